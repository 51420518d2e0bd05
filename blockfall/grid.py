"""The playing field of settled cells."""

from __future__ import annotations

from collections.abc import Iterator

from .block import Block

WIDTH = 10
HEIGHT = 20


class Grid:
    """A 10 by 20 field; each cell holds 0 or the colour id of a settled piece."""

    def __init__(self) -> None:
        self._rows = [[0] * WIDTH for _ in range(HEIGHT)]

    def collides(self, block: Block) -> bool:
        """Whether the block overlaps a wall, the floor or a settled cell.

        Cells above the top of the field are free.
        """
        for x, y in block.cells():
            if x < 0 or x >= WIDTH or y >= HEIGHT:
                return True
            if y >= 0 and self._rows[y][x]:
                return True
        return False

    def place(self, block: Block) -> None:
        """Settle the block's cells into the field; cells above the top are dropped."""
        for x, y in block.cells():
            if 0 <= y < HEIGHT and 0 <= x < WIDTH:
                self._rows[y][x] = block.color_id

    def clear_lines(self) -> int:
        """Remove full rows, shifting the rows above down; return how many."""
        kept = [row for row in self._rows if not all(row)]
        cleared = HEIGHT - len(kept)
        self._rows = [[0] * WIDTH for _ in range(cleared)] + kept
        return cleared

    def cell(self, row: int, col: int) -> int:
        if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
            raise IndexError(f"cell ({row}, {col}) is outside the field")
        return self._rows[row][col]

    def occupied(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, color_id) for every settled cell."""
        for r, row in enumerate(self._rows):
            for c, color_id in enumerate(row):
                if color_id:
                    yield r, c, color_id