"""Falling tetromino pieces."""

from __future__ import annotations

import random as _random

SHAPES: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 1), (1, 1), (2, 1), (3, 1)),  # I
    ((1, 0), (2, 0), (1, 1), (2, 1)),  # O
    ((1, 0), (2, 0), (0, 1), (1, 1)),  # S
    ((0, 0), (1, 0), (1, 1), (2, 1)),  # Z
    ((1, 0), (0, 1), (1, 1), (2, 1)),  # T
    ((0, 0), (0, 1), (1, 1), (2, 1)),  # J
    ((2, 0), (0, 1), (1, 1), (2, 1)),  # L
)

SHAPE_COUNT = len(SHAPES)
O_SHAPE = 1
SPAWN_POSITION = (3, 0)


class Block:
    """A four-cell piece with a shape, a colour and a position on the board."""

    def __init__(self, shape_id: int) -> None:
        self.set_shape(shape_id)

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Block:
        """Return a block of a shape picked by ``rng``."""
        rng = rng or _random.Random()
        return cls(rng.randrange(SHAPE_COUNT))

    def set_shape(self, shape_id: int) -> None:
        """Reset to the given shape, in its spawn orientation and position."""
        if not 0 <= shape_id < SHAPE_COUNT:
            raise ValueError(f"shape id must be in 0..{SHAPE_COUNT - 1}, got {shape_id}")
        self.shape = shape_id
        self.color_id = shape_id + 1
        self._offsets = list(SHAPES[shape_id])
        self.position = SPAWN_POSITION

    def move(self, dx: int, dy: int) -> None:
        x, y = self.position
        self.position = (x + dx, y + dy)

    def rotate(self) -> None:
        """Turn a quarter turn; the O piece never turns."""
        if self.shape == O_SHAPE:
            return
        self._offsets = [(-y, x) for x, y in self._offsets]

    def cells(self) -> list[tuple[int, int]]:
        """Board coordinates (x, y) of the four cells."""
        px, py = self.position
        return [(px + x, py + y) for x, y in self._offsets]

    def copy(self) -> Block:
        other = Block(self.shape)
        other._offsets = list(self._offsets)
        other.position = self.position
        return other

    def __repr__(self) -> str:
        return f"Block(shape={self.shape}, position={self.position})"