"""The windowed game."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .game import Game
from .grid import HEIGHT, WIDTH

BLOCK_SIZE = 35
PANEL_WIDTH = 150
WINDOW_WIDTH = WIDTH * BLOCK_SIZE + PANEL_WIDTH
WINDOW_HEIGHT = HEIGHT * BLOCK_SIZE
FRAME_RATE = 60

COLORS: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),        # black
    (255, 255, 0),    # yellow
    (0, 255, 255),    # cyan
    (255, 0, 0),      # red
    (0, 255, 0),      # green
    (255, 165, 0),    # orange
    (0, 0, 255),      # blue
    (255, 0, 255),    # magenta
)

WHITE = (255, 255, 255)
RED = (255, 0, 0)

ASSETS = {
    "background": "background2.png",
    "font": "arial.ttf",
    "music": "backgroundmusic.wav",
    "game_over": "gameover.mp3",
}


def color_for(color_id: int) -> tuple[int, int, int]:
    """RGB colour of a colour id."""
    if not 0 <= color_id < len(COLORS):
        raise ValueError(f"unknown colour id {color_id}")
    return COLORS[color_id]


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def preview_position(x: int, y: int) -> tuple[int, int]:
    """Pixel position of a next-piece cell at board coordinates (x, y)."""
    px = WIDTH * BLOCK_SIZE + 40 + _trunc_div((x - 3) * BLOCK_SIZE, 2)
    py = 140 + _trunc_div((y - 1) * BLOCK_SIZE, 2)
    return px, py


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.add_argument("--assets", default=".", help="directory holding images, font and sounds")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    assets = Path(args.assets)
    paths = {key: assets / name for key, name in ASSETS.items()}
    for path in paths.values():
        if not path.is_file():
            print(f"blockfall: missing asset {path}", file=sys.stderr)
            return 1

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tetris SFML with Score")
        try:
            background = pygame.image.load(str(paths["background"])).convert()
            background = pygame.transform.scale(background, (WINDOW_WIDTH, WINDOW_HEIGHT))
            font = pygame.font.Font(str(paths["font"]), 24)
            big_font = pygame.font.Font(str(paths["font"]), 50)
            pygame.mixer.init()
            pygame.mixer.music.load(str(paths["music"]))
            game_over_sound = pygame.mixer.Sound(str(paths["game_over"]))
        except pygame.error as exc:
            print(f"blockfall: {exc}", file=sys.stderr)
            return 1
        pygame.mixer.music.play(-1)

        banner_pos = (WINDOW_WIDTH // 4, WINDOW_HEIGHT // 2)
        next_label = font.render("Next:", True, WHITE)
        game_over_text = big_font.render("Game Over", True, RED)
        cell = pygame.Rect(0, 0, BLOCK_SIZE, BLOCK_SIZE)
        small = BLOCK_SIZE // 2

        game = Game()
        clock = pygame.time.Clock()
        sound_played = False
        running = True
        while running:
            dt = clock.tick(FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif game.game_over:
                    continue
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_LEFT:
                        game.move_left()
                    elif event.key == pygame.K_RIGHT:
                        game.move_right()
                    elif event.key == pygame.K_UP:
                        game.rotate()
                    elif event.key == pygame.K_DOWN:
                        game.set_soft_drop(True)
                elif event.type == pygame.KEYUP and event.key == pygame.K_DOWN:
                    game.set_soft_drop(False)
            if not running:
                break

            if game.game_over:
                if not sound_played:
                    pygame.mixer.music.stop()
                    game_over_sound.play()
                    sound_played = True
                screen.fill(COLORS[0])
                screen.blit(background, (0, 0))
                screen.blit(game_over_text, banner_pos)
                pygame.display.flip()
                continue

            game.update(dt)

            screen.fill(COLORS[0])
            screen.blit(background, (0, 0))
            for row, col, color_id in game.grid.occupied():
                cell.topleft = (col * BLOCK_SIZE, row * BLOCK_SIZE)
                pygame.draw.rect(screen, color_for(color_id), cell)
            for x, y in game.current.cells():
                cell.topleft = (x * BLOCK_SIZE, y * BLOCK_SIZE)
                pygame.draw.rect(screen, color_for(game.current.color_id), cell)
            for x, y in game.next.cells():
                px, py = preview_position(x, y)
                pygame.draw.rect(
                    screen, color_for(game.next.color_id), pygame.Rect(px, py, small, small)
                )
            screen.blit(font.render(f"Score: {game.score}", True, WHITE),
                        (WIDTH * BLOCK_SIZE + 20, 20))
            screen.blit(font.render(f"Clear Lines: {game.lines_cleared}", True, WHITE),
                        (8 * BLOCK_SIZE + 20, 60))
            screen.blit(next_label, (WIDTH * BLOCK_SIZE + 20, 100))
            banner = game.visible_banner()
            if banner:
                screen.blit(big_font.render(banner, True, RED), banner_pos)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())