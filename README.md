# blockfall

A falling-block puzzle game. Pieces drop into a 10 × 20 well; steer and rotate
them so that they fill whole rows. A full row disappears and scores 100 points.

## Installing

```
pip install .
```

## Playing

```
blockfall
```

The window shows the well on the left, with the score, the number of cleared
lines and a preview of the next piece on the right.

| Key   | Action                          |
|-------|---------------------------------|
| Left  | Move the piece one column left  |
| Right | Move the piece one column right |
| Up    | Rotate the piece (O never turns)|
| Down  | Hold to drop faster             |

A piece drops one row every 0.5 seconds, or every 0.05 seconds while Down is
held. At 100 points the game reaches level 2 and at 200 points level 3; from
level 3 on, pieces drop every 0.2 seconds. A banner ("LEVEL 2", "LEVEL 3")
announces each new level for three seconds. The game ends when a new piece has
no room to appear: the music stops, a sound plays and "Game Over" stays on
screen until the window is closed.

### Assets

The game needs four files: `background2.png`, `arial.ttf`,
`backgroundmusic.wav` and `gameover.mp3`. By default it looks for them in the
working directory; point it elsewhere with `--assets`:

```
blockfall --assets path/to/assets
```

If any of them is missing or cannot be loaded, the command prints a message
to standard error and exits with status 1.

## Using the game logic

The rules can be driven without a window:

```python
import random
from blockfall.game import Game

game = Game(random.Random(1))
game.move_left()
game.rotate()
game.set_soft_drop(True)
game.update(0.5)
print(game.score, game.lines_cleared, game.level(), game.game_over)
```

`Game.update(dt)` advances the game by `dt` seconds; `Game.fall_interval()`
gives the current drop interval and `Game.visible_banner()` the level banner
on show, if any.

`blockfall.block.Block` models a piece (`move`, `rotate`, `cells`, `copy`,
`Block.random`), and `blockfall.grid.Grid` the well (`collides`, `place`,
`clear_lines`, `cell`, `occupied`). `blockfall.app.color_for` maps a colour id
to an RGB tuple.

## What it does not do

There is no pause, no hard drop, no high-score table and no saved state; the
game has a single round and must be restarted to play again.

## Running the tests

```
pip install .[test]
pytest
```