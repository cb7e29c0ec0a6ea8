# towerdefense

A small real-time tower defense game that runs in your terminal.

A tower stands on a 40×20 grid, placed at random at least five cells from
every edge. Enemies spawn on the borders in batches of ten, one batch every
five seconds, and walk toward the tower one step at a time at speeds from 1
to 5. Wave *n* brings *n* × 10 enemies. The tower shoots at the closest enemy;
a bullet that hits leaves a short explosion. When a wave is cleared the next
one begins. If an enemy reaches the tower, the game ends.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Playing

```
towerdefense
```

Options:

| Option        | Meaning                                           |
|---------------|---------------------------------------------------|
| `--log PATH`  | File to write the session log to (default `log.txt`, truncated at start) |
| `--seed N`    | Seed for the random number generator              |

Controls:

| Key          | Action                                                   |
|--------------|----------------------------------------------------------|
| `a` or `A`   | Toggle auto-fire on or off                               |
| `space`      | Fire at the closest enemy (only while auto-fire is off)  |
| `Esc`        | Quit                                                     |

With auto-fire on, the tower shoots only at enemies within 10 cells; a manual
shot goes at the closest enemy whatever its distance. Either way the tower
fires at most once every 100 ms. Auto-fire is switched back on at the start of
each new wave.

The panel to the right of the grid shows whether auto-fire is on, how many
enemies are active, and how many enemy objects the pool holds. The log file
gets one timestamped line per event, such as
`2024-08-30 14:48:16 Starting game...`.

The game draws with ANSI escape sequences, so it needs a terminal that
understands them.

## Using the pieces

The game logic is plain Python and can be driven directly. `Game` accepts a
`random.Random`, a clock function and an output stream, which makes it easy to
run without a terminal:

```python
import io
import random

from towerdefense.game import Game

game = Game(40, 20, rng=random.Random(1), out=io.StringIO())
game.reset()
game.spawn_tower()
game.spawn_enemies(10)
game.update()
print(game.active_enemies_count())
```

Other modules:

- `towerdefense.geometry` – `Vector2D`, an immutable integer point.
- `towerdefense.texture` – `Color`, `Texture` and `color_code`.
- `towerdefense.entities` – `Bullet`, `Enemy` and `Explosion`.
- `towerdefense.pooler` – `Pooler`, a reusable pool of enemies.
- `towerdefense.grid` – `Grid` and `GridCell`.
- `towerdefense.tower` – `Tower`, `distance` and `find_closest_enemy`.
- `towerdefense.screen` – `set_cursor`, `render_text` and `move_cursor_to_end`.
- `towerdefense.logger` – `Logger`, a file logger usable as a context manager.
- `towerdefense.keyboard` – `InputEvent`, `event_for_key` and `KeyReader`.
- `towerdefense.cli` – `main` and `handle_event`.

## Running the tests

```
pip install .[test]
pytest
```