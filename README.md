# hanoi-tower

The classic Tower of Hanoi puzzle. Move every disk from the left peg to the
right peg, one at a time, never placing a larger disk on a smaller one.

The package is made of:

- `hanoi_tower.logic`: the game rules and an optimal solver that works from
  any legal position, with no graphics dependencies;
- `hanoi_tower.layout`: the board geometry (peg positions, disk sizes and
  colours, hit testing);
- `hanoi_tower.controller`: player interaction (selection, dragging,
  auto-solving, on-screen text), independent of any window system;
- `hanoi_tower.app`: the pygame window and event loop.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
hanoi-tower
```

To start with a different number of disks (2 to 10, default 5):

```
hanoi-tower --disks 7
```

All disks start on the left peg. Controls:

| Input              | Action                                               |
|--------------------|------------------------------------------------------|
| `1` / `2` / `3`    | Select a peg; press another peg to move onto it      |
| Click or tap a peg | Select it; click a second peg to move                |
| Drag a disk        | Drag the top disk of a peg onto another peg          |
| `+` / `-`          | More or fewer disks (2 to 10); restarts the game     |
| `S`                | Solve automatically from the current position        |
| `R`                | Restart with the current number of disks             |
| `Esc`              | Cancel selection, drag or auto-solve                 |

Selecting the same peg twice clears the selection. Illegal moves are
ignored. While the game is solving itself, peg selection and pointer input
are ignored; one move is played roughly every 0.35 seconds.

The top-left counter shows your moves against the optimal count
(2ⁿ − 1 for n disks). When all disks reach the right peg the game tells
you whether you matched the optimum. The window can be resized; the board
scales to fit.

## Using the logic in your own code

```python
from hanoi_tower.logic import HanoiGame, Move, Peg, solve, solve_from_current
from hanoi_tower.logic import InvalidPlacementError

game = HanoiGame(3)
game.make_move(Move(Peg.LEFT, Peg.RIGHT))     # returns the moved disk, 1
print(game.disks_on(Peg.LEFT))                # (3, 2)

try:
    game.make_move(Move(Peg.LEFT, Peg.RIGHT))
except InvalidPlacementError:
    print("a larger disk cannot go on a smaller one")

for move in solve_from_current(game):
    game.make_move(move)
assert game.is_solved()

print(len(solve(5, Peg.LEFT, Peg.RIGHT, Peg.MIDDLE)))  # 31
```

`HanoiGame(n)` accepts 1 to 20 disks and raises `ValueError` otherwise.
`num_disks`, `move_count` and `minimum_moves` are read-only properties;
`reset()` and `reset_with(n)` return to the starting position, and `copy()`
gives an independent copy.

Illegal moves raise a subclass of `MoveError`: `EmptySourceError`,
`InvalidPlacementError` or `SamePegError`. Use `is_valid_move` to check a
move without making it.

## Driving the game without a window

`hanoi_tower.controller.Controller` holds a game and the interaction state.
Feed it `Key` presses with `press_key`, pointer positions in world
coordinates with `pointer_down`, `pointer_motion` and `pointer_up`, and
elapsed time with `tick(dt)`. `disk_sprites()`, `selection_x()` and the
`*_text()` methods describe what to draw.