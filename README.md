# floodmouse

floodmouse is a micromouse controller for a 5×5 maze. It talks to a maze
simulator through a plain line protocol. Each command goes out on standard
output, and the simulator writes its reply back on standard input.

The mouse starts in the bottom-left cell `(0, 4)`, facing north. It first
explores its way to the centre cell `(2, 2)`. At every cell on the way it asks
the simulator about the walls ahead, to the right and to the left, records
them, runs a flood fill over its distance table, and steps to the open
neighbour with the lowest distance. It then explores its way back to the start
in the same manner. Last, it drives to the centre once more, following the
distance table it already has without sensing or flooding again.

## Installation

```
pip install .
```

## Running

Set this as the mouse command in your simulator:

```
floodmouse
```

The command takes no options apart from `--help`. Standard output carries the
protocol, so any warnings, such as a reported crash, are written to standard
error through the `logging` module.

## Using the pieces

### `floodmouse.api`

`SimulatorAPI(stdin=None, stdout=None)` speaks the protocol. If you leave out
the streams it uses `sys.stdin` and `sys.stdout`.

- Queries:
  - `maze_width()` and `maze_height()` return integers. A reply that cannot be
    parsed counts as `0`.
  - `wall_front()`, `wall_right()`, `wall_left()` and `was_reset()` return
    `True` only when the reply is exactly `true`.
- Movement:
  - `move_forward()` returns `True` when the simulator answers `ack`, and
    `False` after a crash.
  - `turn_left()`, `turn_right()` and `ack_reset()` wait for their reply.
- Display commands send a line and do not wait for a reply:
  - `set_wall(x, y, direction)` and `clear_wall(x, y, direction)`
  - `set_color(x, y, color)`, `clear_color(x, y)` and `clear_all_color()`
  - `set_text(x, y, text)`, `clear_text(x, y)` and `clear_all_text()`
- If the input stream ends before a reply arrives, the call raises `EOFError`.

### `floodmouse.maze`

- `Heading` is an enum: `NORTH`, `EAST`, `SOUTH`, `WEST`.
- `Cell(x, y, value=0, heading=Heading.NORTH)` is a frozen dataclass.
- `CircularBuffer(capacity=18)` is a fixed-size FIFO queue.
  - `push` raises `OverflowError` when the queue is full.
  - `pop` raises `IndexError` when the queue is empty.
  - `len()` gives the number of items held.
- `Walls(size)` holds the walls known so far in a square maze. The outer
  boundary counts as walled from the start.
  - `record(x, y, heading)` marks a wall.
  - `is_open(x, y, heading)` asks whether a side of a cell is open.
- `sort_cells(cells)` orders cells by value. Among cells with equal values it
  keeps their original order.
- `check_neighbours(walls, y, x, distances)` returns the neighbours of `(x, y)`
  that can be reached, lowest distance first.
- `flood_fill(walls, start, distances)` raises the values of the distance grid
  in place. It starts from `start`, and it uses a `CircularBuffer` of capacity
  18 as its work queue.

### `floodmouse.mouse`

`Mouse(api, walls, x, y, heading=Heading.NORTH)` holds the mouse's position and
heading. Its methods are:

- `sense_walls()` records the walls ahead, to the right and to the left.
- `move_to(cell)` turns towards `cell.heading` and steps one cell.
- `solve(target_x, target_y, distances)` explores towards a target, sensing
  walls and flooding at every cell.
- `run(target_x, target_y, distances)` follows the distance grid to a target.

`solve` and `run` raise `RuntimeError` if the mouse is ever boxed in with no
open neighbour.

`main(argv=None)` runs the full route described above.

```python
import sys
from floodmouse.api import SimulatorAPI
from floodmouse.maze import Heading, Walls
from floodmouse.mouse import Mouse

api = SimulatorAPI(sys.stdin, sys.stdout)
mouse = Mouse(api, Walls(5), 0, 4, Heading.NORTH)
```

## What it does not do

- The maze size, the start cell, the centre cell and both starting distance
  tables are fixed. The command never asks the simulator for the maze's width
  or height.
- The command does not draw the walls it finds, colours or text in the
  simulator. It also does not handle a simulator reset.
- It only logs a crash reported by `move_forward`. The mouse's position is
  updated as though the move succeeded.

## Tests

```
pip install .[test]
pytest
```