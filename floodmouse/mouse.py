"""The mouse: senses walls, floods distances and drives through the simulator."""

from __future__ import annotations

import argparse
import logging
from collections.abc import MutableSequence, Sequence

from floodmouse.api import SimulatorAPI
from floodmouse.maze import Cell, Heading, Walls, check_neighbours, flood_fill

logger = logging.getLogger(__name__)

_CLOCKWISE = (Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST)

_STEP = {
    Heading.NORTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, 1),
    Heading.WEST: (-1, 0),
}

MAZE_SIZE = 5
START = (0, 4)
CENTRE = (2, 2)

_TO_CENTRE = (
    (4, 3, 2, 3, 4),
    (3, 2, 1, 2, 3),
    (2, 1, 0, 1, 2),
    (1, 2, 1, 2, 3),
    (0, 1, 2, 3, 4),
)

_TO_START = (
    (4, 5, 6, 7, 4),
    (3, 4, 5, 6, 7),
    (2, 3, 4, 5, 6),
    (1, 2, 3, 4, 5),
    (0, 1, 2, 3, 4),
)


def _rotate(heading: Heading, quarter_turns: int) -> Heading:
    index = _CLOCKWISE.index(heading)
    return _CLOCKWISE[(index + quarter_turns) % len(_CLOCKWISE)]


class Mouse:
    """A mouse at a cell of the maze, facing one of the four headings."""

    def __init__(
        self, api: SimulatorAPI, walls: Walls, x: int, y: int, heading: Heading = Heading.NORTH
    ) -> None:
        self.api = api
        self.walls = walls
        self.x = x
        self.y = y
        self.heading = heading

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def sense_walls(self) -> None:
        """Ask for the walls ahead, to the right and to the left, and record them."""
        logger.debug("sensing at x=%d y=%d facing %s", self.x, self.y, self.heading.value)
        if self.api.wall_front():
            self.walls.record(self.x, self.y, self.heading)
        if self.api.wall_right():
            self.walls.record(self.x, self.y, _rotate(self.heading, 1))
        if self.api.wall_left():
            self.walls.record(self.x, self.y, _rotate(self.heading, -1))

    def move_to(self, cell: Cell) -> None:
        """Turn towards the cell's heading and step one cell that way."""
        turns = (_CLOCKWISE.index(cell.heading) - _CLOCKWISE.index(self.heading)) % 4
        if turns == 1:
            self.api.turn_right()
        elif turns == 2:
            self.api.turn_right()
            self.api.turn_right()
        elif turns == 3:
            self.api.turn_left()
        if not self.api.move_forward():
            logger.warning("crashed moving %s from x=%d y=%d", cell.heading.value, self.x, self.y)
        dx, dy = _STEP[cell.heading]
        self.x += dx
        self.y += dy
        self.heading = cell.heading

    def _step_downhill(self, distances: list[MutableSequence[int]]) -> None:
        neighbours = check_neighbours(self.walls, self.y, self.x, distances)
        if not neighbours:
            raise RuntimeError(f"no open neighbour at x={self.x} y={self.y}")
        self.move_to(neighbours[0])

    def solve(
        self, target_x: int, target_y: int, distances: list[MutableSequence[int]]
    ) -> None:
        """Explore towards the target, sensing walls and reflooding at every cell."""
        while (self.x, self.y) != (target_x, target_y):
            self.sense_walls()
            start = Cell(self.x, self.y, distances[self.y][self.x], self.heading)
            flood_fill(self.walls, start, distances)
            self._step_downhill(distances)

    def run(self, target_x: int, target_y: int, distances: list[MutableSequence[int]]) -> None:
        """Follow known distances to the target without sensing or reflooding."""
        while (self.x, self.y) != (target_x, target_y):
            self._step_downhill(distances)


def _grid(rows: Sequence[Sequence[int]]) -> list[MutableSequence[int]]:
    return [list(row) for row in rows]


def main(argv: Sequence[str] | None = None) -> int:
    """Drive the mouse to the centre, back to the start, and to the centre again."""
    parser = argparse.ArgumentParser(
        prog="floodmouse", description="Flood-fill micromouse for the maze simulator."
    )
    parser.parse_args(argv)

    mouse = Mouse(SimulatorAPI(), Walls(MAZE_SIZE), *START, Heading.NORTH)
    to_centre = _grid(_TO_CENTRE)
    mouse.solve(*CENTRE, to_centre)
    mouse.solve(*START, _grid(_TO_START))
    mouse.run(*CENTRE, to_centre)
    return 0