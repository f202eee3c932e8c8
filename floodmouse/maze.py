"""Maze model and the flood-fill distance update."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass
from typing import Generic, TypeVar

SIZE_OF_ARRAY = 18

T = TypeVar("T")


class Heading(enum.Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


@dataclass(frozen=True)
class Cell:
    """A maze cell together with its distance value and the heading to reach it."""

    x: int
    y: int
    value: int = 0
    heading: Heading = Heading.NORTH


class CircularBuffer(Generic[T]):
    """Fixed-capacity FIFO queue."""

    def __init__(self, capacity: int = SIZE_OF_ARRAY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: list[T | None] = [None] * capacity
        self._read = 0
        self._write = 0
        self._length = 0

    def push(self, item: T) -> None:
        if self._length == len(self._items):
            raise OverflowError("buffer is full")
        self._items[self._write] = item
        self._write = (self._write + 1) % len(self._items)
        self._length += 1

    def pop(self) -> T:
        if self._length == 0:
            raise IndexError("buffer is empty")
        item = self._items[self._read]
        self._items[self._read] = None
        self._read = (self._read + 1) % len(self._items)
        self._length -= 1
        return item  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._length


class Walls:
    """Known walls of a square maze; the outer boundary is walled from the start."""

    def __init__(self, size: int) -> None:
        self.size = size
        # horizontal[y][x] is the wall on the north side of cell (x, y)
        self._horizontal = [[False] * size for _ in range(size + 1)]
        # vertical[y][x] is the wall on the west side of cell (x, y)
        self._vertical = [[False] * (size + 1) for _ in range(size)]
        for j in range(size):
            self._vertical[j][0] = True
            self._vertical[j][size] = True
            self._horizontal[0][j] = True
            self._horizontal[size][j] = True

    def _slot(self, x: int, y: int, heading: Heading) -> tuple[list[bool], int]:
        if heading is Heading.NORTH:
            return self._horizontal[y], x
        if heading is Heading.SOUTH:
            return self._horizontal[y + 1], x
        if heading is Heading.WEST:
            return self._vertical[y], x
        return self._vertical[y], x + 1

    def record(self, x: int, y: int, heading: Heading) -> None:
        """Mark the wall on the given side of cell (x, y) as present."""
        row, index = self._slot(x, y, heading)
        row[index] = True

    def is_open(self, x: int, y: int, heading: Heading) -> bool:
        row, index = self._slot(x, y, heading)
        return not row[index]


_OFFSETS = (
    (Heading.NORTH, 0, -1),
    (Heading.EAST, 1, 0),
    (Heading.SOUTH, 0, 1),
    (Heading.WEST, -1, 0),
)


def sort_cells(cells: Iterable[Cell]) -> list[Cell]:
    """Order cells by value, keeping the original order among equal values."""
    return sorted(cells, key=lambda cell: cell.value)


def check_neighbours(
    walls: Walls, y: int, x: int, distances: list[MutableSequence[int]]
) -> list[Cell]:
    """Reachable neighbours of (x, y), lowest distance first."""
    neighbours = [
        Cell(x + dx, y + dy, distances[y + dy][x + dx], heading)
        for heading, dx, dy in _OFFSETS
        if walls.is_open(x, y, heading)
    ]
    return sort_cells(neighbours)


def flood_fill(
    walls: Walls,
    start: Cell,
    distances: list[MutableSequence[int]],
) -> None:
    """Raise distances in place until no visited cell is lower than its best neighbour."""
    queue: CircularBuffer[Cell] = CircularBuffer(SIZE_OF_ARRAY)
    queue.push(start)
    while queue:
        cell = queue.pop()
        neighbours = check_neighbours(walls, cell.y, cell.x, distances)
        if not neighbours:
            continue
        minimum = neighbours[0]
        if distances[cell.y][cell.x] <= minimum.value:
            distances[cell.y][cell.x] = minimum.value + 1
            for neighbour in neighbours:
                queue.push(neighbour)