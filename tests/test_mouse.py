import io

import pytest

from floodmouse.api import SimulatorAPI
from floodmouse.maze import Cell, Heading, Walls
from floodmouse.mouse import Mouse


class FakeSimulator:
    def __init__(self, front=False, right=False, left=False):
        self.calls = []
        self.answers = {"front": front, "right": right, "left": left}

    def wall_front(self):
        self.calls.append("wall_front")
        return self.answers["front"]

    def wall_right(self):
        self.calls.append("wall_right")
        return self.answers["right"]

    def wall_left(self):
        self.calls.append("wall_left")
        return self.answers["left"]

    def move_forward(self):
        self.calls.append("move_forward")
        return True

    def turn_right(self):
        self.calls.append("turn_right")

    def turn_left(self):
        self.calls.append("turn_left")


def manhattan_to_centre():
    return [[abs(x - 2) + abs(y - 2) for x in range(5)] for y in range(5)]


@pytest.mark.parametrize(
    "facing, target, turns",
    [
        (Heading.NORTH, Heading.NORTH, []),
        (Heading.NORTH, Heading.EAST, ["turn_right"]),
        (Heading.NORTH, Heading.WEST, ["turn_left"]),
        (Heading.NORTH, Heading.SOUTH, ["turn_right", "turn_right"]),
        (Heading.EAST, Heading.NORTH, ["turn_left"]),
        (Heading.EAST, Heading.WEST, ["turn_right", "turn_right"]),
        (Heading.EAST, Heading.SOUTH, ["turn_right"]),
        (Heading.SOUTH, Heading.NORTH, ["turn_right", "turn_right"]),
        (Heading.SOUTH, Heading.EAST, ["turn_left"]),
        (Heading.SOUTH, Heading.WEST, ["turn_right"]),
        (Heading.WEST, Heading.NORTH, ["turn_right"]),
        (Heading.WEST, Heading.EAST, ["turn_right", "turn_right"]),
        (Heading.WEST, Heading.SOUTH, ["turn_left"]),
    ],
)
def test_move_to_turns_then_moves(facing, target, turns):
    api = FakeSimulator()
    mouse = Mouse(api, Walls(5), 2, 2, facing)
    mouse.move_to(Cell(0, 0, 0, target))
    assert api.calls == turns + ["move_forward"]
    assert mouse.heading is target


@pytest.mark.parametrize(
    "heading, expected",
    [
        (Heading.NORTH, (2, 1)),
        (Heading.EAST, (3, 2)),
        (Heading.SOUTH, (2, 3)),
        (Heading.WEST, (1, 2)),
    ],
)
def test_move_to_updates_position(heading, expected):
    mouse = Mouse(FakeSimulator(), Walls(5), 2, 2, heading)
    mouse.move_to(Cell(*expected, 0, heading))
    assert mouse.position == expected


@pytest.mark.parametrize(
    "facing, answers, closed",
    [
        (Heading.NORTH, {"front": True}, Heading.NORTH),
        (Heading.NORTH, {"right": True}, Heading.EAST),
        (Heading.NORTH, {"left": True}, Heading.WEST),
        (Heading.EAST, {"front": True}, Heading.EAST),
        (Heading.EAST, {"right": True}, Heading.SOUTH),
        (Heading.EAST, {"left": True}, Heading.NORTH),
        (Heading.SOUTH, {"right": True}, Heading.WEST),
        (Heading.WEST, {"left": True}, Heading.SOUTH),
    ],
)
def test_sense_walls_records_relative_walls(facing, answers, closed):
    walls = Walls(5)
    mouse = Mouse(FakeSimulator(**answers), walls, 2, 2, facing)
    mouse.sense_walls()
    open_sides = {h for h in Heading if walls.is_open(2, 2, h)}
    assert open_sides == set(Heading) - {closed}


def test_sense_walls_queries_front_right_left():
    api = FakeSimulator()
    Mouse(api, Walls(5), 2, 2, Heading.SOUTH).sense_walls()
    assert api.calls == ["wall_front", "wall_right", "wall_left"]


def test_move_to_speaks_protocol():
    out = io.StringIO()
    api = SimulatorAPI(io.StringIO("ack\nack\n"), out)
    Mouse(api, Walls(5), 0, 4, Heading.NORTH).move_to(Cell(1, 4, 0, Heading.EAST))
    assert out.getvalue() == "turnRight\nmoveForward\n"


def test_sense_walls_over_protocol():
    out = io.StringIO()
    walls = Walls(5)
    api = SimulatorAPI(io.StringIO("true\nfalse\nfalse\n"), out)
    Mouse(api, walls, 1, 1, Heading.NORTH).sense_walls()
    assert out.getvalue() == "wallFront\nwallRight\nwallLeft\n"
    assert not walls.is_open(1, 1, Heading.NORTH)
    assert walls.is_open(1, 1, Heading.EAST)


def test_solve_reaches_target_in_open_maze():
    distances = manhattan_to_centre()
    original = [row[:] for row in distances]
    mouse = Mouse(FakeSimulator(), Walls(5), 0, 4, Heading.NORTH)
    mouse.solve(2, 2, distances)
    assert mouse.position == (2, 2)
    assert distances == original


def test_solve_moves_once_per_distance_step():
    api = FakeSimulator()
    mouse = Mouse(api, Walls(5), 0, 4, Heading.NORTH)
    distances = manhattan_to_centre()
    mouse.solve(2, 2, distances)
    assert api.calls.count("move_forward") == distances[4][0]


def test_run_does_not_sense_walls():
    api = FakeSimulator()
    mouse = Mouse(api, Walls(5), 4, 0, Heading.SOUTH)
    mouse.run(2, 2, manhattan_to_centre())
    assert mouse.position == (2, 2)
    assert not any(call.startswith("wall_") for call in api.calls)


def test_already_at_target_does_nothing():
    api = FakeSimulator()
    mouse = Mouse(api, Walls(5), 2, 2, Heading.WEST)
    mouse.solve(2, 2, manhattan_to_centre())
    assert api.calls == []
    assert mouse.heading is Heading.WEST


def test_boxed_in_mouse_raises():
    api = FakeSimulator(front=True, right=True, left=True)
    walls = Walls(5)
    walls.record(0, 0, Heading.SOUTH)
    mouse = Mouse(api, walls, 0, 0, Heading.NORTH)
    with pytest.raises(RuntimeError):
        mouse.solve(2, 2, manhattan_to_centre())


def test_run_boxed_in_raises():
    walls = Walls(5)
    for heading in Heading:
        walls.record(3, 3, heading)
    mouse = Mouse(FakeSimulator(), walls, 3, 3, Heading.NORTH)
    with pytest.raises(RuntimeError):
        mouse.run(2, 2, manhattan_to_centre())