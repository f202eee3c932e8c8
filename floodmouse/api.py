"""Line-based text protocol spoken with the micromouse simulator."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_BUFFER_SIZE = 32
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read a leading integer the lenient way: anything unparsable is 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class SimulatorAPI:
    """Commands sent to the simulator on one stream, replies read from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _send(self, line: str) -> None:
        self._out.write(f"{line}\n")
        self._out.flush()

    def _ask(self, command: str) -> str:
        self._send(command)
        response = self._in.readline(_BUFFER_SIZE - 1)
        if not response:
            raise EOFError(f"no reply from simulator to {command!r}")
        return response

    def _ask_int(self, command: str) -> int:
        return _parse_int(self._ask(command))

    def _ask_bool(self, command: str) -> bool:
        return self._ask(command) == "true\n"

    def _ask_ack(self, command: str) -> bool:
        return self._ask(command) == "ack\n"

    def maze_width(self) -> int:
        return self._ask_int("mazeWidth")

    def maze_height(self) -> int:
        return self._ask_int("mazeHeight")

    def wall_front(self) -> bool:
        return self._ask_bool("wallFront")

    def wall_right(self) -> bool:
        return self._ask_bool("wallRight")

    def wall_left(self) -> bool:
        return self._ask_bool("wallLeft")

    def move_forward(self) -> bool:
        """Move one cell ahead; False means the mouse crashed."""
        return self._ask_ack("moveForward")

    def turn_right(self) -> None:
        self._ask_ack("turnRight")

    def turn_left(self) -> None:
        self._ask_ack("turnLeft")

    def set_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"setWall {x} {y} {direction}")

    def clear_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"clearWall {x} {y} {direction}")

    def set_color(self, x: int, y: int, color: str) -> None:
        self._send(f"setColor {x} {y} {color}")

    def clear_color(self, x: int, y: int) -> None:
        self._send(f"clearColor {x} {y}")

    def clear_all_color(self) -> None:
        self._send("clearAllColor")

    def set_text(self, x: int, y: int, text: str) -> None:
        self._send(f"setText {x} {y} {text}")

    def clear_text(self, x: int, y: int) -> None:
        self._send(f"clearText {x} {y}")

    def clear_all_text(self) -> None:
        self._send("clearAllText")

    def was_reset(self) -> bool:
        return self._ask_bool("wasReset")

    def ack_reset(self) -> None:
        self._ask_ack("ackReset")