"""Two-dimensional coordinates and the eight compass directions on a grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

Real = Union[int, float]

DIRECTION_COUNT = 8

DEFAULT = ("up", "up-right", "right", "down-right", "down", "down-left", "left", "up-left")
DEFAULT_CAMEL = ("Up", "UpRight", "Right", "DownRight", "Down", "DownLeft", "Left", "UpLeft")
SHORT = ("u", "ur", "r", "dr", "d", "dl", "l", "ul")
SHORT_UPPER = ("U", "UR", "R", "DR", "D", "DL", "L", "UL")
COMPASS = (
    "north",
    "north-east",
    "east",
    "south-east",
    "south",
    "south-west",
    "west",
    "north-west",
)
COMPASS_CAMEL = (
    "North",
    "NorthEast",
    "East",
    "SouthEast",
    "South",
    "SouthWest",
    "West",
    "NorthWest",
)
COMPASS_SHORT = ("n", "ne", "e", "se", "s", "sw", "w", "nw")
COMPASS_SHORT_UPPER = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
# Only the four straight directions have a character.
CHARACTERS = ("^", "", ">", "", "v", "", "<", "")

_format: tuple[str, ...] = DEFAULT


def set_format(names: Sequence[str]) -> None:
    """Set the names used to print and parse directions.

    ``names`` lists the eight directions clockwise, starting from up.
    """
    global _format
    names = tuple(names)
    if len(names) != DIRECTION_COUNT:
        raise ValueError(
            f"a direction format needs {DIRECTION_COUNT} names, got {len(names)}"
        )
    _format = names


def current_format() -> tuple[str, ...]:
    """Return the names currently used to print and parse directions."""
    return _format


@dataclass(frozen=True)
class Coordinate2D:
    """A point on a plane; ``y`` grows downwards, like row indexes."""

    x: Real
    y: Real

    def add(self, other: Coordinate2D) -> Coordinate2D:
        """Return the component-wise sum of the two coordinates."""
        return Coordinate2D(self.x + other.x, self.y + other.y)

    __add__ = add

    def column(self) -> Real:
        """Return the column, which is ``x``."""
        return self.x

    def go(self, direction: Direction) -> Coordinate2D:
        """Return the coordinate one step away in ``direction``."""
        return self.go_n(direction, 1)

    def go_n(self, direction: Direction, n: int) -> Coordinate2D:
        """Return the coordinate ``n`` steps away in ``direction``."""
        step = direction.to_coordinate()
        return self.add(Coordinate2D(step.x * n, step.y * n))

    def i(self) -> Real:
        """Return ``x``, the first index into a 2D sequence."""
        return self.x

    def j(self) -> Real:
        """Return ``y``, the second index into a 2D sequence."""
        return self.y

    def in_2d_slice(self, width: Real, height: Real) -> bool:
        """Return whether the coordinate lies in a ``width`` by ``height`` grid."""
        return self.in_limits(0, 0, width - 1, height - 1)

    def in_limits(self, min_x: Real, min_y: Real, max_x: Real, max_y: Real) -> bool:
        """Return whether the coordinate lies within the inclusive limits."""
        return min_x <= self.x <= max_x and min_y <= self.y <= max_y

    def neighbors(
        self, directions: Iterable[Direction] | None
    ) -> dict[Direction, Coordinate2D]:
        """Return the neighbouring coordinate in each of ``directions``."""
        return {direction: self.go(direction) for direction in directions or ()}

    def row(self) -> Real:
        """Return the row, which is ``y``."""
        return self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def from_indexes(i: int, j: int) -> Coordinate2D:
    """Build a coordinate from grid indexes: ``i`` is the row, ``j`` the column."""
    return Coordinate2D(j, i)


class Direction(Enum):
    """One of the eight grid directions, numbered clockwise from up."""

    UP = 0
    UP_RIGHT = 1
    RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    LEFT = 6
    UP_LEFT = 7

    def _rotate(self, steps: int) -> Direction:
        return Direction((self.value + steps) % DIRECTION_COUNT)

    def is_diagonal(self) -> bool:
        """Return whether the direction is diagonal."""
        return self.value % 2 == 1

    def is_horizontal(self) -> bool:
        """Return whether the direction is left or right."""
        return self in (Direction.RIGHT, Direction.LEFT)

    def is_vertical(self) -> bool:
        """Return whether the direction is up or down."""
        return self in (Direction.UP, Direction.DOWN)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return self._rotate(DIRECTION_COUNT // 2)

    def to_coordinate(self) -> Coordinate2D:
        """Return the unit step for this direction."""
        return _STEPS[self.value]

    def turn_right(self) -> Direction:
        """Return the direction 90 degrees clockwise."""
        return self._rotate(DIRECTION_COUNT // 4)

    def turn_right45(self) -> Direction:
        """Return the direction 45 degrees clockwise."""
        return self._rotate(DIRECTION_COUNT // 8)

    def turn_left(self) -> Direction:
        """Return the direction 90 degrees counter-clockwise."""
        return self._rotate(DIRECTION_COUNT * 3 // 4)

    def turn_left45(self) -> Direction:
        """Return the direction 45 degrees counter-clockwise."""
        return self._rotate(DIRECTION_COUNT * 7 // 8)

    def __str__(self) -> str:
        return _format[self.value]


_STEPS = (
    Coordinate2D(0, -1),
    Coordinate2D(1, -1),
    Coordinate2D(1, 0),
    Coordinate2D(1, 1),
    Coordinate2D(0, 1),
    Coordinate2D(-1, 1),
    Coordinate2D(-1, 0),
    Coordinate2D(-1, -1),
)


def diagonals() -> list[Direction]:
    """Return the four diagonal directions, clockwise from up-right."""
    return [Direction.UP_RIGHT, Direction.DOWN_RIGHT, Direction.DOWN_LEFT, Direction.UP_LEFT]


def horizontals() -> list[Direction]:
    """Return right and left."""
    return [Direction.RIGHT, Direction.LEFT]


def straights() -> list[Direction]:
    """Return the four straight directions, clockwise from up."""
    return [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]


def verticals() -> list[Direction]:
    """Return up and down."""
    return [Direction.UP, Direction.DOWN]


def parse(s: str) -> Direction:
    """Return the direction named ``s`` in the current format."""
    for index, name in enumerate(_format):
        if name == s:
            return Direction(index)
    raise ValueError(f"unknown direction: {s}")