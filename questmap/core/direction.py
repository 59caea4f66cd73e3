from enum import Enum


class Direction(str, Enum):
    """A compass, vertical or in/out direction an exit can leave a room by."""

    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"
    NORTHEAST = "ne"
    SOUTHEAST = "se"
    SOUTHWEST = "sw"
    NORTHWEST = "nw"
    UP = "up"
    DOWN = "down"
    IN = "in"
    OUT = "out"

    def opposite(self) -> "Direction":
        """Get the direction leading back the way this one came."""
        return OPPOSITES[self]

    @property
    def token(self) -> str:
        return to_token(self)

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse either the short form ("ne") or the full token ("northeast").

        Raises:
            ValueError: If the text names no known direction
        """
        key = text.strip().lower()
        for direction in cls:
            if key == direction.value or key == TOKENS[direction]:
                return direction
        raise ValueError(f"Unknown direction '{text}'")


# Canonical emission order
ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
    Direction.NORTHEAST,
    Direction.SOUTHEAST,
    Direction.SOUTHWEST,
    Direction.NORTHWEST,
    Direction.UP,
    Direction.DOWN,
    Direction.IN,
    Direction.OUT,
)

TOKENS: dict[Direction, str] = {
    Direction.NORTH: "north",
    Direction.SOUTH: "south",
    Direction.EAST: "east",
    Direction.WEST: "west",
    Direction.NORTHEAST: "northeast",
    Direction.SOUTHEAST: "southeast",
    Direction.SOUTHWEST: "southwest",
    Direction.NORTHWEST: "northwest",
    Direction.UP: "up",
    Direction.DOWN: "down",
    Direction.IN: "in",
    Direction.OUT: "out",
}

OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.NORTHEAST: Direction.SOUTHWEST,
    Direction.SOUTHWEST: Direction.NORTHEAST,
    Direction.SOUTHEAST: Direction.NORTHWEST,
    Direction.NORTHWEST: Direction.SOUTHEAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.IN: Direction.OUT,
    Direction.OUT: Direction.IN,
}

# Every direction must be mapped, checked once at import
assert set(TOKENS) == set(Direction), "direction token table is incomplete"
assert set(OPPOSITES) == set(Direction), "direction opposite table is incomplete"
assert set(ALL_DIRECTIONS) == set(Direction) and len(ALL_DIRECTIONS) == len(Direction)


def to_token(direction: Direction) -> str:
    """Get the QuestJS property name for a direction.

    Raises:
        KeyError: If given something that is not a Direction
    """
    return TOKENS[direction]
