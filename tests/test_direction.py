import pytest

from questmap.core.direction import ALL_DIRECTIONS, Direction, to_token


def test_tokens_in_canonical_order():
    assert [to_token(d) for d in ALL_DIRECTIONS] == [
        "north", "south", "east", "west",
        "northeast", "southeast", "southwest", "northwest",
        "up", "down", "in", "out",
    ]


def test_every_direction_has_an_opposite_that_leads_back():
    for direction in Direction:
        assert direction.opposite() != direction
        assert direction.opposite().opposite() == direction


@pytest.mark.parametrize("direction, opposite", [
    (Direction.NORTH, Direction.SOUTH),
    (Direction.NORTHEAST, Direction.SOUTHWEST),
    (Direction.SOUTHEAST, Direction.NORTHWEST),
    (Direction.UP, Direction.DOWN),
    (Direction.IN, Direction.OUT),
])
def test_opposites(direction, opposite):
    assert direction.opposite() == opposite


@pytest.mark.parametrize("text, expected", [
    ("n", Direction.NORTH),
    ("north", Direction.NORTH),
    ("NE", Direction.NORTHEAST),
    (" southwest ", Direction.SOUTHWEST),
    ("in", Direction.IN),
])
def test_parse(text, expected):
    assert Direction.parse(text) == expected


def test_parse_rejects_unknown_direction():
    with pytest.raises(ValueError, match="sideways"):
        Direction.parse("sideways")


def test_unmapped_value_is_a_hard_error():
    with pytest.raises(KeyError):
        to_token("sideways")
