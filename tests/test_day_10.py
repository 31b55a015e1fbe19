import pytest

from yuletide.day import Part
from yuletide.day_10 import TopographicMap, run
from yuletide.errors import InvalidInputError
from yuletide.input import Input

EXAMPLE = "\n".join(
    [
        "89010123",
        "78121874",
        "87430965",
        "96549874",
        "45678903",
        "32019012",
        "01329801",
        "10456732",
    ]
) + "\n"


def _map(text: str) -> TopographicMap:
    return TopographicMap.from_input(Input.from_text(text))


def _mirrored(text: str) -> str:
    return "\n".join(row[::-1] for row in text.splitlines()) + "\n"


def _transposed(text: str) -> str:
    rows = text.splitlines()
    return "\n".join("".join(column) for column in zip(*rows)) + "\n"


def test_example_score():
    assert _map(EXAMPLE).total_score() == 36


def test_example_rating():
    assert _map(EXAMPLE).total_rating() == 81


def test_trailheads_are_the_zero_cells():
    topographic_map = _map(EXAMPLE)
    assert all(topographic_map.heights[p.y][p.x] == 0 for p in topographic_map.trailheads)
    assert len(topographic_map.trailheads) == sum(
        row.count(0) for row in topographic_map.heights
    )


def test_rating_is_at_least_score():
    topographic_map = _map(EXAMPLE)
    assert topographic_map.total_rating() >= topographic_map.total_score()


@pytest.mark.parametrize("transform", [_mirrored, _transposed])
def test_symmetries_keep_score_and_rating(transform):
    original = _map(EXAMPLE)
    changed = _map(transform(EXAMPLE))
    assert changed.total_score() == original.total_score()
    assert changed.total_rating() == original.total_rating()


def test_single_straight_trail_has_one_route_per_trailhead():
    topographic_map = _map("0123456789\n")
    assert topographic_map.total_score() == len(topographic_map.trailheads)
    assert topographic_map.total_rating() == topographic_map.total_score()


def test_map_without_trailheads():
    topographic_map = _map("123\n456\n789\n")
    assert topographic_map.trailheads == []
    assert topographic_map.total_score() == topographic_map.total_rating() == 0


def test_run_dispatches_on_part():
    topographic_map = _map(EXAMPLE)
    assert run(Input.from_text(EXAMPLE), Part.ONE) == topographic_map.total_score()
    assert run(Input.from_text(EXAMPLE), Part.TWO) == topographic_map.total_rating()


def test_non_digit_is_rejected():
    with pytest.raises(InvalidInputError):
        _map("01.3\n")