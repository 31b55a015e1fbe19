import pytest

from yuletide.vec2 import Dims, Vec2


def test_parse_comma_separated():
    assert Vec2.parse("3,4") == Vec2(3, 4)


@pytest.mark.parametrize("text", ["6|-2", "6 -2", "6,-2\n"])
def test_parse_other_separators(text):
    assert Vec2.parse(text) == (6, -2)


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1, 2"])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        Vec2.parse(text)


def test_equality_and_hash_with_tuples():
    v = Vec2(2, 5)
    assert v == (2, 5)
    assert hash(v) == hash((2, 5))
    assert {v: "a"}[Vec2(2, 5)] == "a"


def test_arithmetic_round_trip():
    a, b = Vec2(3, -7), Vec2(-2, 9)
    assert (a + b) - b == a
    assert a + (1, 1) - (1, 1) == a
    assert a * 3 == 3 * a
    assert -(-a) == a


def test_manhattan():
    a, b = Vec2(1, 2), Vec2(-4, 8)
    assert Vec2(3, -4).manhattan_len() == 7
    assert a.manhattan_dist(b) == b.manhattan_dist(a)
    assert a.manhattan_dist(b) == (a - b).manhattan_len()
    assert (a - b).abs_vec().manhattan_len() == (a - b).manhattan_len()


def test_neighbours_order_and_distance():
    v = Vec2(5, 5)
    up, down, left, right = v.neighbours()
    assert up == (5, 4)
    assert down == (5, 6)
    assert left == (4, 5)
    assert right == (6, 5)
    assert all(n.manhattan_dist(v) == 1 for n in v.neighbours())


def test_inside_and_try_add():
    bounds = Vec2(3, 3)
    assert Vec2(0, 0).inside(bounds)
    assert not Vec2(3, 0).inside(bounds)
    assert not Vec2(0, -1).inside(bounds)
    assert Vec2(1, 1).try_add(Vec2(1, 1), bounds) == (2, 2)
    assert Vec2(2, 2).try_add(Vec2(1, 0), bounds) is None


@pytest.mark.parametrize("step", [Vec2(-5, 3), Vec2(13, -20), Vec2(0, 0)])
def test_wrapping_add_stays_inside(step):
    bounds = Vec2(11, 7)
    result = Vec2(4, 2).wrapping_add(step, bounds)
    assert result.inside(bounds)
    assert (result - Vec2(4, 2) - step) % bounds == (0, 0)


def test_unpacking_and_dims():
    x, y = Vec2(8, 9)
    assert (x, y) == (8, 9)
    dims = Dims(width=4, height=2)
    assert (dims.width, dims.height) == (4, 2)