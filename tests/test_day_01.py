from yuletide.day import Part
from yuletide.day_01 import lists_distance, parse_locations, run, similarity_score
from yuletide.input import Input

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_sorts_both_columns():
    left, right = parse_locations(Input.from_text(EXAMPLE))
    assert left == sorted([3, 4, 2, 1, 3, 3])
    assert right == sorted([4, 3, 5, 3, 9, 3])


def test_parse_stops_at_unparseable_line():
    left, right = parse_locations(Input.from_text("1 2\nfoo bar\n3 4\n"))
    assert (left, right) == ([1], [2])


def test_example_part_one():
    assert run(Input.from_text(EXAMPLE), Part.ONE) == 11


def test_example_part_two():
    assert run(Input.from_text(EXAMPLE), Part.TWO) == 31


def test_identical_lists_have_zero_distance():
    values = [5, 1, 9, 1]
    assert lists_distance(sorted(values), sorted(values)) == 0


def test_similarity_of_disjoint_lists_is_zero():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0


def test_similarity_counts_each_occurrence():
    left = [7]
    right = [7, 7, 7]
    assert similarity_score(left, right) == 7 * len(right)