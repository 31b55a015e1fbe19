import pytest

from yuletide.day import Part
from yuletide.day_23 import Network, run
from yuletide.errors import InvalidInputError
from yuletide.input import Input

K4 = "ab-cd\nab-ef\nab-tx\ncd-ef\ncd-tx\nef-tx\ntx-zz\n"


def network(text):
    return Network.from_input(Input.from_text(text))


def test_k4_lan_parties_with_t():
    assert network(K4).count_lan_parties() == 3


def test_path_has_no_triangles():
    assert network("ta-tb\ntb-tc\n").count_lan_parties() == 0


def test_largest_party_is_the_k4():
    assert network(K4).largest_party() == ["ab", "cd", "ef", "tx"]


def test_no_triangle_means_no_party():
    assert network("ab-cd\n").largest_party() == []


def test_lines_without_connection_are_ignored():
    assert network(K4 + "junk\n").count_lan_parties() == network(K4).count_lan_parties()


def test_run_part_two_is_party_size():
    assert run(Input.from_text(K4), Part.TWO) == len(network(K4).largest_party())


def test_run_part_one_matches_count():
    assert run(Input.from_text(K4), Part.ONE) == network(K4).count_lan_parties()


@pytest.mark.parametrize("line", ["AB-cd\n", "abc-de\n", "a1-bc\n"])
def test_invalid_names_are_errors(line):
    with pytest.raises(InvalidInputError):
        network(line)