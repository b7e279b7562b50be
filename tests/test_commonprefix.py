import pytest

from termcli.commonprefix import common_prefix


def test_empty_input_raises():
    with pytest.raises(ValueError):
        common_prefix([])


def test_single_string_is_its_own_prefix():
    assert common_prefix(["hello"]) == "hello"


def test_identical_strings():
    assert common_prefix(["sub", "sub", "sub"]) == "sub"


def test_shared_start():
    assert common_prefix(["hello", "hello_everysession"]) == "hello"


def test_partial_prefix():
    assert common_prefix(["color", "colour"]) == "colo"


def test_no_shared_start():
    assert common_prefix(["add", "sub"]) == ""


def test_empty_member_gives_empty_prefix():
    assert common_prefix(["", "abc"]) == ""


@pytest.mark.parametrize(
    "strings",
    [
        ["list", "loaded", "load"],
        ["reverse", "upper", "sort"],
        ["hello", "help", "helium"],
        ["answer"],
    ],
)
def test_result_is_prefix_of_all_and_maximal(strings):
    prefix = common_prefix(strings)
    assert all(s.startswith(prefix) for s in strings)
    shortest = min(strings, key=len)
    if len(prefix) < len(shortest):
        longer = shortest[: len(prefix) + 1]
        assert not all(s.startswith(longer) for s in strings)


def test_order_does_not_matter():
    strings = ["loaded", "load", "loader"]
    assert common_prefix(strings) == common_prefix(list(reversed(strings)))