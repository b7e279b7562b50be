import pytest

from termcli import colors
from termcli.colors import (
    Bg,
    BgB,
    Fg,
    FgB,
    Style,
    after_input,
    after_prompt,
    before_input,
    before_prompt,
    color_enabled,
    escape,
    set_color,
    set_no_color,
    supports_color,
)


@pytest.fixture(autouse=True)
def _reset_colors():
    set_no_color()
    yield
    set_no_color()


def test_escape_reset_sequence():
    assert escape(Style.RESET) == "\x1b[0m"


def test_escape_wraps_code():
    for code in (Fg.RED, Bg.BLUE, FgB.CYAN, BgB.GRAY, Style.BOLD):
        seq = escape(code)
        assert seq.startswith("\x1b[")
        assert seq.endswith("m")
        assert seq[2:-1] == str(int(code))


def test_color_toggle():
    assert color_enabled() is False
    set_color()
    assert color_enabled() is True
    set_no_color()
    assert color_enabled() is False


def test_no_sequences_without_color():
    assert before_prompt() == ""
    assert after_prompt() == ""
    assert before_input() == ""
    assert after_input() == ""


def test_prompt_sequences_with_color():
    set_color()
    assert before_prompt() == escape(Fg.GREEN) + escape(Style.BOLD)
    assert after_prompt() == escape(Style.RESET)


def test_input_sequences_with_color():
    set_color()
    assert before_input() == escape(FgB.GRAY)
    assert after_input() == escape(Style.RESET)


@pytest.mark.parametrize("term", ["xterm", "xterm-256color", "screen", "linux", "vt100", "rxvt-unicode"])
def test_supports_color_known_terms(term):
    assert supports_color(term) is True


@pytest.mark.parametrize("term", [None, "", "dumb"])
def test_supports_color_unknown_terms(term):
    assert supports_color(term) is False


def test_module_state_shared():
    set_color()
    assert colors.color_enabled() is True