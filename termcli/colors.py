"""ANSI colour codes and the colour profile used around prompts and input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "Style",
    "Fg",
    "Bg",
    "FgB",
    "BgB",
    "set_color",
    "set_no_color",
    "color_enabled",
    "supports_color",
    "escape",
    "before_prompt",
    "after_prompt",
    "before_input",
    "after_input",
]


class Style(IntEnum):
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(IntEnum):
    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgB(IntEnum):
    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgB(IntEnum):
    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


_COLOR_TERMS = (
    "ansi", "color", "console", "cygwin", "gnome", "konsole", "kterm",
    "linux", "msys", "putty", "rxvt", "screen", "vt100", "xterm",
)


@dataclass
class _Profile:
    enabled: bool = False


_profile = _Profile()


def set_color() -> None:
    """Turn colours on for prompts and input."""
    _profile.enabled = True


def set_no_color() -> None:
    """Turn colours off for prompts and input."""
    _profile.enabled = False


def color_enabled() -> bool:
    """Return whether colours are currently on."""
    return _profile.enabled


def supports_color(term: str | None) -> bool:
    """Return whether a terminal of type *term* (the TERM value) shows colours."""
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


def escape(code: int) -> str:
    """Return the ANSI escape sequence that selects *code*."""
    return f"\033[{int(code)}m"


def before_prompt() -> str:
    """Sequence written before the prompt: bold green when colours are on."""
    return escape(Fg.GREEN) + escape(Style.BOLD) if _profile.enabled else ""


def after_prompt() -> str:
    """Sequence written after the prompt."""
    return escape(Style.RESET) if _profile.enabled else ""


def before_input() -> str:
    """Sequence written before echoed input: bright gray when colours are on."""
    return escape(FgB.GRAY) if _profile.enabled else ""


def after_input() -> str:
    """Sequence written after echoed input."""
    return escape(Style.RESET) if _profile.enabled else ""