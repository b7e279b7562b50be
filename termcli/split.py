"""Split a command line into words, honouring quotes and backslash escapes."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["split"]

_BLANKS = " \t\n"
_QUOTES = "\"'"


class _State(Enum):
    SPACE = auto()
    WORD = auto()
    SENTENCE = auto()
    ESCAPE = auto()


def split(text: str) -> list[str]:
    """Split *text* into words.

    Words are separated by spaces, tabs and newlines. Single or double quotes
    group a sentence into one word, and a backslash escapes a following quote
    or backslash. Empty words are dropped.
    """
    tokens: list[str] = []
    state = _State.SPACE
    prev_state = _State.SPACE
    quote = '"'

    for c in text:
        if state is _State.SPACE:
            if c in _BLANKS:
                continue
            if c in _QUOTES:
                state, quote = _State.SENTENCE, c
                tokens.append("")
            elif c == "\\":
                # an escape at the start of a word returns to the word state
                prev_state, state = _State.WORD, _State.ESCAPE
                tokens.append("")
            else:
                state = _State.WORD
                tokens.append(c)
        elif state is _State.WORD:
            if c in _BLANKS:
                state = _State.SPACE
            elif c in _QUOTES:
                state, quote = _State.SENTENCE, c
                tokens.append("")
            elif c == "\\":
                prev_state, state = _State.WORD, _State.ESCAPE
            else:
                tokens[-1] += c
        elif state is _State.SENTENCE:
            if c in _QUOTES:
                if c == quote:
                    state = _State.SPACE
                else:
                    tokens[-1] += c
            elif c == "\\":
                prev_state, state = _State.SENTENCE, _State.ESCAPE
            else:
                tokens[-1] += c
        else:
            if c not in "\"'\\":
                tokens[-1] += "\\"
            tokens[-1] += c
            state = prev_state

    return [token for token in tokens if token]