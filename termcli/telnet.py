"""Telnet stream handling: output encoding, option negotiation and key decoding."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum, auto

from .inputdevice import Key, KeyType

__all__ = [
    "TelnetCommand",
    "TelnetDecoder",
    "TelnetKeyDecoder",
    "encode",
    "negotiation",
]

_log = logging.getLogger(__name__)

_OPTION_ECHO = 0x01
_OPTION_LINEMODE = 0x22
_LINEMODE_MODE = 0x01


class TelnetCommand(IntEnum):
    """Telnet command bytes that may follow an IAC."""

    SE = 0xF0  # end of subnegotiation parameters
    NOP = 0xF1
    DATA_MARK = 0xF2
    BREAK = 0xF3
    INTERRUPT_PROCESS = 0xF4
    ABORT_OUTPUT = 0xF5
    ARE_YOU_THERE = 0xF6
    ERASE_CHARACTER = 0xF7
    ERASE_LINE = 0xF8
    GO_AHEAD = 0xF9
    SB = 0xFA  # start of subnegotiation
    WILL = 0xFB
    WONT = 0xFC
    DO = 0xFD
    DONT = 0xFE
    IAC = 0xFF


_RESETTING_COMMANDS = frozenset(
    {
        TelnetCommand.DATA_MARK,
        TelnetCommand.BREAK,
        TelnetCommand.INTERRUPT_PROCESS,
        TelnetCommand.ABORT_OUTPUT,
        TelnetCommand.ARE_YOU_THERE,
        TelnetCommand.ERASE_CHARACTER,
        TelnetCommand.ERASE_LINE,
        TelnetCommand.GO_AHEAD,
        TelnetCommand.NOP,
    }
)


def encode(text: str) -> str:
    """Return *text* with every newline preceded by a carriage return."""
    return text.replace("\n", "\r\n")


def negotiation() -> bytes:
    """Return the option negotiation a server sends when a client connects.

    It asks for line mode, sets the line mode to 0 and offers to echo.
    """
    iac, do, will = TelnetCommand.IAC, TelnetCommand.DO, TelnetCommand.WILL
    sb, se = TelnetCommand.SB, TelnetCommand.SE
    return bytes(
        [
            iac, do, _OPTION_LINEMODE,
            iac, sb, _OPTION_LINEMODE, _LINEMODE_MODE, 0x00, iac, se,
            iac, will, _OPTION_ECHO,
        ]
    )


class _State(Enum):
    DATA = auto()
    SUB = auto()
    WAIT_WILL = auto()
    WAIT_WONT = auto()
    WAIT_DO = auto()
    WAIT_DONT = auto()


_WAITING = {
    TelnetCommand.WILL: _State.WAIT_WILL,
    TelnetCommand.WONT: _State.WAIT_WONT,
    TelnetCommand.DO: _State.WAIT_DO,
    TelnetCommand.DONT: _State.WAIT_DONT,
}

_WAITED = {state: command for command, state in _WAITING.items()}


class TelnetDecoder:
    """Separates the data bytes of a telnet stream from its commands.

    Option requests received (WILL, WONT, DO, DONT with their option byte)
    are collected in ``negotiations``; the parameters of each completed
    subnegotiation are collected in ``subnegotiations``.
    """

    def __init__(self) -> None:
        self._state = _State.DATA
        self._escape = False
        self._sub = bytearray()
        self.negotiations: list[tuple[TelnetCommand, int]] = []
        self.subnegotiations: list[bytes] = []

    def feed(self, data: bytes) -> bytes:
        """Consume *data* and return the plain data bytes it carries."""
        out = bytearray()
        for byte in data:
            if self._escape:
                self._escape = False
                if byte == TelnetCommand.IAC:
                    self._data(byte, out)
                else:
                    self._command(byte)
            elif byte == TelnetCommand.IAC:
                self._escape = True
            else:
                self._data(byte, out)
        return bytes(out)

    def _data(self, byte: int, out: bytearray) -> None:
        if self._state is _State.DATA:
            out.append(byte)
        elif self._state is _State.SUB:
            self._sub.append(byte)
        else:
            self.negotiations.append((_WAITED[self._state], byte))
            self._state = _State.DATA

    def _command(self, byte: int) -> None:
        if byte == TelnetCommand.SE:
            if self._state is _State.SUB:
                self.subnegotiations.append(bytes(self._sub))
                self._sub.clear()
                self._state = _State.DATA
            else:
                _log.warning("received SE when not in sub state")
        elif byte == TelnetCommand.SB:
            if self._state is not _State.SUB:
                self._sub.clear()
                self._state = _State.SUB
            else:
                _log.warning("received SB when already in sub state")
        elif byte in _WAITING:
            self._state = _WAITING[TelnetCommand(byte)]
        elif byte in _RESETTING_COMMANDS:
            self._state = _State.DATA
        # any other byte after IAC is not a command and is dropped


class _Step(Enum):
    FIRST = auto()
    ESCAPE = auto()
    BRACKET = auto()
    TILDE = auto()
    WAIT_ZERO = auto()


_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class TelnetKeyDecoder:
    """Turns the data bytes of a telnet client into key events."""

    def __init__(self) -> None:
        self._step = _Step.FIRST

    def feed(self, byte: int) -> Key | None:
        """Consume one data byte; return a key once one is complete, else None.

        Byte 255 (or -1) and 4 end the input, 8 and 127 are backspace,
        CR followed by NUL or LF is return, and ESC [ sequences are the
        arrow, home, end and delete keys.
        """
        step = self._step
        if step is _Step.FIRST:
            if byte in (-1, 0xFF, 4):
                return Key(KeyType.EOF)
            if byte in (8, 127):
                return Key(KeyType.BACKSPACE)
            if byte == 27:
                self._step = _Step.ESCAPE
                return None
            if byte == 13:
                self._step = _Step.WAIT_ZERO
                return None
            return Key(KeyType.ASCII, chr(byte))
        if step is _Step.ESCAPE:
            if byte == 91:
                self._step = _Step.BRACKET
                return None
            self._step = _Step.FIRST
            return Key(KeyType.IGNORED)
        if step is _Step.BRACKET:
            if byte in _ARROWS:
                self._step = _Step.FIRST
                return Key(_ARROWS[byte])
            self._step = _Step.TILDE
            return None
        self._step = _Step.FIRST
        if step is _Step.TILDE:
            return Key(KeyType.CANC) if byte == 126 else Key(KeyType.IGNORED)
        return Key(KeyType.RET) if byte in (0, 10) else Key(KeyType.IGNORED)