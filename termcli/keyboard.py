"""Local keyboard input: key decoding, raw terminal mode and a reader thread."""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Callable, Iterator
from contextlib import ExitStack, contextmanager

from .inputdevice import InputDevice, Key, KeyType
from .interfaces import Scheduler

try:
    import termios
except ImportError:  # not available on Windows
    termios = None

try:
    import msvcrt
except ImportError:  # only available on Windows
    msvcrt = None

__all__ = ["Keyboard", "decode_posix_key", "decode_windows_key", "raw_mode"]

Reader = Callable[[], int]
Decoder = Callable[[Reader], Key]

_END_OF_STREAM = -1

_POSIX_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}

_WINDOWS_SYMBOLS = {
    72: KeyType.UP,
    80: KeyType.DOWN,
    75: KeyType.LEFT,
    77: KeyType.RIGHT,
    71: KeyType.HOME,
    79: KeyType.END,
    83: KeyType.CANC,
}


def decode_posix_key(read: Reader) -> Key:
    """Read one key from a POSIX terminal in raw mode.

    *read* returns the next byte as an int, or -1 at the end of the stream.
    Only the bytes that make up the key are consumed.
    """
    ch = read()
    if ch in (_END_OF_STREAM, 4):
        return Key(KeyType.EOF)
    if ch == 127:
        return Key(KeyType.BACKSPACE)
    if ch == 10:
        return Key(KeyType.RET)
    if ch == 27:
        if read() != 91:
            return Key(KeyType.IGNORED)
        ch = read()
        if ch == 51:
            return Key(KeyType.CANC) if read() == 126 else Key(KeyType.IGNORED)
        return Key(_POSIX_ARROWS.get(ch, KeyType.IGNORED))
    return Key(KeyType.ASCII, chr(ch))


def decode_windows_key(read: Reader) -> Key:
    """Read one key from a Windows console.

    *read* returns the next code as an int, or -1 at the end of the stream.
    """
    ch = read()
    if ch in (_END_OF_STREAM, 4, 26, 3):
        return Key(KeyType.EOF)
    if ch == 224:
        return Key(_WINDOWS_SYMBOLS.get(read(), KeyType.IGNORED))
    if ch == 8:
        return Key(KeyType.BACKSPACE, chr(ch))
    if ch == 13:
        return Key(KeyType.RET, chr(ch))
    return Key(KeyType.ASCII, chr(ch))


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Turn off line buffering and echo on terminal *fd* for the duration.

    Where the platform has no termios the terminal is left as it is.
    """
    if termios is None:
        yield
        return
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] = new[3] & ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _posix_reader(fd: int) -> Reader:
    def read() -> int:
        data = os.read(fd, 1)
        return data[0] if data else _END_OF_STREAM

    return read


def _windows_reader() -> int:
    data = msvcrt.getch()
    return data[0] if data else _END_OF_STREAM


class Keyboard(InputDevice):
    """Reads keys in a background thread and posts them to a scheduler.

    By default keys come from standard input, decoded for the current
    platform, with the terminal switched to raw mode while running. A custom
    *read* function (and *decode* function) can be given instead; the
    terminal is then left untouched.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        read: Reader | None = None,
        decode: Decoder | None = None,
        fd: int | None = None,
    ) -> None:
        super().__init__(scheduler)
        windows = os.name == "nt"
        self._fd = sys.stdin.fileno() if fd is None and read is None else fd
        self._manage_terminal = read is None and not windows
        if read is None:
            read = _windows_reader if windows else _posix_reader(self._fd)
        self._read = read
        self._decode = decode or (decode_windows_key if windows else decode_posix_key)
        self._running = threading.Event()
        self._stack = ExitStack()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start reading keys; raises RuntimeError if already started."""
        if self._running.is_set():
            raise RuntimeError("keyboard already started")
        if self._manage_terminal and self._fd is not None and os.isatty(self._fd):
            self._stack.enter_context(raw_mode(self._fd))
        self._running.set()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop reading keys and restore the terminal."""
        self._running.clear()
        self._stack.close()

    def __enter__(self) -> Keyboard:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        ended = False

        def read() -> int:
            nonlocal ended
            code = self._read()
            if code < 0:
                ended = True
            return code

        while self._running.is_set() and not ended:
            try:
                key = self._decode(read)
            except OSError:
                key, ended = Key(KeyType.EOF), True
            self.notify(key)