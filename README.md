# termcli

termcli provides building blocks for interactive command line interfaces. It
has no third-party dependencies.

## Modules

- `termcli.split`: `split(text)` splits an input line into words. Spaces,
  tabs and newlines separate words. Single or double quotes group a sentence
  into one word. A backslash escapes a following quote or backslash; before
  any other character the backslash is kept. Empty words are dropped.
- `termcli.fromstring`: `from_string(text, target)` converts one argument
  strictly and raises `BadConversion` (a `ValueError`) when the text does not
  fit.
  - `target` can be a `CType`, for example `CType.INT`,
    `CType.UNSIGNED_CHAR`, `CType.BOOL`, `CType.CHAR`, `CType.FLOAT` or
    `CType.STRING`. Integers are range-checked for their width. A bool
    accepts `true`, `false`, `1` or `0`. A char must be exactly one
    character. A floating-point value must contain no whitespace and must not
    overflow.
  - `target` can also be one of the Python types `str`, `int` (read as a C
    `int`), `float` (a `double`), `bool` or `type(None)`.
  - Any other callable that builds a value from a string is accepted too.
- `termcli.commonprefix`: `common_prefix(strings)` returns the longest prefix
  that every string shares. It raises `ValueError` for an empty sequence.
- `termcli.colors`:
  - The ANSI code enums `Style`, `Fg`, `Bg`, `FgB` and `BgB`, and
    `escape(code)`.
  - A colour switch: `set_color()`, `set_no_color()` and `color_enabled()`.
  - The markers `before_prompt()`, `after_prompt()`, `before_input()` and
    `after_input()`. Each returns an escape sequence when colours are on and
    an empty string when they are off.
  - `supports_color(term)`, which checks a `TERM` value.
- `termcli.interfaces`: the abstract base classes `Scheduler` (`post(task)`)
  and `HistoryStorage` (`store(commands)`, `commands()`, `clear()`).
- `termcli.inputdevice`:
  - `KeyType` and `Key`, a named tuple holding `type` and `char`.
  - `InputDevice`. Its `notify(key)` posts the key through a scheduler to
    the handler set with `register(handler)`.
- `termcli.keyboard`:
  - `decode_posix_key(read)` and `decode_windows_key(read)` turn raw key
    codes into `Key` values. `read` returns the next code, or -1 at the end
    of the stream.
  - `raw_mode(fd)` is a context manager that turns off line buffering and
    echo where termios is available.
  - `Keyboard` is an `InputDevice` that reads keys in a background thread
    after `start()`, until `stop()`. It can also be used as a context
    manager. By default it reads standard input and switches a POSIX
    terminal to raw mode. A custom `read` (and `decode`) function leaves the
    terminal untouched.
- `termcli.telnet`:
  - `encode(text)` turns newlines into CRLF.
  - `negotiation()` returns the option bytes sent to a newly connected
    client: line mode and server echo.
  - `TelnetCommand` lists the command bytes.
  - `TelnetDecoder.feed(data)` strips telnet commands from a byte stream and
    returns the plain data. It records option requests in `negotiations` and
    subnegotiation parameters in `subnegotiations`.
  - `TelnetKeyDecoder.feed(byte)` turns client data bytes into `Key` values.

## Example

```python
from termcli.split import split
from termcli.fromstring import from_string, CType, BadConversion

words = split('add 3 "four five"')        # ['add', '3', 'four five']
value = from_string(words[1], CType.INT)  # 3

try:
    from_string("300", CType.UNSIGNED_CHAR)
except BadConversion:
    print("out of range")
```

## What it does not do

termcli is a set of parts, not a complete command line framework. It does not
include:

- a menu or command registry, or command dispatch;
- a prompt or session loop, or line editing driven by keys;
- a concrete scheduler or history store, only the abstract interfaces;
- a network server: the telnet module works on bytes you pass it and opens
  no sockets.

It provides no command of its own.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```