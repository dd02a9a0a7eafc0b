"""ANSI colour helpers and writers that keep or strip colour escape sequences."""

from __future__ import annotations

import enum
from typing import Any, Callable, TextIO, Union

ANSI_ESCAPE = "\x1b"

ColorFunc = Callable[[Any], str]


class _Color(enum.IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class OutputMode(enum.Enum):
    """How a colour writer treats escape sequences that are not colours."""

    DISCARD_NON_COLOR_ESC_SEQ = 1
    OUTPUT_NON_COLOR_ESC_SEQ = 2


def _colorize(value: Any, color: _Color) -> str:
    return f"{ANSI_ESCAPE}[{int(color)}m{value}{ANSI_ESCAPE}[0m"


def bold(fn: ColorFunc) -> ColorFunc:
    """Wrap a colour function so that its output is also bold."""

    def wrapped(value: Any) -> str:
        return fn(value).replace(ANSI_ESCAPE + "[", ANSI_ESCAPE + "[1;", 1)

    return wrapped


def green(value: Any) -> str:
    """Return the value as a green string."""
    return _colorize(value, _Color.GREEN)


def red(value: Any) -> str:
    """Return the value as a red string."""
    return _colorize(value, _Color.RED)


def cyan(value: Any) -> str:
    """Return the value as a cyan string."""
    return _colorize(value, _Color.CYAN)


def black(value: Any) -> str:
    """Return the value as a black string."""
    return _colorize(value, _Color.BLACK)


def yellow(value: Any) -> str:
    """Return the value as a yellow string."""
    return _colorize(value, _Color.YELLOW)


def white(value: Any) -> str:
    """Return the value as a white string."""
    return _colorize(value, _Color.WHITE)


def _as_text(data: Union[str, bytes]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def _is_csi_terminator(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "@"


class UncoloredWriter:
    """A writer that drops ANSI CSI escape sequences before passing text on.

    Escape sequences left incomplete at the end of a write are held back and
    never emitted; they are not counted as written.
    """

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self._held = ""

    def write(self, data: Union[str, bytes]) -> int:
        text = _as_text(data)
        plain: list[str] = []
        chars = iter(text)
        for c1 in chars:
            if c1 != ANSI_ESCAPE:
                plain.append(c1)
                continue
            c2 = next(chars, None)
            if c2 is None:
                self._held += c1
                break
            if c2 != "[":
                self._held += c1 + c2
                continue
            params: list[str] = []
            for ch in chars:
                if _is_csi_terminator(ch):
                    break
                params.append(ch)
            else:
                self._held += c1 + c2 + "".join(params)
                break
        if plain:
            self.out.write("".join(plain))
        return len(text) - len(self._held)


class ColoredWriter:
    """A writer that passes text, escape sequences included, to its target."""

    def __init__(
        self,
        out: TextIO,
        mode: OutputMode = OutputMode.DISCARD_NON_COLOR_ESC_SEQ,
    ) -> None:
        self.out = out
        self.mode = mode

    def write(self, data: Union[str, bytes]) -> int:
        text = _as_text(data)
        written = self.out.write(text)
        return len(text) if written is None else written


def uncolored(out: TextIO) -> UncoloredWriter:
    """Return a writer that strips colours before writing to ``out``."""
    return UncoloredWriter(out)


def colored(out: TextIO) -> ColoredWriter:
    """Return a writer that keeps colours when writing to ``out``."""
    if isinstance(out, ColoredWriter):
        return out
    return ColoredWriter(out, OutputMode.DISCARD_NON_COLOR_ESC_SEQ)