import io

import pytest

from bddsuite import colors
from bddsuite.colors import ColoredWriter, UncoloredWriter


@pytest.mark.parametrize(
    "fn, code",
    [
        (colors.black, 30),
        (colors.red, 31),
        (colors.green, 32),
        (colors.yellow, 33),
        (colors.cyan, 36),
        (colors.white, 37),
    ],
)
def test_color_functions_wrap_with_sgr_code(fn, code):
    assert fn("text") == f"\x1b[{code}mtext\x1b[0m"


def test_color_function_formats_non_string_values():
    result = colors.yellow(42)
    assert result.startswith("\x1b[33m")
    assert "42" in result
    assert result.endswith("\x1b[0m")


def test_bold_inserts_bold_attribute_once():
    assert colors.bold(colors.red)("x") == "\x1b[1;31mx\x1b[0m"


def test_bold_keeps_reset_untouched():
    result = colors.bold(colors.green)("abc")
    assert result.count("\x1b[1;") == 1
    assert result.endswith("\x1b[0m")


def test_uncolored_strips_colors():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    data = colors.green("hello") + " " + colors.bold(colors.red)("world")
    written = writer.write(data)
    assert buf.getvalue() == "hello world"
    assert written == len(data)


def test_uncolored_accepts_bytes():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    data = colors.cyan("plain").encode("utf-8")
    writer.write(data)
    assert buf.getvalue() == "plain"


def test_uncolored_strips_non_color_sequences():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    writer.write("\x1b[2Kline\x1b[1@end")
    assert buf.getvalue() == "lineend"


def test_uncolored_holds_back_incomplete_sequence():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    data = "abc\x1b[31"
    written = writer.write(data)
    assert buf.getvalue() == "abc"
    assert written == len(data) - len("\x1b[31")


def test_uncolored_holds_back_trailing_escape():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    data = "ab\x1b"
    written = writer.write(data)
    assert buf.getvalue() == "ab"
    assert written == len(data) - 1


def test_uncolored_drops_escape_without_bracket():
    buf = io.StringIO()
    writer = colors.uncolored(buf)
    data = "a\x1bXb"
    written = writer.write(data)
    assert buf.getvalue() == "ab"
    assert written == len(data) - 2


def test_uncolored_returns_writer_type():
    writer = colors.uncolored(io.StringIO())
    assert isinstance(writer, UncoloredWriter)
    assert writer.write("text") == len("text")


def test_colored_passes_text_through():
    buf = io.StringIO()
    writer = colors.colored(buf)
    data = colors.green("ok") + " done"
    written = writer.write(data)
    assert buf.getvalue() == data
    assert written == len(data)


def test_colored_does_not_wrap_twice():
    writer = colors.colored(io.StringIO())
    assert isinstance(writer, ColoredWriter)
    assert colors.colored(writer) is writer


def test_colored_then_uncolored_round_trip():
    buf = io.StringIO()
    writer = colors.colored(colors.uncolored(buf))
    writer.write(colors.white("round") + colors.black("trip"))
    assert buf.getvalue() == "roundtrip"