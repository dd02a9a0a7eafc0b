"""Command-line flags that configure a feature suite run."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TextIO

from bddsuite import colors
from bddsuite.formatters import available_formatters

PROGRAM = "bddsuite"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _spaces(count: int) -> str:
    return " " * count


_DESC_FEATURES_ARGUMENT = (
    "Optional feature(s) to run. Can be:\n"
    + _spaces(4) + "- dir " + colors.yellow("(features/)") + "\n"
    + _spaces(4) + "- feature " + colors.yellow("(*.feature)") + "\n"
    + _spaces(4) + "- scenario at specific line " + colors.yellow("(*.feature:10)") + "\n"
    + "If no feature paths are listed, suite tries " + colors.yellow("features")
    + " path by default.\n"
)

_DESC_CONCURRENCY_OPTION = (
    "Run the test suite with concurrency level:\n"
    + _spaces(4) + "- " + colors.yellow("= 1") + ": supports all types of formats.\n"
    + _spaces(4) + "- " + colors.yellow(">= 2") + ": only supports "
    + colors.yellow("progress") + ". Note, that\n"
    + _spaces(4) + "your context needs to support parallel execution."
)

_DESC_TAGS_OPTION = (
    "Filter scenarios by tags. Expression can be:\n"
    + _spaces(4) + "- " + colors.yellow('"@wip"') + ": run all scenarios with wip tag\n"
    + _spaces(4) + "- " + colors.yellow('"~@wip"') + ": exclude all scenarios with wip tag\n"
    + _spaces(4) + "- " + colors.yellow('"@wip && ~@new"') + ": run wip scenarios, but exclude new\n"
    + _spaces(4) + "- " + colors.yellow('"@wip,@undone"') + ": run wip or undone scenarios"
)

_DESC_RANDOM_OPTION = (
    "Randomly shuffle the scenario execution order.\n"
    "Specify SEED to reproduce the shuffling from a previous run.\n"
    + _spaces(4) + "e.g. " + colors.yellow("--random") + " or " + colors.yellow("--random=5738")
)

_DESC_DEFINITIONS = "Print all available step definitions."
_DESC_STOP_ON_FAILURE = "Stop processing on first failed scenario."
_DESC_STRICT = "Fail suite when there are pending or undefined steps."
_DESC_NO_COLORS = "Disable ansi colors."


@dataclass
class Options:
    """Settings of a feature suite run."""

    format: str = ""
    tags: str = ""
    concurrency: int = 0
    show_step_definitions: bool = False
    stop_on_failure: bool = False
    strict: bool = False
    no_colors: bool = False
    randomize: int = 0
    paths: list[str] = field(default_factory=list)
    output: Optional[TextIO] = None


def _parse_bool(value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError("invalid syntax")


def _check_int64(number: int) -> int:
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError("value out of range")
    return number


def _parse_int(value: str) -> int:
    sign, body = "", value
    if body and body[0] in "+-":
        sign, body = body[0], body[1:]
    if not body or body != body.strip():
        raise ValueError("invalid syntax")
    try:
        if len(body) > 1 and body[0] == "0" and body[1].isdigit():
            number = int(body, 8)
        else:
            number = int(body, 0)
    except ValueError:
        raise ValueError("invalid syntax") from None
    return _check_int64(-number if sign == "-" else number)


def make_random_seed() -> int:
    """Return a pseudo-random seed between 1 and 99998."""
    return random.Random(time.time_ns()).randrange(99998) + 1


def parse_random_seed(value: str) -> int:
    """Turn a ``--random`` flag value into a seed.

    ``true`` draws a fresh seed, ``false`` disables shuffling (0) and any
    other value must be a base-10 integer.
    """
    if value == "true":
        return make_random_seed()
    if value == "false":
        return 0
    body = value[1:] if value[:1] in ("+", "-") else value
    if not body or not body.isascii() or not body.isdigit():
        raise ValueError(f'parsing "{value}": invalid syntax')
    return _check_int64(int(value, 10))


@dataclass
class _Flag:
    name: str
    usage: str
    default: str
    set: Callable[[str], None]
    is_bool: Callable[[], bool]


class _FlagSet:
    """A set of named flags, parsed with single- or double-dash syntax."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.flags: dict[str, _Flag] = {}
        self.args: list[str] = []
        self.usage: Optional[Callable[[], None]] = None

    def define(self, flag: _Flag) -> None:
        if flag.name in self.flags:
            raise ValueError(f"{self.name} flag redefined: {flag.name}")
        self.flags[flag.name] = flag

    def visit_all(self) -> list[_Flag]:
        return [self.flags[name] for name in sorted(self.flags)]

    def parse(self, args: Sequence[str]) -> list[str]:
        remaining = list(args)
        while remaining:
            arg = remaining[0]
            if len(arg) < 2 or not arg.startswith("-"):
                break
            remaining.pop(0)
            name = arg[1:]
            if name.startswith("-"):
                name = name[1:]
                if not name:
                    break
            if not name or name[0] in "-=":
                raise ValueError(f"bad flag syntax: {arg}")
            name, eq, value = name.partition("=")
            has_value = bool(eq)
            flag = self.flags.get(name)
            if flag is None:
                if name in ("help", "h"):
                    if self.usage is not None:
                        self.usage()
                    raise ValueError("flag: help requested")
                raise ValueError(f"flag provided but not defined: -{name}")
            if flag.is_bool():
                text = value if has_value else "true"
                try:
                    flag.set(text)
                except ValueError as exc:
                    raise ValueError(f'invalid boolean value "{text}" for -{name}: {exc}') from None
                continue
            if not has_value:
                if not remaining:
                    raise ValueError(f"flag needs an argument: -{name}")
                value = remaining.pop(0)
            try:
                flag.set(value)
            except ValueError as exc:
                raise ValueError(f'invalid value "{value}" for flag -{name}: {exc}') from None
        self.args = remaining
        return list(remaining)


def flag_set(opt: Options) -> _FlagSet:
    """Build a flag set bound to ``opt`` with usage written to its output."""
    parser = _FlagSet(PROGRAM)
    bind_flags("", parser, opt)
    parser.usage = usage(parser, opt.output if opt.output is not None else sys.stdout)
    return parser


def bind_flags(prefix: str, parser: _FlagSet, opt: Options) -> None:
    """Bind the run flags, each named with ``prefix``, to ``opt``.

    Values already set on ``opt`` become the flag defaults; unset ones take
    the built-in defaults.
    """
    format_lines = "How to format tests output. Built-in formats:\n"
    for name, desc in sorted(available_formatters().items()):
        format_lines += _spaces(4) + "- " + colors.yellow(name) + ": " + desc + "\n"
    desc_format = format_lines.strip()

    defaults = {
        "format": opt.format or "pretty",
        "tags": opt.tags,
        "concurrency": opt.concurrency or 1,
        "show_step_definitions": opt.show_step_definitions,
        "stop_on_failure": opt.stop_on_failure,
        "strict": opt.strict,
        "no_colors": opt.no_colors,
    }

    def setter(attr: str, convert: Callable[[str], object]) -> Callable[[str], None]:
        return lambda value: setattr(opt, attr, convert(value))

    def define(names: Sequence[str], attr: str, desc: str) -> None:
        default = defaults[attr]
        setattr(opt, attr, default)
        if isinstance(default, bool):
            convert: Callable[[str], object] = _parse_bool
            default_text = "true" if default else "false"
            is_bool: Callable[[], bool] = lambda: True
        elif isinstance(default, int):
            convert, default_text, is_bool = _parse_int, str(default), lambda: False
        else:
            convert, default_text, is_bool = str, default, lambda: False
        for name in names:
            parser.define(_Flag(prefix + name, desc, default_text, setter(attr, convert), is_bool))

    define(("format", "f"), "format", desc_format)
    define(("tags", "t"), "tags", _DESC_TAGS_OPTION)
    define(("concurrency", "c"), "concurrency", _DESC_CONCURRENCY_OPTION)
    define(("definitions", "d"), "show_step_definitions", _DESC_DEFINITIONS)
    define(("stop-on-failure",), "stop_on_failure", _DESC_STOP_ON_FAILURE)
    define(("strict",), "strict", _DESC_STRICT)
    define(("no-colors",), "no_colors", _DESC_NO_COLORS)

    def set_random(value: str) -> None:
        opt.randomize = parse_random_seed(value)

    parser.define(
        _Flag(
            prefix + "random",
            _DESC_RANDOM_OPTION,
            str(opt.randomize),
            set_random,
            lambda: opt.randomize == 0,
        )
    )


def parse_into(parser: _FlagSet, opt: Options, args: Sequence[str]) -> list[str]:
    """Parse ``args``, store the remaining positional paths on ``opt`` and return them."""
    paths = parser.parse(args)
    opt.paths = list(paths)
    return paths


@dataclass
class _Flagged:
    descr: str
    dflt: str
    short: str = ""
    long: str = ""

    @property
    def name(self) -> str:
        if self.short and self.long:
            name = f"-{self.short}, --{self.long}"
        elif self.long:
            name = f"--{self.long}"
        elif self.short:
            name = f"-{self.short}"
        else:
            name = ""
        if self.long == "random":
            # the seed is chosen at parse time, so its default is not shown
            name += "[=SEED]"
        elif self.dflt not in ("true", "false"):
            name += "=" + self.dflt
        return name


def usage(parser: _FlagSet, out: TextIO) -> Callable[[], None]:
    """Return a function that writes the usage text of ``parser`` to ``out``."""

    def show() -> None:
        entries: list[_Flagged] = []
        for flag in parser.visit_all():
            entry = next((e for e in entries if e.descr == flag.usage), None)
            if entry is None:
                entry = _Flagged(descr=flag.usage, dflt=flag.default)
                entries.append(entry)
            if len(flag.name) > 2:
                entry.long = flag.name
            else:
                entry.short = flag.name

        longest = max((len(entry.name) for entry in entries), default=0)

        def option(name: str, desc: str) -> str:
            first, *rest = desc.split("\n")
            lines = [_spaces(2) + colors.green(name) + _spaces(longest + 2 - len(name)) + first]
            lines.extend(_spaces(2) + _spaces(longest + 2) + line for line in rest)
            return "\n".join(lines)

        def println(text: str = "") -> None:
            out.write(text + "\n")

        println(colors.yellow("Usage:"))
        out.write(_spaces(2) + f"{PROGRAM} [options] [<features>]\n\n")
        println("Runs the given feature files against the tested package.")
        out.write("Command should be run from the directory of the tested package.\n\n")

        println(colors.yellow("Arguments:"))
        println(option("features", _DESC_FEATURES_ARGUMENT))

        println(colors.yellow("Options:"))
        for entry in entries:
            println(option(entry.name, entry.descr))
        println()

    return show