# bddsuite

Building blocks for a behaviour-driven test runner:

- `bddsuite.colors` – functions that wrap values in ANSI color codes, and
  writers that pass colored text through or strip the escape sequences;
- `bddsuite.formatters` – the `Formatter` interface, `StepDefinition`, and a
  registry to register, look up and list formatters by name;
- `bddsuite.flags` – an `Options` record and a flag parser for the usual
  runner flags (format, tags, concurrency, strict mode, random ordering…);
- `bddsuite.cli` – the `bddsuite` command, which reports the version.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Colored output

```python
import sys
from bddsuite.colors import green, yellow, bold, black, colored, uncolored

print(green("passed"))
print(bold(black)("# a comment"))

colored(sys.stdout).write(yellow("pending") + "\n")    # colors kept
uncolored(sys.stdout).write(yellow("pending") + "\n")  # escape sequences removed
```

`green`, `red`, `cyan`, `black`, `yellow` and `white` accept any value and
return it wrapped in the matching color code. `bold` takes one of them and
returns a function producing the bold variant.

`colored(out)` returns a `ColoredWriter` that writes text unchanged (given a
`ColoredWriter`, it returns it as is). `uncolored(out)` returns an
`UncoloredWriter` that drops `ESC [ ... <letter>` sequences. Both accept `str`
or UTF-8 `bytes`. An escape sequence left incomplete at the end of a write is
held back, never written, and not counted in the returned length.

## Formatters

A formatter receives the events of a test run: `test_run_started`,
`feature`, `pickle`, `defined`, `passed`, `failed`, `skipped`, `undefined`,
`pending` and finally `summary`. `Formatter` is an abstract base class, so a
subclass must implement every one of these methods. Register a factory that
builds it from a suite name and an output stream:

```python
from bddsuite.formatters import Formatter, register_format, find_fmt, available_formatters


class Quiet(Formatter):
    def __init__(self, suite, out):
        self.suite = suite
        self.out = out

    def test_run_started(self): pass
    def feature(self, document, uri, content): pass
    def pickle(self, scenario): pass
    def defined(self, scenario, step, definition): pass
    def failed(self, scenario, step, definition, error): pass
    def passed(self, scenario, step, definition): pass
    def skipped(self, scenario, step, definition): pass
    def undefined(self, scenario, step, definition): pass
    def pending(self, scenario, step, definition): pass
    def summary(self): pass


register_format("quiet", "Prints nothing at all.", Quiet)

factory = find_fmt("quiet")        # None if the name is not registered
print(available_formatters())      # {"quiet": "Prints nothing at all."}
```

If a name is registered twice, `find_fmt` returns the first factory, while
`available_formatters` reports the description registered last.
`StepDefinition` pairs a compiled step pattern (`expr`) with its `handler`.

## Run options

```python
from bddsuite.flags import Options, flag_set, parse_into

opt = Options()
parser = flag_set(opt)
parse_into(parser, opt, ["--format=progress", "--tags", "@wip", "--random=123", "features/"])
print(opt.format, opt.tags, opt.randomize, opt.paths)   # progress @wip 123 ['features/']
```

Flags: `-f/--format` (default `pretty`), `-t/--tags`, `-c/--concurrency`
(default `1`), `-d/--definitions`, `--stop-on-failure`, `--strict`,
`--no-colors` and `--random[=SEED]`. Flags may be written with one or two
dashes, with the value after `=` or as the next argument; parsing stops at the
first non-flag argument or at `--`. Values already set on the `Options` you
pass in become the defaults.

`--random` on its own, or `--random=true`, picks a seed between 1 and 99998
(`make_random_seed`); `--random=false` sets 0; any other value must be a
base-10 integer (`parse_random_seed`).

Errors — an unknown flag, a missing or malformed value — raise `ValueError`.
`-h`/`--help` writes the usage text to `opt.output` (standard output when it
is `None`) and then raises `ValueError`.

`bind_flags(prefix, parser, opt)` adds the same flags, each name prefixed, to
an existing flag set, and `usage(parser, out)` returns a function that writes
the help text, including the registered formatters and their descriptions.

## Command line

```
bddsuite version
```

prints the current version; `bddsuite --version` does the same. Without
arguments, `bddsuite` prints its help.

## What this package does not do

There is no feature-file parser, no step matching or execution, no suite
runner and no built-in formatters: `available_formatters()` lists only what
you register yourself. The command line has no `run` or `build` command.