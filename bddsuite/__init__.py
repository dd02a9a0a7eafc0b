"""Building blocks for a behaviour-driven test runner: colors, formatters, flags and a CLI."""

__version__ = "0.11.0rc2"

__all__ = ["cli", "colors", "flags", "formatters"]