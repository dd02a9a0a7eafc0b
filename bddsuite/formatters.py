"""Formatter interface and the registry of named output formatters."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO


@dataclass
class StepDefinition:
    """A registered step: the pattern that matches it and its handler."""

    expr: re.Pattern
    handler: Callable[..., Any]


class Formatter(abc.ABC):
    """Presents the progress and summary of a feature suite run."""

    @abc.abstractmethod
    def test_run_started(self) -> None:
        """Called once when the test run starts."""

    @abc.abstractmethod
    def feature(self, document: Any, uri: str, content: bytes) -> None:
        """Called for each feature file before its scenarios run."""

    @abc.abstractmethod
    def pickle(self, scenario: Any) -> None:
        """Called when a scenario starts."""

    @abc.abstractmethod
    def defined(self, scenario: Any, step: Any, definition: Optional[StepDefinition]) -> None:
        """Called when a step has been matched to a definition."""

    @abc.abstractmethod
    def failed(
        self,
        scenario: Any,
        step: Any,
        definition: Optional[StepDefinition],
        error: BaseException,
    ) -> None:
        """Called when a step fails."""

    @abc.abstractmethod
    def passed(self, scenario: Any, step: Any, definition: Optional[StepDefinition]) -> None:
        """Called when a step passes."""

    @abc.abstractmethod
    def skipped(self, scenario: Any, step: Any, definition: Optional[StepDefinition]) -> None:
        """Called when a step is skipped."""

    @abc.abstractmethod
    def undefined(self, scenario: Any, step: Any, definition: Optional[StepDefinition]) -> None:
        """Called when no definition matches a step."""

    @abc.abstractmethod
    def pending(self, scenario: Any, step: Any, definition: Optional[StepDefinition]) -> None:
        """Called when a step is pending."""

    @abc.abstractmethod
    def summary(self) -> None:
        """Called once after the whole run."""


FormatterFactory = Callable[[str, TextIO], Formatter]


@dataclass(frozen=True)
class _RegisteredFormatter:
    name: str
    description: str
    factory: FormatterFactory


_registered: list[_RegisteredFormatter] = []


def find_fmt(name: str) -> Optional[FormatterFactory]:
    """Return the factory of the first formatter registered under ``name``, or None."""
    return next((entry.factory for entry in _registered if entry.name == name), None)


def register_format(name: str, description: str, factory: FormatterFactory) -> None:
    """Register a formatter factory under a name with a description."""
    _registered.append(_RegisteredFormatter(name, description, factory))


def available_formatters() -> dict[str, str]:
    """Return a mapping of every registered formatter name to its description."""
    return {entry.name: entry.description for entry in _registered}