"""Command registry — every path command is a handler function registered via decorator.

Usage:
    @command("Ll", description="Straight line to a point")
    def line_to(state: InterpreterState, relative: bool) -> None:
        ...

The upper-case letter registers the absolute form and the lower-case letter
the relative form of the same handler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathgeom.parser.interpreter import InterpreterState

logger = logging.getLogger(__name__)

Handler = Callable[["InterpreterState", bool], None]


@dataclass(frozen=True)
class CommandSpec:
    letter: str
    fn: Handler
    relative: bool = False
    description: str = ""


class CommandRegistry:
    """Lookup table from command letter to handler."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.letter in self._commands:
            raise ValueError(f"Duplicate command letter: {spec.letter}")
        self._commands[spec.letter] = spec
        logger.debug("Registered command %s (%s)", spec.letter, spec.fn.__name__)

    def get(self, letter: str) -> CommandSpec | None:
        return self._commands.get(letter)

    def __contains__(self, letter: str) -> bool:
        return letter in self._commands

    def letters(self) -> str:
        return "".join(sorted(self._commands))

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(letters: str, *, description: str = "", registry: CommandRegistry | None = None):
    """Decorator to register a handler under an absolute/relative letter pair."""
    target = registry or _registry

    def decorator(fn: Handler) -> Handler:
        for letter in letters:
            target.register(
                CommandSpec(letter=letter, fn=fn, relative=letter.islower(), description=description)
            )
        return fn

    return decorator
