"""Path interpreter — the state machine turning path data into a Path.

One InterpreterState is created per parse call and dropped when it returns,
so parsing is safe from any thread. Command letters are dispatched through
the command registry; the handlers live in ``pathgeom.parser.commands``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import pathgeom.parser.commands  # noqa: F401  (registers the command handlers)
from pathgeom.models.path import ORIGIN, ClosePath, MoveTo, Path, Point, Segment
from pathgeom.parser.config import DEFAULT_CONFIG, ParserConfig
from pathgeom.parser.errors import PathParseError, UnrecognizedCommand
from pathgeom.parser.lexer import Lexer
from pathgeom.parser.registry import CommandRegistry, get_registry

logger = logging.getLogger(__name__)


@dataclass
class InterpreterState:
    """Mutable per-parse state shared by the command handlers."""

    lexer: Lexer
    path: Path = field(default_factory=Path)
    config: ParserConfig = DEFAULT_CONFIG
    current_point: Point = ORIGIN
    subpath_start: Point = ORIGIN
    prev_cubic_control: Point | None = None
    prev_quadratic_control: Point | None = None

    def base(self, relative: bool) -> Point:
        """Offset added to operands: the current point for relative commands."""
        return self.current_point if relative else ORIGIN

    def clear_prev(self, cubic: bool = True, quadratic: bool = True) -> None:
        if cubic:
            self.prev_cubic_control = None
        if quadratic:
            self.prev_quadratic_control = None

    def read_point(self, relative: bool) -> Point:
        x, y = self.lexer.read_numbers(2)
        return self.base(relative) + Point(x, y)

    def append(self, segment: Segment) -> None:
        """Append a segment and move the current point to its end."""
        self.path.append(segment)
        if isinstance(segment, ClosePath):
            self.current_point = self.subpath_start
        else:
            self.current_point = segment.point
            if isinstance(segment, MoveTo):
                self.subpath_start = segment.point

    def reflected_control(self, previous: Point | None) -> Point:
        """First control point of a smooth curve.

        Reflection of ``previous`` through the current point, or the current
        point itself when the previous segment was of another family.
        """
        if previous is None:
            return self.current_point
        return previous.reflect(self.current_point)


@dataclass
class ParseResult:
    path: Path
    error: PathParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_path(
    text: str,
    *,
    tolerant: bool = False,
    config: ParserConfig | None = None,
    registry: CommandRegistry | None = None,
) -> ParseResult:
    """Parse path data into a Path.

    Args:
        text: Path data, e.g. ``"M0,0 L10,0 Z"``.
        tolerant: On error, keep the segments built so far and return them
            with the error instead of raising.
        config: Arc handling knobs. Defaults to ``ParserConfig()``.
        registry: Command table. Defaults to the built-in commands.

    Raises:
        PathParseError: In strict mode, on the first malformed command or operand.
    """
    start = time.perf_counter()
    registry = registry or get_registry()
    state = InterpreterState(lexer=Lexer(text), config=config or DEFAULT_CONFIG)

    try:
        while True:
            letter = state.lexer.read_command()
            if letter is None:
                break
            spec = registry.get(letter)
            if spec is None:
                raise UnrecognizedCommand(letter, state.lexer.index - 1, text)
            spec.fn(state, spec.relative)
    except PathParseError as e:
        if not tolerant:
            raise
        logger.warning("Path data error after %d segments: %s", len(state.path), e.message)
        return ParseResult(path=state.path, error=e)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("Parsed %d chars into %d segments in %.2fms", len(text), len(state.path), elapsed)
    return ParseResult(path=state.path)
