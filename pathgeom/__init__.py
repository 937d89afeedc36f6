"""pathgeom — path data parser and elliptical arc solver."""

from pathgeom.geometry.arc import EllipseArc, solve_arc
from pathgeom.models.path import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    Point,
    QuadraticCurveTo,
)
from pathgeom.parser import (
    ExpectedNumberNotFound,
    MalformedNumber,
    ParseCache,
    ParseResult,
    ParserConfig,
    PathParseError,
    UnexpectedNumber,
    UnrecognizedCommand,
    parse,
    parse_path,
)
from pathgeom.template import ShapeTemplate

__all__ = [
    "Point",
    "MoveTo",
    "LineTo",
    "CubicCurveTo",
    "QuadraticCurveTo",
    "ArcTo",
    "ClosePath",
    "Path",
    "EllipseArc",
    "solve_arc",
    "parse",
    "parse_path",
    "ParseResult",
    "ParseCache",
    "ParserConfig",
    "PathParseError",
    "UnrecognizedCommand",
    "UnexpectedNumber",
    "ExpectedNumberNotFound",
    "MalformedNumber",
    "ShapeTemplate",
]
