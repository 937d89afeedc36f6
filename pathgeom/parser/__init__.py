"""Path data parser: lexer, command interpreter, and parse cache."""

from pathgeom.parser.cache import ParseCache
from pathgeom.parser.config import ParserConfig
from pathgeom.parser.errors import (
    ExpectedNumberNotFound,
    MalformedNumber,
    PathParseError,
    UnexpectedNumber,
    UnrecognizedCommand,
)
from pathgeom.parser.facade import parse
from pathgeom.parser.interpreter import ParseResult, parse_path

__all__ = [
    "ParseCache",
    "ParserConfig",
    "PathParseError",
    "UnrecognizedCommand",
    "UnexpectedNumber",
    "ExpectedNumberNotFound",
    "MalformedNumber",
    "ParseResult",
    "parse",
    "parse_path",
]
