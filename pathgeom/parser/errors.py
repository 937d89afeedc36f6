"""Parse errors. Every error carries the offending offset and the full source."""

from __future__ import annotations

# Characters of context shown on each side of the offset in a snippet.
_SNIPPET_RADIUS = 30


class PathParseError(ValueError):
    """Base class for path data errors."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(f"{message} at index {offset}\n{self.snippet()}")

    def snippet(self) -> str:
        """Source excerpt with a caret under the offset."""
        lo = max(0, self.offset - _SNIPPET_RADIUS)
        hi = min(len(self.source), self.offset + _SNIPPET_RADIUS)
        prefix = "..." if lo > 0 else ""
        suffix = "..." if hi < len(self.source) else ""
        line = f"{prefix}{self.source[lo:hi]}{suffix}"
        caret = " " * (len(prefix) + self.offset - lo) + "^"
        return f"  {line}\n  {caret}"


class UnrecognizedCommand(PathParseError):
    def __init__(self, command: str, offset: int, source: str) -> None:
        self.command = command
        super().__init__(f'Unknown command "{command}"', offset, source)


class UnexpectedNumber(PathParseError):
    def __init__(self, offset: int, source: str) -> None:
        super().__init__("Expected command, but found number", offset, source)


class ExpectedNumberNotFound(PathParseError):
    def __init__(self, offset: int, source: str, expected: int = 1, found: int = 0) -> None:
        self.expected = expected
        self.found = found
        if expected == 1:
            message = "Expected number, but number not found"
        else:
            message = f"Expected {expected} numbers, but number {found + 1} not found"
        super().__init__(message, offset, source)


class MalformedNumber(PathParseError):
    def __init__(self, token: str, offset: int, source: str) -> None:
        self.token = token
        super().__init__(f'Cannot parse number "{token}"', offset, source)
