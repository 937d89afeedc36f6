"""Lexer and number reader for path data.

The lexer only classifies what comes next; it never consumes a token while
classifying, it only skips separators in front of the cursor. Anything that
is neither a letter nor a number start (digit, ``-``, ``.``) is a separator.

Numbers follow the packing rules of path data: a second ``-`` or a second
``.`` ends the current number without being consumed, so ``1-2`` reads as
``1`` then ``-2`` and ``1.5.5`` as ``1.5`` then ``.5``.
"""

from __future__ import annotations

import enum

from pathgeom.parser.errors import ExpectedNumberNotFound, MalformedNumber, UnexpectedNumber

_DIGITS = frozenset("0123456789")
_NUMBER_START = _DIGITS | {"-", "."}


class Token(enum.Enum):
    COMMAND = "command"
    NUMBER = "number"


class Lexer:
    """Cursor over a path data string."""

    def __init__(self, source: str, index: int = 0) -> None:
        self.source = source
        self.index = index

    @property
    def char(self) -> str | None:
        if 0 <= self.index < len(self.source):
            return self.source[self.index]
        return None

    def next_token(self) -> Token | None:
        """Skip separators and classify the next character. None at end of input."""
        while (ch := self.char) is not None:
            if ch.isalpha():
                return Token.COMMAND
            if ch in _NUMBER_START:
                return Token.NUMBER
            self.index += 1
        return None

    def at_number(self) -> bool:
        return self.next_token() is Token.NUMBER

    def read_command(self) -> str | None:
        """Consume the next command letter. None at end of input."""
        token = self.next_token()
        if token is None:
            return None
        if token is Token.NUMBER:
            raise UnexpectedNumber(self.index, self.source)
        letter = self.source[self.index]
        self.index += 1
        return letter

    # ── Number reader ──

    def read_number(self, expected: int = 1, found: int = 0) -> float:
        """Consume the longest valid numeric token and convert it.

        ``expected``/``found`` only shape the error message when the operand
        group the caller is reading comes up short.

        Raises:
            ExpectedNumberNotFound: The cursor is not in front of a number.
            MalformedNumber: The consumed run is not a float (a lone ``-`` or ``.``).
        """
        requested_at = self.index
        if self.next_token() is not Token.NUMBER:
            raise ExpectedNumberNotFound(requested_at, self.source, expected, found)

        start = self.index
        end = start
        dot_found = False
        while end < len(self.source):
            ch = self.source[end]
            if ch in _DIGITS:
                pass
            elif ch == "-":
                if end != start:
                    break
            elif ch == ".":
                if dot_found:
                    break
                dot_found = True
            else:
                break
            end += 1

        self.index = end
        token = self.source[start:end]
        try:
            return float(token)
        except ValueError:
            raise MalformedNumber(token, start, self.source) from None

    def read_numbers(self, count: int) -> list[float]:
        """Read one operand group of ``count`` numbers."""
        return [self.read_number(count, i) for i in range(count)]
