"""Parse cache — memoizes parse results keyed by the exact path data string.

The lock only guards the dictionary; parsing itself runs outside it, so
concurrent misses on the same key may both parse. The last writer wins,
and both writers store identical results since parsing is deterministic.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from pathgeom.models.path import Path
from pathgeom.parser.config import ParserConfig
from pathgeom.parser.errors import PathParseError
from pathgeom.parser.interpreter import ParseResult, parse_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    path: Path
    error: PathParseError | None = None


class ParseCache:
    """Thread-safe memo of parse results.

    Stored paths are never handed out: every hit returns a fresh copy.
    """

    def __init__(self, max_entries: int = 0, config: ParserConfig | None = None) -> None:
        self.max_entries = max_entries
        self.config = config
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_parse(self, text: str, *, tolerant: bool = False) -> ParseResult:
        """Return the parse of ``text``, parsing and storing it on a miss.

        A strict request whose stored entry carries an error parses again
        from scratch and raises.

        Raises:
            PathParseError: In strict mode, when ``text`` is malformed.
        """
        entry = self._lookup(text)
        if entry is not None and (tolerant or entry.error is None):
            self._count(hit=True)
            logger.debug("Parse cache hit (%d chars)", len(text))
            return ParseResult(path=entry.path.copy(), error=entry.error)

        self._count(hit=False)
        result = parse_path(text, tolerant=True, config=self.config)
        self._store(text, CacheEntry(path=result.path.copy(), error=result.error))
        if result.error is not None and not tolerant:
            raise result.error
        return result

    def get(self, text: str) -> CacheEntry | None:
        """Stored entry for ``text`` with a copied path, or None."""
        entry = self._lookup(text)
        if entry is None:
            return None
        return CacheEntry(path=entry.path.copy(), error=entry.error)

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info("Parse cache cleared (%d entries)", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, text: str) -> bool:
        with self._lock:
            return text in self._entries

    def _lookup(self, text: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(text)

    def _count(self, hit: bool) -> None:
        with self._lock:
            if hit:
                self.hits += 1
            else:
                self.misses += 1

    def _store(self, text: str, entry: CacheEntry) -> None:
        with self._lock:
            self._entries.pop(text, None)
            self._entries[text] = entry
            if self.max_entries > 0:
                while len(self._entries) > self.max_entries:
                    oldest = next(iter(self._entries))
                    del self._entries[oldest]
        logger.debug("Parse cache stored entry (%d chars, error=%s)", len(text), entry.error is not None)
