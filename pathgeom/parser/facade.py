"""Parser facade — one call from path data to a Path, optionally through a cache."""

from __future__ import annotations

from pathgeom.models.path import Path
from pathgeom.parser.cache import ParseCache
from pathgeom.parser.config import ParserConfig
from pathgeom.parser.interpreter import parse_path


def parse(
    text: str,
    *,
    tolerant: bool = False,
    cache: ParseCache | None = None,
    config: ParserConfig | None = None,
) -> Path:
    """Parse path data and return only the Path.

    With ``cache`` the cache's own config applies and ``config`` is ignored.
    In tolerant mode a malformed input yields the partial path; use
    ``parse_path`` or ``ParseCache.get_or_parse`` to also get the error.
    """
    if cache is not None:
        return cache.get_or_parse(text, tolerant=tolerant).path
    return parse_path(text, tolerant=tolerant, config=config).path
