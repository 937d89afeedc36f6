"""CLI output models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SegmentOut(BaseModel):
    kind: str
    # Control points first, end point last; empty for ClosePath
    points: list[tuple[float, float]] = Field(default_factory=list)


class ParseErrorOut(BaseModel):
    kind: str
    message: str
    offset: int


class ParseResponse(BaseModel):
    path_data: str
    segments: list[SegmentOut] = Field(default_factory=list)
    subpath_count: int = 0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    error: ParseErrorOut | None = None
