"""Path value model — points, segments, and the ordered segment container.

Every coordinate is absolute. Relative commands are resolved by the
interpreter before a segment is built.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

from pathgeom.utils.geometry import bbox

if TYPE_CHECKING:
    from pathgeom.geometry.arc import EllipseArc


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def reflect(self, about: Point) -> Point:
        """Point reflection through ``about``: 2*about - self."""
        return Point(2 * about.x - self.x, 2 * about.y - self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def as_complex(self) -> complex:
        return complex(self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    point: Point


@dataclass(frozen=True)
class QuadraticCurveTo:
    control: Point
    point: Point


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc ending at ``point``, traced along ``arc``."""

    arc: EllipseArc
    point: Point

    def to_cubics(self, max_segment_degrees: float = 90.0) -> list[CubicCurveTo]:
        from pathgeom.geometry.arc import arc_to_cubics

        return arc_to_cubics(self.arc, self.point, max_segment_degrees)


@dataclass(frozen=True)
class ClosePath:
    pass


Segment = Union[MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ArcTo, ClosePath]


def _map_segment(seg: Segment, sx: float, sy: float, dx: float, dy: float) -> Segment:
    def m(p: Point) -> Point:
        return Point(p.x * sx + dx, p.y * sy + dy)

    if isinstance(seg, (MoveTo, LineTo)):
        return type(seg)(m(seg.point))
    if isinstance(seg, CubicCurveTo):
        return CubicCurveTo(m(seg.control1), m(seg.control2), m(seg.point))
    if isinstance(seg, QuadraticCurveTo):
        return QuadraticCurveTo(m(seg.control), m(seg.point))
    if isinstance(seg, ArcTo):
        return ArcTo(seg.arc.transformed(sx, dx, dy), m(seg.point))
    return seg


@dataclass
class Path:
    """Ordered sequence of segments. Insertion order is draw order."""

    segments: list[Segment] = field(default_factory=list)

    def append(self, segment: Segment) -> None:
        self.segments.append(segment)

    def extend(self, segments: list[Segment]) -> None:
        self.segments.extend(segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    def __bool__(self) -> bool:
        return bool(self.segments)

    def copy(self) -> Path:
        # Segments are immutable, a shallow list copy is enough.
        return Path(list(self.segments))

    @property
    def end_point(self) -> Point:
        """Current point after the last segment (origin for an empty path)."""
        start = ORIGIN
        current = ORIGIN
        for seg in self.segments:
            if isinstance(seg, ClosePath):
                current = start
            else:
                current = seg.point
                if isinstance(seg, MoveTo):
                    start = current
        return current

    def subpaths(self) -> list[Path]:
        """Split at every MoveTo. Segments before the first MoveTo form their own subpath."""
        result: list[Path] = []
        current: list[Segment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo) and current:
                result.append(Path(current))
                current = []
            current.append(seg)
        if current:
            result.append(Path(current))
        return result

    # ── Affine helpers ──

    def transformed(self, sx: float = 1.0, sy: float = 1.0, dx: float = 0.0, dy: float = 0.0) -> Path:
        """Return a new path with every point mapped to (x*sx + dx, y*sy + dy)."""
        source = self if sx == sy else self.with_arcs_as_cubics()
        return Path([_map_segment(seg, sx, sy, dx, dy) for seg in source.segments])

    def scaled(self, sx: float, sy: float | None = None) -> Path:
        return self.transformed(sx, sx if sy is None else sy)

    def translated(self, dx: float, dy: float) -> Path:
        return self.transformed(1.0, 1.0, dx, dy)

    def with_arcs_as_cubics(self, max_segment_degrees: float = 90.0) -> Path:
        """Return a copy where every ArcTo is replaced by its cubic approximation."""
        out = Path()
        for seg in self.segments:
            if isinstance(seg, ArcTo):
                out.extend(seg.to_cubics(max_segment_degrees))
            else:
                out.append(seg)
        return out

    # ── Sampling ──

    def sample(self, samples_per_segment: int = 12) -> NDArray[np.float64]:
        """Sample drawn points along the path as an Nx2 array.

        MoveTo contributes its own point; every drawing segment contributes
        ``samples_per_segment`` points excluding its start.
        """
        ts = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
        chunks: list[NDArray[np.float64]] = []
        start = ORIGIN
        current = ORIGIN

        for seg in self.segments:
            if isinstance(seg, MoveTo):
                start = current = seg.point
                chunks.append(np.array([seg.point.as_tuple()]))
                continue
            if isinstance(seg, ClosePath):
                end = start
                chunks.append(_lerp(current, end, ts))
                current = end
                continue
            if isinstance(seg, LineTo):
                chunks.append(_lerp(current, seg.point, ts))
            elif isinstance(seg, QuadraticCurveTo):
                chunks.append(_bezier([current, seg.control, seg.point], ts))
            elif isinstance(seg, CubicCurveTo):
                chunks.append(_bezier([current, seg.control1, seg.control2, seg.point], ts))
            elif isinstance(seg, ArcTo):
                chunks.append(seg.arc.points(ts))
            current = seg.point

        if not chunks:
            return np.empty((0, 2))
        return np.vstack(chunks)

    def bbox(self, samples_per_segment: int = 12) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax) of the sampled outline."""
        return bbox(self.sample(samples_per_segment))


def _lerp(a: Point, b: Point, ts: NDArray[np.float64]) -> NDArray[np.float64]:
    pa = np.array(a.as_tuple())
    pb = np.array(b.as_tuple())
    return pa + (pb - pa) * ts[:, None]


def _bezier(control_points: list[Point], ts: NDArray[np.float64]) -> NDArray[np.float64]:
    """Evaluate a Bezier curve of any degree with de Casteljau."""
    pts = np.array([p.as_tuple() for p in control_points])
    t = ts[:, None, None]
    level = np.broadcast_to(pts, (len(ts),) + pts.shape)
    while level.shape[1] > 1:
        level = (1 - t) * level[:, :-1] + t * level[:, 1:]
    return level[:, 0, :]
