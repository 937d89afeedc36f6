"""Hand a parsed Path to rendering collaborators.

``to_svgpathtools`` builds an svgpathtools.Path (for sampling, lengths,
intersections); ``to_path_data`` writes absolute path data back out.
"""

from __future__ import annotations

import logging

import svgpathtools

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

logger = logging.getLogger(__name__)


def to_svgpathtools(path: Path) -> svgpathtools.Path:
    """Convert to an svgpathtools.Path. MoveTo starts a new (possibly discontinuous) run."""
    segments: list[svgpathtools.Line | svgpathtools.QuadraticBezier | svgpathtools.CubicBezier | svgpathtools.Arc] = []
    start = current = complex(0, 0)

    for seg in path:
        if isinstance(seg, MoveTo):
            start = current = seg.point.as_complex()
            continue
        if isinstance(seg, ClosePath):
            if current != start:
                segments.append(svgpathtools.Line(current, start))
            current = start
            continue

        end = seg.point.as_complex()
        if isinstance(seg, LineTo):
            segments.append(svgpathtools.Line(current, end))
        elif isinstance(seg, QuadraticCurveTo):
            segments.append(svgpathtools.QuadraticBezier(current, seg.control.as_complex(), end))
        elif isinstance(seg, CubicCurveTo):
            segments.append(
                svgpathtools.CubicBezier(current, seg.control1.as_complex(), seg.control2.as_complex(), end)
            )
        elif isinstance(seg, ArcTo):
            arc = seg.arc
            segments.append(
                svgpathtools.Arc(
                    start=current,
                    radius=complex(arc.rx, arc.ry),
                    rotation=arc.rotation,
                    large_arc=abs(arc.extent) > 180,
                    sweep=arc.extent > 0,
                    end=end,
                )
            )
        current = end

    logger.debug("Exported %d segments to svgpathtools", len(segments))
    return svgpathtools.Path(*segments)


def _fmt(value: float, precision: int) -> str:
    # Fixed notation only: the parser reads no exponents.
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _pt(p: Point, precision: int) -> str:
    return f"{_fmt(p.x, precision)},{_fmt(p.y, precision)}"


def to_path_data(path: Path, precision: int = 6) -> str:
    """Serialize to absolute path data (M, L, C, Q, A, Z)."""
    parts: list[str] = []
    for seg in path:
        if isinstance(seg, MoveTo):
            parts.append(f"M{_pt(seg.point, precision)}")
        elif isinstance(seg, LineTo):
            parts.append(f"L{_pt(seg.point, precision)}")
        elif isinstance(seg, CubicCurveTo):
            parts.append(
                f"C{_pt(seg.control1, precision)} {_pt(seg.control2, precision)} {_pt(seg.point, precision)}"
            )
        elif isinstance(seg, QuadraticCurveTo):
            parts.append(f"Q{_pt(seg.control, precision)} {_pt(seg.point, precision)}")
        elif isinstance(seg, ArcTo):
            arc = seg.arc
            large = 1 if abs(arc.extent) > 180 else 0
            sweep = 1 if arc.extent > 0 else 0
            parts.append(
                f"A{_fmt(arc.rx, precision)},{_fmt(arc.ry, precision)} {_fmt(arc.rotation, precision)} "
                f"{large} {sweep} {_pt(seg.point, precision)}"
            )
        elif isinstance(seg, ClosePath):
            parts.append("Z")
    return " ".join(parts)
