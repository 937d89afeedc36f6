"""Elliptical arc solver — endpoint to center parameterization.

Given the endpoint form used by the ``A``/``a`` path commands (start point,
radii, x-axis rotation, large-arc flag, sweep flag, end point), compute the
ellipse center, the possibly enlarged radii, the start angle, and the signed
angular extent. Angles are in degrees, measured in the y-down frame of path
data: a positive extent runs clockwise on screen.

The returned :class:`EllipseArc` is described in the ellipse's own unrotated
frame; ``rotation`` is applied about ``center`` when points are evaluated.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

import numpy as np
import svgpathtools
from numpy.typing import NDArray

from pathgeom.models.path import CubicCurveTo, Point
from pathgeom.utils.geometry import rotation_matrix

logger = logging.getLogger(__name__)

# Radii check threshold: enlarge when the endpoints are within 1e-5 of
# being unreachable rather than exactly at it.
RADII_CHECK_MARGIN = 0.99999

# Relative growth applied on top of the exact enlarging factor so the
# enlarged ellipse passes through both endpoints despite rounding.
RADII_SCALE_EPSILON = 1e-5


@dataclass(frozen=True)
class EllipseArc:
    center: Point
    rx: float
    ry: float
    start_angle: float
    extent: float
    rotation: float = 0.0

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.extent

    def point(self, angle: float) -> Point:
        """Point on the rotated ellipse at parametric ``angle`` (degrees)."""
        theta = math.radians(angle)
        x, y = rotation_matrix(self.rotation) @ np.array([self.rx * math.cos(theta), self.ry * math.sin(theta)])
        return Point(self.center.x + float(x), self.center.y + float(y))

    def points(self, ts: NDArray[np.float64]) -> NDArray[np.float64]:
        """Evaluate at fractions ``ts`` of the extent. Returns an Nx2 array."""
        theta = np.radians(self.start_angle + self.extent * np.asarray(ts, dtype=float))
        local = np.stack([self.rx * np.cos(theta), self.ry * np.sin(theta)], axis=1)
        return local @ rotation_matrix(self.rotation).T + np.array(self.center.as_tuple())

    def tangent(self, angle: float) -> Point:
        """Derivative of the parametric point with respect to the angle in radians."""
        theta = math.radians(angle)
        dx, dy = rotation_matrix(self.rotation) @ np.array([-self.rx * math.sin(theta), self.ry * math.cos(theta)])
        return Point(float(dx), float(dy))

    def transformed(self, scale: float, dx: float = 0.0, dy: float = 0.0) -> EllipseArc:
        """Map through a uniform scale followed by a translation."""
        center = Point(self.center.x * scale + dx, self.center.y * scale + dy)
        rotation = self.rotation + 180.0 if scale < 0 else self.rotation
        return replace(self, center=center, rx=self.rx * abs(scale), ry=self.ry * abs(scale), rotation=rotation)


def _unit_sign(value: float) -> float:
    return -1.0 if value < 0 else 1.0


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def _empty_arc(start: Point, rx: float, ry: float, rotation: float, cos_a: float, sin_a: float) -> EllipseArc:
    """Zero-extent arc sitting at angle 0, placed so that it passes through ``start``."""
    center = Point(start.x - rx * cos_a, start.y - rx * sin_a)
    return EllipseArc(center=center, rx=rx, ry=ry, start_angle=0.0, extent=0.0, rotation=rotation)


def solve_arc(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
    *,
    margin: float = RADII_CHECK_MARGIN,
    epsilon: float = RADII_SCALE_EPSILON,
) -> EllipseArc:
    """Convert an endpoint-parameterized arc to center parameterization.

    Any finite non-zero radii are accepted, however small or large. Zero
    radii are the one rejected input: path data draws such an arc as a
    straight line, which has no center form, so callers handle that case
    before solving.

    Args:
        start: Current point, where the arc begins.
        rx, ry: Requested radii. Signs are ignored; both must be non-zero.
        rotation: X-axis rotation of the ellipse in degrees.
        large_arc: Pick the arc spanning more than 180 degrees.
        sweep: Pick the arc running in the positive-angle direction.
        end: Arc endpoint.
        margin: Radii check threshold above which the radii are enlarged.
        epsilon: Relative extra growth when enlarging.

    Returns:
        The solved arc. ``extent`` lies in (-360, 360) and its sign agrees
        with ``sweep`` unless the arc is too flat to resolve, in which case
        it is 0; ``start_angle`` lies in (-360, 360).

    Raises:
        ValueError: If either radius is zero.
    """
    rx = abs(rx)
    ry = abs(ry)
    if rx == 0 or ry == 0:
        raise ValueError(f"Arc radii must be non-zero, got rx={rx}, ry={ry}")

    # Step 1: midpoint-relative, rotation-compensated start point
    dx2 = (start.x - end.x) / 2.0
    dy2 = (start.y - end.y) / 2.0
    angle = math.radians(math.fmod(rotation, 360.0))
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    x1 = cos_a * dx2 + sin_a * dy2
    y1 = -sin_a * dx2 + cos_a * dy2

    if x1 == 0 and y1 == 0:
        return _empty_arc(start, rx, ry, rotation, cos_a, sin_a)

    # Everything below works on radius-normalized coordinates, never on
    # squared radii, so extreme radii neither overflow nor underflow.
    nx = x1 / rx
    ny = y1 / ry
    reach = math.hypot(nx, ny)
    if reach == 0:
        # Chord below what the radii can resolve
        return _empty_arc(start, rx, ry, rotation, cos_a, sin_a)

    # Step 2: enlarge radii when the endpoints are out of reach
    if reach * reach > margin:
        radii_scale = reach * (1.0 + epsilon)
        logger.debug("Arc radii (%.6g, %.6g) too small, scaling by %.6g", rx, ry, radii_scale)
        rx *= radii_scale
        ry *= radii_scale
        nx = x1 / rx
        ny = y1 / ry
        reach = math.hypot(nx, ny)

    # Step 3: candidate center in the rotated frame. (ex, ey) is the unit
    # direction of the normalized half chord; the center sits off the chord
    # midpoint along its normal.
    sign = -1.0 if large_arc == sweep else 1.0
    ex = nx / reach
    ey = ny / reach
    offset = sign * math.sqrt(max(1.0 - reach * reach, 0.0))
    cx1 = offset * ey * rx
    cy1 = -offset * ex * ry

    # Step 4: back to absolute coordinates
    cx = (start.x + end.x) / 2.0 + (cos_a * cx1 - sin_a * cy1)
    cy = (start.y + end.y) / 2.0 + (sin_a * cx1 + cos_a * cy1)

    # Step 5: start angle and signed extent on the unit circle
    ux = nx - offset * ey
    uy = ny + offset * ex
    vx = -nx - offset * ey
    vy = -ny + offset * ex

    start_angle = math.degrees(_unit_sign(uy) * _clamped_acos(ux / math.hypot(ux, uy)))

    n = math.hypot(ux, uy) * math.hypot(vx, vy)
    p = ux * vx + uy * vy
    extent = math.degrees(_unit_sign(ux * vy - uy * vx) * _clamped_acos(p / n))
    if not sweep and extent > 0:
        extent -= 360.0
    elif sweep and extent < 0:
        extent += 360.0

    return EllipseArc(
        center=Point(cx, cy),
        rx=rx,
        ry=ry,
        start_angle=math.fmod(start_angle, 360.0),
        extent=math.fmod(extent, 360.0),
        rotation=rotation,
    )


def _point(z: complex) -> Point:
    return Point(z.real, z.imag)


def arc_to_cubics(arc: EllipseArc, end: Point | None = None, max_segment_degrees: float = 90.0) -> list[CubicCurveTo]:
    """Approximate an arc with cubic Bezier segments of at most ``max_segment_degrees`` each.

    The flattening is svgpathtools' ``Arc.as_cubic_curves``. The last piece
    ends exactly at ``end`` when given, so rounding in the solver never leaves
    a gap before the next segment.
    """
    start = arc.point(arc.start_angle)
    target = end if end is not None else arc.point(arc.end_angle)
    if arc.extent == 0 or start == target:
        return [CubicCurveTo(target, target, target)]

    count = max(1, math.ceil(abs(arc.extent) / max_segment_degrees - 1e-9))
    curve = svgpathtools.Arc(
        start=start.as_complex(),
        radius=complex(arc.rx, arc.ry),
        rotation=arc.rotation,
        large_arc=abs(arc.extent) > 180,
        sweep=arc.extent > 0,
        end=target.as_complex(),
    )
    return [
        CubicCurveTo(_point(c.control1), _point(c.control2), _point(c.end)) for c in curve.as_cubic_curves(count)
    ]
