"""Parser configuration — controls arc handling in the interpreter."""

from __future__ import annotations

from dataclasses import dataclass

from pathgeom.geometry.arc import RADII_CHECK_MARGIN, RADII_SCALE_EPSILON


@dataclass(frozen=True)
class ParserConfig:
    """Numeric knobs for one parse. Frozen so a shared default is safe across threads."""

    # Emit flattened cubics instead of ArcTo segments
    arcs_as_cubics: bool = False
    # Largest sweep covered by one cubic when flattening
    arc_max_segment_degrees: float = 90.0

    # Arc solver radii enlargement
    radii_check_margin: float = RADII_CHECK_MARGIN
    radii_scale_epsilon: float = RADII_SCALE_EPSILON


DEFAULT_CONFIG = ParserConfig()
