"""Shape template — a fixed-size drawing area whose content is a set of paths.

A template is what an icon or image builder consumes: the paths are already
placed so that the template's top-left corner is the origin, and the size is
what a rasterizer allocates (rounded up to whole pixels).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from pathgeom.models.path import Path
from pathgeom.parser.config import ParserConfig
from pathgeom.parser.interpreter import parse_path

logger = logging.getLogger(__name__)

# (x, y, width, height) of the visible area in path coordinates
ViewBox = tuple[float, float, float, float]


class ShapeTemplate:
    def __init__(self, width: float, height: float, paths: Iterable[Path] = ()) -> None:
        self.width = float(width)
        self.height = float(height)
        self._paths = [p.copy() for p in paths]

    @classmethod
    def from_path_data(
        cls, width: float, height: float, *path_data: str, config: ParserConfig | None = None
    ) -> ShapeTemplate:
        """Build a template by parsing each path data string (strict mode)."""
        return cls(width, height, [parse_path(d, config=config).path for d in path_data])

    @classmethod
    def from_view_box(
        cls, view_box: ViewBox, *paths: Path | str, config: ParserConfig | None = None
    ) -> ShapeTemplate:
        """Build a template showing ``view_box`` of the given content.

        Content is translated so the view box origin lands on (0, 0); the
        template takes the view box size.
        """
        x, y, width, height = view_box
        parsed = [parse_path(p, config=config).path if isinstance(p, str) else p for p in paths]
        if x != 0 or y != 0:
            parsed = [p.translated(-x, -y) for p in parsed]
        return cls(width, height, parsed)

    @property
    def int_width(self) -> int:
        return math.ceil(self.width)

    @property
    def int_height(self) -> int:
        return math.ceil(self.height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.int_width, self.int_height)

    @property
    def paths(self) -> list[Path]:
        """Copies of the content paths."""
        return [p.copy() for p in self._paths]

    def scale(self, x_factor: float, y_factor: float | None = None) -> ShapeTemplate:
        """New template with sizes and coordinates multiplied per axis."""
        if y_factor is None:
            y_factor = x_factor
        if x_factor == 1.0 and y_factor == 1.0:
            return ShapeTemplate(self.width, self.height, self._paths)
        logger.debug("Scaling template %gx%g by (%g, %g)", self.width, self.height, x_factor, y_factor)
        return ShapeTemplate(
            self.width * x_factor,
            self.height * y_factor,
            [p.scaled(x_factor, y_factor) for p in self._paths],
        )

    def sample(self, samples_per_segment: int = 12) -> list[NDArray[np.float64]]:
        """Sampled outline points of every content path, in template coordinates."""
        return [p.sample(samples_per_segment) for p in self._paths]

    def __repr__(self) -> str:
        return f"ShapeTemplate(width={self.width:g}, height={self.height:g}, paths={len(self._paths)})"
