"""Leaf-node geometry helpers over Nx2 point arrays. No parser imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    """2x2 rotation matrix for a counter-clockwise angle in y-up terms (clockwise on screen)."""
    rad = np.radians(degrees)
    c, s = np.cos(rad), np.sin(rad)
    return np.array([[c, -s], [s, c]])
