# vowelspace/hull.py
"""
Convex hull adapter around scipy.spatial.ConvexHull (Qhull).

Qhull reports `area` and `volume` for the hull surface and the enclosed
region. In two dimensions these are the perimeter and the enclosed
area respectively; ConvexHullResult keeps the Qhull naming and exposes
`enclosed_area` for the latter.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull, QhullError

from vowelspace.errors import DegenerateGeometryError, ExternalComputationFailure

logger = logging.getLogger(__name__)


@dataclass
class ConvexHullResult:
    points: NDArray[np.float64]        # (n, 2), columns (F2, F1)
    vertices: NDArray[np.intp]         # hull vertex indices, counterclockwise
    hull_indices: NDArray[np.intp]     # (m, 2) point indices of each hull edge
    area: float
    volume: float

    @property
    def enclosed_area(self) -> float:
        return self.volume

    @property
    def perimeter(self) -> float:
        return self.area

    @property
    def hull_points(self) -> NDArray[np.float64]:
        return self.points[self.vertices]

    def __bool__(self):
        return True


class NoResult:
    """Explicit "nothing to report" result of a filtered hull computation."""

    def __init__(self, reason: str = ""):
        self.reason = reason

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NoResult)

    def __hash__(self):
        return hash(NoResult)

    def __repr__(self):
        return f"NoResult({self.reason!r})"


def is_result(value) -> bool:
    return isinstance(value, ConvexHullResult)


def _check_geometry(points):
    unique = np.unique(points, axis=0)
    if unique.shape[0] < 3:
        raise DegenerateGeometryError(
            f"convex hull needs 3 distinct points, got {unique.shape[0]}"
        )
    if np.linalg.matrix_rank(unique - unique.mean(axis=0)) < 2:
        raise DegenerateGeometryError("all points are collinear")


class ConvexHullAdapter:
    """Computes 2-D convex hulls; area and volume are order independent."""

    def compute(self, points) -> ConvexHullResult:
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"expected an (n, 2) point array, got shape {pts.shape}")
        if not np.all(np.isfinite(pts)):
            raise ValueError("convex hull points must be finite")

        _check_geometry(pts)

        try:
            hull = ConvexHull(pts)
        except QhullError as e:
            raise ExternalComputationFailure(f"Qhull failed: {e}") from e

        logger.debug(
            "convex hull: %d points, %d vertices, volume=%.6g",
            pts.shape[0], len(hull.vertices), hull.volume,
        )
        return ConvexHullResult(
            points=pts,
            vertices=np.asarray(hull.vertices, dtype=np.intp),
            hull_indices=np.asarray(hull.simplices, dtype=np.intp),
            area=float(hull.area),
            volume=float(hull.volume),
        )


def hull_or_no_result(points, adapter=None, label="convex hull"):
    """
    Run the hull adapter, recovering empty or degenerate input into NoResult.

    External failures still propagate.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if pts.shape[0] == 0:
        logger.warning("%s: no points survived filtering", label)
        return NoResult("no points survived filtering")

    adapter = adapter or ConvexHullAdapter()
    try:
        return adapter.compute(pts)
    except DegenerateGeometryError as e:
        logger.warning("%s: %s", label, e)
        return NoResult(str(e))
