# vowelspace/polygon.py
"""
Vowel space area (VSA) from corner vowels.

The corner points found by the corner classifier are joined into a
polygon (triangle or quadrilateral) and its area is computed with the
shoelace formula. Fewer than three corners give NaN.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from vowelspace.center import VowelSpaceCenter
from vowelspace.corners import (
    CornerSupportPolicy,
    MeanVector,
    classify_corners,
    corner_labels,
)
from vowelspace.errors import InsufficientDataError
from vowelspace.vectors import VowelVectors, compute_vowel_vectors
from vowelspace.vowel_data import DEFAULT_CENTER_METHOD, MIN_CORNER_SUPPORT

logger = logging.getLogger(__name__)


@dataclass
class VectorSpace:
    center: VowelSpaceCenter
    vectors: VowelVectors
    corners: List[Optional[str]]
    mean_vectors: List[MeanVector] = field(default_factory=list)
    vsa: float = float("nan")

    @property
    def corner_points(self) -> NDArray[np.float64]:
        """Corner vowels as an (n, 2) array of (F2, F1)."""
        if not self.mean_vectors:
            return np.zeros((0, 2), dtype=float)
        return np.array([(m.f2, m.f1) for m in self.mean_vectors], dtype=float)

    @property
    def n_corners(self) -> int:
        return len(self.mean_vectors)


def order_around_centroid(points) -> NDArray[np.float64]:
    """Sort polygon vertices by angle around their own centroid."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if pts.shape[0] == 0:
        return pts
    cx, cy = pts.mean(axis=0)
    order = np.argsort(np.arctan2(pts[:, 1] - cy, pts[:, 0] - cx), kind="stable")
    return pts[order]


def _shoelace(pts):
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def _polygon_area(points) -> float:
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if pts.shape[0] < 3:
        raise InsufficientDataError(
            f"a polygon needs at least 3 vertices, got {pts.shape[0]}"
        )
    return abs(_shoelace(order_around_centroid(pts)))


def polygon_area(points) -> float:
    """Absolute area of the polygon through points; NaN for < 3 points."""
    try:
        return _polygon_area(points)
    except InsufficientDataError:
        return float("nan")


def compute_vector_space(
    f1,
    f2,
    method: str = DEFAULT_CENTER_METHOD,
    center: Optional[VowelSpaceCenter] = None,
    min_corner_support: int = MIN_CORNER_SUPPORT,
    policy: Optional[CornerSupportPolicy] = None,
) -> VectorSpace:
    """
    Full vector-space analysis: center, vowel vectors, corner of each
    vowel, corner mean vectors and the vowel space area.
    """
    vectors = compute_vowel_vectors(f1, f2, center=center, center_method=method)
    mean_vectors = classify_corners(
        vectors, min_corner_support=min_corner_support, policy=policy
    )
    space = VectorSpace(
        center=vectors.center,
        vectors=vectors,
        corners=corner_labels(vectors.angles),
        mean_vectors=mean_vectors,
    )

    try:
        space.vsa = _polygon_area(space.corner_points)
    except InsufficientDataError as e:
        logger.warning("VSA undefined: %s", e)
        space.vsa = float("nan")

    return space


def compute_vowel_space_area(
    f1,
    f2,
    method: str = DEFAULT_CENTER_METHOD,
    center: Optional[VowelSpaceCenter] = None,
    min_corner_support: int = MIN_CORNER_SUPPORT,
    policy: Optional[CornerSupportPolicy] = None,
) -> float:
    """Vowel space area in Hz^2, NaN when fewer than 3 corners survive."""
    return compute_vector_space(
        f1,
        f2,
        method=method,
        center=center,
        min_corner_support=min_corner_support,
        policy=policy,
    ).vsa
