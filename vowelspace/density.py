# vowelspace/density.py
"""
Vowel space density (VSD), after Story & Bunton (2017).

Formants are normalized by their medians, a regular grid is laid over
the normalized (F2, F1) plane and each cell counts the vowels within
`resolution` of its center. Cells whose count, relative to the densest
cell, reaches `density_threshold` are kept and their convex hull is the
dense part of the vowel space.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import cKDTree

from vowelspace.hull import ConvexHullAdapter, hull_or_no_result
from vowelspace.utils import drop_missing
from vowelspace.vowel_data import (
    VSD_DENSITY_THRESHOLD,
    VSD_GRID_HIGH,
    VSD_GRID_LOW,
    VSD_GRID_RESOLUTION,
    VSD_RESOLUTION,
)

logger = logging.getLogger(__name__)


@dataclass
class DensityGrid:
    cells: NDArray[np.float64]     # (n_cells, 2) cell centers, columns (F2, F1)
    counts: NDArray[np.int64]      # vowels within `resolution` of each center
    density: NDArray[np.float64]   # counts / max(counts), in [0, 1]

    def above(self, threshold: float) -> NDArray[np.float64]:
        """Cell centers whose density reaches threshold."""
        return self.cells[self.density >= threshold]


def median_normalize(x):
    """(x - median) / median."""
    x = np.asarray(x, dtype=float)
    if x.size == 0:
        return x
    med = float(np.median(x))
    with np.errstate(divide="ignore", invalid="ignore"):
        return (x - med) / med


def grid_axis(grid_resolution: float = VSD_GRID_RESOLUTION) -> NDArray[np.float64]:
    """Cell centers from VSD_GRID_LOW + grid_resolution/2 up to VSD_GRID_HIGH."""
    start = VSD_GRID_LOW + grid_resolution / 2
    n = int(np.floor((VSD_GRID_HIGH - start) / grid_resolution + 1e-9)) + 1
    return start + grid_resolution * np.arange(max(n, 0))


def density_grid(
    f1,
    f2,
    resolution: float = VSD_RESOLUTION,
    grid_resolution: float = VSD_GRID_RESOLUTION,
) -> DensityGrid:
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    if grid_resolution <= 0:
        raise ValueError(f"grid_resolution must be positive, got {grid_resolution}")

    f1, f2 = drop_missing(f1, f2)

    axis = grid_axis(grid_resolution)
    g2, g1 = np.meshgrid(axis, axis, indexing="ij")
    cells = np.column_stack([g2.ravel(), g1.ravel()])

    points = np.column_stack([median_normalize(f2), median_normalize(f1)])
    # A zero median leaves nothing to normalize against
    points = points[np.all(np.isfinite(points), axis=1)]

    if points.shape[0] == 0:
        counts = np.zeros(cells.shape[0], dtype=np.int64)
    else:
        tree = cKDTree(points)
        counts = np.asarray(
            tree.query_ball_point(cells, r=resolution, return_length=True),
            dtype=np.int64,
        )

    peak = int(counts.max()) if counts.size else 0
    if peak > 0:
        density = counts / float(peak)
    else:
        density = np.zeros(cells.shape[0], dtype=float)

    return DensityGrid(cells=cells, counts=counts, density=density)


def compute_density_vowel_space(
    f1,
    f2,
    resolution: float = VSD_RESOLUTION,
    grid_resolution: float = VSD_GRID_RESOLUTION,
    density_threshold: float = VSD_DENSITY_THRESHOLD,
    hull_adapter: Optional[ConvexHullAdapter] = None,
):
    """
    Convex hull of the dense cells of the normalized vowel space.

    Returns a ConvexHullResult over cell centers (F2, F1), or NoResult
    when no cell reaches density_threshold.
    """
    grid = density_grid(f1, f2, resolution=resolution, grid_resolution=grid_resolution)

    # An empty grid has density 0 everywhere; it never counts as dense
    if not np.any(grid.counts):
        survivors = np.zeros((0, 2), dtype=float)
    else:
        survivors = grid.above(density_threshold)

    logger.debug(
        "VSD: %d of %d cells at density >= %.3g",
        survivors.shape[0], grid.cells.shape[0], density_threshold,
    )
    return hull_or_no_result(survivors, adapter=hull_adapter, label="VSD")
