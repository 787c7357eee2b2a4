# vowelspace/corners.py
"""
Angular corner classification.

Vowel vectors are binned into four quadrants around the vowel space
center. A quadrant yields a mean vector (a "corner vowel") only when

  - its CornerSupportPolicy accepts the distribution of its angles, and
  - it holds strictly more than min_corner_support vectors.

The mean vector is projected back into the formant plane to give the
corner point used for the vowel space polygon.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from scipy.stats import norm as normal_dist

from vowelspace.vectors import VowelVectors
from vowelspace.vowel_data import (
    CORNER_BREAKS,
    CORNER_LABELS,
    CORNER_CDF_CENTER,
    CORNER_CDF_HALF_WIDTH,
    MIN_CORNER_SUPPORT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeanVector:
    corner: str
    norm: float
    angle: float
    f1: float
    f2: float
    support: int


# ---------------------------------------------------------
# Support policies
# ---------------------------------------------------------

class CornerSupportPolicy(ABC):
    """Decides whether the angles collected in one corner form a usable corner."""

    @abstractmethod
    def is_plausible(self, angles: np.ndarray) -> bool:
        ...


class InnerBandSupportPolicy(CornerSupportPolicy):
    """
    Accept a corner if at least one of its angles falls in the inner band
    of the corner's own normal distribution, i.e. |CDF(angle) - 0.5| < 0.25
    under N(mean, sd) of the corner angles (sample sd).

    A single vector has no spread; it is accepted. Identical angles give
    a point mass whose CDF is 1 at every angle; they are rejected.
    """

    def __init__(self, center=CORNER_CDF_CENTER, half_width=CORNER_CDF_HALF_WIDTH):
        self.center = center
        self.half_width = half_width

    def cdf(self, angles):
        angles = np.asarray(angles, dtype=float)
        if angles.size < 2:
            return np.full(angles.size, np.nan)

        mean = float(np.mean(angles))
        sd = float(np.std(angles, ddof=1))
        if sd == 0:
            return np.where(angles >= mean, 1.0, 0.0)
        return normal_dist.cdf(angles, loc=mean, scale=sd)

    def is_plausible(self, angles) -> bool:
        angles = np.asarray(angles, dtype=float)
        if angles.size == 0:
            return False
        if angles.size == 1:
            return True

        p = self.cdf(angles)
        return bool(np.any(np.abs(p - self.center) < self.half_width))


class AcceptAllSupportPolicy(CornerSupportPolicy):
    """Leave the decision to the support count alone."""

    def is_plausible(self, angles) -> bool:
        return np.asarray(angles).size > 0


# ---------------------------------------------------------
# Binning
# ---------------------------------------------------------

def corner_index(angles) -> np.ndarray:
    """
    Index into CORNER_LABELS for each angle, -1 for missing angles.

    Bins are right-closed; -pi falls in the first bin.
    """
    angles = np.asarray(angles, dtype=float)
    idx = np.searchsorted(np.asarray(CORNER_BREAKS[1:-1]), angles, side="left")
    idx = idx.astype(int)
    idx[~np.isfinite(angles)] = -1
    return idx


def corner_labels(angles) -> List[Optional[str]]:
    return [CORNER_LABELS[i] if i >= 0 else None for i in corner_index(angles)]


# ---------------------------------------------------------
# Classification
# ---------------------------------------------------------

def classify_corners(
    vectors: VowelVectors,
    min_corner_support: int = MIN_CORNER_SUPPORT,
    policy: Optional[CornerSupportPolicy] = None,
) -> List[MeanVector]:
    """
    Compute the mean vector of every corner that passes both gates.

    Returns 0-4 MeanVector objects in corner order.
    """
    policy = policy or InnerBandSupportPolicy()
    center = vectors.center

    valid = vectors.valid
    norms = vectors.norms[valid]
    angles = vectors.angles[valid]
    idx = corner_index(angles)

    out: List[MeanVector] = []
    for i, label in enumerate(CORNER_LABELS):
        sel = idx == i
        support = int(np.count_nonzero(sel))
        if support == 0:
            continue

        if not policy.is_plausible(angles[sel]):
            logger.debug("%s rejected by %s", label, type(policy).__name__)
            continue

        if support <= min_corner_support:
            logger.debug(
                "%s rejected: %d vectors, need more than %d",
                label, support, min_corner_support,
            )
            continue

        m_norm = float(np.mean(norms[sel]))
        m_angle = float(np.mean(angles[sel]))
        out.append(
            MeanVector(
                corner=label,
                norm=m_norm,
                angle=m_angle,
                f1=float(m_norm * np.sin(m_angle) + center.f1c),
                f2=float(m_norm * np.cos(m_angle) + center.f2c),
                support=support,
            )
        )

    return out
