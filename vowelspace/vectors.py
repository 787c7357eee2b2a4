# vowelspace/vectors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from vowelspace.center import VowelSpaceCenter, compute_vowel_space_center
from vowelspace.utils import formant_pairs
from vowelspace.vowel_data import DEFAULT_CENTER_METHOD


@dataclass
class VowelVectors:
    norms: NDArray[np.float64]
    angles: NDArray[np.float64]
    center: VowelSpaceCenter

    def __len__(self):
        return int(self.norms.size)

    @property
    def valid(self) -> NDArray[np.bool_]:
        return np.isfinite(self.norms) & np.isfinite(self.angles)


def _resolve_center(f1, f2, center, center_method):
    if center is None:
        return compute_vowel_space_center(f1, f2, method=center_method)
    if isinstance(center, VowelSpaceCenter):
        return center
    # Plain (f1c, f2c) pair
    f1c, f2c = center
    return VowelSpaceCenter(float(f1c), float(f2c))


def compute_vowel_vectors(
    f1,
    f2,
    center: Optional[VowelSpaceCenter] = None,
    center_method: str = DEFAULT_CENTER_METHOD,
) -> VowelVectors:
    """
    Polar decomposition of each vowel around the vowel space center.

    The angle is atan2(F1 - F1c, F2 - F2c), so angle 0 points along the
    F2 (front) axis. Missing inputs give NaN norm and angle at the same
    index, nothing is dropped here.
    """
    f1, f2 = formant_pairs(f1, f2)
    center = _resolve_center(f1, f2, center, center_method)

    d1 = f1 - center.f1c
    d2 = f2 - center.f2c

    norms = np.hypot(d1, d2)
    angles = np.arctan2(d1, d2)
    # atan2(-0.0, x < 0) gives -pi; keep the half-open range (-pi, pi]
    angles[angles == -np.pi] = np.pi

    return VowelVectors(norms=norms, angles=angles, center=center)


def vowel_norms(f1, f2, center=None, center_method=DEFAULT_CENTER_METHOD):
    return compute_vowel_vectors(f1, f2, center, center_method).norms


def vowel_angles(f1, f2, center=None, center_method=DEFAULT_CENTER_METHOD):
    return compute_vowel_vectors(f1, f2, center, center_method).angles
