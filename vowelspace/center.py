# vowelspace/center.py
"""
Vowel space center estimation.

Three estimators are available:

  centroid   plain mean of F1 and F2
  twomeans   mean F1, and F2 as the unweighted mean of the F2 means of the
             points above and below the F1 center
  wcentroid  mean F1, and the mean F2 of the points with F1 below the
             F1 center (the default)

The twomeans and wcentroid estimators keep the center inside triangular
vowel spaces, where the plain centroid tends to drift towards the
[a]-corner.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from vowelspace.utils import formant_pairs, valid_mask, nan_mean
from vowelspace.vowel_data import CENTER_METHODS, DEFAULT_CENTER_METHOD

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VowelSpaceCenter:
    f1c: float
    f2c: float

    @classmethod
    def undefined(cls) -> "VowelSpaceCenter":
        return cls(float("nan"), float("nan"))

    @property
    def is_defined(self) -> bool:
        return bool(np.isfinite(self.f1c) and np.isfinite(self.f2c))

    def to_dict(self):
        return {"f1c": self.f1c, "f2c": self.f2c}


def _twomeans_f2(f1, f2, f1c):
    above = f2[f1 > f1c]
    below = f2[f1 < f1c]

    if above.size and below.size:
        return 0.5 * (float(np.mean(above)) + float(np.mean(below)))
    if above.size:
        return float(np.mean(above))
    if below.size:
        return float(np.mean(below))
    # All F1 equal to the center
    return nan_mean(f2)


def _wcentroid_f2(f1, f2, f1c):
    below = f2[f1 < f1c]
    if below.size == 0:
        return nan_mean(f2)
    return float(np.mean(below))


def compute_vowel_space_center(
    f1,
    f2,
    method: str = DEFAULT_CENTER_METHOD,
    drop_missing: bool = True,
) -> VowelSpaceCenter:
    """
    Compute the center of the vowel space spanned by (F1, F2).

    Missing pairs are removed first when drop_missing is set, otherwise
    they propagate NaN into the result. Empty input returns
    VowelSpaceCenter.undefined().
    """
    if method not in CENTER_METHODS:
        raise ValueError(
            f"Invalid center method {method!r}, must be one of {CENTER_METHODS}"
        )

    f1, f2 = formant_pairs(f1, f2)
    if drop_missing:
        mask = valid_mask(f1, f2)
        f1, f2 = f1[mask], f2[mask]

    if f1.size == 0:
        logger.warning("No formant pairs available; vowel space center undefined")
        return VowelSpaceCenter.undefined()

    f1c = float(np.mean(f1))

    if method == "centroid":
        f2c = float(np.mean(f2))
    elif method == "twomeans":
        f2c = _twomeans_f2(f1, f2, f1c)
    else:
        f2c = _wcentroid_f2(f1, f2, f1c)

    return VowelSpaceCenter(f1c=f1c, f2c=f2c)
