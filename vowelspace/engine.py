from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from vowelspace.center import VowelSpaceCenter
from vowelspace.continuous import compute_continuous_vowel_space
from vowelspace.corners import CornerSupportPolicy
from vowelspace.density import compute_density_vowel_space
from vowelspace.hull import ConvexHullResult, NoResult, is_result
from vowelspace.polygon import VectorSpace, compute_vector_space
from vowelspace.utils import formant_array, sanitize_formants
from vowelspace.vowel_data import (
    DEFAULT_CENTER_METHOD,
    MIN_CORNER_SUPPORT,
    MIN_TRACK_SAMPLES,
)

logger = logging.getLogger(__name__)


class VSAMethod(str, Enum):
    BASIC = "basic"
    DENSITY = "density"
    CONTINUOUS = "continuous"


# ---------------------------------------------------------
# Per-method results
# ---------------------------------------------------------

@dataclass
class BasicVowelSpace:
    center: VowelSpaceCenter
    mean_norm: float
    sd_norm: float
    cv_norm: float
    vsa: float
    space: VectorSpace

    method = VSAMethod.BASIC


@dataclass
class DensityVowelSpace:
    hull: Union[ConvexHullResult, NoResult]

    method = VSAMethod.DENSITY

    @property
    def vsd(self) -> float:
        return self.hull.enclosed_area if is_result(self.hull) else float("nan")


@dataclass
class ContinuousVowelSpace:
    hull: Union[ConvexHullResult, NoResult]

    method = VSAMethod.CONTINUOUS

    @property
    def cvsa(self) -> float:
        return self.hull.enclosed_area if is_result(self.hull) else float("nan")


VowelSpaceMetrics = Union[BasicVowelSpace, DensityVowelSpace, ContinuousVowelSpace]


@dataclass
class FormantTrackSummary:
    n_vowels: int
    method: VSAMethod
    f1_mean: float = float("nan")
    f1_sd: float = float("nan")
    f1_range: float = float("nan")
    f2_mean: float = float("nan")
    f2_sd: float = float("nan")
    f2_range: float = float("nan")
    metrics: Optional[VowelSpaceMetrics] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _describe(x):
    return (
        float(np.mean(x)),
        float(np.std(x, ddof=1)),
        float(np.max(x) - np.min(x)),
    )


# ---------------------------------------------------------
# Engine
# ---------------------------------------------------------

class VowelSpaceEngine:
    """
    Configured entry point for vowel space metrics.

    Holds the analysis settings only; every call works on its own input
    and nothing is kept between calls.
    """

    def __init__(
        self,
        center_method: str = DEFAULT_CENTER_METHOD,
        min_corner_support: int = MIN_CORNER_SUPPORT,
        policy: Optional[CornerSupportPolicy] = None,
        random_state=None,
        density_options: Optional[Dict[str, Any]] = None,
        continuous_options: Optional[Dict[str, Any]] = None,
    ):
        self.center_method = center_method
        self.min_corner_support = min_corner_support
        self.policy = policy
        self.random_state = random_state
        self.density_options = dict(density_options or {})
        self.continuous_options = dict(continuous_options or {})

        self._dispatch = {
            VSAMethod.BASIC: self._basic,
            VSAMethod.DENSITY: self._density,
            VSAMethod.CONTINUOUS: self._continuous,
        }

    # -------------------------
    # Variants
    # -------------------------
    def _basic(self, f1, f2, **kwargs) -> BasicVowelSpace:
        center = kwargs.pop("center", None)
        space = compute_vector_space(
            f1,
            f2,
            method=kwargs.pop("center_method", self.center_method),
            center=center,
            min_corner_support=kwargs.pop("min_corner_support", self.min_corner_support),
            policy=kwargs.pop("policy", self.policy),
        )
        if kwargs:
            raise TypeError(f"unexpected options for basic VSA: {sorted(kwargs)}")

        norms = space.vectors.norms[space.vectors.valid]
        if norms.size:
            mean_norm = float(np.mean(norms))
            sd_norm = float(np.std(norms, ddof=1)) if norms.size > 1 else float("nan")
        else:
            mean_norm = sd_norm = float("nan")
        cv_norm = sd_norm / mean_norm if mean_norm else float("nan")

        return BasicVowelSpace(
            center=space.center,
            mean_norm=mean_norm,
            sd_norm=sd_norm,
            cv_norm=cv_norm,
            vsa=space.vsa,
            space=space,
        )

    def _density(self, f1, f2, **kwargs) -> DensityVowelSpace:
        options = {**self.density_options, **kwargs}
        return DensityVowelSpace(hull=compute_density_vowel_space(f1, f2, **options))

    def _continuous(self, f1, f2, **kwargs) -> ContinuousVowelSpace:
        options = {"random_state": self.random_state, **self.continuous_options, **kwargs}
        return ContinuousVowelSpace(hull=compute_continuous_vowel_space(f1, f2, **options))

    # -------------------------
    # Public API
    # -------------------------
    def analyze_arrays(self, f1, f2, method=VSAMethod.BASIC, **kwargs) -> VowelSpaceMetrics:
        """Compute one vowel space metric for already-clean F1/F2 arrays."""
        return self._dispatch[VSAMethod(method)](f1, f2, **kwargs)

    def analyze(
        self,
        track,
        time_range: Optional[Tuple[float, float]] = None,
        method=VSAMethod.BASIC,
        **kwargs,
    ) -> FormantTrackSummary:
        """
        Vowel space metrics for a formant track.

        track is a mapping (dict of arrays, DataFrame, ...) with F1 and F2
        columns and optionally a time column used by time_range.
        """
        method = VSAMethod(method)

        if "F1" not in track or "F2" not in track:
            raise ValueError("formant track must contain F1 and F2 columns")

        f1 = formant_array(track["F1"])
        f2 = formant_array(track["F2"])

        if time_range is not None:
            if "time" not in track:
                logger.warning("No time column in formant track; ignoring time_range")
            else:
                t = formant_array(track["time"])
                start, end = time_range
                idx = (t >= start) & (t <= end)
                f1, f2 = f1[idx], f2[idx]

        f1, f2 = sanitize_formants(f1, f2)
        n = int(f1.size)

        if n < MIN_TRACK_SAMPLES:
            logger.warning(
                "Insufficient valid formant measurements (%d < %d)", n, MIN_TRACK_SAMPLES
            )
            return FormantTrackSummary(n_vowels=n, method=method, error="Insufficient data")

        f1_mean, f1_sd, f1_range = _describe(f1)
        f2_mean, f2_sd, f2_range = _describe(f2)

        return FormantTrackSummary(
            n_vowels=n,
            method=method,
            f1_mean=f1_mean,
            f1_sd=f1_sd,
            f1_range=f1_range,
            f2_mean=f2_mean,
            f2_sd=f2_sd,
            f2_range=f2_range,
            metrics=self.analyze_arrays(f1, f2, method, **kwargs),
        )


def analyze_formant_track(
    track,
    time_range=None,
    method=VSAMethod.BASIC,
    center_method: str = DEFAULT_CENTER_METHOD,
    **kwargs,
) -> FormantTrackSummary:
    engine = VowelSpaceEngine(center_method=center_method)
    return engine.analyze(track, time_range=time_range, method=method, **kwargs)
