# vowelspace/continuous.py
"""
Continuous vowel space area (cVSA), after Sandoval et al. (2013).

A Gaussian mixture with one component per expected vowel category is
fitted to continuously tracked formants. Measurements are kept by a
likelihood threshold and the convex hull of what remains is the
vowel space.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from sklearn.preprocessing import StandardScaler

from vowelspace.hull import ConvexHullAdapter, NoResult, hull_or_no_result
from vowelspace.mixture import GMMAdapter
from vowelspace.utils import drop_missing
from vowelspace.vowel_data import CVSA_COMPONENTS, CVSA_LIKELIHOOD_THRESHOLD

logger = logging.getLogger(__name__)


def likelihood_filter(log_likelihood, likelihood_threshold=CVSA_LIKELIHOOD_THRESHOLD):
    """
    Boolean mask of the measurements that pass the likelihood threshold.

    Each measurement's likelihood is compared with the threshold times
    its own likelihood, as in the published method. This keeps every
    finite measurement when the threshold is at most 1 and none above 1.
    """
    lik = np.exp(np.asarray(log_likelihood, dtype=float))
    return lik >= likelihood_threshold * lik


def _prepare(f1, f2, center, scale):
    f1, f2 = drop_missing(f1, f2)
    points = np.column_stack([f2, f1])
    if points.shape[0] and (center or scale):
        points = StandardScaler(with_mean=center, with_std=scale).fit_transform(points)
    return points


def compute_continuous_vowel_space(
    f1,
    f2,
    num_components: int = CVSA_COMPONENTS,
    likelihood_threshold: float = CVSA_LIKELIHOOD_THRESHOLD,
    center: bool = False,
    scale: bool = False,
    random_state=None,
    gmm_adapter: Optional[GMMAdapter] = None,
    hull_adapter: Optional[ConvexHullAdapter] = None,
):
    """
    Convex hull of the measurements that survive the GMM likelihood filter.

    Points are (F2, F1), optionally centered and/or scaled per column.
    Returns NoResult when there are too few measurements for the mixture
    or nothing survives. GMM failures (including non-convergence) raise
    ExternalComputationFailure.
    """
    if num_components < 1:
        raise ValueError(f"num_components must be >= 1, got {num_components}")

    points = _prepare(f1, f2, center, scale)

    needed = max(num_components, 3)
    if points.shape[0] < needed:
        reason = f"{points.shape[0]} measurements, need at least {needed}"
        logger.warning("cVSA: %s", reason)
        return NoResult(reason)

    adapter = gmm_adapter or GMMAdapter(random_state=random_state)
    fit = adapter.fit(points, num_components)

    keep = likelihood_filter(fit.log_likelihood, likelihood_threshold)
    survivors = points[keep]
    survivors = survivors[np.all(np.isfinite(survivors), axis=1)]

    logger.debug(
        "cVSA: %d of %d measurements kept at threshold %.3g",
        survivors.shape[0], points.shape[0], likelihood_threshold,
    )
    return hull_or_no_result(survivors, adapter=hull_adapter, label="cVSA")
