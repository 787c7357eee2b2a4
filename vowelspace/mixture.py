# vowelspace/mixture.py
"""
Gaussian mixture adapter around sklearn.mixture.GaussianMixture.

EM initialisation is random: two unseeded fits of the same data can end
in different local optima, so per-point likelihoods (and anything
filtered on them) may differ slightly between runs. Pass random_state
for reproducible results.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from sklearn.exceptions import ConvergenceWarning
from sklearn.mixture import GaussianMixture

from vowelspace.errors import ExternalComputationFailure, GMMConvergenceError
from vowelspace.vowel_data import CVSA_MAX_ITER

logger = logging.getLogger(__name__)


@dataclass
class MixtureFit:
    log_likelihood: NDArray[np.float64]   # per point
    weights: NDArray[np.float64]
    means: NDArray[np.float64]
    covariances: NDArray[np.float64]      # (k, 2) for "diag", (k, 2, 2) for "full"
    converged: bool                       # always True; non-convergence raises
    n_iter: int

    @property
    def n_components(self) -> int:
        return int(self.weights.size)


class GMMAdapter:
    """
    Fits a k-component Gaussian mixture and returns per-point log-likelihoods.

    Covariances default to "diag", the model used by the published cVSA
    method; any GaussianMixture covariance_type is accepted.
    """

    def __init__(
        self,
        random_state=None,
        covariance_type: str = "diag",
        max_iter: int = CVSA_MAX_ITER,
        n_init: int = 1,
        tol: float = 1e-3,
    ):
        self.random_state = random_state
        self.covariance_type = covariance_type
        self.max_iter = max_iter
        self.n_init = n_init
        self.tol = tol

    def fit(self, points, n_components: int) -> MixtureFit:
        pts = np.asarray(points, dtype=float)

        gmm = GaussianMixture(
            n_components=n_components,
            covariance_type=self.covariance_type,
            max_iter=self.max_iter,
            n_init=self.n_init,
            tol=self.tol,
            random_state=self.random_state,
        )

        # Convergence is checked explicitly below
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", category=ConvergenceWarning)
            try:
                gmm.fit(pts)
            except (ValueError, np.linalg.LinAlgError) as e:
                raise ExternalComputationFailure(f"GMM fit failed: {e}") from e

        if not gmm.converged_:
            raise GMMConvergenceError(n_components, gmm.n_iter_)

        log_likelihood = gmm.score_samples(pts)
        logger.debug(
            "GMM k=%d converged in %d iterations, mean log-likelihood %.4g",
            n_components, gmm.n_iter_, float(np.mean(log_likelihood)),
        )

        return MixtureFit(
            log_likelihood=np.asarray(log_likelihood, dtype=float),
            weights=np.asarray(gmm.weights_, dtype=float),
            means=np.asarray(gmm.means_, dtype=float),
            covariances=np.asarray(gmm.covariances_, dtype=float),
            converged=True,
            n_iter=int(gmm.n_iter_),
        )
