import numpy as np
import pytest
from vowelspace.errors import ExternalComputationFailure, GMMConvergenceError
from vowelspace.mixture import GMMAdapter


def _points(cloud):
    f1, f2 = cloud
    return np.column_stack([f2, f1])


def test_fit_returns_per_point_log_likelihood(cloud):
    pts = _points(cloud)
    fit = GMMAdapter(random_state=0).fit(pts, 4)
    assert fit.log_likelihood.shape == (pts.shape[0],)
    assert np.all(np.isfinite(fit.log_likelihood))
    assert fit.n_components == 4
    assert fit.weights.sum() == pytest.approx(1.0)
    assert fit.means.shape == (4, 2)
    assert fit.converged


def test_seeded_fit_is_reproducible(cloud):
    pts = _points(cloud)
    a = GMMAdapter(random_state=42).fit(pts, 4)
    b = GMMAdapter(random_state=42).fit(pts, 4)
    assert np.allclose(a.log_likelihood, b.log_likelihood)


def test_default_covariance_is_diagonal(cloud):
    fit = GMMAdapter(random_state=0).fit(_points(cloud), 4)
    assert GMMAdapter().covariance_type == "diag"
    assert fit.covariances.shape == (4, 2)
    assert np.all(fit.covariances > 0)


def test_full_covariance_option(cloud):
    fit = GMMAdapter(random_state=0, covariance_type="full").fit(_points(cloud), 4)
    assert fit.covariances.shape == (4, 2, 2)


def test_non_convergence_raises(cloud):
    adapter = GMMAdapter(random_state=0, max_iter=1)
    with pytest.raises(GMMConvergenceError) as exc:
        adapter.fit(_points(cloud), 4)
    assert exc.value.n_components == 4
    assert isinstance(exc.value, ExternalComputationFailure)


def test_fit_error_is_external_failure():
    # More components than samples
    with pytest.raises(ExternalComputationFailure):
        GMMAdapter(random_state=0).fit(np.array([[1.0, 2.0], [3.0, 4.0]]), 5)
