# vowelspace/errors.py


class VowelSpaceError(Exception):
    """Base class for all vowel space errors."""


class InsufficientDataError(VowelSpaceError):
    """Fewer points than a method needs (empty input, < 3 corners, ...)."""


class DegenerateGeometryError(VowelSpaceError):
    """Geometry was requested but fewer than 3 usable vertices remain."""


class ExternalComputationFailure(VowelSpaceError):
    """The convex hull or mixture model backend failed."""


class GMMConvergenceError(ExternalComputationFailure):
    """The Gaussian mixture fit did not converge."""

    def __init__(self, n_components, n_iter):
        self.n_components = n_components
        self.n_iter = n_iter
        super().__init__(
            f"GMM with {n_components} components did not converge "
            f"after {n_iter} iterations"
        )
