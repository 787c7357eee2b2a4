# vowelspace.utils
import logging

import numpy as np

logger = logging.getLogger(__name__)


def formant_array(x):
    """
    Convert x into a 1D float64 numpy array, keeping missing values.

    None entries become NaN so index alignment with the other formant
    is preserved. Returns a zero-length array if x is None or invalid.
    """
    if x is None:
        return np.zeros(0, dtype=float)

    try:
        return np.array(x, dtype=float).flatten()
    except (TypeError, ValueError):
        logger.debug("could not convert %r to a formant array", type(x))
        return np.zeros(0, dtype=float)


def formant_pairs(f1, f2):
    """Return (f1, f2) as aligned float arrays, raising on length mismatch."""
    f1 = formant_array(f1)
    f2 = formant_array(f2)
    if f1.size != f2.size:
        raise ValueError(
            f"F1 and F2 must have the same length ({f1.size} != {f2.size})"
        )
    return f1, f2


def valid_mask(f1, f2):
    """True where both formants are present and finite."""
    return np.isfinite(f1) & np.isfinite(f2)


def drop_missing(f1, f2):
    f1, f2 = formant_pairs(f1, f2)
    mask = valid_mask(f1, f2)
    return f1[mask], f2[mask]


def sanitize_formants(f1, f2):
    """
    Ingestion-boundary filter for formant tracks.

    Drops every pair where either formant is missing, non-finite,
    or not strictly positive (trackers report 0 for "no formant").
    """
    f1, f2 = formant_pairs(f1, f2)
    mask = valid_mask(f1, f2) & (f1 > 0) & (f2 > 0)

    dropped = int(f1.size - np.count_nonzero(mask))
    if dropped:
        logger.debug("sanitize_formants dropped %d of %d samples", dropped, f1.size)
    return f1[mask], f2[mask]


def nan_mean(x):
    """Mean that returns NaN for empty input instead of warning."""
    x = np.asarray(x, dtype=float)
    if x.size == 0:
        return float("nan")
    return float(np.mean(x))
