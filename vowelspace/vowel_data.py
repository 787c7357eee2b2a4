"""
Reference constants and defaults for vowel space analysis.

The corner table follows Karlsson & van Doorn (2012): vectors are drawn
from the vowel space center and binned by angle into four quadrants,
each named after the corner vowel that usually occupies it.

These are *defaults*, every operation accepts its own keyword override.
"""
import numpy as np

# ---------------------------------------------------------
# Vowel space center
# ---------------------------------------------------------

CENTER_METHODS = ("centroid", "twomeans", "wcentroid")
DEFAULT_CENTER_METHOD = "wcentroid"

# ---------------------------------------------------------
# Corner bins (angle = atan2(F1 - F1c, F2 - F2c))
#
# Intervals are right-closed, the lowest one is closed on both ends:
#   [-pi, -pi/2]  (-pi/2, 0]  (0, pi/2]  (pi/2, pi]
# ---------------------------------------------------------

CORNER_BREAKS = (-np.pi, -np.pi / 2, 0.0, np.pi / 2, np.pi)

CORNER_LABELS = (
    "[u]-corner",   # low F1, low F2
    "[i]-corner",   # low F1, high F2
    "[ae]-corner",  # high F1, high F2
    "[a]-corner",   # high F1, low F2
)

# A corner needs strictly more vectors than this to get a mean vector
MIN_CORNER_SUPPORT = 3

# Inner-band plausibility gate on the per-corner angle CDF
CORNER_CDF_CENTER = 0.5
CORNER_CDF_HALF_WIDTH = 0.25

# ---------------------------------------------------------
# Vowel space density (Story & Bunton, 2017)
# ---------------------------------------------------------

VSD_RESOLUTION = 0.05
VSD_GRID_RESOLUTION = 0.01
VSD_DENSITY_THRESHOLD = 0.25

# Span of the median-normalized grid, both axes
VSD_GRID_LOW = -1.0
VSD_GRID_HIGH = 1.5

# ---------------------------------------------------------
# Continuous vowel space area (Sandoval et al., 2013)
# ---------------------------------------------------------

CVSA_COMPONENTS = 5
CVSA_LIKELIHOOD_THRESHOLD = 0.3
CVSA_MAX_ITER = 100

# ---------------------------------------------------------
# Track analysis
# ---------------------------------------------------------

MIN_TRACK_SAMPLES = 3
