"""
Tunable constants for palette generation and naming lookup.
"""

import os

# Luminance at which black and white ink give equal WCAG contrast
INK_THRESHOLD = 0.1791
INK_BLACK = "black"
INK_WHITE = "white"

# Flare term of the WCAG contrast formula
WCAG_OFFSET = 0.05

# sRGB (D65, 2 deg observer) to XYZ
SRGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)
LUMINANCE_COEFFICIENTS = SRGB_TO_XYZ[1]

SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308

# Luminance solver
MAX_SOLVER_ATTEMPTS = 30
SOLVER_STEP_DIVISOR = 10

# Distinct set builder
MAX_DISTINCT_ATTEMPTS = 50
MIN_XYZ_DISTANCE = 8
HUE_DELTAS = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 0.25, 0.75, 1 / 3, 2 / 3)
COMPLEMENT_HUE_SHIFT = 0.5

# Random seed colours avoid near-gray, near-black and near-white
RANDOM_SATURATION_RANGE = (0.6, 1.0)
RANDOM_LIGHTNESS_RANGE = (0.3, 0.7)

DEFAULT_TARGET_RATIO = 4.5
DEFAULT_NUMBER_OF_COLORS = 5

NAMING_API_URL = os.environ.get("COLOR_NAMING_URL", "https://api.color.pizza/v1/")
NAMING_TIMEOUT = float(os.environ.get("COLOR_NAMING_TIMEOUT", "5"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
