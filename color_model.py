"""
Stateless colour conversions: hex, RGB, HSL, XYZ and WCAG relative luminance.

RGB triples are integers in 0-255, HSL triples are fractions in [0, 1]
(hue as a fraction of a full turn).  None of these functions validate
their input; callers are expected to hand them well-formed values.
"""

import math

import numpy as np
from scipy.spatial.distance import cdist

from palette_config import (
    LINEAR_TO_SRGB_TH,
    LUMINANCE_COEFFICIENTS,
    SRGB_TO_LINEAR_TH,
    SRGB_TO_XYZ,
    WCAG_OFFSET,
)

_SRGB_TO_XYZ = np.array(SRGB_TO_XYZ)


def clamp(value, min_value, max_value):
    """Clamp value to the closed interval [min_value, max_value]."""
    return max(min_value, min(max_value, value))


def random_in_range(rng, low, high):
    """Draw uniformly between low and high (either order) from rng."""
    return low + (high - low) * rng.random()


def hex_to_rgb(hex_code):
    """Convert a 6-digit hex string (with or without '#') to an RGB tuple."""
    hex_code = hex_code.lstrip("#")
    return (
        int(hex_code[0:2], 16),
        int(hex_code[2:4], 16),
        int(hex_code[4:6], 16),
    )


def rgb_to_hex(rgb):
    """Convert an RGB tuple to an uppercase '#RRGGBB' string."""
    r, g, b = rgb
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def rgb_to_hsl(rgb):
    """Convert RGB (0-255) to HSL fractions."""
    r, g, b = [c / 255.0 for c in rgb]

    max_val = max(r, g, b)
    min_val = min(r, g, b)
    h = s = 0.0
    l = (max_val + min_val) / 2

    if max_val != min_val:
        d = max_val - min_val
        s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)
        if max_val == r:
            h = ((g - b) / d + (6 if g < b else 0)) % 6
        elif max_val == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return (h, s, l)


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl):
    """Convert HSL fractions to RGB (0-255), rounding half up."""
    h, s, l = hsl

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return tuple(int(math.floor(c * 255 + 0.5)) for c in (r, g, b))


def srgb_to_linear(channel):
    """Linearize an encoded sRGB channel in [0, 1]."""
    if channel <= SRGB_TO_LINEAR_TH:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def linear_to_srgb(channel):
    """Encode a linear channel value back to sRGB."""
    if channel <= LINEAR_TO_SRGB_TH:
        return channel * 12.92
    return 1.055 * channel ** (1 / 2.4) - 0.055


def rgb_to_xyz(rgb):
    """Convert RGB (0-255) to CIE XYZ scaled to 0-100."""
    linear = np.array([srgb_to_linear(c / 255.0) for c in rgb]) * 100
    x, y, z = _SRGB_TO_XYZ @ linear
    return (float(x), float(y), float(z))


def rgb_to_luminance(rgb):
    """Calculate WCAG relative luminance of an RGB (0-255) triple."""
    kr, kg, kb = LUMINANCE_COEFFICIENTS
    r, g, b = [srgb_to_linear(c / 255.0) for c in rgb]
    return kr * r + kg * g + kb * b


def contrast_ratio(luminance1, luminance2):
    """WCAG contrast ratio between two relative luminances."""
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + WCAG_OFFSET) / (darker + WCAG_OFFSET)


def xyz_distances(xyz, others):
    """Euclidean distances in XYZ from one point to each of others."""
    if len(others) == 0:
        return np.array([])
    return cdist(np.atleast_2d(xyz), np.asarray(others, dtype=float))[0]
