"""
Immutable colour value carrying hex, RGB, HSL, XYZ, luminance and ink colour.

RGB is the canonical representation; everything else is derived from it
once, when the colour is built through one of the factory classmethods.
"""

import math
import numbers
import re
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from color_model import (
    contrast_ratio,
    hex_to_rgb,
    hsl_to_rgb,
    random_in_range,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_luminance,
    rgb_to_xyz,
)
from luminance_solver import iterate_rgb_for_luminance
from palette_config import (
    INK_BLACK,
    INK_THRESHOLD,
    INK_WHITE,
    RANDOM_LIGHTNESS_RANGE,
    RANDOM_SATURATION_RANGE,
)
from palette_errors import InvalidColorInput

HEX_REGEX = re.compile(r"^#?[0-9a-fA-F]{6}$")


def ink_color_for(luminance):
    """Black ink above the threshold luminance, white at or below it."""
    return INK_BLACK if luminance > INK_THRESHOLD else INK_WHITE


def _is_real(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_rgb(rgb):
    try:
        channels = tuple(rgb)
    except TypeError:
        raise InvalidColorInput(f"RGB value must be a sequence of three channels, got {rgb!r}")
    if len(channels) != 3:
        raise InvalidColorInput(f"RGB value must have three channels, got {len(channels)}")
    for c in channels:
        if not isinstance(c, numbers.Integral) or isinstance(c, bool) or not 0 <= c <= 255:
            raise InvalidColorInput(f"RGB channel {c!r} is not an integer in 0-255")
    return tuple(int(c) for c in channels)


def _check_hsl(hsl):
    try:
        components = tuple(hsl)
    except TypeError:
        raise InvalidColorInput(f"HSL value must be a sequence of three components, got {hsl!r}")
    if len(components) != 3:
        raise InvalidColorInput(f"HSL value must have three components, got {len(components)}")
    for c in components:
        if not _is_real(c) or not math.isfinite(c) or not 0 <= c <= 1:
            raise InvalidColorInput(f"HSL component {c!r} is not a number in [0, 1]")
    return tuple(float(c) for c in components)


@dataclass(frozen=True)
class Color:
    """A colour in every representation the palette code needs."""

    hex: str
    rgb: Tuple[int, int, int]
    hsl: Tuple[float, float, float]
    xyz: Tuple[float, float, float]
    luminance: float
    ink_color: str
    name: Optional[str] = None

    @classmethod
    def from_rgb(cls, rgb):
        """Build a colour from an RGB (0-255) triple."""
        rgb = _check_rgb(rgb)
        luminance = rgb_to_luminance(rgb)
        return cls(
            hex=rgb_to_hex(rgb),
            rgb=rgb,
            hsl=rgb_to_hsl(rgb),
            xyz=rgb_to_xyz(rgb),
            luminance=luminance,
            ink_color=ink_color_for(luminance),
        )

    @classmethod
    def from_hex(cls, hex_code):
        """Build a colour from '#RRGGBB' or 'RRGGBB' in any case."""
        if not isinstance(hex_code, str) or not HEX_REGEX.match(hex_code):
            raise InvalidColorInput(f"Invalid hex colour {hex_code!r}; expected #RRGGBB")
        return cls.from_rgb(hex_to_rgb(hex_code))

    @classmethod
    def from_hsl(cls, hsl):
        """Build a colour from an (h, s, l) triple of fractions."""
        return cls.from_rgb(hsl_to_rgb(_check_hsl(hsl)))

    @classmethod
    def random(cls, rng=None):
        """Random saturated, mid-lightness colour."""
        rng = rng if rng is not None else np.random.default_rng()
        hsl = (
            rng.random(),
            random_in_range(rng, *RANDOM_SATURATION_RANGE),
            random_in_range(rng, *RANDOM_LIGHTNESS_RANGE),
        )
        return cls.from_rgb(hsl_to_rgb(hsl))

    @classmethod
    def from_luminance(cls, target_luminance, rng=None, dark=None):
        """
        Synthesize a colour whose luminance reaches target_luminance.

        Targets outside [0, 1] are allowed and resolve to the nearest
        reachable extreme; the result is best effort, never an error.
        dark forces the side of the target the result lands on; by default
        it follows the ink threshold.
        """
        if not _is_real(target_luminance) or not math.isfinite(target_luminance):
            raise InvalidColorInput(f"Luminance target {target_luminance!r} is not a finite number")
        rng = rng if rng is not None else np.random.default_rng()
        return cls.from_rgb(iterate_rgb_for_luminance(float(target_luminance), rng, dark=dark))

    def contrast_with(self, other):
        """WCAG contrast ratio between this colour and another."""
        return contrast_ratio(self.luminance, other.luminance)


def make_color(value=None, rng=None):
    """
    Build a colour from whichever input is given.

    None gives a random colour, a string is read as hex, a single number
    as a target luminance and a three-item sequence as HSL.
    """
    if value is None:
        return Color.random(rng)
    if isinstance(value, str):
        return Color.from_hex(value)
    if _is_real(value):
        return Color.from_luminance(value, rng)
    if isinstance(value, (tuple, list)):
        return Color.from_hsl(value)
    raise InvalidColorInput(f"Cannot build a colour from {type(value).__name__}")
