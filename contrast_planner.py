"""
Luminance planning for a target WCAG contrast ratio.
"""

import logging
from typing import NamedTuple, Optional

from color import Color
from palette_config import INK_WHITE, WCAG_OFFSET

logger = logging.getLogger(__name__)


class LuminanceRange(NamedTuple):
    """Closed luminance band; empty when min > max."""

    min: float
    max: float

    @property
    def is_empty(self):
        return self.min > self.max

    def contains(self, luminance):
        return self.min <= luminance <= self.max


EMPTY_RANGE = LuminanceRange(1.0, 0.0)


class ContrastTargets(NamedTuple):
    """Luminance targets for the contrast colours; None when not needed."""

    dark: Optional[float]
    light: Optional[float]


def unachievable_luminance_range(target_ratio):
    """
    Luminances that cannot reach target_ratio against both black and white.

    A colour inside this band is too light to contrast with white and too
    dark to contrast with black, so no single partner colour can serve it.
    """
    upper_bound_l1 = target_ratio * WCAG_OFFSET - WCAG_OFFSET
    lower_bound_l2 = (1 + WCAG_OFFSET) / target_ratio - WCAG_OFFSET

    if lower_bound_l2 >= upper_bound_l1:
        return EMPTY_RANGE
    return LuminanceRange(lower_bound_l2, upper_bound_l1)


def contrast_targets(colors, target_ratio):
    """Luminance targets that contrast with every dark- and light-leaning colour."""
    dark_luminances = [c.luminance for c in colors if c.ink_color == INK_WHITE]
    light_luminances = [c.luminance for c in colors if c.ink_color != INK_WHITE]

    dark = light = None
    if dark_luminances:
        dark = target_ratio * max(dark_luminances) + WCAG_OFFSET * (target_ratio - 1)
    if light_luminances:
        light = (min(light_luminances) + WCAG_OFFSET - WCAG_OFFSET * target_ratio) / target_ratio

    return ContrastTargets(dark, light)


def plan_contrasts(colors, target_ratio, rng=None):
    """
    Synthesize the one or two contrast colours for colors.

    The contrast for dark-leaning colours must be at least as light as its
    target and the one for light-leaning colours at most as light, whatever
    side of the ink threshold the target itself falls on.
    """
    targets = contrast_targets(colors, target_ratio)
    logger.debug(
        "Contrast targets for ratio %.2f: dark=%s light=%s",
        target_ratio, targets.dark, targets.light,
    )

    contrasts = []
    if targets.dark is not None:
        contrasts.append(Color.from_luminance(targets.dark, rng, dark=False))
    if targets.light is not None:
        contrasts.append(Color.from_luminance(targets.light, rng, dark=True))
    return contrasts
