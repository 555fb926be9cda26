"""
Grow a list of mutually distinguishable colours by hue rotation.
"""

import logging

import numpy as np

from color import Color
from color_model import xyz_distances
from contrast_planner import EMPTY_RANGE
from palette_config import (
    COMPLEMENT_HUE_SHIFT,
    HUE_DELTAS,
    MAX_DISTINCT_ATTEMPTS,
    MIN_XYZ_DISTANCE,
)

logger = logging.getLogger(__name__)


def next_distinct_color(colors, unachievable_range=EMPTY_RANGE, rng=None,
                        max_attempts=MAX_DISTINCT_ATTEMPTS):
    """
    Propose the next colour after the last one in colors.

    Candidates rotate the last colour's hue and must be more than
    MIN_XYZ_DISTANCE from every existing colour and outside
    unachievable_range.  When no candidate passes, the complementary hue
    is accepted unchecked.  Returns (color, is_fallback).
    """
    rng = rng if rng is not None else np.random.default_rng()
    base = colors[-1]
    h, s, l = base.hsl
    existing_xyz = [c.xyz for c in colors]

    for _ in range(max_attempts):
        hue = (h + rng.choice(HUE_DELTAS)) % 1
        candidate = Color.from_hsl((hue, s, l))

        if np.min(xyz_distances(candidate.xyz, existing_xyz)) <= MIN_XYZ_DISTANCE:
            continue
        if unachievable_range.contains(candidate.luminance):
            continue
        return candidate, False

    logger.info(
        "No distinct colour found from %s in %d attempts, using its complement",
        base.hex, max_attempts,
    )
    return Color.from_hsl(((h + COMPLEMENT_HUE_SHIFT) % 1, s, l)), True


def grow_distinct_colors(seed_colors, number_of_colors, unachievable_range=EMPTY_RANGE, rng=None):
    """Extend seed_colors (or one random colour) to number_of_colors entries."""
    rng = rng if rng is not None else np.random.default_rng()
    colors = list(seed_colors) or [Color.random(rng)]

    while len(colors) < number_of_colors:
        color, _ = next_distinct_color(colors, unachievable_range, rng)
        colors.append(color)
    return colors
