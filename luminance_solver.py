"""
Synthesize RGB colours that reach a target WCAG relative luminance.

Two channels are drawn at random and the third is solved from the
luminance equation.  Dark targets (at or below the ink threshold) are
solved so the result lands at or below the target, light targets so it
lands at or above; integer rounding follows the same direction.
"""

import logging
import math

from color_model import (
    clamp,
    linear_to_srgb,
    random_in_range,
    rgb_to_luminance,
    srgb_to_linear,
)
from palette_config import (
    INK_THRESHOLD,
    LUMINANCE_COEFFICIENTS,
    MAX_SOLVER_ATTEMPTS,
    SOLVER_STEP_DIVISOR,
)

logger = logging.getLogger(__name__)


def is_dark_target(target_luminance):
    """True when the target is solved on the dark side of the ink threshold."""
    return target_luminance <= INK_THRESHOLD


def _first_channel_range(target_luminance, first, second, solved, dark):
    # Linear-light interval of the first channel from which the target is reachable
    k = LUMINANCE_COEFFICIENTS
    if dark:
        low, high = 0.0, target_luminance / k[first]
    else:
        low, high = (target_luminance - k[second] - k[solved]) / k[first], 1.0
    return clamp(low, 0.0, 1.0), clamp(high, 0.0, 1.0)


def generate_rgb_from_luminance(target_luminance, rng, dark=None):
    """Single solve attempt for target_luminance, returning an RGB (0-255) tuple."""
    k = LUMINANCE_COEFFICIENTS
    if dark is None:
        dark = is_dark_target(target_luminance)

    first, second = sorted(int(i) for i in rng.choice(3, size=2, replace=False))
    solved = 3 - first - second
    channels = [0.0, 0.0, 0.0]

    low, high = _first_channel_range(target_luminance, first, second, solved, dark)
    channels[first] = clamp(
        random_in_range(rng, linear_to_srgb(low), linear_to_srgb(high)), 0.0, 1.0
    )

    remainder = (target_luminance - k[first] * srgb_to_linear(channels[first])) / k[second]
    draw = random_in_range(rng, 0.0, remainder) if dark else random_in_range(rng, remainder, 1.0)
    channels[second] = clamp(linear_to_srgb(draw), 0.0, 1.0)

    solved_linear = (
        target_luminance
        - k[first] * srgb_to_linear(channels[first])
        - k[second] * srgb_to_linear(channels[second])
    ) / k[solved]
    channels[solved] = clamp(linear_to_srgb(solved_linear), 0.0, 1.0)

    to_int = math.floor if dark else math.ceil
    return tuple(int(to_int(c * 255)) for c in channels)


def iterate_rgb_for_luminance(target_luminance, rng, max_attempts=MAX_SOLVER_ATTEMPTS, dark=None):
    """
    Repeat solve attempts until the result is on the correct side of the target.

    Each failed attempt moves the working target a further tenth of the way
    towards the reachable extreme (0 for dark targets, 1 for light ones).
    After max_attempts the last result is returned as a best effort.
    Targets outside [0, 1] are solved for the nearest reachable extreme.
    dark overrides the side chosen from the ink threshold.
    """
    if not 0.0 <= target_luminance <= 1.0:
        logger.debug("Luminance target %.4f is unreachable, clamping", target_luminance)
        target_luminance = clamp(target_luminance, 0.0, 1.0)

    if dark is None:
        dark = is_dark_target(target_luminance)
    if dark:
        increment = -target_luminance / SOLVER_STEP_DIVISOR
    else:
        increment = (1 - target_luminance) / SOLVER_STEP_DIVISOR

    adjuster = 0.0
    rgb = (0, 0, 0)
    for attempt in range(1, max_attempts + 1):
        rgb = generate_rgb_from_luminance(target_luminance + adjuster, rng, dark)
        luminance = rgb_to_luminance(rgb)

        if (dark and luminance <= target_luminance) or (not dark and luminance >= target_luminance):
            break

        logger.debug(
            "Attempt %d missed target luminance %.4f (got %.4f from rgb%s)",
            attempt, target_luminance, luminance, rgb,
        )
        adjuster += increment
    else:
        logger.debug(
            "No exact solve for luminance %.4f after %d attempts, keeping %s",
            target_luminance, max_attempts, rgb,
        )

    return rgb
