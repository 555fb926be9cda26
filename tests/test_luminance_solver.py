"""Tests for the luminance-targeted RGB solver."""

import logging

import numpy as np
import pytest

from color_model import rgb_to_luminance
from luminance_solver import (
    generate_rgb_from_luminance,
    is_dark_target,
    iterate_rgb_for_luminance,
)


def _on_correct_side(rgb, target):
    luminance = rgb_to_luminance(rgb)
    return luminance <= target if is_dark_target(target) else luminance >= target


def test_branch_threshold():
    assert is_dark_target(0.1791)
    assert not is_dark_target(0.18)


def test_single_attempt_returns_valid_channels(rng):
    for target in np.linspace(0, 1, 21):
        rgb = generate_rgb_from_luminance(target, rng)
        assert len(rgb) == 3
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)


@pytest.mark.parametrize("target", [0.05, 0.1791, 0.3, 0.7, 0.95])
def test_solver_converges_for_seeded_trials(target):
    trials = 200
    hits = sum(
        _on_correct_side(iterate_rgb_for_luminance(target, np.random.default_rng(seed)), target)
        for seed in range(trials)
    )
    assert hits / trials >= 0.95


def test_dark_results_round_down_and_light_results_round_up(rng):
    for _ in range(50):
        assert rgb_to_luminance(generate_rgb_from_luminance(0.1, rng)) <= 0.1
        assert rgb_to_luminance(generate_rgb_from_luminance(0.6, rng)) >= 0.6


def test_solver_is_deterministic_for_a_seed():
    first = iterate_rgb_for_luminance(0.42, np.random.default_rng(99))
    second = iterate_rgb_for_luminance(0.42, np.random.default_rng(99))
    assert first == second


def test_attempts_are_bounded():
    class CountingRng:
        def __init__(self):
            self.inner = np.random.default_rng(0)
            self.choices = 0

        def choice(self, *args, **kwargs):
            self.choices += 1
            return self.inner.choice(*args, **kwargs)

        def random(self):
            return self.inner.random()

    counting = CountingRng()
    iterate_rgb_for_luminance(0.5, counting, max_attempts=3)
    assert 1 <= counting.choices <= 3


def test_failed_attempts_are_traced_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="luminance_solver"):
        iterate_rgb_for_luminance(1.2, np.random.default_rng(0))
    assert any("clamping" in r.getMessage() for r in caplog.records)
