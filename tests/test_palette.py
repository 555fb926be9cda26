"""Tests for palette generation, regeneration, reporting and the CLI."""

import numpy as np
import pytest

from color import Color
from color_palette_generator import (
    Palette,
    distance_matrix,
    generate_palette,
    main,
    print_palette_statistics,
    regenerate_palette,
    visualize_palette,
)
from palette_errors import InvalidColorInput, InvalidPaletteSize, InvalidRatio


@pytest.mark.parametrize("seed", range(25))
def test_random_palette_shape(seed):
    palette = generate_palette(4.5, 5, rng=np.random.default_rng(seed))
    luminances = [c.luminance for c in palette.colors]
    assert len(palette.colors) == 5
    assert luminances == sorted(luminances)
    assert len(palette.contrasts) in (1, 2)


def test_contrast_count_follows_leanings(rng):
    palette = generate_palette(4.5, 5, rng=rng)
    inks = {c.ink_color for c in palette.colors}
    assert len(palette.contrasts) == len(inks)


def test_all_light_seeds_give_one_contrast(rng):
    seeds = ["#FFFFFF", "#FFF59D", "#B2EBF2", "#F8BBD0", "#DCEDC8"]
    palette = generate_palette(4.5, 5, *seeds, rng=rng)
    assert all(c.luminance > 0.5 for c in palette.colors)
    assert len(palette.contrasts) == 1
    assert palette.contrasts[0].luminance < 0.5


def test_seeds_are_kept(rng):
    seed = Color.from_hex("#3366CC")
    palette = generate_palette(4.5, 4, seed, rng=rng)
    assert seed in palette.colors
    assert len(palette.colors) == 4


def test_palette_records_ratio_and_band(rng):
    palette = generate_palette(7, 3, rng=rng)
    assert palette.target_ratio == 7.0
    assert palette.unachievable_luminance_range.min == pytest.approx(0.1)


def test_generate_classmethod(rng):
    palette = Palette.generate(3, 2, "#000000", rng=rng)
    assert isinstance(palette, Palette)
    assert len(palette.colors) == 2


def test_generation_is_reproducible():
    first = generate_palette(4.5, 5, rng=np.random.default_rng(11))
    second = generate_palette(4.5, 5, rng=np.random.default_rng(11))
    assert first == second


@pytest.mark.parametrize("ratio", [0.5, float("nan"), float("inf"), "4.5", True])
def test_rejects_bad_ratio(ratio):
    with pytest.raises(InvalidRatio):
        generate_palette(ratio, 5)


@pytest.mark.parametrize("count", [0, -1, 2.5])
def test_rejects_bad_size(count):
    with pytest.raises(InvalidPaletteSize):
        generate_palette(4.5, count)


def test_rejects_more_seeds_than_slots():
    with pytest.raises(InvalidPaletteSize):
        generate_palette(4.5, 1, "#000000", "#FFFFFF")


def test_rejects_bad_seed_hex():
    with pytest.raises(InvalidColorInput):
        generate_palette(4.5, 3, "#XYZXYZ")


def test_regenerate_keeps_locked_colors(rng):
    palette = generate_palette(4.5, 5, rng=rng)
    locked = {0, 3}
    kept = {palette.colors[i] for i in locked}
    new = regenerate_palette(palette, locked, rng=rng)
    assert len(new.colors) == 5
    assert new.target_ratio == palette.target_ratio
    assert kept <= set(new.colors)


def test_regenerate_leaves_input_palette_unchanged(rng):
    palette = generate_palette(4.5, 3, rng=rng)
    before = palette.colors
    regenerate_palette(palette, (), rng=rng)
    assert palette.colors == before


def test_distance_matrix_is_symmetric(rng):
    palette = generate_palette(4.5, 4, rng=rng)
    matrix = distance_matrix(palette.colors)
    assert matrix.shape == (4, 4)
    assert np.allclose(matrix, matrix.T)
    assert np.allclose(np.diag(matrix), 0)


def test_print_statistics(rng, capsys):
    palette = generate_palette(4.5, 3, "#979AC4", rng=rng)
    print_palette_statistics(palette)
    out = capsys.readouterr().out
    assert "COLOR PALETTE STATISTICS" in out
    assert "#979AC4" in out


def test_visualize_saves_figure(rng, tmp_path):
    import matplotlib.pyplot as plt

    palette = generate_palette(4.5, 4, rng=rng)
    path = tmp_path / "palette.png"
    fig = visualize_palette(palette, output_path=path)
    plt.close(fig)
    assert path.exists()
    assert path.stat().st_size > 0


def test_cli_prints_palette(capsys):
    assert main(["--ratio", "4.5", "--count", "3", "--seed", "5", "--color", "#336699"]) == 0
    out = capsys.readouterr().out
    assert "#336699" in out


def test_cli_rejects_bad_ratio(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--ratio", "0.5"])
    assert excinfo.value.code == 2
