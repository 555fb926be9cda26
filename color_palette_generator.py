#!/usr/bin/env python3
"""
Generate palettes of distinct colours with matching WCAG contrast colours.
"""

import argparse
import itertools
import logging
import math
import numbers
import sys
from dataclasses import dataclass, replace
from typing import Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle
from scipy.spatial.distance import cdist

from color import Color
from color_naming import name_palette
from contrast_planner import LuminanceRange, plan_contrasts, unachievable_luminance_range
from distinct_set import grow_distinct_colors
from palette_config import DEFAULT_NUMBER_OF_COLORS, DEFAULT_TARGET_RATIO, LOG_FORMAT
from palette_errors import InvalidPaletteSize, InvalidRatio, PaletteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Distinct colours sorted by luminance plus their contrast colours."""

    target_ratio: float
    unachievable_luminance_range: LuminanceRange
    colors: Tuple[Color, ...]
    contrasts: Tuple[Color, ...]

    @classmethod
    def generate(cls, target_ratio, number_of_colors, *seed_colors, rng=None):
        return generate_palette(target_ratio, number_of_colors, *seed_colors, rng=rng)

    def with_colors(self, colors, contrasts):
        """Copy of this palette with replacement colour objects (e.g. named)."""
        return replace(self, colors=tuple(colors), contrasts=tuple(contrasts))


def _check_ratio(target_ratio):
    if (not isinstance(target_ratio, numbers.Real) or isinstance(target_ratio, bool)
            or not math.isfinite(target_ratio) or target_ratio < 1):
        raise InvalidRatio(f"Target contrast ratio must be a finite number >= 1, got {target_ratio!r}")
    return float(target_ratio)


def _check_size(number_of_colors, n_seeds):
    if not isinstance(number_of_colors, numbers.Integral) or number_of_colors < 1:
        raise InvalidPaletteSize(f"Number of colours must be a positive integer, got {number_of_colors!r}")
    if n_seeds > number_of_colors:
        raise InvalidPaletteSize(
            f"{n_seeds} seed colours do not fit in a palette of {number_of_colors}"
        )
    return int(number_of_colors)


def _as_color(seed):
    return seed if isinstance(seed, Color) else Color.from_hex(seed)


def generate_palette(target_ratio, number_of_colors, *seed_colors, rng=None):
    """
    Build a palette of number_of_colors distinct colours.

    seed_colors (Color objects or hex strings) are kept as the first
    members; a random colour seeds the palette when none are given.
    """
    target_ratio = _check_ratio(target_ratio)
    seeds = [_as_color(s) for s in seed_colors]
    number_of_colors = _check_size(number_of_colors, len(seeds))
    rng = rng if rng is not None else np.random.default_rng()

    if not seeds:
        seeds = [Color.random(rng)]

    unachievable = unachievable_luminance_range(target_ratio)
    colors = grow_distinct_colors(seeds, number_of_colors, unachievable, rng)
    contrasts = plan_contrasts(colors, target_ratio, rng)

    logger.info(
        "Generated %d colours and %d contrast colours for ratio %.2f",
        len(colors), len(contrasts), target_ratio,
    )
    return Palette(
        target_ratio=target_ratio,
        unachievable_luminance_range=unachievable,
        colors=tuple(sorted(colors, key=lambda c: c.luminance)),
        contrasts=tuple(contrasts),
    )


def regenerate_palette(palette, locked=(), rng=None):
    """New palette of the same size and ratio keeping the colours at locked indices."""
    kept = [palette.colors[i] for i in sorted(set(locked))]
    return generate_palette(palette.target_ratio, len(palette.colors), *kept, rng=rng)


def best_contrast(color, contrasts):
    """Best contrast ratio any of the contrast colours achieves against color."""
    if not contrasts:
        return float('nan')
    return max(color.contrast_with(c) for c in contrasts)


def distance_matrix(colors):
    """Pairwise XYZ distances between colors."""
    xyz = np.array([c.xyz for c in colors], dtype=float)
    return cdist(xyz, xyz)


def visualize_palette(palette, output_path=None, show=False):
    """Draw the palette swatches, contrast strip and XYZ distance matrix."""
    colors = palette.colors
    n_colors = len(colors)

    fig, axes = plt.subplots(3, 1, figsize=(12, 10),
                             gridspec_kw={'height_ratios': [2, 0.5, 2]})

    # Top plot: colour swatches with their ink colour
    ax1 = axes[0]
    ax1.set_xlim(0, n_colors)
    ax1.set_ylim(0, 1)

    for i, color in enumerate(colors):
        rect = Rectangle((i, 0), 1, 1, facecolor=np.array(color.rgb) / 255.0,
                         edgecolor='black', linewidth=2)
        ax1.add_patch(rect)

        text_color = color.ink_color
        if color.name:
            ax1.text(i + 0.5, 0.85, color.name, ha='center', va='center',
                     fontsize=8, fontweight='bold', color=text_color, style='italic')
        ax1.text(i + 0.5, 0.65, color.hex, ha='center', va='center',
                 fontsize=11, fontweight='bold', color=text_color, family='monospace')
        ax1.text(i + 0.5, 0.45, f"L = {color.luminance:.3f}", ha='center', va='center',
                 fontsize=8, color=text_color, family='monospace')
        ax1.text(i + 0.5, 0.25, f"CR: {best_contrast(color, palette.contrasts):.2f}",
                 ha='center', va='center', fontsize=9, color=text_color)

    ax1.set_xticks([])
    ax1.set_yticks([])
    ax1.set_title(f"Palette for contrast ratio {palette.target_ratio:g}:1",
                  fontsize=14, fontweight='bold', pad=20)

    # Middle plot: contrast colours
    ax2 = axes[1]
    n_contrasts = max(len(palette.contrasts), 1)
    ax2.set_xlim(0, n_contrasts)
    ax2.set_ylim(0, 1)
    for i, contrast in enumerate(palette.contrasts):
        ax2.add_patch(Rectangle((i, 0), 1, 1, facecolor=np.array(contrast.rgb) / 255.0,
                                edgecolor='black', linewidth=2))
        ax2.text(i + 0.5, 0.5, contrast.name or contrast.hex, ha='center', va='center',
                 fontsize=10, color=contrast.ink_color, family='monospace')
    ax2.set_xticks([])
    ax2.set_yticks([])
    ax2.set_title("Contrast colours", fontsize=12, fontweight='bold')

    # Bottom plot: XYZ distance matrix
    ax3 = axes[2]
    matrix = distance_matrix(colors)
    im = ax3.imshow(matrix, cmap='YlOrRd', aspect='auto')
    ax3.set_xticks(range(n_colors))
    ax3.set_yticks(range(n_colors))
    ax3.set_xticklabels([c.hex for c in colors], fontsize=8, family='monospace')
    ax3.set_yticklabels([c.hex for c in colors], fontsize=8, family='monospace')
    ax3.set_title("XYZ Distance Matrix", fontsize=12, fontweight='bold')

    cbar = plt.colorbar(im, ax=ax3)
    cbar.set_label('XYZ distance', rotation=270, labelpad=20)

    for i in range(n_colors):
        for j in range(n_colors):
            if i != j:
                ax3.text(j, i, f'{matrix[i, j]:.1f}', ha="center", va="center",
                         color="black", fontsize=8)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        logger.info("Visualization saved to %s", output_path)
    if show:
        plt.show()
    return fig


def print_palette_statistics(palette):
    """Print per-colour and pairwise distance statistics."""
    print("\n" + "=" * 70)
    print("COLOR PALETTE STATISTICS")
    print("=" * 70)
    print(f"Target ratio: {palette.target_ratio:g}:1")
    band = palette.unachievable_luminance_range
    if band.is_empty:
        print("Unachievable luminance band: none")
    else:
        print(f"Unachievable luminance band: {band.min:.4f} - {band.max:.4f}")

    for i, color in enumerate(palette.colors, 1):
        r, g, b = color.rgb
        print(f"Color {i}: {color.name or '(unnamed)'}")
        print(f"  {color.hex} | RGB({r:3d}, {g:3d}, {b:3d}) | L = {color.luminance:.4f} | ink: {color.ink_color}")
        print(f"  Best contrast colour ratio: {best_contrast(color, palette.contrasts):.2f}:1")

    print("\n" + "-" * 70)
    print("CONTRAST COLORS:")
    print("-" * 70)
    for contrast in palette.contrasts:
        print(f"  {contrast.hex} | L = {contrast.luminance:.4f} | {contrast.name or '(unnamed)'}")

    matrix = distance_matrix(palette.colors)
    distances = [matrix[i, j] for i, j in itertools.combinations(range(len(palette.colors)), 2)]
    if distances:
        print("\n" + "-" * 70)
        print("PAIRWISE XYZ DISTANCES:")
        print("-" * 70)
        print(f"  Minimum: {min(distances):.2f}")
        print(f"  Maximum: {max(distances):.2f}")
        print(f"  Average: {np.mean(distances):.2f}")
    print("=" * 70)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate distinct colours with WCAG contrast colours."
    )
    parser.add_argument('--ratio', type=float, default=DEFAULT_TARGET_RATIO,
                        help="target WCAG contrast ratio (default: %(default)s)")
    parser.add_argument('--count', type=int, default=DEFAULT_NUMBER_OF_COLORS,
                        help="number of palette colours (default: %(default)s)")
    parser.add_argument('--color', action='append', default=[], metavar='HEX',
                        help="seed colour to keep in the palette; may be repeated")
    parser.add_argument('--seed', type=int, default=None,
                        help="random seed for reproducible palettes")
    parser.add_argument('--names', action='store_true',
                        help="look up colour names from the naming service")
    parser.add_argument('--plot', metavar='PATH', default=None,
                        help="save a visualization of the palette to PATH")
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="logging level (default: %(default)s)")
    return parser


def main(argv=None):
    """Command line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    rng = np.random.default_rng(args.seed)
    try:
        palette = generate_palette(args.ratio, args.count, *args.color, rng=rng)
    except PaletteError as e:
        parser.error(str(e))

    if args.names:
        palette, result = name_palette(palette)
        if not result.enriched:
            print(f"Colour names unavailable: {result.reason}", file=sys.stderr)

    print_palette_statistics(palette)

    if args.plot:
        fig = visualize_palette(palette, output_path=args.plot)
        plt.close(fig)
        print(f"\nVisualization saved to: {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
