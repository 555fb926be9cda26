#!/usr/bin/env python3
"""
Streamlit page for generating distinct palettes with WCAG contrast colours.

Run with: streamlit run app.py
"""

import logging

import numpy as np
import streamlit as st

from color import Color
from color_naming import name_palette
from color_palette_generator import generate_palette, regenerate_palette
from palette_config import DEFAULT_NUMBER_OF_COLORS, DEFAULT_TARGET_RATIO, LOG_FORMAT
from palette_errors import PaletteError

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

st.set_page_config(page_title="Accessible Palette Generator", layout="wide")

st.title("Accessible Palette Generator")

col1, col2 = st.columns([1, 3])

with col1:
    st.subheader("Configuration")

    target_ratio = st.slider(
        "Target contrast ratio:",
        min_value=1.0,
        max_value=21.0,
        value=float(DEFAULT_TARGET_RATIO),
        step=0.5,
        help="WCAG contrast ratio the contrast colours must reach against every palette colour"
    )

    n_colors = st.slider(
        "Number of colours:",
        min_value=1,
        max_value=10,
        value=DEFAULT_NUMBER_OF_COLORS,
    )

    seed = st.number_input('Random seed (0 for none)', min_value=0, value=0)
    lookup_names = st.checkbox('Look up colour names', value=False,
                               help='Ask the naming service for colour names; failures leave colours unnamed')

    regenerate = st.button('Generate palette')

rng = np.random.default_rng(int(seed) if seed else None)

if 'palette' not in st.session_state:
    st.session_state['palette'] = generate_palette(target_ratio, n_colors, rng=rng)
    st.session_state['locked'] = set()

palette = st.session_state['palette']

# A changed size or ratio is a new palette; locks only survive a plain regeneration
if len(palette.colors) != n_colors or palette.target_ratio != target_ratio:
    st.session_state['palette'] = generate_palette(target_ratio, n_colors, rng=rng)
    st.session_state['locked'] = set()
elif regenerate:
    st.session_state['palette'] = regenerate_palette(palette, st.session_state['locked'], rng=rng)
    st.session_state['locked'] = set()

palette = st.session_state['palette']

if lookup_names:
    palette, naming = name_palette(palette)
    if naming.enriched:
        st.session_state['palette'] = palette
    else:
        st.caption(f"Colour names unavailable ({naming.reason})")


def swatch_html(color, height=220):
    label = color.name or ''
    return f"""
    <div style="
        background-color: {color.hex};
        border: 2px solid #333;
        border-radius: 8px;
        padding: 12px;
        text-align: center;
        color: {color.ink_color};
        font-family: monospace;
        min-height: {height}px;
        display: flex;
        flex-direction: column;
        justify-content: space-between;
    ">
        <div style="font-size: 11px; font-style: italic; font-family: sans-serif;">{label}</div>
        <div>
            <div style="font-size: 14px; font-weight: bold;">{color.hex}</div>
            <div style="font-size: 10px;">L = {color.luminance:.3f}</div>
        </div>
    </div>
    """


with col2:
    st.subheader("Palette")
    cols = st.columns(len(palette.colors))
    for idx, (col, color) in enumerate(zip(cols, palette.colors)):
        with col:
            st.markdown(swatch_html(color), unsafe_allow_html=True)

            locked = st.checkbox('Lock', value=idx in st.session_state['locked'], key=f'lock_{idx}_{color.hex}')
            if locked:
                st.session_state['locked'].add(idx)
            else:
                st.session_state['locked'].discard(idx)

            edited = st.text_input('Hex', value=color.hex, key=f'hex_{idx}_{color.hex}')
            if edited.strip().upper() != color.hex:
                # Editing a colour keeps it and rebuilds the others around it
                try:
                    kept = [Color.from_hex(edited.strip())] + [
                        c for i, c in enumerate(palette.colors)
                        if i != idx and i in st.session_state['locked']
                    ]
                    st.session_state['palette'] = generate_palette(
                        target_ratio, n_colors, *kept, rng=rng
                    )
                    st.session_state['locked'] = set()
                    st.rerun()
                except PaletteError as e:
                    st.error(str(e))

    st.subheader("Contrast colours")
    contrast_cols = st.columns(max(len(palette.contrasts), 1))
    for col, contrast in zip(contrast_cols, palette.contrasts):
        with col:
            st.markdown(swatch_html(contrast, height=80), unsafe_allow_html=True)

    band = palette.unachievable_luminance_range
    if band.is_empty:
        st.caption("Every luminance can reach the target ratio against black or white.")
    else:
        st.caption(f"Luminances between {band.min:.3f} and {band.max:.3f} are avoided.")

    st.subheader("Color Details")
    color_data = []
    for color in palette.colors:
        color_data.append({
            "Hex": color.hex,
            "Name": color.name or "",
            "Luminance": f"{color.luminance:.4f}",
            "Ink": color.ink_color,
            "Best contrast": f"{max((color.contrast_with(c) for c in palette.contrasts), default=0):.2f}:1",
        })
    st.dataframe(color_data, width="stretch")
