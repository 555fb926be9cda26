"""
Best-effort colour naming through a remote lookup service.

Lookup failures never invalidate computed colours: they are reported in
a NamingResult and the colours come back unchanged.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

import requests

from color import Color
from palette_config import INK_BLACK, INK_WHITE, NAMING_API_URL, NAMING_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamingResult:
    """Colours after a lookup, and whether the lookup succeeded."""

    colors: Tuple[Color, ...]
    enriched: bool
    reason: Optional[str] = None


def _fetch_entries(hex_codes, session, url, timeout):
    response = session.get(url, params={'values': ','.join(hex_codes)}, timeout=timeout)
    response.raise_for_status()
    entries = response.json()['colors']
    if len(entries) < len(hex_codes):
        raise ValueError(f"expected {len(hex_codes)} colours in response, got {len(entries)}")
    return entries


def _apply_entry(color, entry):
    ink = entry.get('bestContrast')
    if ink not in (INK_BLACK, INK_WHITE):
        ink = color.ink_color
    return replace(color, name=entry['name'], ink_color=ink)


def name_colors(colors, session=None, url=NAMING_API_URL, timeout=NAMING_TIMEOUT):
    """Look up names (and recommended ink colours) for colors in one request."""
    colors = tuple(colors)
    if not colors:
        return NamingResult(colors, enriched=True)

    hex_codes = [c.hex.lstrip('#') for c in colors]
    # requests.get and Session.get share a signature
    session = session if session is not None else requests
    try:
        entries = _fetch_entries(hex_codes, session, url, timeout)
        named = tuple(_apply_entry(c, e) for c, e in zip(colors, entries))
    except (ValueError, KeyError, TypeError) as e:
        reason = f"unexpected naming response: {e}"
    except requests.RequestException as e:
        reason = f"naming service unreachable: {e}"
    else:
        return NamingResult(named, enriched=True)

    logger.warning("Colour naming failed for %s: %s", ','.join(hex_codes), reason)
    return NamingResult(colors, enriched=False, reason=reason)


def name_palette(palette, session=None, url=NAMING_API_URL, timeout=NAMING_TIMEOUT):
    """Name a palette's colours and contrasts, returning (palette, NamingResult)."""
    n_colors = len(palette.colors)
    result = name_colors(palette.colors + palette.contrasts, session, url, timeout)
    if not result.enriched:
        return palette, result
    return palette.with_colors(result.colors[:n_colors], result.colors[n_colors:]), result
