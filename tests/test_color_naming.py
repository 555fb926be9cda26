"""Tests for best-effort colour naming; the HTTP session is mocked."""

from unittest import mock

import pytest
import requests

from color import Color
from color_naming import NamingResult, name_colors, name_palette
from color_palette_generator import generate_palette


def _session_returning(payload=None, exc=None, status_error=None):
    response = mock.Mock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = mock.Mock()
    if exc is not None:
        session.get.side_effect = exc
    else:
        session.get.return_value = response
    return session


def test_names_and_ink_are_applied():
    colors = [Color.from_hex("#979AC4"), Color.from_hex("#000000")]
    session = _session_returning({"colors": [
        {"name": "Blue Bell", "bestContrast": "white"},
        {"name": "Black", "bestContrast": "white"},
    ]})

    result = name_colors(colors, session=session, url="https://names.test/v1/")

    assert result.enriched
    assert result.reason is None
    assert [c.name for c in result.colors] == ["Blue Bell", "Black"]
    assert result.colors[0].ink_color == "white"
    assert result.colors[0].rgb == colors[0].rgb
    session.get.assert_called_once_with(
        "https://names.test/v1/", params={"values": "979AC4,000000"}, timeout=mock.ANY
    )


def test_unknown_best_contrast_keeps_computed_ink():
    color = Color.from_hex("#FFFFFF")
    session = _session_returning({"colors": [{"name": "White", "bestContrast": "grey"}]})
    result = name_colors([color], session=session)
    assert result.colors[0].ink_color == "black"


@pytest.mark.parametrize("session, fragment", [
    (_session_returning(exc=requests.ConnectionError("down")), "unreachable"),
    (_session_returning(status_error=requests.HTTPError("500")), "unreachable"),
    (_session_returning({"colors": []}), "unexpected"),
    (_session_returning({"unexpected": True}), "unexpected"),
    (_session_returning({"colors": [{"hex": "#FFFFFF"}]}), "unexpected"),
])
def test_failures_leave_colors_untouched(session, fragment, caplog):
    colors = (Color.from_hex("#FFFFFF"),)
    result = name_colors(colors, session=session)
    assert isinstance(result, NamingResult)
    assert not result.enriched
    assert fragment in result.reason
    assert result.colors == colors
    assert result.colors[0].name is None
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_no_colors_means_no_request():
    session = mock.Mock()
    result = name_colors([], session=session)
    assert result.enriched
    session.get.assert_not_called()


def test_name_palette_names_colors_and_contrasts(rng):
    palette = generate_palette(4.5, 3, rng=rng)
    total = len(palette.colors) + len(palette.contrasts)
    session = _session_returning({"colors": [
        {"name": f"Name {i}", "bestContrast": "black"} for i in range(total)
    ]})

    named, result = name_palette(palette, session=session)

    assert result.enriched
    assert [c.name for c in named.colors + named.contrasts] == [f"Name {i}" for i in range(total)]
    assert [c.hex for c in named.colors] == [c.hex for c in palette.colors]
    assert all(c.name is None for c in palette.colors)


def test_name_palette_failure_returns_same_palette(rng):
    palette = generate_palette(4.5, 3, rng=rng)
    session = _session_returning(exc=requests.Timeout("slow"))
    named, result = name_palette(palette, session=session)
    assert named is palette
    assert not result.enriched
