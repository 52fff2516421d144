"""Unit tests for the accent theme table and CSS rendering."""

from __future__ import annotations

import re

import pytest

from core.themes import (
    DEFAULT_THEME,
    SCROLLBAR_CSS,
    THEMES,
    Theme,
    UnknownThemeError,
    get_theme,
    render_theme_css,
    theme_css_variables,
)

pytestmark = pytest.mark.unit

_HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


def test_theme_table_is_keyed_by_theme_name() -> None:
    """Every entry is stored under its own name and the default exists."""

    assert DEFAULT_THEME in THEMES
    for name, theme in THEMES.items():
        assert theme.name == name
        assert theme.label


def test_every_theme_defines_every_token() -> None:
    """Variants are flat records: each one sets the full token set."""

    token_sets = {tuple(theme_css_variables(theme)) for theme in THEMES.values()}
    assert len(token_sets) == 1
    for theme in THEMES.values():
        for prop, value in theme_css_variables(theme).items():
            if prop == "--scrollbar-track":
                assert value == "transparent"
            else:
                assert _HEX_COLOR.match(value), (theme.name, prop, value)


def test_accent_themes_derive_scrollbar_from_accent_shades() -> None:
    """Accent variants tint the scrollbar thumb with their own accent."""

    violet = get_theme("violet")
    assert violet.scrollbar_thumb == violet.accent_800
    assert violet.scrollbar_thumb_hover == violet.accent_500


def test_get_theme_rejects_unknown_names() -> None:
    """Unknown names raise a KeyError subclass that keeps the requested name."""

    with pytest.raises(UnknownThemeError) as excinfo:
        get_theme("chartreuse")
    assert excinfo.value.name == "chartreuse"
    assert isinstance(excinfo.value, KeyError)


def test_unknown_theme_error_message_is_not_quoted() -> None:
    """The message reads as plain text, not as a quoted KeyError repr."""

    message = str(UnknownThemeError(name="chartreuse"))
    assert message.startswith("Unknown theme 'chartreuse';")
    assert message.endswith(".")


def test_render_theme_css_emits_one_rule_per_variant_and_scrollbar_rules() -> None:
    """The full stylesheet has every variant followed by the scrollbar block."""

    css = render_theme_css()
    for name in THEMES:
        assert f".theme-{name} {{" in css
    assert css.endswith(SCROLLBAR_CSS)
    assert css.count("--accent-500:") == len(THEMES)


def test_render_theme_css_for_single_variant() -> None:
    """Rendering a subset only includes the requested variant."""

    theme = Theme(
        name="test",
        label="Test",
        accent_900="#000001",
        accent_800="#000002",
        accent_500="#000003",
        accent_300="#000004",
        scrollbar_thumb="#000005",
        scrollbar_thumb_hover="#000006",
    )
    css = render_theme_css((theme,))
    assert css.startswith(
        ".theme-test {\n"
        "  --accent-900: #000001;\n"
        "  --accent-800: #000002;\n"
        "  --accent-500: #000003;\n"
        "  --accent-300: #000004;\n"
        "  --scrollbar-thumb: #000005;\n"
        "  --scrollbar-thumb-hover: #000006;\n"
        "  --scrollbar-track: transparent;\n"
        "}\n"
    )
    assert ".theme-violet" not in css
    assert "var(--scrollbar-thumb)" in css
