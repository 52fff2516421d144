"""Accent themes and scrollbar styling for the log viewer UI.

A theme is a flat record of color tokens. Each variant is rendered as a
`.theme-<name>` rule that sets CSS custom properties; the scrollbar rules are
shared across variants and only read those properties. Variants never inherit
from one another.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final


class UnknownThemeError(KeyError):
    """Raised when a theme name is not in the theme table."""

    def __init__(self, *, name: str) -> None:
        """Initialize the error.

        Args:
            name: The requested theme name.
        """

        self.message = f"Unknown theme {name!r}; expected one of {sorted(THEMES)}."
        super().__init__(self.message)
        self.name = name

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""

        return self.message


@dataclass(frozen=True, slots=True)
class Theme:
    """A named set of accent and scrollbar color tokens.

    Args:
        name: Stable key used in class names and URLs.
        label: Human-readable label for settings menus.
        accent_900: Darkest accent shade (panel headers).
        accent_800: Dark accent shade (selected rows, meter bars).
        accent_500: Base accent shade (buttons, links).
        accent_300: Light accent shade (hover text, highlights).
        scrollbar_thumb: Scrollbar thumb color.
        scrollbar_thumb_hover: Scrollbar thumb color while hovered.
        scrollbar_track: Scrollbar track color.
    """

    name: str
    label: str
    accent_900: str
    accent_800: str
    accent_500: str
    accent_300: str
    scrollbar_thumb: str
    scrollbar_thumb_hover: str
    scrollbar_track: str = "transparent"


def _accent_theme(name: str, label: str, shades: tuple[str, str, str, str]) -> Theme:
    """Build a theme whose scrollbar follows its accent shades."""

    accent_900, accent_800, accent_500, accent_300 = shades
    return Theme(
        name=name,
        label=label,
        accent_900=accent_900,
        accent_800=accent_800,
        accent_500=accent_500,
        accent_300=accent_300,
        scrollbar_thumb=accent_800,
        scrollbar_thumb_hover=accent_500,
    )


THEMES: Final[Mapping[str, Theme]] = {
    theme.name: theme
    for theme in (
        _accent_theme("violet", "Violet", ("#4c1d95", "#5b21b6", "#8b5cf6", "#c4b5fd")),
        _accent_theme("red", "Red", ("#7f1d1d", "#991b1b", "#ef4444", "#fca5a5")),
        _accent_theme("pink", "Pink", ("#831843", "#9d174d", "#ec4899", "#f9a8d4")),
        _accent_theme("rose", "Rose", ("#881337", "#9f1239", "#f43f5e", "#fda4af")),
        _accent_theme("orange", "Orange", ("#7c2d12", "#9a3412", "#f97316", "#fdba74")),
        _accent_theme("yellow", "Yellow", ("#713f12", "#854d0e", "#eab308", "#fde047")),
        _accent_theme("emerald", "Emerald", ("#064e3b", "#065f46", "#10b981", "#6ee7b7")),
        _accent_theme("sky", "Sky", ("#0c4a6e", "#075985", "#0ea5e9", "#7dd3fc")),
        _accent_theme("blue", "Blue", ("#1e3a8a", "#1e40af", "#3b82f6", "#93c5fd")),
        Theme(
            name="gray",
            label="Gray",
            accent_900="#18181b",
            accent_800="#27272a",
            accent_500="#71717a",
            accent_300="#d4d4d8",
            scrollbar_thumb="#3f3f46",
            scrollbar_thumb_hover="#52525b",
        ),
    )
}

DEFAULT_THEME: Final[str] = "violet"

SCROLLBAR_CSS: Final[str] = """\
::-webkit-scrollbar {
  width: 8px;
  height: 8px;
}
::-webkit-scrollbar-track {
  background: var(--scrollbar-track);
}
::-webkit-scrollbar-thumb {
  background: var(--scrollbar-thumb);
  border-radius: 4px;
}
::-webkit-scrollbar-thumb:hover {
  background: var(--scrollbar-thumb-hover);
}
::-webkit-scrollbar-corner {
  background: transparent;
}
* {
  scrollbar-width: thin;
  scrollbar-color: var(--scrollbar-thumb) var(--scrollbar-track);
}
"""


def get_theme(name: str) -> Theme:
    """Look up a theme by name.

    Raises:
        UnknownThemeError: When `name` is not a known theme.
    """

    try:
        return THEMES[name]
    except KeyError:
        raise UnknownThemeError(name=name) from None


def theme_css_variables(theme: Theme) -> dict[str, str]:
    """Return the CSS custom properties a theme sets, in declaration order."""

    return {
        "--accent-900": theme.accent_900,
        "--accent-800": theme.accent_800,
        "--accent-500": theme.accent_500,
        "--accent-300": theme.accent_300,
        "--scrollbar-thumb": theme.scrollbar_thumb,
        "--scrollbar-thumb-hover": theme.scrollbar_thumb_hover,
        "--scrollbar-track": theme.scrollbar_track,
    }


def _theme_rule(theme: Theme) -> str:
    """Render a single `.theme-<name>` rule."""

    declarations = "".join(f"  {prop}: {value};\n" for prop, value in theme_css_variables(theme).items())
    return f".theme-{theme.name} {{\n{declarations}}}\n"


def render_theme_css(themes: Iterable[Theme] | None = None) -> str:
    """Render theme variant rules followed by the shared scrollbar rules.

    Args:
        themes: Themes to include. Defaults to every theme in `THEMES`.

    Returns:
        A complete stylesheet.
    """

    selected = tuple(THEMES.values()) if themes is None else tuple(themes)
    rules = [_theme_rule(theme) for theme in selected]
    rules.append(SCROLLBAR_CSS)
    return "\n".join(rules)
