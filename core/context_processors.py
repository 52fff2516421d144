"""Template context processors for logViewer."""

from __future__ import annotations

from django.http import HttpRequest

from core.preferences import active_theme
from core.themes import THEMES, Theme


def theme(request: HttpRequest) -> dict[str, object]:
    """Expose the active theme and the theme menu to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `theme` (the active Theme) and `themes` (every Theme
        in menu order).
    """

    themes: tuple[Theme, ...] = tuple(THEMES.values())
    return {"theme": active_theme(request), "themes": themes}
