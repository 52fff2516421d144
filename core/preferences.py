"""Per-browser display preferences.

Preferences live in plain cookies; nothing is persisted server-side.
"""

from __future__ import annotations

from typing import Final

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from core.themes import THEMES, Theme, get_theme

THEME_COOKIE_NAME: Final[str] = "theme"
THEME_COOKIE_MAX_AGE: Final[int] = 365 * 24 * 60 * 60


def active_theme(request: HttpRequest) -> Theme:
    """Return the theme selected by the browser, or the configured default.

    Unknown cookie values fall back to `settings.DEFAULT_THEME`.
    """

    name = request.COOKIES.get(THEME_COOKIE_NAME, "")
    if name in THEMES:
        return THEMES[name]
    return get_theme(settings.DEFAULT_THEME)


def set_theme_cookie(response: HttpResponse, *, theme: Theme) -> None:
    """Persist a theme choice on the client.

    Args:
        response: Outgoing response to attach the cookie to.
        theme: Selected theme.
    """

    response.set_cookie(
        THEME_COOKIE_NAME,
        theme.name,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="Lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
