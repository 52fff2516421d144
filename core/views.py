"""Views for theme stylesheets and theme selection."""

from __future__ import annotations

import logging

from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from core.preferences import active_theme, set_theme_cookie
from core.redirects import redirect_back
from core.themes import THEMES, UnknownThemeError, get_theme, render_theme_css

logger = logging.getLogger(__name__)

CSS_CONTENT_TYPE = "text/css; charset=utf-8"


@require_GET
def theme_stylesheet(request: HttpRequest) -> HttpResponse:
    """Serve every theme variant plus the shared scrollbar rules."""

    return HttpResponse(render_theme_css(), content_type=CSS_CONTENT_TYPE)


@require_GET
def theme_variant_stylesheet(request: HttpRequest, name: str) -> HttpResponse:
    """Serve a single theme variant plus the shared scrollbar rules.

    Args:
        request: Incoming request.
        name: Theme name from the URL.

    Returns:
        A `text/css` response.

    Raises:
        Http404: When `name` is not a known theme.
    """

    try:
        theme = get_theme(name)
    except UnknownThemeError as exc:
        logger.warning("Stylesheet requested for unknown theme %r.", exc.name)
        raise Http404(str(exc)) from exc
    return HttpResponse(render_theme_css((theme,)), content_type=CSS_CONTENT_TYPE)


@require_GET
def theme_list(request: HttpRequest) -> JsonResponse:
    """Return the theme menu and the currently active theme as JSON."""

    return JsonResponse(
        {
            "active": active_theme(request).name,
            "themes": [
                {
                    "name": theme.name,
                    "label": theme.label,
                    "stylesheet": reverse("core:theme_variant_stylesheet", args=[theme.name]),
                }
                for theme in THEMES.values()
            ],
        }
    )


@require_POST
def select_theme(request: HttpRequest) -> HttpResponse:
    """Store the posted theme choice in a cookie and redirect back.

    Unknown theme names leave the current choice untouched.
    """

    response = redirect_back(request, fallback=reverse("core:theme_list"))
    name = (request.POST.get("theme") or "").strip()
    try:
        theme = get_theme(name)
    except UnknownThemeError:
        logger.warning("Ignoring selection of unknown theme %r.", name)
        return response
    set_theme_cookie(response, theme=theme)
    return response
