"""Redirect-back helpers for form posts.

Preference forms post back to whatever page they were rendered on. The target
comes from user-controlled input (`next` or the referer header), so every
candidate is validated with Django's `url_has_allowed_host_and_scheme`.
"""

from __future__ import annotations

from collections.abc import Iterable

from django.conf import settings
from django.core.exceptions import DisallowedHost
from django.http import HttpRequest, HttpResponseRedirect
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme


def is_safe_target(request: HttpRequest, url: str) -> bool:
    """Return True when `url` stays on an allowed host and scheme."""

    allowed_hosts = set(settings.ALLOWED_HOSTS)
    try:
        allowed_hosts.add(request.get_host())
    except DisallowedHost:
        pass
    return url_has_allowed_host_and_scheme(
        url=url,
        allowed_hosts=allowed_hosts,
        require_https=request.is_secure(),
    )


def safe_redirect(
    request: HttpRequest,
    *,
    candidates: Iterable[str | None],
    fallback: str,
) -> HttpResponseRedirect:
    """Redirect to the first safe URL from a candidate list.

    Args:
        request: Incoming request used for host + scheme validation.
        candidates: Candidate redirect URLs; blanks and unsafe values are skipped.
        fallback: Safe default URL to use when no candidates are safe.

    Returns:
        An HttpResponseRedirect to a safe URL.
    """

    for candidate in candidates:
        value = (candidate or "").strip()
        if value and is_safe_target(request, value):
            return redirect(value)
    return redirect(fallback)


def redirect_back(request: HttpRequest, *, fallback: str) -> HttpResponseRedirect:
    """Redirect to the posted `next` value or the referer, whichever is safe first."""

    return safe_redirect(
        request,
        candidates=[request.POST.get("next"), request.META.get("HTTP_REFERER")],
        fallback=fallback,
    )
