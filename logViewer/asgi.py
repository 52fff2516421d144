"""ASGI config for logViewer.

Exposes the ASGI callable as `application` for serving the theme stylesheets
and preference endpoints.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "logViewer.settings")

application = get_asgi_application()

