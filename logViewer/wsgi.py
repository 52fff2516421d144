"""WSGI config for logViewer.

Exposes the WSGI callable as `application` for serving the theme stylesheets
and preference endpoints.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "logViewer.settings")

application = get_wsgi_application()

