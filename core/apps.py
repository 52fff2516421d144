"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (themes, stylesheets, template filters)."""

    name = "core"
    verbose_name = "Log viewer presentation"
