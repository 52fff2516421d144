"""Django app that serves themes and exposes display helpers to templates."""
