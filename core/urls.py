"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("theme.css", views.theme_stylesheet, name="theme_stylesheet"),
    path("theme/<slug:name>.css", views.theme_variant_stylesheet, name="theme_variant_stylesheet"),
    path("themes/", views.theme_list, name="theme_list"),
    path("themes/select/", views.select_theme, name="select_theme"),
]
