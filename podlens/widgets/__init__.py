"""Textual widgets used by the app shell."""

from podlens.widgets.content_view import ContentView

__all__ = ["ContentView"]
