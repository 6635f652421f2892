"""Static region that displays a rich renderable produced by a controller."""

from __future__ import annotations

from rich.console import RenderableType
from textual.widgets import Static


class ContentView(Static):
    """Non-focusable ``Static`` whose content is replaced wholesale on render.

    All input is handled by the app, so the view never takes focus and never
    interprets keys itself.
    """

    can_focus = False

    DEFAULT_CSS = """
    ContentView {
        width: 1fr;
        height: auto;
    }
    """

    def show(self, renderable: RenderableType) -> None:
        self.update(renderable)
