"""Shared scrolling behaviour for dashboard content panels."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.text import Text

from podlens.keyboard import DEFAULT_KEYMAP, KeyMap


class BasePanel:
    """A panel renders a list of lines and scrolls through them by offset.

    Subclasses build ``lines()`` and may override ``handle_key`` to add their
    own keys before delegating scrolling here.
    """

    title = ""

    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.offset = 0
        self.height = 10

    def header(self) -> Text:
        return Text(self.title, style="bold")

    def lines(self) -> list[Text]:
        raise NotImplementedError

    @property
    def body_height(self) -> int:
        return max(1, self.height - 1)

    def max_offset(self) -> int:
        return max(0, len(self.lines()) - self.body_height)

    def scroll_to_top(self) -> None:
        self.offset = 0

    def scroll_to_bottom(self) -> None:
        self.offset = self.max_offset()

    def scroll(self, delta: int) -> None:
        self.offset = min(self.max_offset(), max(0, self.offset + delta))

    def handle_key(self, key: str) -> None:
        if self._keymap.matches(key, "up"):
            self.scroll(-1)
        elif self._keymap.matches(key, "down"):
            self.scroll(1)
        elif self._keymap.matches(key, "page_up"):
            self.scroll(-self.body_height)
        elif self._keymap.matches(key, "page_down"):
            self.scroll(self.body_height)
        elif self._keymap.matches(key, "home"):
            self.scroll_to_top()
        elif self._keymap.matches(key, "end"):
            self.scroll_to_bottom()

    def render(self, height: int | None = None) -> RenderableType:
        if height is not None:
            self.height = max(2, height)
        self.offset = min(self.offset, self.max_offset())
        window = self.lines()[self.offset : self.offset + self.body_height]
        return Group(self.header(), *window)
