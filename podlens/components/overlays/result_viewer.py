"""Scrollable overlay for arbitrary text such as ``kubectl describe`` output."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from podlens.constants.values import STYLE_BORDER_ACTIVE, STYLE_MUTED, STYLE_TITLE
from podlens.keyboard import DEFAULT_KEYMAP, KeyMap


class ResultViewer:
    """Holds its own scroll offset, independent of the dashboard panels."""

    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.title = ""
        self.lines: list[str] = []
        self.offset = 0
        self.visible = False
        self.width = 80
        self.height = 24

    def show(self, title: str, content: str, width: int, height: int) -> None:
        self.title = title
        self.lines = content.rstrip("\n").splitlines()
        self.offset = 0
        self.set_size(width, height)
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def set_size(self, width: int, height: int) -> None:
        self.width = max(20, width)
        self.height = max(8, height)

    @property
    def page_size(self) -> int:
        # Border, padding and footer rows.
        return max(1, self.height - 6)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.page_size)

    def handle_key(self, key: str) -> None:
        if not self.visible:
            return
        if key in ("escape", "q"):
            self.hide()
        elif self._keymap.matches(key, "up"):
            self.offset = max(0, self.offset - 1)
        elif self._keymap.matches(key, "down"):
            self.offset = min(self.max_offset, self.offset + 1)
        elif self._keymap.matches(key, "page_up"):
            self.offset = max(0, self.offset - self.page_size)
        elif self._keymap.matches(key, "page_down"):
            self.offset = min(self.max_offset, self.offset + self.page_size)
        elif self._keymap.matches(key, "home"):
            self.offset = 0
        elif self._keymap.matches(key, "end"):
            self.offset = self.max_offset

    def render(self) -> RenderableType:
        visible = self.lines[self.offset : self.offset + self.page_size]
        total = len(self.lines)
        position = f"{min(self.offset + len(visible), total)}/{total}"
        return Panel(
            Group(
                Text("\n".join(visible), no_wrap=True, overflow="ellipsis"),
                Text(""),
                Text(f"j/k scroll • g/G top/bottom • q/esc close  [{position}]", style=STYLE_MUTED),
            ),
            title=Text(self.title, style=STYLE_TITLE),
            border_style=STYLE_BORDER_ACTIVE,
            width=self.width,
        )
