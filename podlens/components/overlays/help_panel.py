"""Key reference overlay built from the key binding table."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podlens.constants.values import STYLE_BORDER_ACTIVE, STYLE_MUTED, STYLE_SUBTITLE, STYLE_TITLE
from podlens.keyboard import DEFAULT_KEYMAP, HELP_SECTIONS, SHORT_HELP_ACTIONS, KeyMap


class HelpPanel:
    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.visible = False

    def toggle(self) -> None:
        self.visible = not self.visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def handle_key(self, key: str) -> None:
        """Close on ``?`` or escape; every other key is swallowed."""
        if key in ("?", "escape"):
            self.hide()

    def short_help(self) -> Text:
        text = Text()
        for index, action in enumerate(SHORT_HELP_ACTIONS):
            if index:
                text.append(" • ", style=STYLE_MUTED)
            text.append(self._keymap.label(action), style=STYLE_SUBTITLE)
            text.append(f" {self._keymap.description(action)}", style=STYLE_MUTED)
        return text

    def render(self) -> RenderableType:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="right", style=STYLE_SUBTITLE, no_wrap=True)
        grid.add_column()
        for title, actions in HELP_SECTIONS:
            grid.add_row(Text(title, style=STYLE_TITLE), "")
            for action in actions:
                grid.add_row(self._keymap.label(action), self._keymap.description(action))
            grid.add_row("", "")
        grid.add_row("", Text("Press ? or esc to close", style=STYLE_MUTED))
        return Panel(
            grid,
            title=Text("Keyboard Shortcuts", style=STYLE_TITLE),
            border_style=STYLE_BORDER_ACTIVE,
            expand=False,
            padding=(1, 2),
        )
