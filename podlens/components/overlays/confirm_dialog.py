"""Yes/No confirmation overlay guarding destructive actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from podlens.constants.enums import ConfirmAction
from podlens.constants.values import STYLE_ERROR, STYLE_MUTED, STYLE_SELECTED


@dataclass(slots=True)
class ConfirmResult:
    confirmed: bool
    action: ConfirmAction
    payload: Any = None


class ConfirmDialog:
    """Modal question carrying an action kind and an opaque payload.

    ``y`` confirms and ``n``/``escape`` cancel directly; ``enter`` activates the
    highlighted button, which starts on "Yes".
    """

    def __init__(self) -> None:
        self.title = ""
        self.message = ""
        self.action: ConfirmAction | None = None
        self.payload: Any = None
        self.yes_selected = True
        self.visible = False

    def show(self, title: str, message: str, action: ConfirmAction, payload: Any = None) -> None:
        self.title = title
        self.message = message
        self.action = action
        self.payload = payload
        self.yes_selected = True
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def _finish(self, confirmed: bool) -> ConfirmResult | None:
        if self.action is None:
            self.hide()
            return None
        result = ConfirmResult(confirmed=confirmed, action=self.action, payload=self.payload)
        self.hide()
        self.action = None
        self.payload = None
        return result

    def handle_key(self, key: str) -> ConfirmResult | None:
        if not self.visible:
            return None
        if key in ("y", "Y"):
            return self._finish(True)
        if key in ("n", "N", "escape", "q"):
            return self._finish(False)
        if key == "enter":
            return self._finish(self.yes_selected)
        if key in ("left", "right", "h", "l", "tab", "shift+tab"):
            self.yes_selected = not self.yes_selected
        return None

    def render(self) -> RenderableType:
        yes = Text(" Yes ", style=STYLE_SELECTED if self.yes_selected else "")
        no = Text(" No ", style="" if self.yes_selected else STYLE_SELECTED)
        buttons = Text.assemble(yes, "    ", no)
        return Panel(
            Group(
                Text(self.message),
                Text(""),
                Align.center(buttons),
                Text(""),
                Text("y confirm • n/esc cancel • ←/→ choose • enter select", style=STYLE_MUTED),
            ),
            title=Text(self.title, style=STYLE_ERROR),
            border_style="#f7768e",
            expand=False,
            padding=(1, 3),
        )
