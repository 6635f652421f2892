"""Single-line bars shown under the content area."""

from __future__ import annotations

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from podlens.constants.values import STYLE_MUTED, STYLE_SUBTITLE, STYLE_TITLE


class StatusBar:
    """Cluster context summary on the left, global hints on the right."""

    def __init__(self) -> None:
        self.context = ""
        self.namespace = ""
        self.resource_type = ""

    def set_context(self, context: str, namespace: str, resource_type: str) -> None:
        self.context = context
        self.namespace = namespace
        self.resource_type = resource_type

    def summary(self) -> str:
        return f"ctx:{self.context or '-'} | ns:{self.namespace} | res:{self.resource_type}"

    def render(self) -> RenderableType:
        grid = Table.grid(expand=True)
        grid.add_column(ratio=1, no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)
        grid.add_row(
            Text(self.summary(), style=STYLE_SUBTITLE),
            Text("? help | q quit", style=STYLE_MUTED),
        )
        return grid


class Breadcrumb:
    separator = " > "

    def __init__(self) -> None:
        self.items: list[str] = []

    def set_items(self, items: list[str]) -> None:
        self.items = [item for item in items if item]

    def __str__(self) -> str:
        return self.separator.join(self.items)

    def render(self) -> RenderableType:
        text = Text(no_wrap=True, overflow="ellipsis")
        for index, item in enumerate(self.items):
            if index:
                text.append(self.separator, style=STYLE_MUTED)
            last = index == len(self.items) - 1
            text.append(item, style=STYLE_TITLE if last else STYLE_SUBTITLE)
        return text
