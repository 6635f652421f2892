"""Events panel: events involving the pod, optionally warnings only."""

from __future__ import annotations

from rich.text import Text

from podlens.components.panels.base_panel import BasePanel
from podlens.constants.values import STYLE_ERROR, STYLE_MUTED, STYLE_SELECTED, STYLE_WARNING
from podlens.models.core import EventInfo


class EventsPanel(BasePanel):
    title = "Events"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.events: list[EventInfo] | None = None
        self.failed = False
        self.warnings_only = False
        self.cursor = 0

    def reset(self) -> None:
        self.events = None
        self.failed = False
        self.cursor = 0
        self.offset = 0

    def set_events(self, events: list[EventInfo] | None) -> None:
        self.failed = events is None
        self.events = list(events or [])
        self.cursor = min(self.cursor, max(0, len(self.visible_events()) - 1))

    def visible_events(self) -> list[EventInfo]:
        events = self.events or []
        if self.warnings_only:
            return [event for event in events if event.is_warning]
        return events

    @property
    def warning_count(self) -> int:
        return sum(1 for event in self.events or [] if event.is_warning)

    def _follow_cursor(self) -> None:
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.body_height:
            self.offset = self.cursor - self.body_height + 1

    def handle_key(self, key: str) -> None:
        last = max(0, len(self.visible_events()) - 1)
        if self._keymap.matches(key, "toggle_warnings"):
            self.warnings_only = not self.warnings_only
            self.cursor = 0
            self.offset = 0
            return
        if self._keymap.matches(key, "up"):
            self.cursor = max(0, self.cursor - 1)
        elif self._keymap.matches(key, "down"):
            self.cursor = min(last, self.cursor + 1)
        elif self._keymap.matches(key, "home"):
            self.cursor = 0
        elif self._keymap.matches(key, "end"):
            self.cursor = last
        else:
            super().handle_key(key)
            return
        self._follow_cursor()

    def header(self) -> Text:
        text = Text("Events", style="bold")
        text.append(" [warnings]" if self.warnings_only else " [all]", style=STYLE_MUTED)
        if self.warning_count:
            text.append(f" {self.warning_count} warnings", style=STYLE_WARNING)
        return text

    def lines(self) -> list[Text]:
        if self.events is None:
            return [Text("Loading events...", style=STYLE_MUTED)]
        if self.failed:
            return [Text("(failed to load events)", style=STYLE_ERROR)]
        events = self.visible_events()
        if not events:
            return [Text("No events found", style=STYLE_MUTED)]
        rows = []
        for index, event in enumerate(events):
            row = Text(no_wrap=True, overflow="ellipsis")
            row.append(f"{event.age:>5} ", style=STYLE_MUTED)
            row.append(event.reason, style=STYLE_WARNING if event.is_warning else "bold")
            if event.count > 1:
                row.append(f" (x{event.count})", style=STYLE_MUTED)
            row.append(f": {event.message}")
            if index == self.cursor:
                row.stylize(STYLE_SELECTED)
            rows.append(row)
        return rows
