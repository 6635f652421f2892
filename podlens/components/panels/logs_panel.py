"""Logs panel: merged container logs with follow, filter and error jumping."""

from __future__ import annotations

from rich.text import Text

from podlens.components.panels.base_panel import BasePanel
from podlens.constants.defaults import LOG_LINE_LIMIT_DEFAULT
from podlens.constants.values import (
    LOG_JUMP_KEYWORDS,
    STYLE_ERROR,
    STYLE_MUTED,
    STYLE_SUBTITLE,
    STYLE_SUCCESS,
    STYLE_WARNING,
)
from podlens.models.core import LogLine


class LogsPanel(BasePanel):
    title = "Logs"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.logs: list[LogLine] | None = None
        self.failed = False
        self.line_limit = LOG_LINE_LIMIT_DEFAULT
        self.containers: list[str] = []
        self.container = ""
        self.following = True
        self.filter = ""
        self.searching = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def reset(self, containers: list[str]) -> None:
        self.logs = None
        self.failed = False
        self.containers = list(containers)
        self.container = ""
        self.filter = ""
        self.searching = False
        self.following = True
        self.offset = 0

    def set_logs(self, logs: list[LogLine] | None) -> None:
        """Replace the buffer with the newest ``line_limit`` lines.

        ``None`` marks a failed fetch and clears whatever was shown before.
        """
        self.failed = logs is None
        self.logs = list(logs or [])[-self.line_limit :]
        if self.following:
            self.scroll_to_bottom()
        else:
            self.offset = min(self.offset, self.max_offset())

    @property
    def selected_container(self) -> str:
        return self.container

    @property
    def error_count(self) -> int:
        return sum(1 for line in self.logs or [] if line.is_error)

    def filtered_logs(self) -> list[LogLine]:
        lines = self.logs or []
        if self.container:
            lines = [line for line in lines if line.container == self.container]
        if self.filter:
            needle = self.filter.lower()
            lines = [line for line in lines if needle in line.content.lower()]
        return lines

    def toggle_follow(self) -> None:
        self.following = not self.following
        if self.following:
            self.scroll_to_bottom()

    def cycle_container(self) -> None:
        if len(self.containers) < 2:
            return
        choices = ["", *self.containers]
        self.container = choices[(choices.index(self.container) + 1) % len(choices)]
        self.offset = 0
        if self.following:
            self.scroll_to_bottom()

    def jump_to_next_error(self) -> None:
        """Move the top line to the next line mentioning an error, wrapping."""
        logs = self.filtered_logs()
        total = len(logs)
        for step in range(1, total + 1):
            index = (self.offset + step) % total
            content = logs[index].content.lower()
            if any(keyword in content for keyword in LOG_JUMP_KEYWORDS):
                self.following = False
                self.offset = min(index, self.max_offset())
                return

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _handle_search_key(self, key: str) -> None:
        if key == "escape":
            self.filter = ""
            self.searching = False
        elif key == "enter":
            self.searching = False
        elif key == "backspace":
            self.filter = self.filter[:-1]
        elif len(key) == 1 and key.isprintable():
            self.filter += key
        else:
            return
        self.offset = 0

    def handle_key(self, key: str) -> None:
        if self.searching:
            self._handle_search_key(key)
            return
        if self._keymap.matches(key, "toggle_follow"):
            self.toggle_follow()
        elif self._keymap.matches(key, "jump_to_error"):
            self.jump_to_next_error()
        elif self._keymap.matches(key, "search"):
            self.searching = True
        elif self._keymap.matches(key, "cycle_container"):
            self.cycle_container()
        elif self._keymap.matches(key, "clear"):
            self.filter = ""
            self.offset = 0
        else:
            if self._keymap.matches(key, "up") or self._keymap.matches(key, "page_up"):
                self.following = False
            elif self._keymap.matches(key, "home"):
                self.following = False
            super().handle_key(key)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def header(self) -> Text:
        text = Text("Logs", style="bold")
        if self.container:
            text.append(f" [{self.container}]", style=STYLE_SUBTITLE)
        if self.following:
            text.append(" [Following]", style=STYLE_SUCCESS)
        if self.logs is not None and self.error_count:
            text.append(f" {self.error_count} errors", style=STYLE_ERROR)
        if self.searching or self.filter:
            text.append(f"  /{self.filter}", style=STYLE_WARNING)
            if self.searching:
                text.append("▏", style=STYLE_WARNING)
        return text

    def _format_line(self, line: LogLine) -> Text:
        text = Text(no_wrap=True, overflow="ellipsis")
        if line.timestamp is not None:
            text.append(line.timestamp.strftime("%H:%M:%S") + " ", style=STYLE_MUTED)
        if line.container and not self.container and len(self.containers) > 1:
            text.append(f"[{line.container}] ", style=STYLE_SUBTITLE)
        text.append(line.content, style=STYLE_ERROR if line.is_error else "")
        return text

    def lines(self) -> list[Text]:
        if self.logs is None:
            return [Text("Loading logs...", style=STYLE_MUTED)]
        if self.failed:
            return [Text("(failed to load logs)", style=STYLE_ERROR)]
        logs = self.filtered_logs()
        if not logs:
            return [Text("No logs", style=STYLE_MUTED)]
        return [self._format_line(line) for line in logs]
