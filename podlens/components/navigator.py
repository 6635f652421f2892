"""Navigator: a filtered, cursor-addressed list over one of four collections.

The navigator owns only its cursor, filter text and the collections it is
handed; it never loads anything itself. Enter, back and mode switches are
decided by the root controller, which reads the ``selected_*`` accessors.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from podlens.constants.enums import NavigatorMode, ResourceType
from podlens.constants.limits import (
    NAVIGATOR_FALLBACK_ROWS,
    NAVIGATOR_MIN_ROWS,
    NAVIGATOR_RESERVED_ROWS,
    PAGE_SIZE,
)
from podlens.constants.values import (
    STATUS_STYLES,
    STYLE_MUTED,
    STYLE_SELECTED,
    STYLE_TITLE,
    STYLE_WARNING,
)
from podlens.keyboard import DEFAULT_KEYMAP, KeyMap
from podlens.models.core import PodInfo, WorkloadInfo

_MODE_HEADERS = {
    NavigatorMode.PODS: "● PODS",
    NavigatorMode.NAMESPACE_SELECT: "◉ SELECT NAMESPACE",
    NavigatorMode.RESOURCE_TYPE_SELECT: "◆ SELECT RESOURCE TYPE",
}


class Navigator:
    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.mode = NavigatorMode.WORKLOADS
        self.workloads: list[WorkloadInfo] = []
        self.pods: list[PodInfo] = []
        self.namespaces: list[str] = []
        self.resource_types: list[ResourceType] = list(ResourceType)
        self.current_namespace = ""
        self.current_resource_type = ResourceType.DEPLOYMENTS
        self.cursor = 0
        self.query = ""
        self.searching = False
        self.width = 80
        self.height = 24

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def set_mode(self, mode: NavigatorMode) -> None:
        """Switch collection; cursor and filter never survive a switch."""
        self.mode = mode
        self.cursor = 0
        self.query = ""
        self.searching = False

    def set_workloads(self, workloads: list[WorkloadInfo]) -> None:
        self.workloads = list(workloads)
        if self.mode is NavigatorMode.WORKLOADS:
            self._clamp_cursor()

    def set_pods(self, pods: list[PodInfo]) -> None:
        self.pods = list(pods)
        self.cursor = 0

    def set_namespaces(self, namespaces: list[str]) -> None:
        self.namespaces = list(namespaces)
        if self.mode is NavigatorMode.NAMESPACE_SELECT:
            self._clamp_cursor()

    def set_context(self, namespace: str, resource_type: ResourceType) -> None:
        self.current_namespace = namespace
        self.current_resource_type = resource_type

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    # ------------------------------------------------------------------
    # Filtering and selection
    # ------------------------------------------------------------------

    def _matches(self, *fields: str) -> bool:
        needle = self.query.lower()
        return not needle or any(needle in field.lower() for field in fields)

    def filtered_workloads(self) -> list[WorkloadInfo]:
        return [w for w in self.workloads if self._matches(w.name, w.status)]

    def filtered_pods(self) -> list[PodInfo]:
        return [p for p in self.pods if self._matches(p.name, p.status, p.node)]

    def filtered_namespaces(self) -> list[str]:
        return [ns for ns in self.namespaces if self._matches(ns)]

    def filtered_resource_types(self) -> list[ResourceType]:
        # Resource types are a fixed enumeration and are never filtered.
        return self.resource_types

    def filtered_count(self) -> int:
        if self.mode is NavigatorMode.WORKLOADS:
            return len(self.filtered_workloads())
        if self.mode is NavigatorMode.PODS:
            return len(self.filtered_pods())
        if self.mode is NavigatorMode.NAMESPACE_SELECT:
            return len(self.filtered_namespaces())
        return len(self.filtered_resource_types())

    @staticmethod
    def _pick(items: list, index: int):
        return items[index] if 0 <= index < len(items) else None

    def selected_workload(self) -> WorkloadInfo | None:
        return self._pick(self.filtered_workloads(), self.cursor)

    def selected_pod(self) -> PodInfo | None:
        return self._pick(self.filtered_pods(), self.cursor)

    def selected_namespace(self) -> str | None:
        return self._pick(self.filtered_namespaces(), self.cursor)

    def selected_resource_type(self) -> ResourceType | None:
        return self._pick(self.filtered_resource_types(), self.cursor)

    # ------------------------------------------------------------------
    # Cursor and search
    # ------------------------------------------------------------------

    def _clamp_cursor(self) -> None:
        self.cursor = min(max(0, self.cursor), max(0, self.filtered_count() - 1))

    def move(self, delta: int) -> None:
        self.cursor += delta
        self._clamp_cursor()

    def start_search(self) -> None:
        if self.mode is NavigatorMode.RESOURCE_TYPE_SELECT:
            return
        self.searching = True

    def close_search(self) -> None:
        """Leave search mode; the typed text stays as the active filter."""
        self.searching = False

    def clear_filter(self) -> None:
        self.query = ""
        self.searching = False
        self._clamp_cursor()

    def _handle_search_key(self, key: str) -> None:
        if key == "backspace":
            self.query = self.query[:-1]
        elif len(key) == 1 and key.isprintable():
            self.query += key
        else:
            return
        self.cursor = 0

    def handle_key(self, key: str) -> None:
        if self.searching:
            self._handle_search_key(key)
            return
        if self._keymap.matches(key, "up"):
            self.move(-1)
        elif self._keymap.matches(key, "down"):
            self.move(1)
        elif self._keymap.matches(key, "page_up"):
            self.move(-PAGE_SIZE)
        elif self._keymap.matches(key, "page_down"):
            self.move(PAGE_SIZE)
        elif self._keymap.matches(key, "home"):
            self.cursor = 0
        elif self._keymap.matches(key, "end"):
            self.cursor = max(0, self.filtered_count() - 1)
        elif self._keymap.matches(key, "search"):
            self.start_search()
        elif self._keymap.matches(key, "clear"):
            self.clear_filter()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def visible_window(total: int, cursor: int, rows: int) -> tuple[int, int]:
        """Return the ``[start, end)`` slice of rows to draw around ``cursor``.

        The window is centred on the cursor and then clamped so it never
        runs past either end of the collection.
        """
        if total <= rows:
            return 0, total
        start = cursor - rows // 2
        start = max(0, min(start, total - rows))
        return start, start + rows

    def visible_rows(self) -> int:
        rows = self.height - NAVIGATOR_RESERVED_ROWS
        return rows if rows >= NAVIGATOR_MIN_ROWS else NAVIGATOR_FALLBACK_ROWS

    def header(self) -> Text:
        if self.mode is NavigatorMode.WORKLOADS:
            title = f"◈ {self.current_resource_type.value.upper()}"
        else:
            title = _MODE_HEADERS[self.mode]
        return Text(title, style=STYLE_TITLE)

    def _search_line(self) -> Text:
        if self.searching:
            return Text(f"/{self.query}▏", style=STYLE_WARNING)
        if self.query:
            return Text(f"filter: {self.query}  (c to clear)", style=STYLE_WARNING)
        return Text("")

    def _table(self) -> Table:
        table = Table(
            box=None,
            expand=True,
            pad_edge=False,
            show_edge=False,
            header_style=STYLE_MUTED,
        )
        return table

    def _status_cell(self, status: str) -> Text:
        return Text(status, style=STATUS_STYLES.get(status, ""))

    def _render_workloads(self, start: int, end: int) -> Table:
        table = self._table()
        for column in ("NAME", "READY", "STATUS", "AGE"):
            table.add_column(column, no_wrap=True, ratio=3 if column == "NAME" else 1)
        for index, workload in enumerate(self.filtered_workloads()[start:end], start):
            table.add_row(
                workload.name,
                workload.ready_display,
                self._status_cell(workload.status),
                workload.age,
                style=STYLE_SELECTED if index == self.cursor else None,
            )
        return table

    def _render_pods(self, start: int, end: int) -> Table:
        table = self._table()
        for column in ("NAME", "READY", "STATUS", "RESTARTS", "NODE", "AGE"):
            table.add_column(column, no_wrap=True, ratio=3 if column == "NAME" else 1)
        for index, pod in enumerate(self.filtered_pods()[start:end], start):
            table.add_row(
                pod.name,
                pod.ready,
                self._status_cell(pod.status),
                str(pod.restarts),
                pod.node or "-",
                pod.age,
                style=STYLE_SELECTED if index == self.cursor else None,
            )
        return table

    def _render_choices(self, choices: list[str], current: str, start: int, end: int) -> Group:
        rows = []
        for index, choice in enumerate(choices[start:end], start):
            marker = "● " if choice == current else "  "
            rows.append(Text(marker + choice, style=STYLE_SELECTED if index == self.cursor else ""))
        return Group(*rows)

    def _empty_text(self) -> Text:
        noun = {
            NavigatorMode.PODS: "pods",
            NavigatorMode.NAMESPACE_SELECT: "namespaces",
            NavigatorMode.RESOURCE_TYPE_SELECT: "resource types",
        }.get(self.mode, "workloads")
        if self.query:
            return Text(f"No {noun} match filter", style=STYLE_MUTED)
        return Text(f"No {noun} found", style=STYLE_MUTED)

    def _scroll_indicator(self, total: int, start: int, end: int) -> Text:
        if end - start < total:
            percent = (self.cursor + 1) * 100 // total
            return Text(f"{self.cursor + 1}/{total} ({percent}%)", style=STYLE_MUTED)
        return Text(f"{total} items", style=STYLE_MUTED)

    def render(self) -> RenderableType:
        total = self.filtered_count()
        start, end = self.visible_window(total, self.cursor, self.visible_rows())

        if total == 0:
            body: RenderableType = self._empty_text()
        elif self.mode is NavigatorMode.WORKLOADS:
            body = self._render_workloads(start, end)
        elif self.mode is NavigatorMode.PODS:
            body = self._render_pods(start, end)
        elif self.mode is NavigatorMode.NAMESPACE_SELECT:
            body = self._render_choices(
                self.filtered_namespaces(), self.current_namespace, start, end
            )
        else:
            body = self._render_choices(
                [rt.value for rt in self.filtered_resource_types()],
                self.current_resource_type.value,
                start,
                end,
            )

        return Group(
            self.header(),
            self._search_line(),
            body,
            Text(""),
            self._scroll_indicator(total, start, end),
        )
