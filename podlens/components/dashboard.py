"""Pod dashboard: four content panels plus the overlay stack.

Keys reach exactly one place: the highest-priority visible overlay when any
is visible, otherwise the dashboard-level bindings, otherwise the focused
panel. Destructive pod actions only become effects after the confirm
dialog reports a positive ``ConfirmResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podlens.components.overlays import (
    ActionMenu,
    ConfirmDialog,
    ConfirmResult,
    HelpPanel,
    MenuItem,
    PodActionMenu,
    ResultViewer,
    kubectl_commands,
    pod_actions,
)
from podlens.components.panels import (
    BasePanel,
    EventsPanel,
    LogsPanel,
    ManifestPanel,
    MetricsPanel,
)
from podlens.constants.enums import ConfirmAction, MenuAction, PanelFocus
from podlens.constants.values import (
    STATUS_STYLES,
    STYLE_BORDER,
    STYLE_BORDER_ACTIVE,
    STYLE_MUTED,
    STYLE_TITLE,
    STYLE_WARNING,
)
from podlens.keyboard import DEFAULT_KEYMAP, KeyMap
from podlens.models.core import PodInfo
from podlens.models.state.effects import (
    CopyToClipboard,
    DeletePod,
    Effect,
    RunBackground,
    RunForeground,
)
from podlens.models.state.messages import (
    BackgroundOutput,
    ClipboardCopied,
    DashboardDataLoaded,
    ForegroundFinished,
    PodDeleted,
)

logger = logging.getLogger(__name__)

_PANEL_KEYS = {
    "panel_1": PanelFocus.LOGS,
    "panel_2": PanelFocus.EVENTS,
    "panel_3": PanelFocus.METRICS,
    "panel_4": PanelFocus.MANIFEST,
}


@dataclass(slots=True)
class PendingAction:
    """A terminal-handoff command waiting for the user's confirmation."""

    action: ConfirmAction
    command: str


class Dashboard:
    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.logs = LogsPanel(keymap)
        self.events = EventsPanel(keymap)
        self.metrics = MetricsPanel(keymap)
        self.manifest = ManifestPanel(keymap)

        self.confirm = ConfirmDialog()
        self.result_viewer = ResultViewer(keymap)
        self.pod_menu = PodActionMenu(keymap)
        self.action_menu = ActionMenu(keymap)
        self.help = HelpPanel(keymap)

        self.pod: PodInfo | None = None
        self.focus = PanelFocus.LOGS
        self.fullscreen = False
        self.pending_action: PendingAction | None = None
        self.status_msg = ""
        self.width = 120
        self.height = 40

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def set_pod(self, pod: PodInfo) -> None:
        self.pod = pod
        self.focus = PanelFocus.LOGS
        self.fullscreen = False
        self.status_msg = ""
        self.logs.reset(pod.container_names)
        self.events.reset()
        self.metrics.reset(pod)
        self.manifest.reset(pod)

    def set_data(self, data: DashboardDataLoaded) -> None:
        """Overwrite every part; a part whose fetch failed shows a placeholder."""
        self.logs.set_logs(data.logs)
        self.events.set_events(data.events)
        self.metrics.set_metrics(data.metrics)
        self.manifest.set_related(data.related)
        self.manifest.set_helpers(data.helpers)

    def clear(self) -> None:
        self.pod = None
        self.pending_action = None
        self.status_msg = ""
        for overlay in (self.confirm, self.result_viewer, self.pod_menu, self.action_menu, self.help):
            overlay.hide()

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.result_viewer.set_size(width - 4, height - 2)

    # ------------------------------------------------------------------
    # Focus and overlays
    # ------------------------------------------------------------------

    def panel(self, focus: PanelFocus | None = None) -> BasePanel:
        return {
            PanelFocus.LOGS: self.logs,
            PanelFocus.EVENTS: self.events,
            PanelFocus.METRICS: self.metrics,
            PanelFocus.MANIFEST: self.manifest,
        }[focus if focus is not None else self.focus]

    def overlays(self) -> list:
        """Overlays in routing priority order, highest first."""
        return [self.confirm, self.result_viewer, self.pod_menu, self.action_menu, self.help]

    def active_overlay(self):
        for overlay in self.overlays():
            if overlay.visible:
                return overlay
        return None

    @property
    def has_active_overlay(self) -> bool:
        return self.active_overlay() is not None

    @property
    def is_capturing_input(self) -> bool:
        return self.has_active_overlay or self.logs.searching

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> list[Effect]:
        self.status_msg = ""
        overlay = self.active_overlay()
        if overlay is self.confirm:
            result = self.confirm.handle_key(key)
            return self._on_confirm(result) if result else []
        if overlay is self.pod_menu:
            picked = self.pod_menu.handle_key(key)
            return self._on_menu_item(picked.item) if picked else []
        if overlay is self.action_menu:
            picked = self.action_menu.handle_key(key)
            return self._on_menu_item(picked.item) if picked else []
        if overlay is not None:
            overlay.handle_key(key)
            return []

        if self.focus is PanelFocus.LOGS and self.logs.searching:
            self.logs.handle_key(key)
            return []

        if self._keymap.matches(key, "help"):
            self.help.toggle()
        elif self._keymap.matches(key, "pod_actions"):
            self._open_pod_menu()
        elif self._keymap.matches(key, "copy_commands"):
            self._open_copy_menu()
        elif self._keymap.matches(key, "toggle_fullscreen"):
            self.toggle_fullscreen()
        elif self._keymap.matches(key, "next_panel"):
            self.focus = self.focus.next()
        elif self._keymap.matches(key, "prev_panel"):
            self.focus = self.focus.previous()
        else:
            for action, focus in _PANEL_KEYS.items():
                if self._keymap.matches(key, action):
                    self.focus = focus
                    return []
            self.panel().handle_key(key)
        return []

    def _open_pod_menu(self) -> None:
        if self.pod is None:
            return
        self.pod_menu.show(
            "Pod Actions",
            pod_actions(self.pod.namespace, self.pod.name, self.pod.container_names),
        )

    def _open_copy_menu(self) -> None:
        if self.pod is None:
            return
        self.action_menu.show(
            "Copy kubectl command",
            kubectl_commands(
                self.pod.namespace,
                self.pod.name,
                self.logs.selected_container,
                self.pod.container_names,
            ),
        )

    def _on_menu_item(self, item: MenuItem) -> list[Effect]:
        pod = self.pod
        if pod is None:
            return []
        if item.action is MenuAction.COPY:
            return [CopyToClipboard(text=item.command, label=item.label)]
        if item.action is MenuAction.DESCRIBE:
            self.status_msg = "Loading describe..."
            return [RunBackground(command=item.command, title=f"Pod: {pod.name}")]
        if item.action is MenuAction.DELETE:
            self.pending_action = None
            self.confirm.show(
                "Delete Pod",
                f"Are you sure you want to delete pod '{pod.name}'?",
                ConfirmAction.DELETE,
                payload=pod.ref,
            )
        elif item.action is MenuAction.EXEC:
            self.pending_action = PendingAction(ConfirmAction.EXEC, item.command)
            self.confirm.show(
                "Exec into Pod",
                f"Open shell in '{pod.name}'?\n"
                "This will suspend the UI until you exit the shell.",
                ConfirmAction.EXEC,
                payload=pod.ref,
            )
        elif item.action is MenuAction.PORT_FORWARD:
            self.pending_action = PendingAction(ConfirmAction.PORT_FORWARD, item.command)
            self.confirm.show(
                "Port Forward",
                f"Start port forwarding for '{pod.name}'?\n"
                "Press Ctrl+C in terminal to stop and return.",
                ConfirmAction.PORT_FORWARD,
                payload=pod.ref,
            )
        else:
            logger.debug("Ignoring menu action %s on the pod dashboard", item.action)
        return []

    def _on_confirm(self, result: ConfirmResult) -> list[Effect]:
        pending, self.pending_action = self.pending_action, None
        if not result.confirmed:
            return []
        if result.action is ConfirmAction.DELETE:
            self.status_msg = "Deleting pod..."
            return [DeletePod(pod=result.payload)]
        if result.action in (ConfirmAction.EXEC, ConfirmAction.PORT_FORWARD):
            if pending is None or pending.action is not result.action:
                return []
            return [RunForeground(command=pending.command)]
        return []

    # ------------------------------------------------------------------
    # Action results
    # ------------------------------------------------------------------

    def apply_result(
        self, msg: PodDeleted | BackgroundOutput | ForegroundFinished | ClipboardCopied
    ) -> None:
        match msg:
            case PodDeleted(error=None):
                self.status_msg = f"Pod {msg.pod.name} deleted"
            case PodDeleted():
                self.status_msg = f"Delete failed: {msg.error}"
            case BackgroundOutput(error=None):
                self.result_viewer.show(msg.title, msg.content, self.width - 4, self.height - 2)
            case BackgroundOutput():
                self.status_msg = f"Describe failed: {msg.error}"
            case ForegroundFinished(error=None, exit_code=0):
                self.status_msg = "Command completed"
            case ForegroundFinished(error=None):
                self.status_msg = f"Command failed: exit status {msg.exit_code}"
            case ForegroundFinished():
                self.status_msg = f"Command failed: {msg.error}"
            case ClipboardCopied(error=None):
                self.status_msg = f"Copied: {msg.label}"
            case ClipboardCopied():
                self.status_msg = f"Copy failed: {msg.error}"

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _title(self) -> Text:
        pod = self.pod
        if pod is None:
            return Text("")
        text = Text(pod.name, style=STYLE_TITLE)
        text.append(f"  {pod.status}", style=STATUS_STYLES.get(pod.status, ""))
        text.append(f"  ready {pod.ready}  restarts {pod.restarts}", style=STYLE_MUTED)
        if self.fullscreen:
            text.append("  [fullscreen]", style=STYLE_MUTED)
        return text

    def _boxed(self, focus: PanelFocus, height: int) -> Panel:
        active = focus is self.focus
        return Panel(
            self.panel(focus).render(height=height - 2),
            border_style=STYLE_BORDER_ACTIVE if active else STYLE_BORDER,
            height=height,
            padding=(0, 1),
        )

    def _body(self) -> RenderableType:
        available = max(6, self.height - 2)
        if self.fullscreen:
            return self._boxed(self.focus, available)
        cell = available // 2
        grid = Table.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(self._boxed(PanelFocus.LOGS, cell), self._boxed(PanelFocus.EVENTS, cell))
        grid.add_row(self._boxed(PanelFocus.METRICS, cell), self._boxed(PanelFocus.MANIFEST, cell))
        return grid

    def render(self) -> RenderableType:
        overlay = self.active_overlay()
        if overlay is not None:
            return Align.center(overlay.render(), vertical="middle", height=self.height)
        status = Text(self.status_msg, style=STYLE_WARNING) if self.status_msg else Text("")
        return Group(self._title(), self._body(), status)
