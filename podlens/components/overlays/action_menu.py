"""Action menus: copy-a-command, pod actions and workload actions.

Menus only decide *which* item was picked; the owner of the menu turns the
returned ``MenuResult`` into effects (clipboard copy, confirmation, ...).
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from podlens.constants.defaults import (
    PORT_FORWARD_PORT_DEFAULT,
    RESTARTABLE_KINDS,
    SCALABLE_KINDS,
    SCALE_PRESETS,
)
from podlens.constants.enums import MenuAction
from podlens.constants.limits import MAX_MENU_SHORTCUTS, MAX_SCALE_REPLICAS_STEP
from podlens.constants.values import (
    STYLE_BORDER_ACTIVE,
    STYLE_MUTED,
    STYLE_SELECTED,
    STYLE_TITLE,
)
from podlens.keyboard import DEFAULT_KEYMAP, KeyMap


@dataclass(slots=True)
class MenuItem:
    label: str
    action: MenuAction
    command: str = ""
    description: str = ""
    replicas: int | None = None


@dataclass(slots=True)
class MenuResult:
    item: MenuItem


class ActionMenu:
    """Modal list of kubectl commands; selecting one yields it for copying."""

    border_style = STYLE_BORDER_ACTIVE
    footer_hint = "↑/↓ navigate • enter copy • 1-9 quick select • esc close"

    def __init__(self, keymap: KeyMap = DEFAULT_KEYMAP) -> None:
        self._keymap = keymap
        self.title = ""
        self.items: list[MenuItem] = []
        self.cursor = 0
        self.visible = False

    def show(self, title: str, items: list[MenuItem]) -> None:
        self.title = title
        self.items = list(items)
        self.cursor = 0
        self.visible = bool(self.items)

    def hide(self) -> None:
        self.visible = False

    def _select(self, index: int) -> MenuResult | None:
        if not 0 <= index < len(self.items):
            return None
        self.visible = False
        return MenuResult(self.items[index])

    def handle_key(self, key: str) -> MenuResult | None:
        """Apply one keystroke; return the picked item, if any."""
        if not self.visible:
            return None
        if key in ("escape", "q"):
            self.hide()
        elif self._keymap.matches(key, "up"):
            self.cursor = max(0, self.cursor - 1)
        elif self._keymap.matches(key, "down"):
            self.cursor = min(len(self.items) - 1, self.cursor + 1)
        elif key == "enter":
            return self._select(self.cursor)
        elif len(key) == 1 and key.isdigit() and key != "0":
            index = int(key) - 1
            if index < MAX_MENU_SHORTCUTS:
                return self._select(index)
        return None

    def _render_item(self, index: int, item: MenuItem) -> Text:
        prefix = f"{index + 1}. " if index < MAX_MENU_SHORTCUTS else "   "
        line = Text(prefix + item.label, style=STYLE_SELECTED if index == self.cursor else "")
        if item.description:
            line.append(f"  {item.description}", style=STYLE_MUTED)
        if item.command and item.action is MenuAction.COPY:
            line.append(f"\n     {item.command}", style=STYLE_MUTED)
        return line

    def render(self) -> RenderableType:
        rows: list[RenderableType] = [
            self._render_item(index, item) for index, item in enumerate(self.items)
        ]
        rows.append(Text(""))
        rows.append(Text(self.footer_hint, style=STYLE_MUTED))
        return Panel(
            Group(*rows),
            title=Text(self.title, style=STYLE_TITLE),
            border_style=self.border_style,
            expand=False,
            padding=(1, 2),
        )


class PodActionMenu(ActionMenu):
    """Actions against the selected pod."""

    border_style = "#e0af68"
    footer_hint = "↑/↓ navigate • enter select • 1-9 quick select • esc close"


class WorkloadActionMenu(ActionMenu):
    """Scale / restart actions against the selected workload."""

    border_style = "#bb9af7"
    footer_hint = "↑/↓ navigate • enter select • 1-9 quick select • esc close"


# ============================================================================
# MENU BUILDERS
# ============================================================================


def kubectl_commands(
    namespace: str, pod: str, container: str, containers: list[str]
) -> list[MenuItem]:
    """Copyable kubectl commands for a pod."""

    def copy(label: str, command: str) -> MenuItem:
        return MenuItem(label=label, action=MenuAction.COPY, command=command)

    items = [
        copy("Get pod logs", f"kubectl logs -n {namespace} {pod}"),
        copy("Get pod logs (follow)", f"kubectl logs -n {namespace} {pod} -f"),
        copy("Describe pod", f"kubectl describe pod -n {namespace} {pod}"),
        copy("Get pod YAML", f"kubectl get pod -n {namespace} {pod} -o yaml"),
        copy("Exec into pod (sh)", f"kubectl exec -it -n {namespace} {pod} -- sh"),
        copy("Exec into pod (bash)", f"kubectl exec -it -n {namespace} {pod} -- bash"),
        copy("Delete pod", f"kubectl delete pod -n {namespace} {pod}"),
    ]

    if len(containers) > 1 and container:
        items = [
            copy(
                f"Logs for container '{container}'",
                f"kubectl logs -n {namespace} {pod} -c {container}",
            ),
            copy(
                f"Exec into '{container}' (sh)",
                f"kubectl exec -it -n {namespace} {pod} -c {container} -- sh",
            ),
            *items,
        ]

    previous_container = container or (containers[0] if containers else "")
    if previous_container:
        items.append(
            copy(
                "Get previous container logs",
                f"kubectl logs -n {namespace} {pod} -c {previous_container} --previous",
            )
        )
    return items


def pod_actions(namespace: str, pod: str, containers: list[str]) -> list[MenuItem]:
    """Actions offered by the pod action menu."""
    items = [
        MenuItem(
            label="Delete Pod",
            action=MenuAction.DELETE,
            description="(requires confirmation)",
            command=f"kubectl delete pod -n {namespace} {pod}",
        )
    ]

    if len(containers) == 1:
        for shell in ("sh", "bash"):
            items.append(
                MenuItem(
                    label=f"Exec ({shell})",
                    action=MenuAction.EXEC,
                    description="opens shell in terminal",
                    command=f"kubectl exec -it -n {namespace} {pod} -- {shell}",
                )
            )
    else:
        for container in containers:
            items.append(
                MenuItem(
                    label=f"Exec into '{container}' (sh)",
                    action=MenuAction.EXEC,
                    description="opens shell in terminal",
                    command=f"kubectl exec -it -n {namespace} {pod} -c {container} -- sh",
                )
            )

    port = PORT_FORWARD_PORT_DEFAULT
    items.extend(
        [
            MenuItem(
                label=f"Port Forward :{port}",
                action=MenuAction.PORT_FORWARD,
                description="runs in terminal, Ctrl+C to stop",
                command=f"kubectl port-forward -n {namespace} {pod} {port}:{port}",
            ),
            MenuItem(
                label="Describe Pod",
                action=MenuAction.DESCRIBE,
                description="shows pod details",
                command=f"kubectl describe pod -n {namespace} {pod}",
            ),
            MenuItem(
                label="Copy logs command",
                action=MenuAction.COPY,
                description="to clipboard",
                command=f"kubectl logs -n {namespace} {pod} -f",
            ),
        ]
    )
    return items


def workload_actions(namespace: str, name: str, kind: str, current: int) -> list[MenuItem]:
    """Scale presets around the current replica count, restart and copy."""

    def scale(replicas: int, suffix: str = "") -> MenuItem:
        return MenuItem(
            label=f"Scale to {replicas}{suffix}",
            action=MenuAction.SCALE,
            replicas=replicas,
            command=f"kubectl scale {kind}/{name} -n {namespace} --replicas={replicas}",
        )

    items: list[MenuItem] = []
    if kind in SCALABLE_KINDS:
        items = [scale(replicas) for replicas in SCALE_PRESETS]
        if current > 0:
            items.insert(0, scale(current - 1, " (current-1)"))
        if current < MAX_SCALE_REPLICAS_STEP:
            items.append(scale(current + 1, " (current+1)"))
    if kind in RESTARTABLE_KINDS:
        items.append(
            MenuItem(
                label="Restart",
                action=MenuAction.RESTART,
                description="rollout restart",
                command=f"kubectl rollout restart {kind}/{name} -n {namespace}",
            )
        )
    if kind in SCALABLE_KINDS:
        items.append(
            MenuItem(
                label="Copy scale command",
                action=MenuAction.COPY,
                command=f"kubectl scale {kind}/{name} -n {namespace} --replicas=",
            )
        )
    return items
