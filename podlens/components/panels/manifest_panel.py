"""Manifest panel: pod summary, diagnostics, containers and related resources."""

from __future__ import annotations

from rich.text import Text

from podlens.components.panels.base_panel import BasePanel
from podlens.constants.enums import Severity
from podlens.constants.values import (
    STATUS_STYLES,
    STYLE_ERROR,
    STYLE_MUTED,
    STYLE_SUBTITLE,
    STYLE_WARNING,
)
from podlens.models.core import DebugHelper, PodInfo, RelatedResources

_SEVERITY_STYLES = {
    Severity.CRITICAL: STYLE_ERROR,
    Severity.HIGH: STYLE_ERROR,
    Severity.MEDIUM: STYLE_WARNING,
    Severity.WARNING: STYLE_WARNING,
    Severity.INFO: STYLE_MUTED,
}


def _section(title: str) -> Text:
    return Text(title, style="bold underline")


def _field(label: str, value: str, style: str = "") -> Text:
    text = Text(f"  {label:<10}", style=STYLE_MUTED)
    text.append(value or "-", style=style)
    return text


class ManifestPanel(BasePanel):
    title = "Manifest"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.pod: PodInfo | None = None
        self.related: RelatedResources | None = None
        self.related_failed = False
        self.helpers: list[DebugHelper] = []
        self.full_view = False

    def reset(self, pod: PodInfo) -> None:
        self.pod = pod
        self.related = None
        self.related_failed = False
        self.helpers = []
        self.offset = 0

    def set_related(self, related: RelatedResources | None) -> None:
        self.related_failed = related is None
        self.related = related

    def set_helpers(self, helpers: list[DebugHelper] | None) -> None:
        self.helpers = list(helpers or [])

    def handle_key(self, key: str) -> None:
        if self._keymap.matches(key, "toggle_full_view"):
            self.full_view = not self.full_view
            self.offset = 0
            return
        super().handle_key(key)

    def header(self) -> Text:
        text = Text(self.title, style="bold")
        if self.full_view:
            text.append(" [full]", style=STYLE_MUTED)
        return text

    def _pod_info(self, pod: PodInfo) -> list[Text]:
        rows = [
            _section("Pod Info"),
            _field("Name", pod.name),
            _field("Namespace", pod.namespace),
            _field("Status", pod.status, STATUS_STYLES.get(pod.status, "")),
            _field("Ready", pod.ready),
            _field("Restarts", str(pod.restarts), STYLE_WARNING if pod.restarts else ""),
            _field("Node", pod.node),
            _field("IP", pod.ip),
            _field("Age", pod.age),
        ]
        if pod.owner_name:
            rows.append(_field("Owner", f"{pod.owner_kind}/{pod.owner_name}"))
        return rows

    def _debug_hints(self) -> list[Text]:
        if not self.helpers:
            return []
        rows = [Text(""), _section("Debug Hints")]
        for helper in self.helpers:
            style = _SEVERITY_STYLES.get(helper.severity, "")
            rows.append(Text(f"  [{helper.severity.value}] {helper.issue}", style=style))
            rows.extend(
                Text(f"    • {suggestion}", style=STYLE_MUTED)
                for suggestion in helper.suggestions
            )
        return rows

    def _containers(self, pod: PodInfo) -> list[Text]:
        rows = [Text(""), _section("Containers")]
        for container in pod.containers:
            state = container.state + (f" ({container.reason})" if container.reason else "")
            line = Text(f"  {container.name}", style=STYLE_SUBTITLE)
            line.append(f"  {state}", style=STATUS_STYLES.get(container.reason or container.state, ""))
            line.append(f"  restarts {container.restarts}", style=STYLE_MUTED)
            rows.append(line)
            rows.append(Text(f"    {container.image}", style=STYLE_MUTED))
            if container.ports:
                rows.append(
                    Text("    ports " + ", ".join(str(port) for port in container.ports), style=STYLE_MUTED)
                )
            if container.last_termination_reason:
                rows.append(
                    Text(f"    last terminated: {container.last_termination_reason}", style=STYLE_WARNING)
                )
        return rows

    def _related(self) -> list[Text]:
        if self.related_failed:
            return [Text(""), _section("Related"), Text("  (failed to load)", style=STYLE_ERROR)]
        related = self.related
        if related is None or related.is_empty:
            return []
        rows = [Text(""), _section("Related")]
        for service in related.services:
            rows.append(
                Text(
                    f"  svc/{service.name}  {service.type} {service.cluster_ip}"
                    f"  {', '.join(service.ports)}  endpoints {service.endpoints}"
                )
            )
        for ingress in related.ingresses:
            rows.append(
                Text(f"  ing/{ingress.name}  {', '.join(ingress.hosts)} {', '.join(ingress.paths)}")
            )
        rows.extend(Text(f"  cm/{name}") for name in related.config_maps)
        rows.extend(Text(f"  secret/{name}") for name in related.secrets)
        return rows

    def _full_details(self, pod: PodInfo) -> list[Text]:
        rows = [Text(""), _section("Labels")]
        if pod.labels:
            rows.extend(Text(f"  {key}={value}") for key, value in sorted(pod.labels.items()))
        else:
            rows.append(Text("  <none>", style=STYLE_MUTED))
        rows.extend([Text(""), _section("Conditions")])
        for condition in pod.conditions:
            line = Text(f"  {condition.type:<16} {condition.status}")
            if condition.reason:
                line.append(f"  {condition.reason}", style=STYLE_WARNING)
            rows.append(line)
        return rows

    def lines(self) -> list[Text]:
        pod = self.pod
        if pod is None:
            return [Text("No pod selected", style=STYLE_MUTED)]
        rows = self._pod_info(pod) + self._debug_hints() + self._containers(pod) + self._related()
        if self.full_view:
            rows += self._full_details(pod)
        return rows
