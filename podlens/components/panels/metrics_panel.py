"""Metrics panel: container requests, limits and live usage."""

from __future__ import annotations

from rich.text import Text

from podlens.components.panels.base_panel import BasePanel
from podlens.constants.values import STYLE_MUTED, STYLE_SUBTITLE, STYLE_WARNING
from podlens.models.core import PodInfo, PodMetrics


class MetricsPanel(BasePanel):
    title = "Resource Usage"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.pod: PodInfo | None = None
        self.metrics: PodMetrics | None = None
        self.loaded = False

    def reset(self, pod: PodInfo) -> None:
        self.pod = pod
        self.metrics = None
        self.loaded = False
        self.offset = 0

    def set_metrics(self, metrics: PodMetrics | None) -> None:
        self.metrics = metrics
        self.loaded = True

    def header(self) -> Text:
        text = Text(self.title, style="bold")
        if self.loaded and self.metrics is None:
            text.append(" (metrics-server not available)", style=STYLE_MUTED)
        return text

    @staticmethod
    def _value(value: str | None) -> str:
        return value if value else "not set"

    def lines(self) -> list[Text]:
        if self.pod is None:
            return []
        if not self.loaded:
            return [Text("Loading metrics...", style=STYLE_MUTED)]

        rows: list[Text] = []
        issues: list[str] = []
        for container in self.pod.containers:
            usage = self.metrics.for_container(container.name) if self.metrics else None
            rows.append(Text(container.name, style=STYLE_SUBTITLE))
            for label, resource in (("CPU", "cpu"), ("Memory", "memory")):
                line = Text(f"  {label:<7}")
                if usage is not None:
                    line.append(f"{usage.cpu if resource == 'cpu' else usage.memory:<9}", style="bold")
                line.append(
                    f" req {self._value(container.requests.get(resource))}"
                    f" / lim {self._value(container.limits.get(resource))}",
                    style=STYLE_MUTED,
                )
                rows.append(line)
                if not container.limits.get(resource):
                    issues.append(f"{container.name}: no {label.lower()} limit")

        if issues:
            rows.append(Text(""))
            rows.append(Text("Issues", style="bold"))
            rows.extend(Text(f"  ⚠ {issue}", style=STYLE_WARNING) for issue in issues)
        return rows
