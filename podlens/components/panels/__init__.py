"""Dashboard content panels."""

from podlens.components.panels.base_panel import BasePanel
from podlens.components.panels.events_panel import EventsPanel
from podlens.components.panels.logs_panel import LogsPanel
from podlens.components.panels.manifest_panel import ManifestPanel
from podlens.components.panels.metrics_panel import MetricsPanel

__all__ = ["BasePanel", "EventsPanel", "LogsPanel", "ManifestPanel", "MetricsPanel"]
