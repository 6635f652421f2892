"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View / Navigation Enums
# =============================================================================

class ViewState(Enum):
    """Top-level view that owns the content area."""

    NAVIGATING = "navigating"
    VIEWING = "viewing"


class NavigatorMode(Enum):
    """Collection the navigator is currently browsing."""

    WORKLOADS = "workloads"
    PODS = "pods"
    NAMESPACE_SELECT = "namespace_select"
    RESOURCE_TYPE_SELECT = "resource_type_select"


class PanelFocus(Enum):
    """Dashboard panel holding keyboard focus, in tab order."""

    LOGS = 0
    EVENTS = 1
    METRICS = 2
    MANIFEST = 3

    def next(self) -> "PanelFocus":
        return PanelFocus((self.value + 1) % 4)

    def previous(self) -> "PanelFocus":
        return PanelFocus((self.value + 3) % 4)


# =============================================================================
# Kubernetes Enums
# =============================================================================

class ResourceType(Enum):
    """Workload kinds the navigator can list, in selection order."""

    DEPLOYMENTS = "deployments"
    STATEFULSETS = "statefulsets"
    DAEMONSETS = "daemonsets"
    JOBS = "jobs"
    CRONJOBS = "cronjobs"
    PODS = "pods"

    @classmethod
    def from_value(cls, value: str | None) -> "ResourceType":
        """Resolve a persisted value, falling back to deployments."""
        for member in cls:
            if member.value == value:
                return member
        return cls.DEPLOYMENTS


class Severity(Enum):
    """Severity levels for pod diagnostics."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    WARNING = "warning"
    INFO = "info"


# =============================================================================
# Action Enums
# =============================================================================

class ConfirmAction(Enum):
    """Actions that are only executed after explicit confirmation."""

    DELETE = "delete"
    EXEC = "exec"
    PORT_FORWARD = "port-forward"
    SCALE = "scale"
    RESTART = "restart"


class MenuAction(Enum):
    """Kind of entry offered by an action menu."""

    COPY = "copy"
    DELETE = "delete"
    EXEC = "exec"
    PORT_FORWARD = "port-forward"
    DESCRIBE = "describe"
    SCALE = "scale"
    RESTART = "restart"


__all__ = [
    "ConfirmAction",
    "MenuAction",
    "NavigatorMode",
    "PanelFocus",
    "ResourceType",
    "Severity",
    "ViewState",
]
