"""Messages consumed by the root controller.

The set is closed: ``RootMessage`` lists every kind the controller accepts,
and ``RootController.dispatch`` matches on it exhaustively. Result messages
carry an optional ``error`` string instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from podlens.models.core import (
    DebugHelper,
    EventInfo,
    LogLine,
    PodInfo,
    PodMetrics,
    PodRef,
    RelatedResources,
    WorkloadInfo,
    WorkloadRef,
)
from podlens.models.state.effects import LoadPods, LoadWorkloads

# ============================================================================
# Input events
# ============================================================================


@dataclass(slots=True)
class KeyPressed:
    key: str


@dataclass(slots=True)
class Resized:
    width: int
    height: int


@dataclass(slots=True)
class RefreshTick:
    pod: PodRef


# ============================================================================
# Structural load results
# ============================================================================


@dataclass(slots=True)
class WorkloadsLoaded:
    request: LoadWorkloads
    workloads: list[WorkloadInfo] = field(default_factory=list)
    namespaces: list[str] | None = None
    error: str | None = None


@dataclass(slots=True)
class PodsLoaded:
    request: LoadPods
    pods: list[PodInfo] = field(default_factory=list)
    error: str | None = None


@dataclass(slots=True)
class DashboardDataLoaded:
    """Dashboard payload; each part is ``None`` when its own fetch failed."""

    pod: PodRef
    logs: list[LogLine] | None = None
    events: list[EventInfo] | None = None
    metrics: PodMetrics | None = None
    related: RelatedResources | None = None
    helpers: list[DebugHelper] | None = None
    from_tick: bool = False


# ============================================================================
# Action results
# ============================================================================


@dataclass(slots=True)
class PodDeleted:
    pod: PodRef
    error: str | None = None


@dataclass(slots=True)
class WorkloadActionFinished:
    workload: WorkloadRef
    action: str
    replicas: int | None = None
    error: str | None = None


@dataclass(slots=True)
class BackgroundOutput:
    title: str
    content: str = ""
    error: str | None = None


@dataclass(slots=True)
class ForegroundFinished:
    exit_code: int | None = None
    error: str | None = None


@dataclass(slots=True)
class ClipboardCopied:
    label: str
    error: str | None = None


RootMessage = (
    KeyPressed
    | Resized
    | RefreshTick
    | WorkloadsLoaded
    | PodsLoaded
    | DashboardDataLoaded
    | PodDeleted
    | WorkloadActionFinished
    | BackgroundOutput
    | ForegroundFinished
    | ClipboardCopied
)

__all__ = [
    "BackgroundOutput",
    "ClipboardCopied",
    "DashboardDataLoaded",
    "ForegroundFinished",
    "KeyPressed",
    "PodDeleted",
    "PodsLoaded",
    "RefreshTick",
    "Resized",
    "RootMessage",
    "WorkloadActionFinished",
    "WorkloadsLoaded",
]
