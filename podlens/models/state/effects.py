"""Side effects requested by state handlers and executed by the app shell.

Handlers never touch the cluster, the clipboard or the terminal directly;
they return a list of these descriptors and the shell runs each one,
reporting back exactly one result message per asynchronous effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from podlens.models.core import PodInfo, PodRef, WorkloadRef
from podlens.models.state.app_settings import AppSettings

# ============================================================================
# Structural loads
# ============================================================================


@dataclass(slots=True)
class LoadWorkloads:
    """List the cluster namespaces and the workloads of ``kind`` in ``namespace``."""

    namespace: str
    kind: str


@dataclass(slots=True)
class LoadPods:
    """List the pods owned by ``workload``, matched through ``selector``."""

    workload: WorkloadRef
    selector: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class LoadDashboard:
    """Fetch logs, events, metrics, related resources and diagnostics."""

    pod: PodInfo
    tail_lines: int
    from_tick: bool = False


# ============================================================================
# Cluster actions
# ============================================================================


@dataclass(slots=True)
class DeletePod:
    pod: PodRef


@dataclass(slots=True)
class ScaleWorkload:
    workload: WorkloadRef
    replicas: int


@dataclass(slots=True)
class RestartWorkload:
    workload: WorkloadRef


# ============================================================================
# Process / clipboard
# ============================================================================


@dataclass(slots=True)
class RunBackground:
    """Capture the output of ``command`` and show it under ``title``."""

    command: str
    title: str


@dataclass(slots=True)
class RunForeground:
    """Hand the terminal to ``command`` until it exits."""

    command: str


@dataclass(slots=True)
class CopyToClipboard:
    text: str
    label: str


# ============================================================================
# Timer / lifecycle
# ============================================================================


@dataclass(slots=True)
class ScheduleTick:
    pod: PodRef
    interval: float


@dataclass(slots=True)
class CancelTick:
    pass


@dataclass(slots=True)
class SaveSettings:
    settings: AppSettings


@dataclass(slots=True)
class Quit:
    pass


Effect = (
    LoadWorkloads
    | LoadPods
    | LoadDashboard
    | DeletePod
    | ScaleWorkload
    | RestartWorkload
    | RunBackground
    | RunForeground
    | CopyToClipboard
    | ScheduleTick
    | CancelTick
    | SaveSettings
    | Quit
)

StructuralLoad = LoadWorkloads | LoadPods

__all__ = [
    "CancelTick",
    "CopyToClipboard",
    "DeletePod",
    "Effect",
    "LoadDashboard",
    "LoadPods",
    "LoadWorkloads",
    "Quit",
    "RestartWorkload",
    "RunBackground",
    "RunForeground",
    "SaveSettings",
    "ScaleWorkload",
    "ScheduleTick",
    "StructuralLoad",
]
