"""Modal overlay components."""

from podlens.components.overlays.action_menu import (
    ActionMenu,
    MenuItem,
    MenuResult,
    PodActionMenu,
    WorkloadActionMenu,
    kubectl_commands,
    pod_actions,
    workload_actions,
)
from podlens.components.overlays.confirm_dialog import ConfirmDialog, ConfirmResult
from podlens.components.overlays.help_panel import HelpPanel
from podlens.components.overlays.result_viewer import ResultViewer

__all__ = [
    "ActionMenu",
    "ConfirmDialog",
    "ConfirmResult",
    "HelpPanel",
    "MenuItem",
    "MenuResult",
    "PodActionMenu",
    "ResultViewer",
    "WorkloadActionMenu",
    "kubectl_commands",
    "pod_actions",
    "workload_actions",
]
