"""Root state aggregate owned by the root controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from podlens.components import Breadcrumb, Dashboard, Navigator, StatusBar
from podlens.components.overlays import ConfirmDialog, HelpPanel, WorkloadActionMenu
from podlens.constants.enums import ResourceType, ViewState
from podlens.models.core import PodInfo, WorkloadInfo
from podlens.models.state.app_settings import AppSettings
from podlens.models.state.effects import StructuralLoad


@dataclass
class AppState:
    """Everything the UI shows, mutated only inside ``RootController.dispatch``.

    Components own disjoint slices: the navigator its collections and cursor,
    the dashboard its panels and overlays, and the root-level overlays the
    workload action workflow and the global help.
    """

    settings: AppSettings = field(default_factory=AppSettings)
    context: str = ""
    namespace: str = ""
    resource_type: ResourceType = ResourceType.DEPLOYMENTS

    view: ViewState = ViewState.NAVIGATING
    loading: bool = False
    error: str | None = None
    failed_load: StructuralLoad | None = None
    status_msg: str = ""

    selected_workload: WorkloadInfo | None = None
    selected_pod: PodInfo | None = None

    # The refresh timer only re-arms while this is set.
    refresh_armed: bool = False

    width: int = 120
    height: int = 40

    navigator: Navigator = field(default_factory=Navigator)
    dashboard: Dashboard = field(default_factory=Dashboard)
    help: HelpPanel = field(default_factory=HelpPanel)
    confirm: ConfirmDialog = field(default_factory=ConfirmDialog)
    workload_menu: WorkloadActionMenu = field(default_factory=WorkloadActionMenu)
    status_bar: StatusBar = field(default_factory=StatusBar)
    breadcrumb: Breadcrumb = field(default_factory=Breadcrumb)
