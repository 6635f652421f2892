"""Root controller: the single dispatch step over the whole UI state.

``dispatch`` takes one message, mutates ``AppState`` and returns the effects
the app shell must run. It performs no I/O, so every transition can be
exercised directly in unit tests.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from podlens.components.overlays import ConfirmResult, MenuItem, workload_actions
from podlens.constants.defaults import DASHBOARD_LOG_TAIL_DEFAULT
from podlens.constants.enums import (
    ConfirmAction,
    MenuAction,
    NavigatorMode,
    ResourceType,
    ViewState,
)
from podlens.constants.timeouts import REFRESH_INTERVAL_MIN_SECONDS
from podlens.constants.values import STYLE_ERROR, STYLE_MUTED, STYLE_WARNING
from podlens.keyboard import DEFAULT_KEYMAP, KeyMap
from podlens.models.core import PodInfo, WorkloadInfo, WorkloadRef
from podlens.models.state.app_settings import AppSettings
from podlens.models.state.app_state import AppState
from podlens.models.state.effects import (
    CancelTick,
    CopyToClipboard,
    Effect,
    LoadDashboard,
    LoadPods,
    LoadWorkloads,
    Quit,
    RestartWorkload,
    SaveSettings,
    ScaleWorkload,
    ScheduleTick,
    StructuralLoad,
)
from podlens.models.state.messages import (
    BackgroundOutput,
    ClipboardCopied,
    DashboardDataLoaded,
    ForegroundFinished,
    KeyPressed,
    PodDeleted,
    PodsLoaded,
    RefreshTick,
    Resized,
    RootMessage,
    WorkloadActionFinished,
    WorkloadsLoaded,
)

logger = logging.getLogger(__name__)


class RootController:
    """Owns ``AppState`` and turns messages into state changes plus effects."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        context: str = "",
        namespace: str | None = None,
        keymap: KeyMap = DEFAULT_KEYMAP,
    ) -> None:
        self._keymap = keymap
        settings = settings or AppSettings()
        self.state = AppState(
            settings=settings,
            context=context or settings.last_context,
            namespace=namespace or settings.last_namespace,
            resource_type=ResourceType.from_value(settings.last_resource_type),
        )
        self.state.dashboard.logs.line_limit = settings.log_line_limit
        self._sync_bars()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def refresh_interval(self) -> float:
        return max(REFRESH_INTERVAL_MIN_SECONDS, float(self.state.settings.refresh_interval))

    def _sync_bars(self) -> None:
        state = self.state
        state.navigator.set_context(state.namespace, state.resource_type)
        state.status_bar.set_context(state.context, state.namespace, state.resource_type.value)
        items = [state.context, state.namespace, state.resource_type.value]
        if state.selected_workload is not None:
            items.append(state.selected_workload.name)
        if state.view is ViewState.VIEWING and state.selected_pod is not None:
            items.append(state.selected_pod.name)
        state.breadcrumb.set_items(items)

    def _settings_snapshot(self) -> AppSettings:
        state = self.state
        return state.settings.model_copy(
            update={
                "last_namespace": state.namespace,
                "last_context": state.context,
                "last_resource_type": state.resource_type.value,
            }
        )

    def _load_workloads(self) -> list[Effect]:
        self.state.loading = True
        return [LoadWorkloads(namespace=self.state.namespace, kind=self.state.resource_type.value)]

    @staticmethod
    def _dashboard_load(pod: PodInfo, from_tick: bool = False) -> LoadDashboard:
        return LoadDashboard(pod=pod, tail_lines=DASHBOARD_LOG_TAIL_DEFAULT, from_tick=from_tick)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def initialize(self) -> list[Effect]:
        """Issue the namespace and workload listing for the last-used selection."""
        return self._load_workloads()

    def dispatch(self, msg: RootMessage) -> list[Effect]:
        match msg:
            case KeyPressed():
                effects = self._on_key(msg.key)
            case Resized():
                effects = self._on_resize(msg)
            case RefreshTick():
                effects = self._on_tick(msg)
            case WorkloadsLoaded():
                effects = self._on_workloads_loaded(msg)
            case PodsLoaded():
                effects = self._on_pods_loaded(msg)
            case DashboardDataLoaded():
                effects = self._on_dashboard_loaded(msg)
            case WorkloadActionFinished():
                effects = self._on_workload_action_finished(msg)
            case PodDeleted() | BackgroundOutput() | ForegroundFinished() | ClipboardCopied():
                effects = self._on_action_result(msg)
            case _:
                raise TypeError(f"unhandled message: {msg!r}")
        self._sync_bars()
        return effects

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def _quit(self) -> list[Effect]:
        return [SaveSettings(settings=self._settings_snapshot()), Quit()]

    def _on_key(self, key: str) -> list[Effect]:
        state = self.state
        keymap = self._keymap
        if key == "ctrl+c":
            return self._quit()

        # Root overlays claim every key while visible.
        if state.confirm.visible:
            result = state.confirm.handle_key(key)
            return self._on_workload_confirm(result) if result else []
        if state.workload_menu.visible:
            picked = state.workload_menu.handle_key(key)
            return self._on_workload_menu_item(picked.item) if picked else []
        if state.help.visible:
            state.help.handle_key(key)
            return []

        if state.view is ViewState.VIEWING and state.dashboard.is_capturing_input:
            return state.dashboard.handle_key(key)
        if state.view is ViewState.NAVIGATING and state.navigator.searching:
            if keymap.matches(key, "back") or keymap.matches(key, "enter"):
                state.navigator.close_search()
            else:
                state.navigator.handle_key(key)
            return []

        if state.error is not None:
            if keymap.matches(key, "quit"):
                return self._quit()
            if keymap.matches(key, "refresh"):
                return self._refresh()
            return []

        state.status_msg = ""
        if keymap.matches(key, "quit"):
            return self._quit()
        if keymap.matches(key, "help"):
            if state.view is ViewState.VIEWING:
                state.dashboard.help.toggle()
            else:
                state.help.toggle()
            return []
        if keymap.matches(key, "refresh"):
            return self._refresh()
        if keymap.matches(key, "back"):
            return self._back()
        if keymap.matches(key, "namespace"):
            return self._open_selector(NavigatorMode.NAMESPACE_SELECT)
        if keymap.matches(key, "resource_type"):
            return self._open_selector(NavigatorMode.RESOURCE_TYPE_SELECT)

        if state.view is ViewState.VIEWING:
            return state.dashboard.handle_key(key)
        if keymap.matches(key, "enter"):
            return self._enter()
        if (
            keymap.matches(key, "workload_actions")
            and state.navigator.mode is NavigatorMode.WORKLOADS
        ):
            self._open_workload_menu()
            return []
        state.navigator.handle_key(key)
        return []

    def _on_resize(self, msg: Resized) -> list[Effect]:
        state = self.state
        state.width, state.height = msg.width, msg.height
        state.navigator.set_size(msg.width, msg.height)
        state.dashboard.set_size(msg.width, msg.height)
        return []

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _refresh(self) -> list[Effect]:
        """Re-issue the load behind the current screen; after an error, retry it."""
        state = self.state
        if state.error is not None and state.failed_load is not None:
            request = state.failed_load
            state.error = None
            state.failed_load = None
            state.loading = True
            return [request]

        if state.view is ViewState.VIEWING and state.selected_pod is not None:
            return [self._dashboard_load(state.selected_pod)]
        if state.navigator.mode is NavigatorMode.PODS and state.selected_workload is not None:
            state.loading = True
            workload = state.selected_workload
            return [LoadPods(workload=workload.ref, selector=dict(workload.selector))]
        return self._load_workloads()

    def _enter(self) -> list[Effect]:
        state = self.state
        navigator = state.navigator
        if navigator.mode is NavigatorMode.WORKLOADS:
            workload = navigator.selected_workload()
            if workload is None:
                return []
            state.loading = True
            return [LoadPods(workload=workload.ref, selector=dict(workload.selector))]

        if navigator.mode is NavigatorMode.PODS:
            pod = navigator.selected_pod()
            if pod is None:
                return []
            state.view = ViewState.VIEWING
            state.selected_pod = pod
            state.dashboard.set_pod(pod)
            state.loading = True
            state.refresh_armed = True
            return [
                self._dashboard_load(pod),
                ScheduleTick(pod=pod.ref, interval=self.refresh_interval),
            ]

        if navigator.mode is NavigatorMode.NAMESPACE_SELECT:
            namespace = navigator.selected_namespace()
            if namespace is None:
                return []
            state.namespace = namespace
            state.settings = state.settings.model_copy(update={"last_namespace": namespace})
        else:
            resource_type = navigator.selected_resource_type()
            if resource_type is None:
                return []
            state.resource_type = resource_type
            state.settings = state.settings.model_copy(
                update={"last_resource_type": resource_type.value}
            )
        state.selected_workload = None
        navigator.set_mode(NavigatorMode.WORKLOADS)
        return [SaveSettings(settings=self._settings_snapshot()), *self._load_workloads()]

    def _leave_dashboard(self) -> list[Effect]:
        state = self.state
        state.view = ViewState.NAVIGATING
        state.selected_pod = None
        state.refresh_armed = False
        state.loading = False
        state.dashboard.clear()
        mode = NavigatorMode.PODS if state.selected_workload is not None else NavigatorMode.WORKLOADS
        if state.navigator.mode is not mode:
            state.navigator.set_mode(mode)
        return [CancelTick()]

    def _back(self) -> list[Effect]:
        state = self.state
        if state.view is ViewState.VIEWING:
            return self._leave_dashboard()
        mode = state.navigator.mode
        if mode is NavigatorMode.PODS:
            state.selected_workload = None
            state.navigator.set_mode(NavigatorMode.WORKLOADS)
            return self._load_workloads()
        if mode in (NavigatorMode.NAMESPACE_SELECT, NavigatorMode.RESOURCE_TYPE_SELECT):
            state.navigator.set_mode(NavigatorMode.WORKLOADS)
            return []
        if state.navigator.query:
            state.navigator.clear_filter()
        return []

    def _open_selector(self, mode: NavigatorMode) -> list[Effect]:
        effects: list[Effect] = []
        if self.state.view is ViewState.VIEWING:
            effects = self._leave_dashboard()
        self.state.selected_workload = None
        self.state.navigator.set_mode(mode)
        return effects

    # ------------------------------------------------------------------
    # Workload actions
    # ------------------------------------------------------------------

    def _open_workload_menu(self) -> None:
        state = self.state
        workload = state.navigator.selected_workload()
        if workload is None:
            return
        items = workload_actions(workload.namespace, workload.name, workload.kind, workload.desired)
        if not items:
            state.status_msg = f"No actions available for {workload.kind}"
            return
        state.workload_menu.show(f"Workload Actions: {workload.name}", items)

    def _on_workload_menu_item(self, item: MenuItem) -> list[Effect]:
        state = self.state
        workload = state.navigator.selected_workload()
        if item.action is MenuAction.COPY:
            return [CopyToClipboard(text=item.command, label=item.label)]
        if workload is None:
            return []
        if item.action is MenuAction.SCALE and item.replicas is not None:
            state.confirm.show(
                "Scale Workload",
                f"Scale {workload.kind} '{workload.name}' to {item.replicas} replicas?",
                ConfirmAction.SCALE,
                payload=(workload.ref, item.replicas),
            )
        elif item.action is MenuAction.RESTART:
            state.confirm.show(
                "Restart Workload",
                f"Restart {workload.kind} '{workload.name}'?\n"
                "Pods will be replaced with a rolling update.",
                ConfirmAction.RESTART,
                payload=workload.ref,
            )
        return []

    def _on_workload_confirm(self, result: ConfirmResult) -> list[Effect]:
        if not result.confirmed:
            return []
        if result.action is ConfirmAction.SCALE:
            workload, replicas = result.payload
            self.state.status_msg = f"Scaling {workload.name} to {replicas}..."
            return [ScaleWorkload(workload=workload, replicas=replicas)]
        if result.action is ConfirmAction.RESTART:
            self.state.status_msg = f"Restarting {result.payload.name}..."
            return [RestartWorkload(workload=result.payload)]
        return []

    def _on_workload_action_finished(self, msg: WorkloadActionFinished) -> list[Effect]:
        state = self.state
        if msg.error is not None:
            state.status_msg = f"{msg.action.capitalize()} failed: {msg.error}"
            return []
        if msg.action == ConfirmAction.SCALE.value:
            state.status_msg = f"Scaled {msg.workload.name} to {msg.replicas}"
        else:
            state.status_msg = f"Restarted {msg.workload.name}"
        return self._load_workloads()

    # ------------------------------------------------------------------
    # Load results
    # ------------------------------------------------------------------

    def _fail(self, error: str, request: StructuralLoad) -> list[Effect]:
        logger.warning("Load failed: %s", error)
        self.state.error = error
        self.state.failed_load = request
        return []

    def _on_workloads_loaded(self, msg: WorkloadsLoaded) -> list[Effect]:
        state = self.state
        state.loading = False
        if msg.error is not None:
            return self._fail(msg.error, msg.request)
        state.navigator.set_workloads(msg.workloads)
        if msg.namespaces is not None:
            state.navigator.set_namespaces(msg.namespaces)
        return []

    def _workload_for(self, request: LoadPods) -> WorkloadInfo:
        for workload in self.state.navigator.workloads:
            if workload.ref == request.workload:
                return workload
        ref: WorkloadRef = request.workload
        return WorkloadInfo(
            name=ref.name, namespace=ref.namespace, kind=ref.kind, selector=dict(request.selector)
        )

    def _on_pods_loaded(self, msg: PodsLoaded) -> list[Effect]:
        state = self.state
        state.loading = False
        if msg.error is not None:
            return self._fail(msg.error, msg.request)
        state.selected_workload = self._workload_for(msg.request)
        if state.view is ViewState.NAVIGATING and state.navigator.mode is not NavigatorMode.PODS:
            state.navigator.set_mode(NavigatorMode.PODS)
        state.navigator.set_pods(msg.pods)
        return []

    def _on_dashboard_loaded(self, msg: DashboardDataLoaded) -> list[Effect]:
        state = self.state
        pod = state.selected_pod
        if pod is None or pod.ref != msg.pod:
            logger.debug("Dropping dashboard data for %s: no longer selected", msg.pod)
            return []
        state.loading = False
        state.dashboard.set_data(msg)
        if msg.from_tick and state.refresh_armed:
            return [ScheduleTick(pod=msg.pod, interval=self.refresh_interval)]
        return []

    def _on_tick(self, msg: RefreshTick) -> list[Effect]:
        state = self.state
        pod = state.selected_pod
        if state.view is not ViewState.VIEWING or not state.refresh_armed or pod is None:
            return []
        if pod.ref != msg.pod:
            return []
        return [self._dashboard_load(pod, from_tick=True)]

    def _on_action_result(
        self, msg: PodDeleted | BackgroundOutput | ForegroundFinished | ClipboardCopied
    ) -> list[Effect]:
        state = self.state
        if state.view is ViewState.VIEWING:
            state.dashboard.apply_result(msg)
        elif isinstance(msg, ClipboardCopied):
            state.status_msg = (
                f"Copied: {msg.label}" if msg.error is None else f"Copy failed: {msg.error}"
            )
        else:
            logger.debug("Action result arrived outside the dashboard: %r", msg)
        return []

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _centered(self, renderable: RenderableType) -> RenderableType:
        return Align.center(renderable, vertical="middle", height=max(1, self.state.height - 3))

    def render_content(self) -> RenderableType:
        state = self.state
        if state.error is not None:
            return self._centered(
                Panel(
                    Group(
                        Text(f"Error: {state.error}", style=STYLE_ERROR),
                        Text(""),
                        Text("Press r to retry • q to quit", style=STYLE_MUTED),
                    ),
                    border_style="#f7768e",
                    expand=False,
                    padding=(1, 2),
                )
            )
        for overlay in (state.confirm, state.workload_menu, state.help):
            if overlay.visible:
                return self._centered(overlay.render())
        if state.view is ViewState.VIEWING:
            return state.dashboard.render()
        if state.loading:
            return self._centered(Text("Loading...", style=STYLE_MUTED))
        return state.navigator.render()

    def render_footer(self) -> RenderableType:
        state = self.state
        status = Text(state.status_msg, style=STYLE_WARNING) if state.status_msg else None
        rows: list[RenderableType] = [state.breadcrumb.render()]
        if status is not None:
            rows.append(status)
        rows.append(state.status_bar.render())
        return Group(*rows)
