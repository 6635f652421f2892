"""Main application class for the PodLens TUI.

The app is a thin shell around ``RootController``: it converts Textual key,
resize and timer events into root messages, runs the effects the controller
returns, and posts exactly one result message back per asynchronous effect.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from contextlib import suppress
from functools import partial
from pathlib import Path

from textual.app import App, ComposeResult, SuspendNotSupported
from textual.css.query import NoMatches
from textual.events import Key, Resize
from textual.message import Message
from textual.timer import Timer

from podlens.constants.values import APP_TITLE
from podlens.controllers.base import BaseController
from podlens.controllers.root import RootController
from podlens.keyboard import normalize_key
from podlens.models.core import PodRef
from podlens.models.state.app_settings import AppSettings, ConfigSaveError
from podlens.models.state.config_manager import ConfigManager
from podlens.models.state.effects import (
    CancelTick,
    CopyToClipboard,
    DeletePod,
    Effect,
    LoadDashboard,
    LoadPods,
    LoadWorkloads,
    Quit,
    RestartWorkload,
    RunBackground,
    RunForeground,
    SaveSettings,
    ScaleWorkload,
    ScheduleTick,
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
from podlens.utils.process_runner import ProcessRunner
from podlens.widgets import ContentView

logger = logging.getLogger(__name__)


# ============================================================================
# Worker Messages
# ============================================================================


class ControllerResult(Message):
    """Carries one root message from a worker back onto the event loop."""

    def __init__(self, payload: RootMessage) -> None:
        super().__init__()
        self.payload = payload


class PodLensApp(App[None]):
    """Main TUI application for PodLens."""

    TITLE = APP_TITLE
    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }

    #content {
        height: 1fr;
    }

    #footer {
        height: auto;
        max-height: 3;
        dock: bottom;
    }
    """

    def __init__(
        self,
        cluster: BaseController,
        settings: AppSettings | None = None,
        namespace: str | None = None,
        process_runner: ProcessRunner | None = None,
        config_path: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.cluster = cluster
        self.settings = settings if settings is not None else ConfigManager.load(config_path)
        self.process_runner = process_runner or ProcessRunner()
        self.config_path = config_path
        self.controller = RootController(
            settings=self.settings,
            context=cluster.context,
            namespace=namespace,
        )
        self._refresh_timer: Timer | None = None
        self._quitting = False

    def compose(self) -> ComposeResult:
        yield ContentView(id="content")
        yield ContentView(id="footer")

    def on_mount(self) -> None:
        """Apply the stored theme and issue the initial loads."""
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        self.controller.dispatch(Resized(width=self.size.width, height=self.size.height))
        self._run_effects(self.controller.initialize())
        self._render()

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    def dispatch_message(self, msg: RootMessage) -> None:
        """Feed one message to the controller and run what it asks for."""
        if self._quitting:
            return
        effects = self.controller.dispatch(msg)
        self._run_effects(effects)
        self._render()

    def on_key(self, event: Key) -> None:
        event.prevent_default()
        event.stop()
        self.dispatch_message(KeyPressed(key=normalize_key(event.key, event.character)))

    def on_resize(self, event: Resize) -> None:
        self.dispatch_message(Resized(width=event.size.width, height=event.size.height))

    def on_controller_result(self, message: ControllerResult) -> None:
        self.dispatch_message(message.payload)

    def action_help_quit(self) -> None:
        """Route ctrl+c through the controller so settings are saved."""
        self.dispatch_message(KeyPressed(key="ctrl+c"))

    async def action_quit(self) -> None:
        self.dispatch_message(KeyPressed(key="ctrl+c"))

    def _render(self) -> None:
        with suppress(NoMatches):
            self.query_one("#content", ContentView).show(self.controller.render_content())
            self.query_one("#footer", ContentView).show(self.controller.render_footer())

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def _run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            match effect:
                case LoadWorkloads():
                    self._start(self._load_workloads(effect), "load-workloads")
                case LoadPods():
                    self._start(self._load_pods(effect), "load-pods")
                case LoadDashboard():
                    self._start(self._load_dashboard(effect), "load-dashboard")
                case DeletePod():
                    self._start(self._delete_pod(effect), "delete-pod")
                case ScaleWorkload():
                    self._start(self._scale(effect), "scale-workload")
                case RestartWorkload():
                    self._start(self._restart(effect), "restart-workload")
                case RunBackground():
                    self._start(self._run_background(effect), "run-background")
                case CopyToClipboard():
                    self._start(self._copy(effect), "copy-to-clipboard")
                case RunForeground():
                    self._run_foreground(effect)
                case ScheduleTick():
                    self._schedule_tick(effect.pod, effect.interval)
                case CancelTick():
                    self._cancel_tick()
                case SaveSettings():
                    self._save_settings(effect.settings)
                case Quit():
                    self._quitting = True
                    self._cancel_tick()
                    self.exit()

    def _start(self, work: Awaitable[RootMessage], name: str) -> None:
        async def _worker() -> None:
            self.post_message(ControllerResult(await work))

        self.run_worker(_worker(), name=name, exit_on_error=False)

    def _schedule_tick(self, pod: PodRef, interval: float) -> None:
        self._cancel_tick()
        self._refresh_timer = self.set_timer(
            interval, partial(self.dispatch_message, RefreshTick(pod=pod))
        )

    def _cancel_tick(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None

    def _save_settings(self, settings: AppSettings) -> None:
        self.settings = settings
        try:
            ConfigManager.save(settings, self.config_path)
        except ConfigSaveError as exc:
            logger.warning("Saving settings failed: %s", exc)
            self.notify(str(exc), title="Settings not saved", severity="error")

    def _run_foreground(self, effect: RunForeground) -> None:
        """Hand the terminal to ``effect.command`` and report its exit status."""
        self._cancel_tick()
        try:
            with self.suspend():
                exit_code = self.process_runner.run_foreground(effect.command)
        except SuspendNotSupported as exc:
            logger.warning("Cannot suspend for %s: %s", effect.command, exc)
            result = ForegroundFinished(error="terminal handoff not supported here")
        except OSError as exc:
            result = ForegroundFinished(error=str(exc))
        else:
            result = ForegroundFinished(exit_code=exit_code)
        self.refresh(layout=True)
        self.post_message(ControllerResult(result))
        pod = self.controller.state.selected_pod
        if self.controller.state.refresh_armed and pod is not None:
            self._schedule_tick(pod.ref, self.controller.refresh_interval)

    # ------------------------------------------------------------------
    # Worker bodies: each returns exactly one result message
    # ------------------------------------------------------------------

    async def _load_workloads(self, effect: LoadWorkloads) -> WorkloadsLoaded:
        try:
            namespaces, workloads = await asyncio.gather(
                self.cluster.list_namespaces(),
                self.cluster.list_workloads(effect.namespace, effect.kind),
            )
        except Exception as exc:
            logger.warning("Listing %s in %s failed: %s", effect.kind, effect.namespace, exc)
            return WorkloadsLoaded(request=effect, error=str(exc))
        return WorkloadsLoaded(request=effect, workloads=workloads, namespaces=namespaces)

    async def _load_pods(self, effect: LoadPods) -> PodsLoaded:
        try:
            pods = await self.cluster.list_pods(effect.workload, effect.selector)
        except Exception as exc:
            logger.warning("Listing pods of %s failed: %s", effect.workload, exc)
            return PodsLoaded(request=effect, error=str(exc))
        return PodsLoaded(request=effect, pods=pods)

    async def _load_dashboard(self, effect: LoadDashboard) -> DashboardDataLoaded:
        try:
            return await self.cluster.fetch_dashboard_data(
                effect.pod, effect.tail_lines, from_tick=effect.from_tick
            )
        except Exception as exc:
            logger.warning("Dashboard fetch for %s failed: %s", effect.pod.ref, exc)
            return DashboardDataLoaded(pod=effect.pod.ref, from_tick=effect.from_tick)

    async def _delete_pod(self, effect: DeletePod) -> PodDeleted:
        try:
            await self.cluster.delete_pod(effect.pod)
        except Exception as exc:
            logger.warning("Deleting %s failed: %s", effect.pod, exc)
            return PodDeleted(pod=effect.pod, error=str(exc))
        return PodDeleted(pod=effect.pod)

    async def _scale(self, effect: ScaleWorkload) -> WorkloadActionFinished:
        try:
            await self.cluster.scale(effect.workload, effect.replicas)
        except Exception as exc:
            return WorkloadActionFinished(
                workload=effect.workload, action="scale", replicas=effect.replicas, error=str(exc)
            )
        return WorkloadActionFinished(
            workload=effect.workload, action="scale", replicas=effect.replicas
        )

    async def _restart(self, effect: RestartWorkload) -> WorkloadActionFinished:
        try:
            await self.cluster.restart(effect.workload)
        except Exception as exc:
            return WorkloadActionFinished(workload=effect.workload, action="restart", error=str(exc))
        return WorkloadActionFinished(workload=effect.workload, action="restart")

    async def _run_background(self, effect: RunBackground) -> BackgroundOutput:
        try:
            output = await asyncio.to_thread(self.process_runner.run_background, effect.command)
        except Exception as exc:
            logger.warning("Background command %r failed: %s", effect.command, exc)
            return BackgroundOutput(title=effect.title, error=str(exc))
        return BackgroundOutput(title=effect.title, content=output)

    async def _copy(self, effect: CopyToClipboard) -> ClipboardCopied:
        try:
            await asyncio.to_thread(self.process_runner.copy_to_clipboard, effect.text)
        except Exception as exc:
            return ClipboardCopied(label=effect.label, error=str(exc))
        return ClipboardCopied(label=effect.label)
