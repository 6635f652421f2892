"""Base controller defining the cluster collaborator contract.

Every method is a coroutine so the app shell can run it inside a Textual
worker without blocking the event loop. Implementations raise on failure;
the shell converts exceptions into the ``error`` field of result messages.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod

from podlens.models.core import (
    EventInfo,
    LogLine,
    PodInfo,
    PodMetrics,
    PodRef,
    RelatedResources,
    WorkloadInfo,
    WorkloadRef,
)
from podlens.models.state.messages import DashboardDataLoaded
from podlens.utils.diagnostics import analyze_pod_issues

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses implement the individual queries and actions; the dashboard
    batch is composed here so any implementation gets the same
    independent-failure semantics.
    """

    context: str = ""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def list_namespaces(self) -> list[str]: ...

    @abstractmethod
    async def list_workloads(self, namespace: str, kind: str) -> list[WorkloadInfo]: ...

    @abstractmethod
    async def list_pods(
        self, workload: WorkloadRef, selector: dict[str, str] | None = None
    ) -> list[PodInfo]: ...

    @abstractmethod
    async def fetch_logs(
        self,
        pod: PodInfo,
        tail_lines: int,
        container: str | None = None,
        previous: bool = False,
    ) -> list[LogLine]: ...

    @abstractmethod
    async def fetch_events(self, pod: PodRef) -> list[EventInfo]: ...

    @abstractmethod
    async def fetch_metrics(self, pod: PodRef) -> PodMetrics | None:
        """Return usage, or ``None`` when metrics are not available."""
        ...

    @abstractmethod
    async def fetch_related(self, pod: PodInfo) -> RelatedResources: ...

    @abstractmethod
    async def delete_pod(self, pod: PodRef) -> None: ...

    @abstractmethod
    async def scale(self, workload: WorkloadRef, replicas: int) -> None: ...

    @abstractmethod
    async def restart(self, workload: WorkloadRef) -> None: ...

    async def fetch_dashboard_data(
        self, pod: PodInfo, tail_lines: int, from_tick: bool = False
    ) -> DashboardDataLoaded:
        """Fetch every dashboard part concurrently.

        Each part fails on its own: a failed part is ``None`` in the result
        and never prevents the others from arriving.
        """
        started = time.monotonic()
        logs, events, metrics, related = await asyncio.gather(
            self.fetch_logs(pod, tail_lines),
            self.fetch_events(pod.ref),
            self.fetch_metrics(pod.ref),
            self.fetch_related(pod),
            return_exceptions=True,
        )
        for label, result in (
            ("logs", logs),
            ("events", events),
            ("metrics", metrics),
            ("related", related),
        ):
            if isinstance(result, BaseException):
                logger.warning("Fetching %s for %s failed: %s", label, pod.ref, result)

        event_list = None if isinstance(events, BaseException) else events
        helpers = analyze_pod_issues(pod, event_list or [])
        logger.debug(
            "Dashboard data for %s fetched in %.0f ms",
            pod.ref,
            (time.monotonic() - started) * 1000,
        )
        return DashboardDataLoaded(
            pod=pod.ref,
            logs=None if isinstance(logs, BaseException) else logs,
            events=event_list,
            metrics=None if isinstance(metrics, BaseException) else metrics,
            related=None if isinstance(related, BaseException) else related,
            helpers=helpers,
            from_tick=from_tick,
        )
