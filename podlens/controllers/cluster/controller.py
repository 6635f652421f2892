"""Cluster controller backed by the ``kubectl`` binary.

This module serves as the orchestrator for cluster data operations,
delegating to specialized fetchers for workloads, pods, events, metrics
and related resources.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess

from podlens.constants.defaults import RESTARTABLE_KINDS, SCALABLE_KINDS
from podlens.constants.enums import ResourceType
from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, KUBECTL_COMMAND_TIMEOUT
from podlens.controllers.base import BaseController
from podlens.controllers.cluster.fetchers import (
    EventFetcher,
    MetricsFetcher,
    PodFetcher,
    RelatedFetcher,
    WorkloadFetcher,
)
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

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Cluster collaborator that shells out to kubectl."""

    @staticmethod
    def kubectl_available() -> bool:
        return shutil.which("kubectl") is not None

    @staticmethod
    def resolve_current_context(timeout_seconds: int = 8) -> str | None:
        """Return kubectl's current context, or None when it cannot be read."""
        try:
            result = subprocess.run(
                ["kubectl", "config", "current-context"],
                capture_output=True,
                text=True,
                timeout=timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.warning("Cannot resolve current context: %s", exc)
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def __init__(self, context: str | None = None):
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name.
        """
        super().__init__()
        self.context = context or ""

        self._workload_fetcher = WorkloadFetcher(self._run_kubectl)
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._event_fetcher = EventFetcher(self._run_kubectl)
        self._metrics_fetcher = MetricsFetcher(self._run_kubectl)
        self._related_fetcher = RelatedFetcher(self._run_kubectl)

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def check_connection(self) -> bool:
        """Check if the API server answers."""
        try:
            await self._run_kubectl(
                ("get", "--raw", "/readyz", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
            )
        except (RuntimeError, OSError, subprocess.TimeoutExpired) as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def list_namespaces(self) -> list[str]:
        return await self._workload_fetcher.list_namespaces()

    async def list_workloads(self, namespace: str, kind: str) -> list[WorkloadInfo]:
        return await self._workload_fetcher.list_workloads(
            namespace, ResourceType.from_value(kind)
        )

    async def list_pods(
        self, workload: WorkloadRef, selector: dict[str, str] | None = None
    ) -> list[PodInfo]:
        return await self._pod_fetcher.list_pods(workload, selector)

    async def fetch_logs(
        self,
        pod: PodInfo,
        tail_lines: int,
        container: str | None = None,
        previous: bool = False,
    ) -> list[LogLine]:
        return await self._pod_fetcher.fetch_logs(pod, tail_lines, container, previous)

    async def fetch_events(self, pod: PodRef) -> list[EventInfo]:
        return await self._event_fetcher.fetch_events(pod)

    async def fetch_metrics(self, pod: PodRef) -> PodMetrics | None:
        return await self._metrics_fetcher.fetch_metrics(pod)

    async def fetch_related(self, pod: PodInfo) -> RelatedResources:
        return await self._related_fetcher.fetch_related(pod)

    async def delete_pod(self, pod: PodRef) -> None:
        logger.info("Deleting pod %s", pod)
        await self._run_kubectl(("delete", "pod", pod.name, "-n", pod.namespace, "--wait=false"))

    async def scale(self, workload: WorkloadRef, replicas: int) -> None:
        if workload.kind not in SCALABLE_KINDS:
            raise ValueError(f"cannot scale {workload.kind}")
        if replicas < 0:
            raise ValueError("replicas must not be negative")
        logger.info("Scaling %s to %d replicas", workload, replicas)
        await self._run_kubectl(
            (
                "scale",
                f"{workload.kind}/{workload.name}",
                f"--replicas={replicas}",
                "-n",
                workload.namespace,
            )
        )

    async def restart(self, workload: WorkloadRef) -> None:
        """Rolling restart; kubectl stamps the restartedAt pod template annotation."""
        if workload.kind not in RESTARTABLE_KINDS:
            raise ValueError(f"cannot restart {workload.kind}")
        logger.info("Restarting %s", workload)
        await self._run_kubectl(
            ("rollout", "restart", f"{workload.kind}/{workload.name}", "-n", workload.namespace)
        )
