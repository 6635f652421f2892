"""Metrics fetcher for cluster controller - reads metrics-server via ``kubectl top``."""

from __future__ import annotations

import logging
from typing import Any

from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from podlens.models.core import ContainerMetrics, PodMetrics, PodRef
from podlens.utils.resource_parser import (
    format_cpu,
    format_memory,
    memory_str_to_bytes,
    parse_cpu,
)

logger = logging.getLogger(__name__)


class MetricsFetcher:
    """Fetches per-container usage of one pod."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @staticmethod
    def parse_top_output(output: str, pod: PodRef) -> PodMetrics:
        """Parse ``kubectl top pod --containers --no-headers`` rows.

        Each row is ``POD CONTAINER CPU MEMORY``.
        """
        containers: list[ContainerMetrics] = []
        for row in output.splitlines():
            fields = row.split()
            if len(fields) < 4:
                continue
            _, name, cpu, memory = fields[:4]
            millicores = parse_cpu(cpu) * 1000
            num_bytes = memory_str_to_bytes(memory)
            containers.append(
                ContainerMetrics(
                    name=name,
                    cpu=format_cpu(millicores),
                    memory=format_memory(num_bytes),
                    cpu_millicores=millicores,
                    memory_bytes=num_bytes,
                )
            )
        return PodMetrics(name=pod.name, namespace=pod.namespace, containers=containers)

    async def fetch_metrics(self, pod: PodRef) -> PodMetrics | None:
        """Return usage for ``pod`` or ``None`` when metrics-server is unavailable."""
        try:
            output = await self._run_kubectl(
                (
                    "top",
                    "pod",
                    pod.name,
                    "-n",
                    pod.namespace,
                    "--containers",
                    "--no-headers",
                    f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
                )
            )
        except Exception as exc:
            logger.debug("Metrics unavailable for %s: %s", pod, exc)
            return None
        metrics = self.parse_top_output(output or "", pod)
        return metrics if metrics.containers else None
