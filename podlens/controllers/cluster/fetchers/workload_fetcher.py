"""Workload fetcher for cluster controller - lists namespaces and workloads."""

from __future__ import annotations

import json
import logging
from typing import Any

from podlens.constants.enums import ResourceType
from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from podlens.controllers.cluster.parsers import WorkloadParser
from podlens.models.core import WorkloadInfo

logger = logging.getLogger(__name__)


class WorkloadFetcher:
    """Fetches namespaces and controller objects from the cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func
        self._parser = WorkloadParser()

    async def list_namespaces(self) -> list[str]:
        """Return namespace names sorted alphabetically."""
        output = await self._run_kubectl(
            (
                "get",
                "namespaces",
                "-o",
                "json",
                f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
            )
        )
        data = json.loads(output) if output else {}
        names = [
            item.get("metadata", {}).get("name", "").strip()
            for item in data.get("items", [])
        ]
        return sorted(name for name in names if name)

    async def list_workloads(self, namespace: str, kind: ResourceType) -> list[WorkloadInfo]:
        """Return workloads of ``kind`` in ``namespace`` sorted by name."""
        output = await self._run_kubectl(
            (
                "get",
                kind.value,
                "-n",
                namespace,
                "-o",
                "json",
                f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
            )
        )
        data = json.loads(output) if output else {}
        workloads = self._parser.parse_items(data, kind)
        logger.debug("Listed %d %s in %s", len(workloads), kind.value, namespace)
        return workloads
