"""Event fetcher for cluster controller - fetches events involving one pod."""

from __future__ import annotations

import json
from typing import Any

from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from podlens.controllers.cluster.parsers import EventParser
from podlens.models.core import EventInfo, PodRef


class EventFetcher:
    """Fetches event data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func
        self._parser = EventParser()

    @staticmethod
    def _build_pod_events_args(pod: PodRef) -> tuple[str, ...]:
        return (
            "get",
            "events",
            "-n",
            pod.namespace,
            "--field-selector",
            f"involvedObject.name={pod.name}",
            "-o",
            "json",
            f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
        )

    async def fetch_events(self, pod: PodRef) -> list[EventInfo]:
        """Return events for ``pod``, newest first."""
        output = await self._run_kubectl(self._build_pod_events_args(pod))
        data: dict[str, Any] = json.loads(output) if output else {}
        return self._parser.parse_events(data)
