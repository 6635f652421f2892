"""Pod fetcher for cluster controller - lists a workload's pods and their logs."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any

from podlens.constants.enums import ResourceType
from podlens.constants.limits import MIN_LOG_TAIL_PER_CONTAINER
from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from podlens.controllers.cluster.parsers import PodParser
from podlens.models.core import LogLine, PodInfo, WorkloadRef

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class PodFetcher:
    """Fetches pod data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func
        self._parser = PodParser()

    @staticmethod
    def _selector_arg(selector: dict[str, str]) -> str:
        return ",".join(f"{key}={value}" for key, value in sorted(selector.items()))

    async def _get_json(self, args: tuple[str, ...]) -> dict[str, Any]:
        output = await self._run_kubectl(
            (*args, "-o", "json", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
        )
        return json.loads(output) if output else {}

    async def _cronjob_job_names(self, workload: WorkloadRef) -> list[str]:
        data = await self._get_json(("get", "jobs", "-n", workload.namespace))
        names = []
        for job in data.get("items", []):
            owners = job.get("metadata", {}).get("ownerReferences") or []
            if any(
                owner.get("kind") == "CronJob" and owner.get("name") == workload.name
                for owner in owners
            ):
                names.append(job["metadata"]["name"])
        return names

    async def list_pods(
        self, workload: WorkloadRef, selector: dict[str, str] | None = None
    ) -> list[PodInfo]:
        """Return the pods owned by ``workload``.

        Pods listed as workloads resolve to themselves; cron jobs resolve
        through the jobs they own; everything else uses its label selector.
        """
        if workload.kind == ResourceType.PODS.value:
            data = await self._get_json(("get", "pod", workload.name, "-n", workload.namespace))
            return [self._parser.parse_pod(data)]

        if workload.kind == ResourceType.CRONJOBS.value:
            job_names = await self._cronjob_job_names(workload)
            if not job_names:
                return []
            label_selector = f"job-name in ({','.join(sorted(job_names))})"
        elif selector:
            label_selector = self._selector_arg(selector)
        else:
            logger.warning("Workload %s has no selector; no pods listed", workload)
            return []

        data = await self._get_json(
            ("get", "pods", "-n", workload.namespace, "-l", label_selector)
        )
        return self._parser.parse_pods(data)

    async def _container_logs(
        self, pod: PodInfo, container: str, tail: int, previous: bool
    ) -> list[LogLine]:
        args: tuple[str, ...] = (
            "logs",
            pod.name,
            "-n",
            pod.namespace,
            "-c",
            container,
            f"--tail={tail}",
            "--timestamps",
        )
        if previous:
            args = (*args, "--previous")
        output = await self._run_kubectl(args)
        return self._parser.parse_log_output(output or "", container)

    async def fetch_logs(
        self,
        pod: PodInfo,
        tail_lines: int,
        container: str | None = None,
        previous: bool = False,
    ) -> list[LogLine]:
        """Fetch logs of one or all containers, merged in timestamp order.

        The tail budget is split evenly across containers with a floor of
        ``MIN_LOG_TAIL_PER_CONTAINER``. A container whose logs cannot be read
        is skipped unless every container fails.
        """
        containers = [container] if container else pod.container_names
        if not containers:
            return []
        per_container = max(MIN_LOG_TAIL_PER_CONTAINER, tail_lines // len(containers))

        results = await asyncio.gather(
            *(
                self._container_logs(pod, name, per_container, previous)
                for name in containers
            ),
            return_exceptions=True,
        )
        lines: list[LogLine] = []
        errors: list[BaseException] = []
        for name, result in zip(containers, results):
            if isinstance(result, BaseException):
                logger.debug("Logs for %s/%s unavailable: %s", pod.name, name, result)
                errors.append(result)
                continue
            lines.extend(result)
        if errors and len(errors) == len(containers):
            raise errors[0]

        lines.sort(key=lambda line: line.timestamp or _EPOCH)
        return lines
