"""Workload parser for cluster controller - turns kubectl JSON into WorkloadInfo rows."""

from __future__ import annotations

from typing import Any

from podlens.constants.enums import ResourceType
from podlens.models.core import WorkloadInfo
from podlens.utils.resource_parser import format_age, parse_timestamp


class WorkloadParser:
    """Parses controller objects of every supported kind."""

    def parse(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        """Dispatch to the kind-specific parser."""
        handler = {
            ResourceType.DEPLOYMENTS: self._parse_deployment,
            ResourceType.STATEFULSETS: self._parse_replicated,
            ResourceType.DAEMONSETS: self._parse_daemonset,
            ResourceType.JOBS: self._parse_job,
            ResourceType.CRONJOBS: self._parse_cronjob,
            ResourceType.PODS: self._parse_pod,
        }[kind]
        return handler(item, kind)

    def parse_items(self, data: dict[str, Any], kind: ResourceType) -> list[WorkloadInfo]:
        workloads = [self.parse(item, kind) for item in data.get("items", [])]
        return sorted(workloads, key=lambda workload: workload.name)

    @staticmethod
    def _base(item: dict[str, Any], kind: ResourceType) -> dict[str, Any]:
        metadata = item.get("metadata", {})
        spec = item.get("spec", {})
        return {
            "name": metadata.get("name", ""),
            "namespace": metadata.get("namespace", ""),
            "kind": kind.value,
            "age": format_age(parse_timestamp(metadata.get("creationTimestamp"))),
            "labels": metadata.get("labels") or {},
            "selector": (spec.get("selector") or {}).get("matchLabels") or {},
        }

    def _parse_deployment(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        status = item.get("status", {})
        ready = int(status.get("readyReplicas") or 0)
        replicas = int(status.get("replicas") or 0)
        state = "Running"
        if ready < replicas:
            state = "Progressing"
        if ready == 0 and replicas > 0:
            state = "NotReady"
        return WorkloadInfo(
            **self._base(item, kind), ready=ready, desired=replicas, status=state
        )

    def _parse_replicated(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        status = item.get("status", {})
        ready = int(status.get("readyReplicas") or 0)
        replicas = int(status.get("replicas") or 0)
        state = "Running" if ready >= replicas else "Progressing"
        return WorkloadInfo(
            **self._base(item, kind), ready=ready, desired=replicas, status=state
        )

    def _parse_daemonset(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        status = item.get("status", {})
        ready = int(status.get("numberReady") or 0)
        desired = int(status.get("desiredNumberScheduled") or 0)
        state = "Running" if ready >= desired else "Progressing"
        return WorkloadInfo(
            **self._base(item, kind), ready=ready, desired=desired, status=state
        )

    def _parse_job(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        status = item.get("status", {})
        succeeded = int(status.get("succeeded") or 0)
        failed = int(status.get("failed") or 0)
        completions = int(item.get("spec", {}).get("completions") or 1)
        state = "Running"
        if succeeded > 0:
            state = "Completed"
        elif failed > 0:
            state = "Failed"
        return WorkloadInfo(
            **self._base(item, kind), ready=succeeded, desired=completions, status=state
        )

    def _parse_cronjob(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        active = len(item.get("status", {}).get("active") or [])
        suspended = bool(item.get("spec", {}).get("suspend"))
        return WorkloadInfo(
            **self._base(item, kind),
            ready=active,
            desired=active,
            status="Suspended" if suspended else "Active",
        )

    def _parse_pod(self, item: dict[str, Any], kind: ResourceType) -> WorkloadInfo:
        statuses = item.get("status", {}).get("containerStatuses") or []
        containers = item.get("spec", {}).get("containers") or []
        base = self._base(item, kind)
        base["selector"] = {}
        return WorkloadInfo(
            **base,
            ready=sum(1 for status in statuses if status.get("ready")),
            desired=len(containers),
            status=item.get("status", {}).get("phase") or "Unknown",
        )
