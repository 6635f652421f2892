"""Pod parser for cluster controller - parses pod objects and log output."""

from __future__ import annotations

from typing import Any

from podlens.constants.values import LOG_ERROR_KEYWORDS
from podlens.models.core import ContainerInfo, LogLine, PodCondition, PodInfo
from podlens.utils.resource_parser import format_age, parse_timestamp


def is_error_line(content: str) -> bool:
    """Return True when a log line mentions any error keyword."""
    lowered = content.lower()
    return any(keyword in lowered for keyword in LOG_ERROR_KEYWORDS)


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def pod_status(pod: dict[str, Any]) -> str:
        """Status as kubectl shows it: terminating, container reason, or phase."""
        if pod.get("metadata", {}).get("deletionTimestamp"):
            return "Terminating"
        status = pod.get("status", {})
        for container_status in status.get("containerStatuses") or []:
            state = container_status.get("state") or {}
            waiting_reason = (state.get("waiting") or {}).get("reason")
            if waiting_reason:
                return waiting_reason
            terminated_reason = (state.get("terminated") or {}).get("reason")
            if terminated_reason:
                return terminated_reason
        return status.get("phase") or "Unknown"

    @staticmethod
    def _parse_container(spec: dict[str, Any], status: dict[str, Any] | None) -> ContainerInfo:
        resources = spec.get("resources") or {}
        info = ContainerInfo(
            name=spec.get("name", ""),
            image=spec.get("image", ""),
            requests={k: str(v) for k, v in (resources.get("requests") or {}).items()},
            limits={k: str(v) for k, v in (resources.get("limits") or {}).items()},
            ports=[
                int(port["containerPort"])
                for port in spec.get("ports") or []
                if "containerPort" in port
            ],
        )
        if status is None:
            return info

        info.ready = bool(status.get("ready"))
        info.restarts = int(status.get("restartCount") or 0)
        state = status.get("state") or {}
        if "running" in state:
            info.state = "Running"
        elif "waiting" in state:
            info.state = "Waiting"
            info.reason = (state.get("waiting") or {}).get("reason", "")
        elif "terminated" in state:
            info.state = "Terminated"
            info.reason = (state.get("terminated") or {}).get("reason", "")
        last_terminated = (status.get("lastState") or {}).get("terminated") or {}
        info.last_termination_reason = last_terminated.get("reason", "")
        return info

    def parse_pod(self, pod: dict[str, Any]) -> PodInfo:
        """Parse a single pod object."""
        metadata = pod.get("metadata", {})
        spec = pod.get("spec", {})
        status = pod.get("status", {})

        statuses_by_name = {
            container_status.get("name"): container_status
            for container_status in status.get("containerStatuses") or []
        }
        containers = [
            self._parse_container(container, statuses_by_name.get(container.get("name")))
            for container in spec.get("containers") or []
        ]
        owners = metadata.get("ownerReferences") or []
        owner = owners[0] if owners else {}

        return PodInfo(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            node=spec.get("nodeName", ""),
            ip=status.get("podIP", ""),
            status=self.pod_status(pod),
            ready=f"{sum(1 for c in containers if c.ready)}/{len(containers)}",
            restarts=sum(c.restarts for c in containers),
            age=format_age(parse_timestamp(metadata.get("creationTimestamp"))),
            labels=metadata.get("labels") or {},
            containers=containers,
            conditions=[
                PodCondition(
                    type=condition.get("type", ""),
                    status=condition.get("status", ""),
                    reason=condition.get("reason", ""),
                    message=condition.get("message", ""),
                )
                for condition in status.get("conditions") or []
            ],
            owner_kind=owner.get("kind", ""),
            owner_name=owner.get("name", ""),
        )

    def parse_pods(self, data: dict[str, Any]) -> list[PodInfo]:
        pods = [self.parse_pod(item) for item in data.get("items", [])]
        return sorted(pods, key=lambda pod: pod.name)

    @staticmethod
    def parse_log_output(output: str, container: str) -> list[LogLine]:
        """Parse ``kubectl logs --timestamps`` output for one container."""
        lines: list[LogLine] = []
        for raw in output.splitlines():
            if not raw.strip():
                continue
            timestamp = None
            content = raw
            head, sep, tail = raw.partition(" ")
            if sep:
                timestamp = parse_timestamp(head)
                if timestamp is not None:
                    content = tail
            lines.append(
                LogLine(
                    timestamp=timestamp,
                    container=container,
                    content=content,
                    is_error=is_error_line(content),
                )
            )
        return lines
