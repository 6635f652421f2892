"""Static table mapping pod status and events to diagnostic suggestions."""

from __future__ import annotations

from podlens.constants.enums import Severity
from podlens.models.core import DebugHelper, EventInfo, PodInfo

_STATUS_HELPERS: dict[str, tuple[str, Severity, tuple[str, ...]]] = {
    "CrashLoopBackOff": (
        "CrashLoopBackOff",
        Severity.HIGH,
        (
            "Check container logs for crash reason",
            "Verify resource limits aren't too restrictive",
            "Check liveness probe configuration",
            "Look for application startup errors",
        ),
    ),
    "ImagePullBackOff": (
        "Image Pull Failed",
        Severity.HIGH,
        (
            "Verify image name and tag are correct",
            "Check image registry credentials",
            "Ensure node has network access to registry",
            "Verify image exists in the registry",
        ),
    ),
    "Pending": (
        "Pod Pending",
        Severity.MEDIUM,
        (
            "Check scheduler events for scheduling failures",
            "Verify node resources are available",
            "Check node selectors and tolerations",
            "Review resource requests against available capacity",
        ),
    ),
    "OOMKilled": (
        "Out of Memory",
        Severity.HIGH,
        (
            "Increase memory limits for the container",
            "Check for memory leaks in application",
            "Review memory usage patterns in metrics",
            "Consider horizontal scaling instead",
        ),
    ),
}
_STATUS_HELPERS["ErrImagePull"] = _STATUS_HELPERS["ImagePullBackOff"]


def _is_unset(value: str | None) -> bool:
    return value in (None, "", "0")


def analyze_pod_issues(pod: PodInfo, events: list[EventInfo]) -> list[DebugHelper]:
    """Return diagnostic hints for a pod's status, containers and events."""
    helpers: list[DebugHelper] = []

    status_helper = _STATUS_HELPERS.get(pod.status)
    if status_helper is not None:
        issue, severity, suggestions = status_helper
        helpers.append(
            DebugHelper(issue=issue, severity=severity, suggestions=list(suggestions))
        )

    for container in pod.containers:
        if _is_unset(container.limits.get("memory")):
            helpers.append(
                DebugHelper(
                    issue=f"No memory limit on container {container.name}",
                    severity=Severity.WARNING,
                    suggestions=[
                        "Set memory limits to prevent OOM issues",
                        "Memory limits help with resource planning",
                    ],
                )
            )
        if _is_unset(container.limits.get("cpu")):
            helpers.append(
                DebugHelper(
                    issue=f"No CPU limit on container {container.name}",
                    severity=Severity.INFO,
                    suggestions=["Consider setting CPU limits for predictable performance"],
                )
            )

    for event in events:
        if event.is_warning and event.reason == "FailedScheduling":
            helpers.append(
                DebugHelper(
                    issue="Scheduling Failed",
                    severity=Severity.HIGH,
                    suggestions=[event.message, "Check node resources and selectors"],
                )
            )

    return helpers
