"""Shared fixtures: model factories and an in-memory cluster collaborator."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

import pytest
from rich.console import Console, RenderableType

from podlens.controllers.base import BaseController
from podlens.models.core import (
    ContainerInfo,
    EventInfo,
    LogLine,
    PodInfo,
    PodMetrics,
    PodRef,
    RelatedResources,
    WorkloadInfo,
    WorkloadRef,
)
from podlens.models.state.app_settings import AppSettings


def build_pod(
    name: str = "web-7f9",
    namespace: str = "default",
    status: str = "Running",
    containers: tuple[str, ...] = ("app",),
    node: str = "node-1",
    limits: dict[str, str] | None = None,
) -> PodInfo:
    return PodInfo(
        name=name,
        namespace=namespace,
        node=node,
        ip="10.0.0.7",
        status=status,
        ready=f"{len(containers)}/{len(containers)}",
        labels={"app": "web"},
        containers=[
            ContainerInfo(
                name=container,
                image=f"registry/{container}:1.0",
                ready=True,
                state="Running",
                limits=dict(limits) if limits is not None else {"cpu": "500m", "memory": "256Mi"},
                requests={"cpu": "100m", "memory": "128Mi"},
            )
            for container in containers
        ],
        owner_kind="ReplicaSet",
        owner_name="web-5d8",
    )


def build_workload(
    name: str = "web",
    namespace: str = "default",
    kind: str = "deployments",
    status: str = "Running",
    ready: int = 2,
    desired: int = 2,
) -> WorkloadInfo:
    return WorkloadInfo(
        name=name,
        namespace=namespace,
        kind=kind,
        ready=ready,
        desired=desired,
        status=status,
        age="3d",
        selector={"app": name},
    )


class FakeCluster(BaseController):
    """In-memory cluster that records every call it receives."""

    def __init__(self) -> None:
        self.context = "kind-test"
        self.namespaces = ["default", "kube-system"]
        self.workloads = [build_workload("api"), build_workload("web")]
        self.pods = [build_pod("web-7f9"), build_pod("web-a1b")]
        self.logs = [LogLine(container="app", content="started")]
        self.events: list[EventInfo] = []
        self.metrics: PodMetrics | None = None
        self.fail_metrics = False
        self.fail_namespaces = False
        self.calls: list[tuple] = []

    async def check_connection(self) -> bool:
        return True

    async def list_namespaces(self) -> list[str]:
        self.calls.append(("list_namespaces",))
        if self.fail_namespaces:
            raise RuntimeError("namespaces is forbidden")
        return list(self.namespaces)

    async def list_workloads(self, namespace: str, kind: str) -> list[WorkloadInfo]:
        self.calls.append(("list_workloads", namespace, kind))
        return list(self.workloads)

    async def list_pods(
        self, workload: WorkloadRef, selector: dict[str, str] | None = None
    ) -> list[PodInfo]:
        self.calls.append(("list_pods", workload))
        return list(self.pods)

    async def fetch_logs(
        self,
        pod: PodInfo,
        tail_lines: int,
        container: str | None = None,
        previous: bool = False,
    ) -> list[LogLine]:
        self.calls.append(("fetch_logs", pod.ref))
        return list(self.logs)

    async def fetch_events(self, pod: PodRef) -> list[EventInfo]:
        return list(self.events)

    async def fetch_metrics(self, pod: PodRef) -> PodMetrics | None:
        if self.fail_metrics:
            raise RuntimeError("metrics API not available")
        return self.metrics

    async def fetch_related(self, pod: PodInfo) -> RelatedResources:
        return RelatedResources()

    async def delete_pod(self, pod: PodRef) -> None:
        self.calls.append(("delete_pod", pod))

    async def scale(self, workload: WorkloadRef, replicas: int) -> None:
        self.calls.append(("scale", workload, replicas))

    async def restart(self, workload: WorkloadRef) -> None:
        self.calls.append(("restart", workload))


@pytest.fixture
def make_pod() -> Callable[..., PodInfo]:
    """Factory for PodInfo instances."""
    return build_pod


@pytest.fixture
def make_workload() -> Callable[..., WorkloadInfo]:
    """Factory for WorkloadInfo instances."""
    return build_workload


@pytest.fixture
def fake_cluster() -> FakeCluster:
    """In-memory cluster collaborator."""
    return FakeCluster()


@pytest.fixture
def settings() -> AppSettings:
    """Default settings with a fast refresh interval."""
    return AppSettings(refresh_interval_seconds=2)


def render_plain(renderable: RenderableType, width: int = 120) -> str:
    """Render a rich renderable to plain text."""
    buffer = StringIO()
    Console(file=buffer, width=width, color_system=None, legacy_windows=False).print(renderable)
    return buffer.getvalue()


@pytest.fixture
def render_text() -> Callable[..., str]:
    """Plain-text renderer for component output."""
    return render_plain
