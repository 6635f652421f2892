"""Tests for workload parser."""

from __future__ import annotations

from typing import Any

from podlens.constants.enums import ResourceType
from podlens.controllers.cluster.parsers.workload_parser import WorkloadParser


def _item(name: str, spec: dict[str, Any] | None = None, status: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "metadata": {"name": name, "namespace": "default", "labels": {"tier": "web"}},
        "spec": {"selector": {"matchLabels": {"app": name}}, **(spec or {})},
        "status": status or {},
    }


class TestWorkloadParser:
    """Tests for WorkloadParser across kinds."""

    def test_deployment_running(self) -> None:
        workload = WorkloadParser().parse(
            _item("web", status={"readyReplicas": 3, "replicas": 3}), ResourceType.DEPLOYMENTS
        )
        assert (workload.ready, workload.desired, workload.status) == (3, 3, "Running")
        assert workload.kind == "deployments"
        assert workload.selector == {"app": "web"}

    def test_deployment_progressing_and_not_ready(self) -> None:
        parser = WorkloadParser()
        partial = parser.parse(
            _item("web", status={"readyReplicas": 1, "replicas": 3}), ResourceType.DEPLOYMENTS
        )
        none_ready = parser.parse(_item("web", status={"replicas": 2}), ResourceType.DEPLOYMENTS)
        assert partial.status == "Progressing"
        assert none_ready.status == "NotReady"

    def test_statefulset(self) -> None:
        workload = WorkloadParser().parse(
            _item("db", status={"readyReplicas": 1, "replicas": 2}), ResourceType.STATEFULSETS
        )
        assert workload.status == "Progressing"

    def test_daemonset(self) -> None:
        workload = WorkloadParser().parse(
            _item("agent", status={"numberReady": 4, "desiredNumberScheduled": 4}),
            ResourceType.DAEMONSETS,
        )
        assert (workload.ready, workload.desired, workload.status) == (4, 4, "Running")

    def test_job_states(self) -> None:
        parser = WorkloadParser()
        done = parser.parse(_item("migrate", status={"succeeded": 1}), ResourceType.JOBS)
        failed = parser.parse(_item("migrate", status={"failed": 2}), ResourceType.JOBS)
        assert done.status == "Completed"
        assert failed.status == "Failed"
        assert done.desired == 1

    def test_cronjob(self) -> None:
        parser = WorkloadParser()
        active = parser.parse(
            _item("backup", status={"active": [{"name": "backup-1"}]}), ResourceType.CRONJOBS
        )
        suspended = parser.parse(_item("backup", spec={"suspend": True}), ResourceType.CRONJOBS)
        assert (active.ready, active.status) == (1, "Active")
        assert active.ready_display == "1 active"
        assert suspended.status == "Suspended"

    def test_bare_pod_has_no_selector(self) -> None:
        item = {
            "metadata": {"name": "debug", "namespace": "default"},
            "spec": {"containers": [{"name": "a"}, {"name": "b"}]},
            "status": {"phase": "Running", "containerStatuses": [{"ready": True}, {"ready": False}]},
        }
        workload = WorkloadParser().parse(item, ResourceType.PODS)
        assert workload.selector == {}
        assert workload.ready_display == "1/2"
        assert workload.status == "Running"

    def test_parse_items_sorted(self) -> None:
        data = {"items": [_item("web"), _item("api")]}
        names = [w.name for w in WorkloadParser().parse_items(data, ResourceType.DEPLOYMENTS)]
        assert names == ["api", "web"]
