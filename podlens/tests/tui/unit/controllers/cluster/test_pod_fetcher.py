"""Tests for pod fetcher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from podlens.controllers.cluster.fetchers.pod_fetcher import PodFetcher
from podlens.models.core import WorkloadRef


def _pod_item(name: str) -> dict:
    return {
        "metadata": {"name": name, "namespace": "default"},
        "spec": {"containers": [{"name": "app"}]},
        "status": {"phase": "Running"},
    }


# =============================================================================
# Pod listing
# =============================================================================


class TestListPods:
    """Tests for PodFetcher.list_pods."""

    @pytest.fixture
    def mock_run_kubectl(self) -> AsyncMock:
        """Create mock run_kubectl function."""
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_selector_query(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.return_value = json.dumps({"items": [_pod_item("web-b"), _pod_item("web-a")]})
        workload = WorkloadRef(namespace="default", name="web", kind="deployments")

        pods = await PodFetcher(mock_run_kubectl).list_pods(
            workload, {"tier": "frontend", "app": "web"}
        )

        called_args = mock_run_kubectl.await_args.args[0]
        assert called_args[called_args.index("-l") + 1] == "app=web,tier=frontend"
        assert [pod.name for pod in pods] == ["web-a", "web-b"]

    @pytest.mark.asyncio
    async def test_missing_selector_lists_nothing(self, mock_run_kubectl: AsyncMock) -> None:
        workload = WorkloadRef(namespace="default", name="web", kind="deployments")
        assert await PodFetcher(mock_run_kubectl).list_pods(workload, {}) == []
        mock_run_kubectl.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bare_pod_resolves_to_itself(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.return_value = json.dumps(_pod_item("debug"))
        workload = WorkloadRef(namespace="default", name="debug", kind="pods")

        pods = await PodFetcher(mock_run_kubectl).list_pods(workload)

        assert [pod.name for pod in pods] == ["debug"]
        assert mock_run_kubectl.await_args.args[0][:3] == ("get", "pod", "debug")

    @pytest.mark.asyncio
    async def test_cronjob_resolves_through_jobs(self, mock_run_kubectl: AsyncMock) -> None:
        jobs = {
            "items": [
                {
                    "metadata": {
                        "name": "backup-28001",
                        "ownerReferences": [{"kind": "CronJob", "name": "backup"}],
                    }
                },
                {
                    "metadata": {
                        "name": "other-1",
                        "ownerReferences": [{"kind": "CronJob", "name": "other"}],
                    }
                },
            ]
        }
        mock_run_kubectl.side_effect = [
            json.dumps(jobs),
            json.dumps({"items": [_pod_item("backup-28001-x")]}),
        ]
        workload = WorkloadRef(namespace="default", name="backup", kind="cronjobs")

        pods = await PodFetcher(mock_run_kubectl).list_pods(workload)

        pod_args = mock_run_kubectl.await_args_list[1].args[0]
        assert pod_args[pod_args.index("-l") + 1] == "job-name in (backup-28001)"
        assert pods[0].name == "backup-28001-x"

    @pytest.mark.asyncio
    async def test_cronjob_without_jobs(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.return_value = json.dumps({"items": []})
        workload = WorkloadRef(namespace="default", name="backup", kind="cronjobs")
        assert await PodFetcher(mock_run_kubectl).list_pods(workload) == []
        assert mock_run_kubectl.await_count == 1


# =============================================================================
# Logs
# =============================================================================


class TestFetchLogs:
    """Tests for PodFetcher.fetch_logs."""

    @pytest.mark.asyncio
    async def test_merges_containers_by_timestamp(self, make_pod) -> None:
        outputs = {
            "app": "2024-05-01T10:00:02Z app second\n2024-05-01T10:00:00Z app first\n",
            "sidecar": "2024-05-01T10:00:01Z sidecar middle\n",
        }

        async def run_kubectl(args: tuple[str, ...]) -> str:
            return outputs[args[args.index("-c") + 1]]

        pod = make_pod(containers=("app", "sidecar"))
        lines = await PodFetcher(run_kubectl).fetch_logs(pod, 200)

        assert [line.content for line in lines] == [
            "app first",
            "sidecar middle",
            "app second",
        ]

    @pytest.mark.asyncio
    async def test_tail_split_with_floor(self, make_pod) -> None:
        mock_run_kubectl = AsyncMock(return_value="")
        pod = make_pod(containers=("a", "b", "c", "d"))

        await PodFetcher(mock_run_kubectl).fetch_logs(pod, 20)

        tails = {call.args[0][6] for call in mock_run_kubectl.await_args_list}
        assert tails == {"--tail=10"}

    @pytest.mark.asyncio
    async def test_single_container_and_previous(self, make_pod) -> None:
        mock_run_kubectl = AsyncMock(return_value="")
        pod = make_pod(containers=("app", "sidecar"))

        await PodFetcher(mock_run_kubectl).fetch_logs(pod, 100, container="sidecar", previous=True)

        args = mock_run_kubectl.await_args.args[0]
        assert mock_run_kubectl.await_count == 1
        assert "sidecar" in args
        assert "--tail=100" in args
        assert args[-1] == "--previous"

    @pytest.mark.asyncio
    async def test_partial_failure_keeps_other_containers(self, make_pod) -> None:
        async def run_kubectl(args: tuple[str, ...]) -> str:
            if "sidecar" in args:
                raise RuntimeError("container is waiting to start")
            return "2024-05-01T10:00:00Z ok\n"

        pod = make_pod(containers=("app", "sidecar"))
        lines = await PodFetcher(run_kubectl).fetch_logs(pod, 100)
        assert [line.container for line in lines] == ["app"]

    @pytest.mark.asyncio
    async def test_all_containers_failing_raises(self, make_pod) -> None:
        mock_run_kubectl = AsyncMock(side_effect=RuntimeError("pod not found"))
        with pytest.raises(RuntimeError, match="pod not found"):
            await PodFetcher(mock_run_kubectl).fetch_logs(make_pod(), 100)
