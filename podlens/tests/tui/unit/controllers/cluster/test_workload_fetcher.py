"""Tests for workload fetcher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from podlens.constants.enums import ResourceType
from podlens.controllers.cluster.fetchers.workload_fetcher import WorkloadFetcher


class TestWorkloadFetcher:
    """Tests for WorkloadFetcher class."""

    @pytest.fixture
    def mock_run_kubectl(self) -> AsyncMock:
        """Create mock run_kubectl function."""
        return AsyncMock()

    def test_fetcher_init(self, mock_run_kubectl: AsyncMock) -> None:
        fetcher = WorkloadFetcher(run_kubectl_func=mock_run_kubectl)
        assert fetcher._run_kubectl is mock_run_kubectl

    @pytest.mark.asyncio
    async def test_list_namespaces_sorted_and_blank_dropped(
        self, mock_run_kubectl: AsyncMock
    ) -> None:
        mock_run_kubectl.return_value = json.dumps(
            {
                "items": [
                    {"metadata": {"name": "kube-system"}},
                    {"metadata": {"name": " "}},
                    {"metadata": {"name": "default"}},
                ]
            }
        )
        namespaces = await WorkloadFetcher(mock_run_kubectl).list_namespaces()
        assert namespaces == ["default", "kube-system"]

    @pytest.mark.asyncio
    async def test_list_workloads_uses_kind_and_namespace(
        self, mock_run_kubectl: AsyncMock
    ) -> None:
        mock_run_kubectl.return_value = json.dumps(
            {
                "items": [
                    {
                        "metadata": {"name": "db", "namespace": "payments"},
                        "spec": {"selector": {"matchLabels": {"app": "db"}}},
                        "status": {"readyReplicas": 1, "replicas": 1},
                    }
                ]
            }
        )
        workloads = await WorkloadFetcher(mock_run_kubectl).list_workloads(
            "payments", ResourceType.STATEFULSETS
        )

        called_args = mock_run_kubectl.await_args.args[0]
        assert called_args[:4] == ("get", "statefulsets", "-n", "payments")
        assert workloads[0].name == "db"
        assert workloads[0].kind == "statefulsets"

    @pytest.mark.asyncio
    async def test_empty_output(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.return_value = ""
        fetcher = WorkloadFetcher(mock_run_kubectl)
        assert await fetcher.list_workloads("default", ResourceType.DEPLOYMENTS) == []

    @pytest.mark.asyncio
    async def test_kubectl_error_propagates(self, mock_run_kubectl: AsyncMock) -> None:
        mock_run_kubectl.side_effect = RuntimeError("Forbidden")
        with pytest.raises(RuntimeError, match="Forbidden"):
            await WorkloadFetcher(mock_run_kubectl).list_namespaces()
