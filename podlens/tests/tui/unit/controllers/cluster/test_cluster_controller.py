"""Tests for the kubectl-backed cluster controller."""

from __future__ import annotations

import subprocess
from unittest.mock import AsyncMock, patch

import pytest

from podlens.controllers.cluster.controller import ClusterController
from podlens.models.core import PodRef, WorkloadRef

# =============================================================================
# kubectl invocation
# =============================================================================


class TestRunKubectl:
    """Tests for the synchronous kubectl wrapper."""

    def test_context_flag_prepended(self) -> None:
        controller = ClusterController(context="prod")
        with patch("podlens.controllers.cluster.controller.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="{}")
            assert controller._run_kubectl_sync(("get", "pods")) == "{}"
        assert run.call_args.args[0] == ["kubectl", "--context", "prod", "get", "pods"]

    def test_no_context(self) -> None:
        controller = ClusterController()
        with patch("podlens.controllers.cluster.controller.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="")
            controller._run_kubectl_sync(("version",))
        assert run.call_args.args[0] == ["kubectl", "version"]

    def test_non_zero_exit_raises_stderr(self) -> None:
        controller = ClusterController()
        with patch("podlens.controllers.cluster.controller.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(
                args=[], returncode=1, stdout="", stderr="error: the server doesn't have a resource type\n"
            )
            with pytest.raises(RuntimeError, match="doesn't have a resource type"):
                controller._run_kubectl_sync(("get", "widgets"))


class TestContextResolution:
    """Tests for static kubectl helpers."""

    def test_resolve_current_context(self) -> None:
        with patch("podlens.controllers.cluster.controller.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="kind-dev\n")
            assert ClusterController.resolve_current_context() == "kind-dev"

    def test_resolve_current_context_failure(self) -> None:
        with patch("podlens.controllers.cluster.controller.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(args=[], returncode=1, stdout="")
            assert ClusterController.resolve_current_context() is None

    def test_resolve_current_context_missing_binary(self) -> None:
        with patch(
            "podlens.controllers.cluster.controller.subprocess.run",
            side_effect=FileNotFoundError("kubectl"),
        ):
            assert ClusterController.resolve_current_context() is None

    def test_kubectl_available(self) -> None:
        with patch("podlens.controllers.cluster.controller.shutil.which", return_value=None):
            assert not ClusterController.kubectl_available()


# =============================================================================
# Actions
# =============================================================================


class TestActions:
    """Tests for delete, scale and restart."""

    @pytest.fixture
    def controller(self) -> ClusterController:
        controller = ClusterController(context="dev")
        controller._run_kubectl = AsyncMock(return_value="")
        return controller

    @pytest.mark.asyncio
    async def test_delete_pod(self, controller: ClusterController) -> None:
        await controller.delete_pod(PodRef(namespace="default", name="web-7f9"))
        assert controller._run_kubectl.await_args.args[0] == (
            "delete", "pod", "web-7f9", "-n", "default", "--wait=false",
        )

    @pytest.mark.asyncio
    async def test_scale(self, controller: ClusterController) -> None:
        workload = WorkloadRef(namespace="default", name="web", kind="deployments")
        await controller.scale(workload, 3)
        args = controller._run_kubectl.await_args.args[0]
        assert args[:3] == ("scale", "deployments/web", "--replicas=3")

    @pytest.mark.asyncio
    async def test_scale_rejects_daemonset(self, controller: ClusterController) -> None:
        workload = WorkloadRef(namespace="default", name="agent", kind="daemonsets")
        with pytest.raises(ValueError):
            await controller.scale(workload, 2)
        controller._run_kubectl.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_scale_rejects_negative(self, controller: ClusterController) -> None:
        workload = WorkloadRef(namespace="default", name="web", kind="deployments")
        with pytest.raises(ValueError):
            await controller.scale(workload, -1)

    @pytest.mark.asyncio
    async def test_restart(self, controller: ClusterController) -> None:
        workload = WorkloadRef(namespace="default", name="agent", kind="daemonsets")
        await controller.restart(workload)
        assert controller._run_kubectl.await_args.args[0][:3] == (
            "rollout", "restart", "daemonsets/agent",
        )

    @pytest.mark.asyncio
    async def test_restart_rejects_jobs(self, controller: ClusterController) -> None:
        workload = WorkloadRef(namespace="default", name="migrate", kind="jobs")
        with pytest.raises(ValueError):
            await controller.restart(workload)


class TestCheckConnection:
    """Tests for ClusterController.check_connection."""

    @pytest.mark.asyncio
    async def test_reachable(self) -> None:
        controller = ClusterController()
        controller._run_kubectl = AsyncMock(return_value="ok")
        assert await controller.check_connection()

    @pytest.mark.asyncio
    async def test_unreachable(self) -> None:
        controller = ClusterController()
        controller._run_kubectl = AsyncMock(side_effect=RuntimeError("connection refused"))
        assert not await controller.check_connection()
