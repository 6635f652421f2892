"""Unit tests for the pod diagnostics table."""

from __future__ import annotations

from podlens.constants.enums import Severity
from podlens.models.core import EventInfo
from podlens.utils.diagnostics import analyze_pod_issues


class TestAnalyzePodIssues:
    """Test analyze_pod_issues function."""

    def test_healthy_pod_has_no_hints(self, make_pod) -> None:
        assert analyze_pod_issues(make_pod(), []) == []

    def test_crash_loop(self, make_pod) -> None:
        helpers = analyze_pod_issues(make_pod(status="CrashLoopBackOff"), [])
        assert helpers[0].issue == "CrashLoopBackOff"
        assert helpers[0].severity is Severity.HIGH
        assert "Check container logs for crash reason" in helpers[0].suggestions

    def test_err_image_pull_shares_image_hint(self, make_pod) -> None:
        helpers = analyze_pod_issues(make_pod(status="ErrImagePull"), [])
        assert helpers[0].issue == "Image Pull Failed"

    def test_pending_is_medium(self, make_pod) -> None:
        helpers = analyze_pod_issues(make_pod(status="Pending"), [])
        assert helpers[0].severity is Severity.MEDIUM

    def test_missing_limits_per_container(self, make_pod) -> None:
        pod = make_pod(containers=("app", "sidecar"), limits={})
        issues = [(h.issue, h.severity) for h in analyze_pod_issues(pod, [])]
        assert ("No memory limit on container app", Severity.WARNING) in issues
        assert ("No CPU limit on container sidecar", Severity.INFO) in issues
        assert len(issues) == 4

    def test_zero_limit_counts_as_missing(self, make_pod) -> None:
        pod = make_pod(limits={"cpu": "0", "memory": "256Mi"})
        issues = [h.issue for h in analyze_pod_issues(pod, [])]
        assert issues == ["No CPU limit on container app"]

    def test_failed_scheduling_event(self, make_pod) -> None:
        event = EventInfo(
            type="Warning",
            reason="FailedScheduling",
            message="0/3 nodes are available: insufficient cpu.",
        )
        helpers = analyze_pod_issues(make_pod(status="Pending"), [event])
        scheduling = [h for h in helpers if h.issue == "Scheduling Failed"]
        assert scheduling[0].suggestions[0] == event.message

    def test_normal_event_ignored(self, make_pod) -> None:
        event = EventInfo(type="Normal", reason="FailedScheduling")
        assert analyze_pod_issues(make_pod(), [event]) == []
