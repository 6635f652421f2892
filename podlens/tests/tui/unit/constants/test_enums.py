"""Unit tests for enum definitions in constants/enums.py.

Tests cover:
- Panel focus cycling in both directions
- Resource type order and lookup fallback
- Action enum values used in kubectl commands
"""

from __future__ import annotations

from podlens.constants.enums import (
    ConfirmAction,
    NavigatorMode,
    PanelFocus,
    ResourceType,
    Severity,
    ViewState,
)

# =============================================================================
# PanelFocus
# =============================================================================


class TestPanelFocus:
    """Test tab-order cycling of dashboard panels."""

    def test_next_cycles_through_all_panels(self) -> None:
        focus = PanelFocus.LOGS
        seen = []
        for _ in range(4):
            seen.append(focus)
            focus = focus.next()
        assert seen == [PanelFocus.LOGS, PanelFocus.EVENTS, PanelFocus.METRICS, PanelFocus.MANIFEST]
        assert focus is PanelFocus.LOGS

    def test_previous_wraps_to_last(self) -> None:
        assert PanelFocus.LOGS.previous() is PanelFocus.MANIFEST

    def test_previous_inverts_next(self) -> None:
        for focus in PanelFocus:
            assert focus.next().previous() is focus


# =============================================================================
# ResourceType
# =============================================================================


class TestResourceType:
    """Test resource type enumeration."""

    def test_selection_order(self) -> None:
        assert [rt.value for rt in ResourceType] == [
            "deployments",
            "statefulsets",
            "daemonsets",
            "jobs",
            "cronjobs",
            "pods",
        ]

    def test_from_value_known(self) -> None:
        assert ResourceType.from_value("cronjobs") is ResourceType.CRONJOBS

    def test_from_value_unknown_falls_back(self) -> None:
        assert ResourceType.from_value("replicasets") is ResourceType.DEPLOYMENTS

    def test_from_value_none_falls_back(self) -> None:
        assert ResourceType.from_value(None) is ResourceType.DEPLOYMENTS


# =============================================================================
# Other enums
# =============================================================================


class TestStateEnums:
    """Test view and navigator enums."""

    def test_view_states(self) -> None:
        assert {state.value for state in ViewState} == {"navigating", "viewing"}

    def test_navigator_modes(self) -> None:
        assert len(NavigatorMode) == 4

    def test_severity_values(self) -> None:
        assert [s.value for s in Severity] == ["critical", "high", "medium", "warning", "info"]

    def test_confirm_action_port_forward_value(self) -> None:
        assert ConfirmAction.PORT_FORWARD.value == "port-forward"
