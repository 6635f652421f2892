"""Tests for modal overlays: confirm dialog, menus, help and result viewer."""

from __future__ import annotations

from podlens.components.overlays import (
    ActionMenu,
    ConfirmDialog,
    HelpPanel,
    MenuItem,
    ResultViewer,
    kubectl_commands,
    pod_actions,
    workload_actions,
)
from podlens.constants.enums import ConfirmAction, MenuAction

# =============================================================================
# ConfirmDialog
# =============================================================================


class TestConfirmDialog:
    """Tests for ConfirmDialog."""

    def _dialog(self) -> ConfirmDialog:
        dialog = ConfirmDialog()
        dialog.show("Delete Pod", "Are you sure?", ConfirmAction.DELETE, payload="web-1")
        return dialog

    def test_y_confirms_with_payload(self) -> None:
        dialog = self._dialog()
        result = dialog.handle_key("y")
        assert result is not None
        assert result.confirmed
        assert result.action is ConfirmAction.DELETE
        assert result.payload == "web-1"
        assert not dialog.visible

    def test_escape_cancels(self) -> None:
        result = self._dialog().handle_key("escape")
        assert result is not None and not result.confirmed

    def test_enter_uses_highlighted_button(self) -> None:
        dialog = self._dialog()
        dialog.handle_key("right")
        result = dialog.handle_key("enter")
        assert result is not None and not result.confirmed

    def test_enter_defaults_to_yes(self) -> None:
        result = self._dialog().handle_key("enter")
        assert result is not None and result.confirmed

    def test_other_keys_swallowed(self) -> None:
        dialog = self._dialog()
        assert dialog.handle_key("j") is None
        assert dialog.visible

    def test_hidden_dialog_ignores_keys(self) -> None:
        assert ConfirmDialog().handle_key("y") is None

    def test_render(self, render_text) -> None:
        output = render_text(self._dialog().render())
        assert "Delete Pod" in output
        assert "Yes" in output and "No" in output


# =============================================================================
# Action menus
# =============================================================================


class TestActionMenu:
    """Tests for ActionMenu key handling."""

    def _menu(self) -> ActionMenu:
        menu = ActionMenu()
        menu.show(
            "Copy",
            [MenuItem(label=f"item {i}", action=MenuAction.COPY, command=f"cmd {i}") for i in range(3)],
        )
        return menu

    def test_enter_selects_cursor(self) -> None:
        menu = self._menu()
        menu.handle_key("j")
        result = menu.handle_key("enter")
        assert result is not None
        assert result.item.command == "cmd 1"
        assert not menu.visible

    def test_digit_shortcut(self) -> None:
        result = self._menu().handle_key("3")
        assert result is not None and result.item.label == "item 2"

    def test_out_of_range_digit_ignored(self) -> None:
        menu = self._menu()
        assert menu.handle_key("7") is None
        assert menu.visible

    def test_escape_closes_without_result(self) -> None:
        menu = self._menu()
        assert menu.handle_key("escape") is None
        assert not menu.visible

    def test_cursor_clamped(self) -> None:
        menu = self._menu()
        for _ in range(5):
            menu.handle_key("down")
        assert menu.cursor == 2

    def test_empty_menu_not_shown(self) -> None:
        menu = ActionMenu()
        menu.show("Nothing", [])
        assert not menu.visible


class TestMenuBuilders:
    """Tests for menu item builders."""

    def test_kubectl_commands_single_container(self) -> None:
        items = kubectl_commands("default", "web-1", "", ["app"])
        assert items[0].command == "kubectl logs -n default web-1"
        assert items[-1].command == "kubectl logs -n default web-1 -c app --previous"
        assert all(item.action is MenuAction.COPY for item in items)

    def test_kubectl_commands_container_specific_first(self) -> None:
        items = kubectl_commands("default", "web-1", "sidecar", ["app", "sidecar"])
        assert items[0].command == "kubectl logs -n default web-1 -c sidecar"
        assert items[1].command == "kubectl exec -it -n default web-1 -c sidecar -- sh"

    def test_pod_actions_single_container(self) -> None:
        actions = [item.action for item in pod_actions("default", "web-1", ["app"])]
        assert actions == [
            MenuAction.DELETE,
            MenuAction.EXEC,
            MenuAction.EXEC,
            MenuAction.PORT_FORWARD,
            MenuAction.DESCRIBE,
            MenuAction.COPY,
        ]

    def test_pod_actions_exec_per_container(self) -> None:
        items = pod_actions("default", "web-1", ["app", "sidecar"])
        exec_commands = [item.command for item in items if item.action is MenuAction.EXEC]
        assert exec_commands == [
            "kubectl exec -it -n default web-1 -c app -- sh",
            "kubectl exec -it -n default web-1 -c sidecar -- sh",
        ]

    def test_port_forward_command(self) -> None:
        items = pod_actions("default", "web-1", ["app"])
        forward = next(item for item in items if item.action is MenuAction.PORT_FORWARD)
        assert forward.command == "kubectl port-forward -n default web-1 8080:8080"

    def test_workload_actions_deployment(self) -> None:
        items = workload_actions("default", "web", "deployments", 2)
        scales = [item.replicas for item in items if item.action is MenuAction.SCALE]
        assert scales == [1, 0, 1, 2, 3, 5, 3]
        assert items[-2].action is MenuAction.RESTART
        assert items[-1].action is MenuAction.COPY

    def test_workload_actions_zero_replicas(self) -> None:
        items = workload_actions("default", "web", "statefulsets", 0)
        assert items[0].label == "Scale to 0"

    def test_daemonset_only_restart(self) -> None:
        items = workload_actions("default", "agent", "daemonsets", 3)
        assert [item.action for item in items] == [MenuAction.RESTART]

    def test_jobs_have_no_actions(self) -> None:
        assert workload_actions("default", "migrate", "jobs", 1) == []


# =============================================================================
# Help and result viewer
# =============================================================================


class TestHelpPanel:
    """Tests for HelpPanel."""

    def test_toggle_and_close(self) -> None:
        panel = HelpPanel()
        panel.toggle()
        assert panel.visible
        panel.handle_key("j")
        assert panel.visible
        panel.handle_key("escape")
        assert not panel.visible

    def test_render_lists_bindings(self, render_text) -> None:
        output = render_text(HelpPanel().render())
        assert "Keyboard Shortcuts" in output
        assert "next error" in output

    def test_short_help(self) -> None:
        assert "? help" in HelpPanel().short_help().plain


class TestResultViewer:
    """Tests for ResultViewer."""

    def _viewer(self, lines: int = 100) -> ResultViewer:
        viewer = ResultViewer()
        viewer.show("Pod: web", "\n".join(f"line {i}" for i in range(lines)), 80, 26)
        return viewer

    def test_scroll_bounds(self) -> None:
        viewer = self._viewer()
        viewer.handle_key("k")
        assert viewer.offset == 0
        viewer.handle_key("G")
        assert viewer.offset == 100 - viewer.page_size
        viewer.handle_key("j")
        assert viewer.offset == viewer.max_offset

    def test_short_content_does_not_scroll(self) -> None:
        viewer = self._viewer(lines=3)
        viewer.handle_key("pagedown")
        assert viewer.offset == 0

    def test_close(self) -> None:
        viewer = self._viewer()
        viewer.handle_key("q")
        assert not viewer.visible

    def test_render_position(self, render_text) -> None:
        output = render_text(self._viewer().render())
        assert "Pod: web" in output
        assert "[20/100]" in output
