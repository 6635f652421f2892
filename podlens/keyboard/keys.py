"""Key binding table: logical actions mapped to Textual key names.

The table holds Textual ``Binding`` objects. The app does not install them as
``BINDINGS``; ``KeyMap`` resolves each key event against them so the root
controller keeps the single dispatch step.
"""

from __future__ import annotations

from typing import Annotated

from textual.binding import Binding

# ============================================================================
# KEY BINDING TABLE
# ============================================================================

KEY_BINDINGS: list[Binding] = [
    # Navigation
    Binding("up,k", "up", "up"),
    Binding("down,j", "down", "down"),
    Binding("g,home", "home", "first"),
    Binding("G,end", "end", "last"),
    Binding("pageup,ctrl+u", "page_up", "page up"),
    Binding("pagedown,ctrl+d", "page_down", "page down"),
    # Global actions
    Binding("enter", "enter", "select"),
    Binding("escape", "back", "back"),
    Binding("q,ctrl+c", "quit", "quit"),
    Binding("?", "help", "help"),
    Binding("r", "refresh", "refresh"),
    Binding("/", "search", "search"),
    Binding("c", "clear", "clear filter"),
    # Panel navigation
    Binding("tab", "next_panel", "next panel"),
    Binding("shift+tab", "prev_panel", "prev panel"),
    Binding("1", "panel_1", "logs"),
    Binding("2", "panel_2", "events"),
    Binding("3", "panel_3", "metrics"),
    Binding("4", "panel_4", "manifest"),
    # Mode switches
    Binding("n", "namespace", "namespace"),
    Binding("t", "resource_type", "resource type"),
    # Panel actions
    Binding("F", "toggle_follow", "follow logs"),
    Binding("e", "jump_to_error", "next error"),
    Binding("w", "toggle_warnings", "warnings only"),
    Binding("f", "toggle_full_view", "full manifest"),
    Binding("v", "toggle_fullscreen", "fullscreen"),
    Binding("C", "cycle_container", "next container"),
    # Menus
    Binding("a", "pod_actions", "pod actions"),
    Binding("y", "copy_commands", "copy command"),
    Binding("a", "workload_actions", "workload actions"),
]


def binding_keys(binding: Binding) -> tuple[str, ...]:
    """Split a binding's comma separated key list."""
    return tuple(key.strip() for key in binding.key.split(",") if key.strip())


class KeyMap:
    """Immutable lookup over the key binding table."""

    def __init__(self, bindings: list[Binding] | None = None) -> None:
        table = KEY_BINDINGS if bindings is None else bindings
        self._bindings: dict[str, Binding] = {binding.action: binding for binding in table}
        self._keys: dict[str, frozenset[str]] = {
            action: frozenset(binding_keys(binding)) for action, binding in self._bindings.items()
        }

    def matches(self, key: str, action: str) -> bool:
        """Return True when ``key`` triggers ``action``."""
        return key in self._keys.get(action, ())

    def binding(self, action: str) -> Binding:
        return self._bindings[action]

    def label(self, action: str) -> str:
        binding = self._bindings[action]
        if binding.key_display:
            return binding.key_display
        return "/".join(_display_key(key) for key in binding_keys(binding))

    def description(self, action: str) -> str:
        return self._bindings[action].description


def normalize_key(key: str, character: str | None = None) -> str:
    """Collapse a Textual key event into the name used by the binding table.

    Printable characters are reported as themselves ("?", "/", "G"), everything
    else keeps Textual's key name ("enter", "escape", "shift+tab").
    """
    if character and len(character) == 1 and character.isprintable():
        return character
    return key


def _display_key(key: str) -> str:
    return {
        "up": "↑",
        "down": "↓",
        "escape": "esc",
        "pageup": "PgUp",
        "pagedown": "PgDn",
        "shift+tab": "S-tab",
    }.get(key, key)


DEFAULT_KEYMAP = KeyMap()

# ============================================================================
# HELP SECTIONS
# ============================================================================

HELP_SECTIONS: list[Annotated[tuple[str, tuple[str, ...]], "title, actions"]] = [
    ("Navigation", ("up", "down", "home", "end", "page_up", "page_down", "enter", "back")),
    ("Navigator", ("search", "clear", "namespace", "resource_type", "workload_actions")),
    ("Dashboard", ("next_panel", "prev_panel", "panel_1", "panel_2", "panel_3", "panel_4", "toggle_fullscreen")),
    ("Panels", ("toggle_follow", "jump_to_error", "cycle_container", "toggle_warnings", "toggle_full_view")),
    ("Actions", ("pod_actions", "copy_commands", "refresh", "help", "quit")),
]

SHORT_HELP_ACTIONS: tuple[str, ...] = ("enter", "back", "search", "refresh", "help", "quit")

__all__ = [
    "DEFAULT_KEYMAP",
    "HELP_SECTIONS",
    "KEY_BINDINGS",
    "SHORT_HELP_ACTIONS",
    "KeyMap",
    "binding_keys",
    "normalize_key",
]
