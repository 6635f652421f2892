"""Keyboard bindings module.

All physical keys are resolved to logical actions through the key binding
table in ``podlens.keyboard.keys``; components never compare raw key names
except for free-text input.
"""

from podlens.keyboard.keys import (
    DEFAULT_KEYMAP,
    HELP_SECTIONS,
    KEY_BINDINGS,
    SHORT_HELP_ACTIONS,
    KeyMap,
    binding_keys,
    normalize_key,
)

__all__ = [
    "DEFAULT_KEYMAP",
    "HELP_SECTIONS",
    "KEY_BINDINGS",
    "SHORT_HELP_ACTIONS",
    "KeyMap",
    "binding_keys",
    "normalize_key",
]
