"""Limit and threshold constants for the TUI."""

from typing import Final

# ============================================================================
# Navigator
# ============================================================================

PAGE_SIZE: Final = 10
# Rows consumed by header, search line, column titles and scroll indicator.
NAVIGATOR_RESERVED_ROWS: Final = 8
NAVIGATOR_MIN_ROWS: Final = 5
NAVIGATOR_FALLBACK_ROWS: Final = 15

# ============================================================================
# Logs
# ============================================================================

MIN_LOG_TAIL_PER_CONTAINER: Final = 10

# ============================================================================
# Actions
# ============================================================================

MAX_SCALE_REPLICAS_STEP: Final = 10
MAX_MENU_SHORTCUTS: Final = 9

__all__ = [
    "MAX_MENU_SHORTCUTS",
    "MAX_SCALE_REPLICAS_STEP",
    "MIN_LOG_TAIL_PER_CONTAINER",
    "NAVIGATOR_FALLBACK_ROWS",
    "NAVIGATOR_MIN_ROWS",
    "NAVIGATOR_RESERVED_ROWS",
    "PAGE_SIZE",
]
