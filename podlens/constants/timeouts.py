"""Timeout constants for the TUI.

All timeout and interval values for API requests and external commands.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
BACKGROUND_COMMAND_TIMEOUT: Final = 60
CLIPBOARD_TIMEOUT: Final = 5

# ============================================================================
# Refresh
# ============================================================================

REFRESH_INTERVAL_MIN_SECONDS: Final = 1.0

__all__ = [
    "BACKGROUND_COMMAND_TIMEOUT",
    "CLIPBOARD_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "REFRESH_INTERVAL_MIN_SECONDS",
]
