"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "PodLens"
CONFIG_DIR_NAME: Final = "podlens"
CONFIG_FILE_NAME: Final = "config.json"
CONFIG_PATH_ENV: Final = "PODLENS_CONFIG"

# ============================================================================
# Logs
# ============================================================================

# Case-insensitive substrings that mark a log line as an error.
LOG_ERROR_KEYWORDS: Final = (
    "error",
    "err:",
    "fatal",
    "panic",
    "exception",
    "failed",
    "failure",
    "crash",
    "critical",
)

# Substrings the logs panel jumps between with "next error".
LOG_JUMP_KEYWORDS: Final = ("error", "fatal", "panic")

# ============================================================================
# Styles (rich style strings)
# ============================================================================

STYLE_TITLE: Final = "bold #7aa2f7"
STYLE_SUBTITLE: Final = "#9aa5ce"
STYLE_MUTED: Final = "#565f89"
STYLE_SELECTED: Final = "bold reverse"
STYLE_ERROR: Final = "bold #f7768e"
STYLE_WARNING: Final = "#e0af68"
STYLE_SUCCESS: Final = "bold #9ece6a"
STYLE_BORDER: Final = "#414868"
STYLE_BORDER_ACTIVE: Final = "#7aa2f7"

STATUS_STYLES: Final = {
    "Running": "#9ece6a",
    "Completed": "#7dcfff",
    "Succeeded": "#7dcfff",
    "Active": "#9ece6a",
    "Progressing": "#e0af68",
    "Pending": "#e0af68",
    "ContainerCreating": "#e0af68",
    "Suspended": "#565f89",
    "Terminating": "#e0af68",
    "NotReady": "#f7768e",
    "Failed": "#f7768e",
    "Error": "#f7768e",
    "CrashLoopBackOff": "#f7768e",
    "ImagePullBackOff": "#f7768e",
    "ErrImagePull": "#f7768e",
    "OOMKilled": "#f7768e",
}

__all__ = [
    "APP_TITLE",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "CONFIG_PATH_ENV",
    "LOG_ERROR_KEYWORDS",
    "LOG_JUMP_KEYWORDS",
    "STATUS_STYLES",
    "STYLE_BORDER",
    "STYLE_BORDER_ACTIVE",
    "STYLE_ERROR",
    "STYLE_MUTED",
    "STYLE_SELECTED",
    "STYLE_SUBTITLE",
    "STYLE_SUCCESS",
    "STYLE_TITLE",
    "STYLE_WARNING",
]
