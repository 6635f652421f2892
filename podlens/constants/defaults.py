"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Cluster defaults
# ============================================================================

NAMESPACE_DEFAULT: Final = "default"
RESOURCE_TYPE_DEFAULT: Final = "deployments"

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
REFRESH_INTERVAL_DEFAULT: Final = 5
LOG_LINE_LIMIT_DEFAULT: Final = 500

# Lines requested per dashboard refresh, split across containers.
DASHBOARD_LOG_TAIL_DEFAULT: Final = 200

# ============================================================================
# Action defaults
# ============================================================================

PORT_FORWARD_PORT_DEFAULT: Final = 8080
SCALE_PRESETS: Final = (0, 1, 2, 3, 5)
SCALABLE_KINDS: Final = ("deployments", "statefulsets")
RESTARTABLE_KINDS: Final = ("deployments", "statefulsets", "daemonsets")

__all__ = [
    "DASHBOARD_LOG_TAIL_DEFAULT",
    "LOG_LINE_LIMIT_DEFAULT",
    "NAMESPACE_DEFAULT",
    "PORT_FORWARD_PORT_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "RESOURCE_TYPE_DEFAULT",
    "RESTARTABLE_KINDS",
    "SCALABLE_KINDS",
    "SCALE_PRESETS",
    "THEME_DEFAULT",
]
