"""Constants module for PodLens.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, styles, keywords with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (page sizes, row budgets)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in podlens.keyboard module.
"""

from podlens.constants.defaults import (
    DASHBOARD_LOG_TAIL_DEFAULT,
    LOG_LINE_LIMIT_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    RESOURCE_TYPE_DEFAULT,
    THEME_DEFAULT,
)
from podlens.constants.enums import (
    ConfirmAction,
    MenuAction,
    NavigatorMode,
    PanelFocus,
    ResourceType,
    Severity,
    ViewState,
)
from podlens.constants.values import APP_TITLE

__all__ = [
    "APP_TITLE",
    "DASHBOARD_LOG_TAIL_DEFAULT",
    "LOG_LINE_LIMIT_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "RESOURCE_TYPE_DEFAULT",
    "THEME_DEFAULT",
    "ConfirmAction",
    "MenuAction",
    "NavigatorMode",
    "PanelFocus",
    "ResourceType",
    "Severity",
    "ViewState",
]
