"""Plain state components rendered with rich.

Every component owns its own slice of state, reacts to ``handle_key`` and
renders a rich renderable; none of them performs I/O.
"""

from podlens.components.bars import Breadcrumb, StatusBar
from podlens.components.dashboard import Dashboard, PendingAction
from podlens.components.navigator import Navigator

__all__ = ["Breadcrumb", "Dashboard", "Navigator", "PendingAction", "StatusBar"]
