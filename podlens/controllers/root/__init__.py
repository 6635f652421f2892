"""Root controller package."""

from podlens.controllers.root.controller import RootController

__all__ = ["RootController"]
