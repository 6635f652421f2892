"""Base controller contract."""

from podlens.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
