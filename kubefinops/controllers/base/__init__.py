"""Base controller classes."""

from kubefinops.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
