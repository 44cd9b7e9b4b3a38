"""Middleware package."""
from .error_handler import add_exception_handlers

__all__ = ["add_exception_handlers"]
