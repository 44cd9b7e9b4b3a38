"""
Routers package.
"""
from . import employees, health

__all__ = ["employees", "health"]
