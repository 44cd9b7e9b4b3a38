"""
Utilities package.
Provides helper functions and dependencies.
"""
from .logger import setup_logging, log_database_operation
from .dependencies import get_database

__all__ = [
    "setup_logging",
    "log_database_operation",
    "get_database"
]
