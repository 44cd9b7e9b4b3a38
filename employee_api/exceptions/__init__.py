"""
Custom exceptions package.
"""
from employee_api.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    DatabaseError,
    ConfigurationError
)

__all__ = [
    "AppError",
    "ValidationError",
    "DatabaseError",
    "ConfigurationError"
]
