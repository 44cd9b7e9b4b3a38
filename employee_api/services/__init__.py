"""
Services package.
Business logic layer for all operations.
"""
from .employee_service import EmployeeService

__all__ = [
    "EmployeeService",
]
