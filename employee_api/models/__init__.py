"""
Models package.
Pydantic schemas for all entities.
"""
from .employee import Employee

__all__ = [
    "Employee",
]
