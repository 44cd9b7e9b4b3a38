"""
Employee repository.
Data access layer for employee operations.
"""
from typing import List, Optional
import logging

from .base_repository import BaseRepository
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""
    
    async def find_all_employees(self) -> List[Employee]:
        """Return every stored employee in insertion order."""
        documents = await self.find_all(sort=[("_id", 1)])
        return [Employee(**doc) for doc in documents]
    
    async def save(self, employee: Employee) -> Employee:
        """
        Insert an employee.
        
        Args:
            employee: Employee without an id
            
        Returns:
            The stored employee with its assigned id
        """
        employee_id = await self.create(employee.to_document())
        return employee.model_copy(update={"id": employee_id})
    
    async def find_employee(self, employee_id: str) -> Optional[Employee]:
        """
        Find employee by ID.
        
        Returns:
            Employee or None
        """
        document = await self.find_by_id(employee_id)
        return Employee(**document) if document else None
    
    async def delete_by_id(self, employee_id: str) -> bool:
        """
        Delete employee by ID.
        
        Returns:
            True if the employee existed and was removed
        """
        return await self.delete(employee_id)
