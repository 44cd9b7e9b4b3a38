"""
Employee service.
Forwards employee operations to the repository.
"""
from typing import List, Optional
import logging

from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.exceptions import ValidationError
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee operations."""
    
    def __init__(self, employee_repo: EmployeeRepository):
        """
        Initialize employee service.
        
        Args:
            employee_repo: Employee repository instance
        """
        self.employee_repo = employee_repo
    
    async def get_all_employees(self) -> List[Employee]:
        return await self.employee_repo.find_all_employees()
    
    async def save_employee(self, employee: Employee) -> Employee:
        """
        Create a new employee.
        
        Args:
            employee: Employee data; id must be empty
            
        Returns:
            Stored employee with assigned id
            
        Raises:
            ValidationError: If the employee already carries an id
        """
        if employee.id:
            raise ValidationError(
                "Employee id is assigned by the server",
                details={"id": employee.id}
            )
        
        saved = await self.employee_repo.save(employee)
        logger.info(f"✅ Employee created: {saved.id}")
        return saved
    
    async def get_employee_by_id(self, employee_id: str) -> Optional[Employee]:
        return await self.employee_repo.find_employee(employee_id)
    
    async def delete_employee(self, employee_id: str) -> bool:
        """
        Delete an employee.
        
        Returns:
            True if the employee existed and was deleted
        """
        return await self.employee_repo.delete_by_id(employee_id)
