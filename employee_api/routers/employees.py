"""
Employees router.
API endpoints for creating, listing, reading and deleting employees.
"""
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import List
import logging

from employee_api.database import Collections
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService
from employee_api.models.employee import Employee
from employee_api.utils.dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter()


# Dependency to get employee service
async def get_employee_service(
    db: AsyncIOMotorDatabase = Depends(get_database)
) -> EmployeeService:
    """Get employee service with injected dependencies."""
    return EmployeeService(EmployeeRepository(db[Collections.EMPLOYEES]))


@router.get(
    "",
    response_model=List[Employee],
    summary="List employees"
)
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service)
) -> List[Employee]:
    """Return every employee."""
    logger.info("Received GET request to /employees")
    employees = await service.get_all_employees()
    logger.info(f"Responding to /employees with {len(employees)} employees, Status: OK")
    return employees


async def _add_employee(employee: Employee, service: EmployeeService, route: str):
    logger.info(f"Received POST request to {route} with employee data: {employee.model_dump()}")
    try:
        saved = await service.save_employee(employee)
    except Exception as e:
        logger.error(f"Failed to add employee: {e}, Status: BAD_REQUEST")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    
    logger.info(f"Successfully added employee with ID: {saved.id}, Status: CREATED")
    return saved


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
    responses={400: {"description": "Employee could not be saved"}}
)
async def add_employee(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Create a new employee.
    
    **Request Body:**
    - **name**, **designation**, **department**: free text
    - **salary**: number
    
    The id is assigned by the server; a body carrying an id is rejected.
    
    **Returns:**
    - The stored employee, including its id
    """
    return await _add_employee(employee, service, "/employees")


@router.post(
    "/addEmployee",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    deprecated=True,
    include_in_schema=False
)
async def add_employee_legacy(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service)
):
    """Older route for creating an employee. Use POST /employees."""
    return await _add_employee(employee, service, "/employees/addEmployee")


@router.get(
    "/{employee_id}",
    response_model=Employee,
    summary="Get employee",
    responses={404: {"description": "Employee not found"}}
)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service)
):
    logger.info(f"Received GET request to /employees/{employee_id}")
    employee = await service.get_employee_by_id(employee_id)
    
    if employee is None:
        logger.warning(f"Employee with ID: {employee_id} not found, Status: NOT_FOUND")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    
    logger.info(f"Found employee with ID: {employee_id}, Status: OK")
    return employee


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    summary="Delete employee",
    responses={404: {"description": "Employee not found"}}
)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service)
) -> PlainTextResponse:
    logger.info(f"Received DELETE request to /employees/{employee_id}")
    
    if await service.delete_employee(employee_id):
        logger.info(f"Successfully deleted employee with ID: {employee_id}, Status: OK")
        return PlainTextResponse("Employee deleted successfully")
    
    logger.warning(f"Employee with ID: {employee_id} not found, Status: NOT_FOUND")
    return PlainTextResponse("Employee not found", status_code=status.HTTP_404_NOT_FOUND)
