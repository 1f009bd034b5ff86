from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.services.hr.employee_service import EmployeeService
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeUpdate, EmployeeResponse

router = APIRouter()

@router.get("", response_model=List[EmployeeResponse])
async def get_employees(
    position: Optional[str] = Query(None),
    is_full_time: Optional[bool] = Query(None, alias="fullTime"),
    session: AsyncSession = Depends(get_async_session)
):
    """Get all employees, optionally filtered by position and full time status"""
    service = EmployeeService(session)
    return await service.get_employees(position, is_full_time)

@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get employee by ID"""
    service = EmployeeService(session)
    return await service.get_employee(employee_id)

@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: EmployeeCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Create a new employee"""
    service = EmployeeService(session)
    return await service.create_employee(employee)

@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    employee: EmployeeUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update employee"""
    service = EmployeeService(session)
    return await service.update_employee(employee_id, employee)

@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Delete employee"""
    service = EmployeeService(session)
    await service.delete_employee(employee_id)
    return {"message": "Employee deleted successfully"}
