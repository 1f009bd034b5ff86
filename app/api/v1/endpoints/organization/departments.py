from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_async_session
from app.services.organization.department_service import DepartmentService
from app.schemas.hr.employee_schema import EmployeeResponse
from app.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate, DepartmentResponse

router = APIRouter()

@router.get("", response_model=List[DepartmentResponse])
async def get_departments(session: AsyncSession = Depends(get_async_session)):
    """Get all departments with their managers and employees"""
    service = DepartmentService(session)
    return await service.get_departments()

@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Get department by ID"""
    service = DepartmentService(session)
    return await service.get_department(department_id)

@router.get("/{department_id}/employees", response_model=List[EmployeeResponse])
async def get_department_employees(
    department_id: int,
    is_full_time: Optional[bool] = Query(None, alias="fullTime"),
    session: AsyncSession = Depends(get_async_session)
):
    """Get the employees of a department"""
    service = DepartmentService(session)
    return await service.get_department_employees(department_id, is_full_time)

@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    department: DepartmentCreate,
    session: AsyncSession = Depends(get_async_session)
):
    """Create a new department"""
    service = DepartmentService(session)
    return await service.create_department(department)

@router.put("/{department_id}", response_model=DepartmentResponse)
async def update_department(
    department_id: int,
    department: DepartmentUpdate,
    session: AsyncSession = Depends(get_async_session)
):
    """Update department"""
    service = DepartmentService(session)
    return await service.update_department(department_id, department)

@router.delete("/{department_id}")
async def delete_department(
    department_id: int,
    session: AsyncSession = Depends(get_async_session)
):
    """Delete department"""
    service = DepartmentService(session)
    await service.delete_department(department_id)
    return {"message": "Department deleted successfully"}
