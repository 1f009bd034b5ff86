import logging
from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EmployeeNotFoundError
from app.repositories.employee_repository import EmployeeRepository
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeResponse, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, session: AsyncSession, repository: Optional[EmployeeRepository] = None):
        self.session = session
        self.repository = repository or EmployeeRepository(session)

    # ---------- Getters ----------
    async def get_employees(
        self,
        position: Optional[str] = None,
        is_full_time: Optional[bool] = None
    ) -> List[EmployeeResponse]:
        """All employees, optionally filtered by position and/or full-time flag"""
        if position is not None:
            if is_full_time is not None:
                return await self.repository.find_all_by_position_and_full_time(position, is_full_time)
            return await self.repository.find_all_by_position(position)
        if is_full_time is not None:
            return await self.repository.find_all_by_full_time(is_full_time)
        return await self.repository.find_all()

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    # ---------- Create / Update / Delete ----------
    async def create_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        try:
            employee = await self.repository.save(
                EmployeeResponse(
                    first_name=data.first_name,
                    last_name=data.last_name,
                    position=data.position,
                    is_full_time=data.is_full_time,
                )
            )
            logger.info(f"Employee created: {employee.id} - {employee.first_name} {employee.last_name}")
            return employee

        except SQLAlchemyError as e:
            logger.error(f"Error creating employee: {e}")
            raise

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        try:
            existing = await self.get_employee(employee_id)
            employee = await self.repository.save(
                existing.model_copy(update={
                    "first_name": data.first_name,
                    "last_name": data.last_name,
                    "position": data.position,
                    "is_full_time": data.is_full_time,
                })
            )
            logger.info(f"Employee updated: {employee.id}")
            return employee

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error updating employee {employee_id}: {e}")
            raise

    async def delete_employee(self, employee_id: int) -> None:
        try:
            employee = await self.get_employee(employee_id)
            await self.repository.delete(employee)
            logger.info(f"Employee deleted: {employee_id}")

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting employee {employee_id}: {e}")
            raise
