import logging
from typing import List, Optional
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DepartmentAlreadyExistsError, DepartmentNotFoundError
from app.repositories.department_repository import DepartmentRepository
from app.schemas.hr.employee_schema import EmployeeResponse
from app.schemas.organization.department_schema import DepartmentCreate, DepartmentResponse, DepartmentUpdate

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, session: AsyncSession, repository: Optional[DepartmentRepository] = None):
        self.session = session
        self.repository = repository or DepartmentRepository(session)

    # ---------- Getters ----------
    async def get_departments(self) -> List[DepartmentResponse]:
        return await self.repository.find_all()

    async def get_department(self, department_id: int) -> DepartmentResponse:
        department = await self.repository.find_by_id(department_id)
        if department is None:
            raise DepartmentNotFoundError(department_id)
        return department

    async def get_department_employees(
        self,
        department_id: int,
        is_full_time: Optional[bool] = None
    ) -> List[EmployeeResponse]:
        """Members of a department, optionally only those with the given full-time flag."""
        department = await self.get_department(department_id)
        if is_full_time is None:
            return department.employees
        return [employee for employee in department.employees if employee.is_full_time == is_full_time]

    # ---------- Create / Update / Delete ----------
    async def create_department(self, data: DepartmentCreate) -> DepartmentResponse:
        try:
            existing = await self.repository.find_by_name(data.name)
            if existing is not None:
                raise DepartmentAlreadyExistsError(existing.name)

            department = await self.repository.save(DepartmentResponse(name=data.name))
            logger.info(f"Department created: {department.id} - {department.name}")
            return department

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error creating department {data.name!r}: {e}")
            raise

    async def update_department(self, department_id: int, data: DepartmentUpdate) -> DepartmentResponse:
        """Overwrite name and members; the manager only when one is given."""
        try:
            current = await self.get_department(department_id)

            changes = {"name": data.name, "employees": list(data.employees)}
            if data.manager is not None:
                changes["manager"] = data.manager

            department = await self.repository.save(current.model_copy(update=changes))
            logger.info(f"Department updated: {department.id} - {department.name}")
            return department

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error updating department {department_id}: {e}")
            raise

    async def delete_department(self, department_id: int) -> None:
        try:
            department = await self.get_department(department_id)
            await self.repository.delete(department)
            logger.info(f"Department deleted: {department.id} - {department.name}")

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting department {department_id}: {e}")
            raise
