import logging
from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import transaction
from app.models.hr.employee import Employee
from app.schemas.hr.employee_schema import EmployeeResponse

logger = logging.getLogger(__name__)


def to_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        position=employee.position,
        is_full_time=employee.is_full_time,
    )


class EmployeeRepository:
    """Reads and writes single rows of the employees table.

    Lookups that find nothing return ``None`` or an empty list; deciding
    whether absence is an error is left to the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # ---------- Reads ----------
    async def _fetch_all(self, query) -> List[EmployeeResponse]:
        result = await self.session.execute(
            query.order_by(Employee.id).execution_options(populate_existing=True)
        )
        return [to_employee_response(employee) for employee in result.scalars().all()]

    async def find_all(self) -> List[EmployeeResponse]:
        return await self._fetch_all(select(Employee))

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        result = await self.session.execute(
            select(Employee).where(Employee.id == employee_id).execution_options(populate_existing=True)
        )
        employee = result.scalar_one_or_none()
        return to_employee_response(employee) if employee is not None else None

    async def find_by_first_name(self, first_name: str) -> Optional[EmployeeResponse]:
        result = await self.session.execute(
            select(Employee).where(Employee.first_name == first_name).order_by(Employee.id).limit(1)
        )
        employee = result.scalar_one_or_none()
        return to_employee_response(employee) if employee is not None else None

    async def find_all_by_position(self, position: str) -> List[EmployeeResponse]:
        return await self._fetch_all(select(Employee).where(Employee.position == position))

    async def find_all_by_full_time(self, is_full_time: bool) -> List[EmployeeResponse]:
        return await self._fetch_all(select(Employee).where(Employee.is_full_time == is_full_time))

    async def find_all_by_position_and_full_time(self, position: str, is_full_time: bool) -> List[EmployeeResponse]:
        return await self._fetch_all(
            select(Employee).where(
                Employee.position == position,
                Employee.is_full_time == is_full_time
            )
        )

    # ---------- Writes ----------
    async def persist(self, employee: EmployeeResponse) -> EmployeeResponse:
        """Insert or update one employee inside the caller's transaction.

        An employee without an id is inserted and comes back carrying the
        id the database generated; otherwise the row with that id is
        overwritten.
        """
        values = {
            "first_name": employee.first_name,
            "last_name": employee.last_name,
            "position": employee.position,
            "is_full_time": employee.is_full_time,
        }
        if employee.id is None:
            row = Employee(**values)
            self.session.add(row)
            await self.session.flush()
            logger.debug(f"Inserted employee {row.id}")
            return employee.model_copy(update={"id": row.id})

        await self.session.execute(
            update(Employee).where(Employee.id == employee.id).values(**values)
        )
        logger.debug(f"Updated employee {employee.id}")
        return employee.model_copy()

    async def save(self, employee: EmployeeResponse) -> EmployeeResponse:
        async with transaction(self.session):
            return await self.persist(employee)

    async def delete(self, employee: EmployeeResponse) -> None:
        async with transaction(self.session):
            await self.session.execute(delete(Employee).where(Employee.id == employee.id))
        logger.debug(f"Deleted employee {employee.id}")
