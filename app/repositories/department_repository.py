import logging
from itertools import groupby
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence
from sqlalchemy import select, insert, update, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.core.database import transaction
from app.models.hr.employee import Employee
from app.models.organization.department import Department, department_employees, department_managers
from app.repositories.employee_repository import EmployeeRepository
from app.schemas.hr.employee_schema import EmployeeResponse
from app.schemas.organization.department_schema import DepartmentResponse

logger = logging.getLogger(__name__)

manager_alias = aliased(Employee, name="m")
member_alias = aliased(Employee, name="e")

# One row per (department, member); manager columns repeat on every row and
# both sides are null when the left joins find nothing.
DEPARTMENT_ROWS_QUERY = (
    select(
        Department.id.label("d_id"),
        Department.name.label("d_name"),
        manager_alias.id.label("m_id"),
        manager_alias.first_name.label("m_first_name"),
        manager_alias.last_name.label("m_last_name"),
        manager_alias.position.label("m_position"),
        manager_alias.is_full_time.label("m_is_full_time"),
        member_alias.id.label("e_id"),
        member_alias.first_name.label("e_first_name"),
        member_alias.last_name.label("e_last_name"),
        member_alias.position.label("e_position"),
        member_alias.is_full_time.label("e_is_full_time"),
    )
    .select_from(Department)
    .outerjoin(department_managers, department_managers.c.department_id == Department.id)
    .outerjoin(manager_alias, manager_alias.id == department_managers.c.employee_id)
    .outerjoin(department_employees, department_employees.c.department_id == Department.id)
    .outerjoin(member_alias, member_alias.id == department_employees.c.employee_id)
    .order_by(Department.id, member_alias.id)
)


def _employee_from_row(row: Mapping[str, Any], prefix: str) -> Optional[EmployeeResponse]:
    if row[f"{prefix}_id"] is None:
        return None
    return EmployeeResponse(
        id=int(row[f"{prefix}_id"]),
        first_name=row[f"{prefix}_first_name"],
        last_name=row[f"{prefix}_last_name"],
        position=row[f"{prefix}_position"],
        is_full_time=bool(row[f"{prefix}_is_full_time"]),
    )


def department_from_rows(rows: Sequence[Mapping[str, Any]]) -> DepartmentResponse:
    """Fold the flat join rows of a single department into one aggregate.

    The department and manager fields come from the first row. Members are
    collected across all rows, skipping the null placeholders the left join
    produces for a department without members and rows repeating a member
    already seen.
    """
    if not rows:
        raise ValueError("Cannot build a department from zero rows")

    first = rows[0]
    members: List[EmployeeResponse] = []
    seen = set()
    for row in rows:
        member = _employee_from_row(row, "e")
        if member is None or member.id in seen:
            continue
        seen.add(member.id)
        members.append(member)

    return DepartmentResponse(
        id=int(first["d_id"]),
        name=first["d_name"],
        manager=_employee_from_row(first, "m"),
        employees=members,
    )


def group_department_rows(rows: Iterable[Mapping[str, Any]]) -> Iterator[DepartmentResponse]:
    """Yield one department per run of consecutive rows sharing a department id."""
    for _, department_rows in groupby(rows, key=lambda row: row["d_id"]):
        yield department_from_rows(list(department_rows))


class DepartmentRepository:
    """Loads and stores departments together with their manager and members.

    A department spans the departments table and the two relationship
    tables; every write touches all three inside a single transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.employee_repository = EmployeeRepository(session)

    # ---------- Reads ----------
    async def _fetch(self, query) -> List[DepartmentResponse]:
        result = await self.session.execute(query)
        return list(group_department_rows(result.mappings().all()))

    async def find_all(self) -> List[DepartmentResponse]:
        return await self._fetch(DEPARTMENT_ROWS_QUERY)

    async def find_by_id(self, department_id: int) -> Optional[DepartmentResponse]:
        departments = await self._fetch(DEPARTMENT_ROWS_QUERY.where(Department.id == department_id))
        return departments[0] if departments else None

    async def find_by_name(self, name: str) -> Optional[DepartmentResponse]:
        departments = await self._fetch(DEPARTMENT_ROWS_QUERY.where(Department.name == name))
        return departments[0] if departments else None

    # ---------- Writes ----------
    async def save(self, department: DepartmentResponse) -> DepartmentResponse:
        """Insert or update a department and replace its relationships.

        Manager and members are saved as employees first, then the old
        relationship rows are deleted and the new ones inserted. Any
        failure rolls the whole call back.
        """
        async with transaction(self.session):
            saved = await self._save_department(department)
            saved = await self._save_manager(saved)
            saved = await self._save_employees(saved)
            await self._delete_department_manager(saved)
            await self._save_department_manager(saved)
            await self._delete_department_employees(saved)
            await self._save_department_employees(saved)
        logger.debug(f"Saved department {saved.id} ({len(saved.employees)} employees)")
        return saved

    async def delete(self, department: DepartmentResponse) -> None:
        """Delete a department and its relationship rows, keeping the employees."""
        async with transaction(self.session):
            await self._delete_department_manager(department)
            await self._delete_department_employees(department)
            await self.session.execute(delete(Department).where(Department.id == department.id))
        logger.debug(f"Deleted department {department.id}")

    async def _save_department(self, department: DepartmentResponse) -> DepartmentResponse:
        if department.id is None:
            row = Department(name=department.name)
            self.session.add(row)
            await self.session.flush()
            return department.model_copy(update={"id": row.id})

        await self.session.execute(
            update(Department).where(Department.id == department.id).values(name=department.name)
        )
        return department.model_copy()

    async def _save_manager(self, department: DepartmentResponse) -> DepartmentResponse:
        if department.manager is None:
            return department
        manager = await self.employee_repository.persist(department.manager)
        return department.model_copy(update={"manager": manager})

    async def _save_employees(self, department: DepartmentResponse) -> DepartmentResponse:
        # Members form a set: a repeated id is saved and linked once.
        employees = []
        seen = set()
        for employee in department.employees:
            if employee.id is not None:
                if employee.id in seen:
                    continue
                seen.add(employee.id)
            employees.append(await self.employee_repository.persist(employee))
        return department.model_copy(update={"employees": employees})

    async def _delete_department_manager(self, department: DepartmentResponse) -> None:
        # A manager is linked to at most one department at a time.
        condition = department_managers.c.department_id == department.id
        if department.manager is not None:
            condition = or_(condition, department_managers.c.employee_id == department.manager.id)
        await self.session.execute(delete(department_managers).where(condition))

    async def _save_department_manager(self, department: DepartmentResponse) -> None:
        if department.manager is None:
            return
        await self.session.execute(
            insert(department_managers).values(
                department_id=department.id,
                employee_id=department.manager.id,
            )
        )

    async def _delete_department_employees(self, department: DepartmentResponse) -> None:
        # Likewise an employee is a member of at most one department.
        condition = department_employees.c.department_id == department.id
        employee_ids = [employee.id for employee in department.employees if employee.id is not None]
        if employee_ids:
            condition = or_(condition, department_employees.c.employee_id.in_(employee_ids))
        await self.session.execute(delete(department_employees).where(condition))

    async def _save_department_employees(self, department: DepartmentResponse) -> None:
        if not department.employees:
            return
        await self.session.execute(
            insert(department_employees),
            [
                {"department_id": department.id, "employee_id": employee.id}
                for employee in department.employees
            ],
        )
