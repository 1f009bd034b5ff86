import pytest
from unittest.mock import AsyncMock, MagicMock
from app.core.exceptions import DepartmentAlreadyExistsError, DepartmentNotFoundError, EmployeeNotFoundError
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeUpdate
from app.schemas.organization.department_schema import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from app.services.hr.employee_service import EmployeeService
from app.services.organization.department_service import DepartmentService
from tests.factories import make_employee

BOB = make_employee("Bob", "Steeves", "Director of Software Development", True, id=10)
NEIL = make_employee("Neil", "White", "Software Developer", True, id=11)
JOANNA = make_employee("Joanna", "Bernier", "Software Tester", False, id=12)
CATHY = make_employee("Cathy", "Ouellette", "Director of Human Resources", True, id=13)


def dev_department() -> DepartmentResponse:
    return DepartmentResponse(id=10, name="Software Development", manager=BOB, employees=[NEIL, JOANNA])


def saved_as_given(department):
    return department


@pytest.fixture
def department_repository():
    repository = MagicMock()
    repository.find_all = AsyncMock(return_value=[dev_department()])
    repository.find_by_id = AsyncMock(return_value=dev_department())
    repository.find_by_name = AsyncMock(return_value=None)
    repository.save = AsyncMock(side_effect=saved_as_given)
    repository.delete = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def employee_repository():
    repository = MagicMock()
    for name in ("find_all", "find_all_by_position", "find_all_by_full_time", "find_all_by_position_and_full_time"):
        setattr(repository, name, AsyncMock(return_value=[]))
    repository.find_by_id = AsyncMock(return_value=NEIL)
    repository.save = AsyncMock(side_effect=saved_as_given)
    repository.delete = AsyncMock(return_value=None)
    return repository


class TestDepartmentService:
    """Existence and uniqueness rules of the department service"""

    async def test_get_department_not_found(self, department_repository):
        department_repository.find_by_id.return_value = None
        service = DepartmentService(session=None, repository=department_repository)

        with pytest.raises(DepartmentNotFoundError) as exc_info:
            await service.get_department(3)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Department not found. Id: 3"

    async def test_department_employees_unfiltered(self, department_repository):
        service = DepartmentService(session=None, repository=department_repository)

        assert await service.get_department_employees(10) == [NEIL, JOANNA]

    async def test_department_employees_filtered_on_false(self, department_repository):
        service = DepartmentService(session=None, repository=department_repository)

        assert await service.get_department_employees(10, False) == [JOANNA]
        assert await service.get_department_employees(10, True) == [NEIL]

    async def test_create_department_already_exists(self, department_repository):
        department_repository.find_by_name.return_value = dev_department()
        service = DepartmentService(session=None, repository=department_repository)

        with pytest.raises(DepartmentAlreadyExistsError) as exc_info:
            await service.create_department(DepartmentCreate(name="Software Development"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == 'Department with name "Software Development" already exists.'
        department_repository.save.assert_not_called()

    async def test_create_department_saves_bare_department(self, department_repository):
        service = DepartmentService(session=None, repository=department_repository)

        await service.create_department(DepartmentCreate(name="Accounting"))

        department_repository.save.assert_awaited_once_with(DepartmentResponse(name="Accounting"))

    async def test_update_without_manager_keeps_current_manager(self, department_repository):
        service = DepartmentService(session=None, repository=department_repository)

        updated = await service.update_department(10, DepartmentUpdate(name="Engineering", employees=[]))

        assert updated.name == "Engineering"
        assert updated.manager == BOB
        assert updated.employees == []

    async def test_update_with_manager_replaces_manager(self, department_repository):
        service = DepartmentService(session=None, repository=department_repository)

        updated = await service.update_department(
            10, DepartmentUpdate(name="Software Development", manager=CATHY, employees=[NEIL])
        )

        assert updated.manager == CATHY
        assert updated.employees == [NEIL]

    async def test_update_missing_department(self, department_repository):
        department_repository.find_by_id.return_value = None
        service = DepartmentService(session=None, repository=department_repository)

        with pytest.raises(DepartmentNotFoundError):
            await service.update_department(99, DepartmentUpdate(name="Nothing"))
        department_repository.save.assert_not_called()

    async def test_delete_missing_department(self, department_repository):
        department_repository.find_by_id.return_value = None
        service = DepartmentService(session=None, repository=department_repository)

        with pytest.raises(DepartmentNotFoundError):
            await service.delete_department(99)
        department_repository.delete.assert_not_called()


class TestEmployeeService:
    """Filter routing and existence rules of the employee service"""

    @pytest.mark.parametrize(
        "position, is_full_time, method, args",
        [
            (None, None, "find_all", ()),
            ("Developer", None, "find_all_by_position", ("Developer",)),
            (None, False, "find_all_by_full_time", (False,)),
            ("Developer", True, "find_all_by_position_and_full_time", ("Developer", True)),
        ],
    )
    async def test_get_employees_routes_filters(self, employee_repository, position, is_full_time, method, args):
        service = EmployeeService(session=None, repository=employee_repository)

        await service.get_employees(position, is_full_time)

        getattr(employee_repository, method).assert_awaited_once_with(*args)

    async def test_get_employee_not_found(self, employee_repository):
        employee_repository.find_by_id.return_value = None
        service = EmployeeService(session=None, repository=employee_repository)

        with pytest.raises(EmployeeNotFoundError) as exc_info:
            await service.get_employee(7)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Employee not found. Id: 7"

    async def test_create_employee_inserts_without_id(self, employee_repository):
        service = EmployeeService(session=None, repository=employee_repository)

        await service.create_employee(
            EmployeeCreate(first_name="Ada", last_name="Lovelace", position="Developer", is_full_time=True)
        )

        saved = employee_repository.save.await_args.args[0]
        assert saved.id is None
        assert saved.first_name == "Ada"

    async def test_update_employee_overwrites_all_fields(self, employee_repository):
        service = EmployeeService(session=None, repository=employee_repository)

        updated = await service.update_employee(
            11, EmployeeUpdate(first_name="Neil", last_name="Black", position="Architect", is_full_time=False)
        )

        assert updated == make_employee("Neil", "Black", "Architect", False, id=11)

    async def test_delete_missing_employee(self, employee_repository):
        employee_repository.find_by_id.return_value = None
        service = EmployeeService(session=None, repository=employee_repository)

        with pytest.raises(EmployeeNotFoundError):
            await service.delete_employee(42)
        employee_repository.delete.assert_not_called()
