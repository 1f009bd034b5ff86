from app.schemas.hr.employee_schema import EmployeeResponse


def make_employee(first_name, last_name, position, is_full_time=True, id=None) -> EmployeeResponse:
    return EmployeeResponse(
        id=id,
        first_name=first_name,
        last_name=last_name,
        position=position,
        is_full_time=is_full_time,
    )
