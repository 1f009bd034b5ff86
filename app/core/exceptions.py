from fastapi import HTTPException, status

class BaseAppException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)

class NotFoundError(BaseAppException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class AlreadyExistsError(BaseAppException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class DepartmentNotFoundError(NotFoundError):
    def __init__(self, department_id: int):
        self.department_id = department_id
        super().__init__(detail=f"Department not found. Id: {department_id}")

class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(detail=f"Employee not found. Id: {employee_id}")

class DepartmentAlreadyExistsError(AlreadyExistsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(detail=f'Department with name "{name}" already exists.')
