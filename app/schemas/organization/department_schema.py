from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from app.schemas.hr.employee_schema import EmployeeResponse

class DepartmentBase(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

class DepartmentCreate(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is None:
            raise ValueError('Name can not be null')
        if not v.strip():
            raise ValueError('Name can not be empty')
        return v

class DepartmentUpdate(DepartmentBase):
    manager: Optional[EmployeeResponse] = None
    employees: List[EmployeeResponse] = Field(default_factory=list)

class DepartmentResponse(DepartmentBase):
    """A department together with its manager and member employees."""
    id: Optional[int] = None
    manager: Optional[EmployeeResponse] = None
    employees: List[EmployeeResponse] = Field(default_factory=list)
