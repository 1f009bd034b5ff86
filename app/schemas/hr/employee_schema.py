from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class EmployeeBase(BaseModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    position: str
    is_full_time: bool = Field(default=False, alias="fullTime")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

class EmployeeCreate(BaseModel):
    """Body of a create-employee request"""
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    position: str
    is_full_time: bool = Field(alias="isFullTime")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('first_name', 'last_name', 'position')
    @classmethod
    def validate_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v.strip()

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeResponse(EmployeeBase):
    id: Optional[int] = None
