from sqlalchemy import Column, String, Integer, ForeignKey, Table
from app.db.base import BaseModel
from app.models.base import Base

class Department(BaseModel):
    __tablename__ = 'departments'
    
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Department id={self.id} name={self.name!r}>"


# Relationship tables carry no payload; removing a row never touches employees.
department_managers = Table(
    "department_managers",
    Base.metadata,
    Column("department_id", Integer, ForeignKey("departments.id", ondelete="CASCADE"), primary_key=True),
    Column("employee_id", Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True),
)

department_employees = Table(
    "department_employees",
    Base.metadata,
    Column("department_id", Integer, ForeignKey("departments.id", ondelete="CASCADE"), primary_key=True),
    Column("employee_id", Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True),
)
