from sqlalchemy import Column, String, Boolean
from app.db.base import BaseModel

class Employee(BaseModel):
    __tablename__ = 'employees'
    
    first_name = Column(String(50), nullable=False, index=True)
    last_name = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False, index=True)
    is_full_time = Column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self):
        return f"<Employee id={self.id} {self.first_name} {self.last_name}>"
