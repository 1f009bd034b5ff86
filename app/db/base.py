from sqlalchemy import Column, Integer
from app.models.base import Base

class BaseModel(Base):
    """Base model with a store-assigned integer id"""
    __abstract__ = True
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
