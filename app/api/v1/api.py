from fastapi import APIRouter
from app.api.v1.endpoints.hr import employees
from app.api.v1.endpoints.organization import departments

api_router = APIRouter()

# Organization routes
api_router.include_router(departments.router, prefix="/departments", tags=["Organization"])

# HR routes
api_router.include_router(employees.router, prefix="/employees", tags=["Human Resource"])
