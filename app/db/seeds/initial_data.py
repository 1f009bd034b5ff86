import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.department_repository import DepartmentRepository
from app.schemas.hr.employee_schema import EmployeeResponse
from app.schemas.organization.department_schema import DepartmentResponse

logger = logging.getLogger(__name__)

SAMPLE_DEPARTMENTS = [
    DepartmentResponse(
        name="Software Development",
        manager=EmployeeResponse(
            first_name="Bob", last_name="Steeves",
            position="Director of Software Development", is_full_time=True,
        ),
        employees=[
            EmployeeResponse(first_name="Neil", last_name="White", position="Software Developer", is_full_time=True),
            EmployeeResponse(first_name="Joanna", last_name="Bernier", position="Software Tester", is_full_time=False),
        ],
    ),
    DepartmentResponse(
        name="HR",
        manager=EmployeeResponse(
            first_name="Cathy", last_name="Ouellette",
            position="Director of Human Resources", is_full_time=True,
        ),
        employees=[
            EmployeeResponse(first_name="Alysha", last_name="Rogers", position="Intraday Analyst", is_full_time=True),
        ],
    ),
]

async def create_initial_data(session: AsyncSession):
    """Create the sample organization, skipping departments that already exist"""
    logger.info("Creating initial data...")
    repository = DepartmentRepository(session)

    for department in SAMPLE_DEPARTMENTS:
        if await repository.find_by_name(department.name) is not None:
            logger.info(f"Department already exists: {department.name}")
            continue
        created = await repository.save(department)
        logger.info(f"Created department: {created.name} ({created.id})")

    logger.info("Initial data created successfully")
    return True
