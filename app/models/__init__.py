from app.models.hr.employee import Employee
from app.models.organization.department import Department, department_employees, department_managers
