# employee_manager/schemas/__init__.py
from .employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeOut,
    EmployeeToolCreate,
    EmployeeFilterOptions,
)
