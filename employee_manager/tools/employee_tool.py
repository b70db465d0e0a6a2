# employee_manager/tools/employee_tool.py
"""
Employee MCP Tools
Text-returning wrappers around the employee operations for agent callers.
"""
import json
from typing import Sequence
from employee_manager.database import EmployeeStore
from employee_manager.models.employee import EmployeeModel
from employee_manager.schemas.employee import EmployeeToolCreate
from employee_manager.services import employee as employee_service
from employee_manager.utils.errors import NotFoundError


def _to_json(payload) -> str:
    return json.dumps(payload, indent=2)


def _dump(employees: Sequence[EmployeeModel]) -> list:
    return [employee.model_dump() for employee in employees]


def list_employees_text(store: EmployeeStore) -> str:
    employees = employee_service.list_employees(store)
    if not employees:
        return "No employees found."
    return _to_json(_dump(employees))


def create_employee_text(store: EmployeeStore, payload: EmployeeToolCreate) -> str:
    """
    Create an employee from an already schema-checked payload.
    Required-field and phone checks still run through the shared service.
    """
    employee = employee_service.create_employee(store, payload.model_dump())
    return "Employee created:\n" + _to_json(employee.model_dump())


def delete_employee_text(store: EmployeeStore, employee_id: int) -> str:
    try:
        employee_service.delete_employee(store, employee_id)
    except NotFoundError:
        return f"No employee found with id {employee_id}."
    return f"Employee with id {employee_id} deleted successfully."
