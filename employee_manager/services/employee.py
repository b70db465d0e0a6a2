# employee_manager/services/employee.py
"""
Employee Record Operations
Create, list, get, update and delete over the flat-file store.
Shared by the HTTP routes and the MCP tools.
"""
import logging
from typing import Any, List, Mapping
from employee_manager.database import EmployeeStore
from employee_manager.models.employee import EmployeeModel
from employee_manager.utils.errors import ClientInputError, NotFoundError
from employee_manager.utils.validation import validate_phone, validate_required

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "name",
    "email",
    "phone",
    "role",
    "department",
    "salary",
    "date_of_joining",
    "status",
)


def _normalized_phone(raw: Any) -> str:
    result = validate_phone(raw)
    if not result.ok:
        raise ClientInputError(result.field, result.reason)
    return result.normalized


def _find_index(employees: List[EmployeeModel], employee_id: int) -> int:
    for index, employee in enumerate(employees):
        if employee.id == employee_id:
            return index
    raise NotFoundError(employee_id)


def create_employee(store: EmployeeStore, data: Mapping[str, Any]) -> EmployeeModel:
    """
    Validate and append a new employee.
    Optional fields fall back to their defaults when missing or empty.
    Nothing is written if validation fails.
    """
    required = validate_required(data)
    if not required.ok:
        raise ClientInputError(required.field, required.reason)
    phone = _normalized_phone(data.get("phone"))

    with store.lock:
        employees = store.load()
        employee = EmployeeModel(
            id=store.next_id(employees),
            name=data["name"],
            email=data["email"],
            phone=phone,
            role=data.get("role") or "",
            department=data.get("department") or "",
            salary=data.get("salary") or 0,
            date_of_joining=data.get("date_of_joining") or "",
            status=data.get("status") or "Active",
        )
        employees.append(employee)
        store.save(employees)

    logger.info("Created employee %d (%s)", employee.id, employee.name)
    return employee


def list_employees(store: EmployeeStore) -> List[EmployeeModel]:
    return store.load()


def get_employee(store: EmployeeStore, employee_id: int) -> EmployeeModel:
    employees = store.load()
    return employees[_find_index(employees, employee_id)]


def update_employee(
    store: EmployeeStore, employee_id: int, data: Mapping[str, Any]
) -> EmployeeModel:
    """
    Merge the given fields into an existing employee.
    A None value keeps the stored value, except for phone: a phone key that
    is present is always re-validated, and a bad phone rejects the update.
    """
    with store.lock:
        employees = store.load()
        index = _find_index(employees, employee_id)

        changes = {
            field: value
            for field, value in data.items()
            if field in UPDATABLE_FIELDS and field != "phone" and value is not None
        }
        if "phone" in data:
            changes["phone"] = _normalized_phone(data["phone"])

        updated = EmployeeModel.model_validate({**employees[index].model_dump(), **changes})
        employees[index] = updated
        store.save(employees)

    logger.info("Updated employee %d: %s", employee_id, ", ".join(sorted(changes)) or "no changes")
    return updated


def delete_employee(store: EmployeeStore, employee_id: int) -> None:
    with store.lock:
        employees = store.load()
        remaining = [employee for employee in employees if employee.id != employee_id]
        if len(remaining) == len(employees):
            raise NotFoundError(employee_id)
        store.save(remaining)

    logger.info("Deleted employee %d", employee_id)
