# employee_manager/routes/employee.py
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Response
from employee_manager.database import EmployeeStore, get_store
from employee_manager.schemas.employee import (
    EmployeeBase,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeOut,
    EmployeeFilterOptions,
)
from employee_manager.services import employee as employee_service
from employee_manager.services.filters import (
    MATCH_ALL,
    FilterCriteria,
    apply_filters,
    distinct_values,
)
from employee_manager.utils.errors import (
    ClientInputError,
    NotFoundError,
    StorageWriteError,
    create_error_response,
)
from employee_manager.utils.record_id import parse_employee_id

router = APIRouter()

def resolve_employee_id(employee_id: str) -> int:
    # a non-integer id can never match a stored employee
    parsed = parse_employee_id(employee_id)
    if parsed is None:
        raise HTTPException(
            status_code=404,
            detail=create_error_response(
                message="Employee not found",
                details=f"No employee found with ID: {employee_id}",
                example="Please ensure you're using a valid employee ID"
            )
        )
    return parsed

def body_fields(employee: Optional[EmployeeBase]) -> dict:
    """Fields the caller actually sent; a missing body counts as empty."""
    if employee is None:
        return {}
    return employee.model_dump(exclude_unset=True)

def raise_for_error(error: Exception):
    """Map a service error onto the matching HTTP error."""
    if isinstance(error, ClientInputError):
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message=error.reason,
                details=f"Invalid value for field '{error.field}'",
                example="Name, email and a 10-digit phone number are required"
            )
        )
    if isinstance(error, NotFoundError):
        raise HTTPException(
            status_code=404,
            detail=create_error_response(
                message="Employee not found",
                details=f"No employee found with ID: {error.employee_id}",
                example="Please ensure you're using a valid employee ID"
            )
        )
    if isinstance(error, StorageWriteError):
        raise HTTPException(
            status_code=500,
            detail=create_error_response(
                message="Save failed",
                details="Failed to write employee data",
                example="Please try again or contact support if the problem persists"
            )
        )
    raise error

@router.get("/health")
def health():
    return {"message": "Employee API is running"}

@router.post("/employees", response_model=EmployeeOut, status_code=201)
def create_employee(employee: Optional[EmployeeCreate] = None, store: EmployeeStore = Depends(get_store)):
    try:
        return employee_service.create_employee(store, body_fields(employee))
    except (ClientInputError, StorageWriteError) as e:
        raise_for_error(e)

@router.get("/employees", response_model=List[EmployeeOut])
def get_employees(
    search: str = "",
    department: str = MATCH_ALL,
    role: str = MATCH_ALL,
    status: str = MATCH_ALL,
    store: EmployeeStore = Depends(get_store)
):
    criteria = FilterCriteria(search=search, department=department, role=role, status=status)
    employees = employee_service.list_employees(store)
    return apply_filters(employees, criteria).matches

@router.get("/employees/filters", response_model=EmployeeFilterOptions)
def get_filter_options(store: EmployeeStore = Depends(get_store)):
    employees = employee_service.list_employees(store)
    return EmployeeFilterOptions(
        departments=distinct_values(employees, "department"),
        roles=distinct_values(employees, "role"),
        statuses=distinct_values(employees, "status"),
    )

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str, store: EmployeeStore = Depends(get_store)):
    employee_id = resolve_employee_id(employee_id)
    try:
        return employee_service.get_employee(store, employee_id)
    except NotFoundError as e:
        raise_for_error(e)

@router.put("/employees/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: str,
    employee: Optional[EmployeeUpdate] = None,
    store: EmployeeStore = Depends(get_store)
):
    employee_id = resolve_employee_id(employee_id)
    try:
        return employee_service.update_employee(
            store, employee_id, body_fields(employee)
        )
    except (ClientInputError, NotFoundError, StorageWriteError) as e:
        raise_for_error(e)

@router.delete("/employees/{employee_id}", status_code=204)
def delete_employee(employee_id: str, store: EmployeeStore = Depends(get_store)):
    employee_id = resolve_employee_id(employee_id)
    try:
        employee_service.delete_employee(store, employee_id)
    except (NotFoundError, StorageWriteError) as e:
        raise_for_error(e)
    return Response(status_code=204)
