# employee_manager/utils/errors.py
from typing import Any, Dict, Optional


class EmployeeManagerError(Exception):
    """Base class for errors raised by the employee operations."""


class ClientInputError(EmployeeManagerError):
    """Caller supplied a missing field or a malformed value."""

    def __init__(self, field: str, reason: str):
        super().__init__(reason)
        self.field = field
        self.reason = reason


class NotFoundError(EmployeeManagerError):
    def __init__(self, employee_id: int):
        super().__init__(f"No employee found with ID: {employee_id}")
        self.employee_id = employee_id


class StorageReadError(EmployeeManagerError):
    """Backing file is unreadable or corrupt. Recovered inside the store."""


class StorageWriteError(EmployeeManagerError):
    """Backing file could not be written. Always surfaced to the caller."""


def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response
