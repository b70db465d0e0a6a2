# employee_manager/models/employee.py
from typing import Any, Union
from pydantic import BaseModel, field_validator

TEXT_FIELDS = ("name", "email", "phone", "role", "department", "date_of_joining", "status")


def coerce_text(value: Any) -> Any:
    """Numbers in text fields (e.g. a phone stored as 5551234567) become strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class EmployeeModel(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    role: str = ""
    department: str = ""
    salary: Union[int, float] = 0
    date_of_joining: str = ""
    status: str = "Active"

    class Config:
        # keys added to the file by hand survive a rewrite
        extra = "allow"

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> Any:
        return coerce_text(value)
