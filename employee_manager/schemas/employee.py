# employee_manager/schemas/employee.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, field_validator
from employee_manager.models.employee import TEXT_FIELDS, coerce_text
from employee_manager.utils.validation import validate_email

class EmployeeBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Union[int, float]] = None
    date_of_joining: Optional[str] = None
    status: Optional[str] = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> Any:
        return coerce_text(value)

class EmployeeCreate(EmployeeBase):
    # name/email/phone presence is checked by the service so a missing
    # field comes back as 400 rather than a schema error
    pass

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    role: str
    department: str
    salary: Union[int, float]
    date_of_joining: str
    status: str

    class Config:
        from_attributes = True

class EmployeeToolCreate(BaseModel):
    """Stricter create payload used by the MCP tool."""
    name: str = Field(min_length=1, description="Employee full name")
    email: str = Field(description="Employee email address")
    phone: str = Field(pattern=r"^[0-9]{10}$", description="10-digit mobile number")
    role: Optional[str] = Field(default=None, description="Job role, e.g., Frontend Developer")
    department: Optional[str] = Field(default=None, description="Department, e.g., IT, QA, HR")
    salary: Optional[Union[int, float]] = Field(default=None, description="Salary as a number (optional)")
    date_of_joining: Optional[str] = Field(default=None, description="Date of joining in YYYY-MM-DD format")
    status: Optional[str] = Field(default=None, description="Status: Active or Inactive")

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        result = validate_email(value)
        if not result.ok:
            raise ValueError(result.reason)
        return result.normalized

class EmployeeFilterOptions(BaseModel):
    departments: List[str]
    roles: List[str]
    statuses: List[str]
