# employee_manager/utils/validation.py
"""
Field validation rules shared by the HTTP routes and the MCP tools.
Each rule returns a ValidationResult instead of raising, so callers decide
how a failure is surfaced.
"""
import re
from typing import Any, Iterable, Mapping, Optional
from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError

PHONE_DIGITS = 10
PHONE_ERROR = "Phone number must be exactly 10 digits"
REQUIRED_FIELDS = ("name", "email", "phone")

_NON_DIGIT = re.compile(r"[^0-9]")
_email_adapter = TypeAdapter(EmailStr)


class ValidationResult(BaseModel):
    ok: bool
    normalized: Optional[str] = None
    field: Optional[str] = None
    reason: Optional[str] = None


def normalize_phone(raw: Any) -> str:
    """Strip every non-digit character from a phone value."""
    if raw is None:
        return ""
    return _NON_DIGIT.sub("", str(raw).strip())


def validate_phone(raw: Any) -> ValidationResult:
    digits = normalize_phone(raw)
    if len(digits) != PHONE_DIGITS:
        return ValidationResult(ok=False, field="phone", reason=PHONE_ERROR)
    return ValidationResult(ok=True, normalized=digits)


def validate_required(
    data: Mapping[str, Any], fields: Iterable[str] = REQUIRED_FIELDS
) -> ValidationResult:
    """
    Check that each field is present and non-blank.
    Fields are checked in order; the first failure is reported.
    """
    for field in fields:
        value = data.get(field)
        if value is None or str(value).strip() == "":
            return ValidationResult(ok=False, field=field, reason=f"'{field}' is required")
    return ValidationResult(ok=True)


def validate_email(raw: Any) -> ValidationResult:
    # Only the MCP tool path applies this; HTTP checks presence only.
    try:
        normalized = _email_adapter.validate_python(raw)
    except ValidationError:
        return ValidationResult(ok=False, field="email", reason="Invalid email format")
    return ValidationResult(ok=True, normalized=str(normalized))
