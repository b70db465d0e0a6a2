# employee_manager/utils/record_id.py
from typing import Optional


def parse_employee_id(raw: str) -> Optional[int]:
    """Parse a path segment into an employee id, or None if it is not an integer."""
    try:
        return int(str(raw).strip())
    except ValueError:
        return None
