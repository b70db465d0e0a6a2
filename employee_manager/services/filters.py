# employee_manager/services/filters.py
"""
Search and filter logic over an already-loaded employee list.
"""
from typing import List, Optional, Sequence
from pydantic import BaseModel
from employee_manager.models.employee import EmployeeModel

MATCH_ALL = "ALL"


class FilterCriteria(BaseModel):
    """Filter criteria for the employee list"""
    # Matched against name or email, case-insensitive
    search: str = ""

    # Exact match, or MATCH_ALL to skip
    department: str = MATCH_ALL
    role: str = MATCH_ALL
    status: str = MATCH_ALL


class FilterResult(BaseModel):
    matches: List[EmployeeModel]
    # Set when an explicit search narrows the list to one employee,
    # which the caller opens for editing
    auto_edit_id: Optional[int] = None


def matches_criteria(employee: EmployeeModel, criteria: FilterCriteria) -> bool:
    text = criteria.search.strip().lower()
    if text and text not in employee.name.lower() and text not in employee.email.lower():
        return False
    if criteria.department != MATCH_ALL and employee.department != criteria.department:
        return False
    if criteria.role != MATCH_ALL and employee.role != criteria.role:
        return False
    if criteria.status != MATCH_ALL and employee.status != criteria.status:
        return False
    return True


def apply_filters(
    employees: Sequence[EmployeeModel],
    criteria: FilterCriteria,
    triggered_by_search: bool = False,
) -> FilterResult:
    """
    Filter employees by text and category.
    triggered_by_search marks an explicit search (as opposed to live typing);
    only then does a single match produce auto_edit_id.
    """
    matches = [employee for employee in employees if matches_criteria(employee, criteria)]
    auto_edit_id = None
    if triggered_by_search and len(matches) == 1:
        auto_edit_id = matches[0].id
    return FilterResult(matches=matches, auto_edit_id=auto_edit_id)


def distinct_values(employees: Sequence[EmployeeModel], field: str) -> List[str]:
    return sorted({getattr(employee, field) for employee in employees if getattr(employee, field)})
