# employee_manager/mcp_server.py
"""
MCP server exposing employee tools: list_employees, create_employee, delete_employee.
Shares the data file and operations with the HTTP API.
"""
import argparse
import logging
from typing import Annotated, Optional, Union
from mcp.server.fastmcp import FastMCP
from pydantic import Field
from employee_manager.config import get_settings
from employee_manager.database import connect_store, get_store
from employee_manager.schemas.employee import EmployeeToolCreate
from employee_manager.tools import employee_tool

logger = logging.getLogger(__name__)

settings = get_settings()

mcp = FastMCP(settings.MCP_SERVER_NAME)


@mcp.tool()
def list_employees() -> str:
    """List all employees. No parameters needed."""
    return employee_tool.list_employees_text(get_store())


@mcp.tool()
def create_employee(
    name: Annotated[str, Field(min_length=1, description="Employee full name")],
    email: Annotated[str, Field(description="Employee email address")],
    phone: Annotated[str, Field(pattern=r"^[0-9]{10}$", description="10-digit mobile number")],
    role: Annotated[Optional[str], Field(description="Job role, e.g., Frontend Developer")] = None,
    department: Annotated[Optional[str], Field(description="Department, e.g., IT, QA, HR")] = None,
    salary: Annotated[Optional[Union[int, float]], Field(description="Salary as a number (optional)")] = None,
    date_of_joining: Annotated[Optional[str], Field(description="Date of joining in YYYY-MM-DD format")] = None,
    status: Annotated[Optional[str], Field(description="Status: Active or Inactive")] = None,
) -> str:
    """Create a new employee."""
    payload = EmployeeToolCreate(
        name=name,
        email=email,
        phone=phone,
        role=role,
        department=department,
        salary=salary,
        date_of_joining=date_of_joining,
        status=status,
    )
    return employee_tool.create_employee_text(get_store(), payload)


@mcp.tool()
def delete_employee(
    id: Annotated[int, Field(gt=0, description="Employee numeric ID to delete")],
) -> str:
    """Delete an employee by ID."""
    return employee_tool.delete_employee_text(get_store(), id)


def main():
    parser = argparse.ArgumentParser(description="Employee MCP server")
    parser.add_argument(
        "--transport", type=str, default="stdio", choices=["stdio", "sse"]
    )
    args = parser.parse_args()

    # stdout carries the protocol on stdio; logs go to stderr
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    connect_store()
    logger.info("Starting %s over %s", settings.MCP_SERVER_NAME, args.transport)
    mcp.run(args.transport)


if __name__ == "__main__":
    main()
