import json

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from employee_manager import database
from employee_manager.mcp_server import mcp


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def shared_store(store, monkeypatch):
    monkeypatch.setattr(database.db, "store", store)
    return store


def text_of(result):
    # newer SDKs return (content, structured); older ones return content only
    if isinstance(result, tuple):
        result = result[0]
    return result[0].text


@pytest.mark.anyio
async def test_tools_are_registered():
    names = {tool.name for tool in await mcp.list_tools()}

    assert {"list_employees", "create_employee", "delete_employee"} <= names


@pytest.mark.anyio
async def test_create_then_list(shared_store):
    # act
    created = text_of(await mcp.call_tool(
        "create_employee",
        {"name": "Ann", "email": "ann@company.com", "phone": "5551234567", "department": "HR"},
    ))
    listed = text_of(await mcp.call_tool("list_employees", {}))

    # assert
    assert created.startswith("Employee created:\n")
    assert json.loads(listed)[0]["department"] == "HR"
    assert [e.id for e in shared_store.load()] == [1]


@pytest.mark.anyio
async def test_list_empty():
    assert text_of(await mcp.call_tool("list_employees", {})) == "No employees found."


@pytest.mark.anyio
async def test_create_rejects_bad_email(shared_store):
    with pytest.raises(ToolError):
        await mcp.call_tool(
            "create_employee",
            {"name": "Ann", "email": "not-an-email", "phone": "5551234567"},
        )

    assert shared_store.load() == []


@pytest.mark.anyio
async def test_create_rejects_formatted_phone(shared_store):
    with pytest.raises(ToolError):
        await mcp.call_tool(
            "create_employee",
            {"name": "Ann", "email": "ann@company.com", "phone": "555-123-4567"},
        )

    assert shared_store.load() == []


@pytest.mark.anyio
async def test_delete(shared_store):
    await mcp.call_tool(
        "create_employee",
        {"name": "Ann", "email": "ann@company.com", "phone": "5551234567"},
    )

    deleted = text_of(await mcp.call_tool("delete_employee", {"id": 1}))
    missing = text_of(await mcp.call_tool("delete_employee", {"id": 1}))

    assert deleted == "Employee with id 1 deleted successfully."
    assert missing == "No employee found with id 1."
