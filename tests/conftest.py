import pytest
from fastapi.testclient import TestClient

from employee_manager.database import EmployeeStore, get_store
from employee_manager.main import app


@pytest.fixture
def store(tmp_path):
    return EmployeeStore(str(tmp_path / "employees.json"))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ann():
    return {"name": "Ann", "email": "a@x.com", "phone": "555-123-4567"}
