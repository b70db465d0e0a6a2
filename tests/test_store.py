import json

import pytest

from employee_manager.database import EmployeeStore, insert_sample_data
from employee_manager.models.employee import EmployeeModel
from employee_manager.utils.errors import StorageWriteError


def make_employee(employee_id, **fields):
    data = {"name": f"Emp {employee_id}", "email": f"e{employee_id}@x.com", "phone": "5551234567"}
    data.update(fields)
    return EmployeeModel(id=employee_id, **data)


def test_load_missing_file_is_empty(store):
    assert store.load() == []


def test_load_whitespace_file_is_empty(store):
    with open(store.path, "w") as f:
        f.write("  \n\t ")

    assert store.load() == []


def test_load_corrupt_file_is_empty_and_logged(store, caplog):
    with open(store.path, "w") as f:
        f.write("[{not json")

    assert store.load() == []
    assert "Error reading" in caplog.text


def test_load_non_array_is_empty(store):
    with open(store.path, "w") as f:
        json.dump({"id": 1}, f)

    assert store.load() == []


def test_save_then_load_preserves_order(store):
    # arrange
    records = [make_employee(3), make_employee(1, salary=1200.5), make_employee(2, status="Inactive")]

    # act
    store.save(records)

    # assert
    assert store.load() == records
    assert [r.id for r in store.load()] == [3, 1, 2]


def test_save_writes_readable_json_array(store):
    store.save([make_employee(1)])

    with open(store.path) as f:
        raw = f.read()
    assert raw.startswith("[\n  {")
    assert json.loads(raw)[0]["phone"] == "5551234567"


def test_load_fills_missing_optional_fields(store):
    with open(store.path, "w") as f:
        json.dump([{"id": 7, "name": "Zed", "email": "z@x.com", "phone": "1234567890"}], f)

    [employee] = store.load()
    assert employee.role == ""
    assert employee.salary == 0
    assert employee.status == "Active"


def test_next_id_empty_is_one():
    assert EmployeeStore.next_id([]) == 1


def test_next_id_skips_gap():
    records = [make_employee(1), make_employee(3)]

    assert EmployeeStore.next_id(records) == 4


def test_save_failure_raises_storage_write_error(tmp_path):
    # a directory in place of the file makes open() fail
    target = tmp_path / "employees.json"
    target.mkdir()
    store = EmployeeStore(str(target))

    with pytest.raises(StorageWriteError):
        store.save([make_employee(1)])


def test_insert_sample_data_only_into_empty_store(store):
    assert insert_sample_data(store) is True
    assert [e.id for e in store.load()] == [1, 2, 3]

    assert insert_sample_data(store) is False
    assert len(store.load()) == 3


def test_load_keeps_valid_rows_when_one_row_is_bad(store, caplog):
    # arrange
    rows = [
        {"id": 1, "name": "Ann", "email": "a@x.com", "phone": "5551234567", "badge": "A-1"},
        {"id": 2, "name": "Ben", "email": "b@x.com", "phone": 5551234568},
        {"name": "No Id", "email": "n@x.com", "phone": "5551234569"},
    ]
    with open(store.path, "w") as f:
        json.dump(rows, f)

    # act
    loaded = store.load()

    # assert
    assert [e.id for e in loaded] == [1, 2]
    assert loaded[1].phone == "5551234568"
    assert "Skipping unreadable employee at index 2" in caplog.text


def test_save_keeps_unknown_keys(store):
    with open(store.path, "w") as f:
        json.dump([{"id": 1, "name": "Ann", "email": "a@x.com", "phone": "5551234567", "badge": "A-1"}], f)

    store.save(store.load() + [make_employee(2)])

    with open(store.path) as f:
        saved = json.load(f)
    assert [r["id"] for r in saved] == [1, 2]
    assert saved[0]["badge"] == "A-1"
