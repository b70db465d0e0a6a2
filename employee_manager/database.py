# employee_manager/database.py
import json
import logging
import os
import threading
from typing import List, Optional, Sequence
from pydantic import ValidationError
from employee_manager.config import get_settings
from employee_manager.models.employee import EmployeeModel
from employee_manager.utils.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

settings = get_settings()


class EmployeeStore:
    """
    Flat-file store for the employee collection.
    The whole collection is read on every load and rewritten on every save.
    """

    def __init__(self, path: str):
        self.path = path
        # Held by mutating operations across load-mutate-save.
        self.lock = threading.RLock()

    def load(self) -> List[EmployeeModel]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
            if not raw.strip():
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                raise StorageReadError(f"expected a JSON array, got {type(data).__name__}")
        except (OSError, ValueError, StorageReadError) as e:
            logger.error("Error reading %s, treating it as empty: %s", self.path, e)
            return []

        records = []
        for position, item in enumerate(data):
            try:
                records.append(EmployeeModel.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable employee at index %d in %s: %s", position, self.path, e)
        return records

    def save(self, records: Sequence[EmployeeModel]) -> None:
        payload = [record.model_dump() for record in records]
        try:
            folder = os.path.dirname(self.path)
            if folder and not os.path.exists(folder):
                os.makedirs(folder)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(json.dumps(payload, indent=2))
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            raise StorageWriteError(f"Failed to write {self.path}: {e}") from e
        logger.debug("Saved %d employees to %s", len(payload), self.path)

    @staticmethod
    def next_id(records: Sequence[EmployeeModel]) -> int:
        if not records:
            return 1
        return max(record.id for record in records) + 1


class Database:
    store: Optional[EmployeeStore] = None

db = Database()

def connect_store(path: Optional[str] = None) -> EmployeeStore:
    db.store = EmployeeStore(path or settings.DATA_FILE)
    logger.info("Using employee data file: %s", db.store.path)
    return db.store

def close_store():
    if db.store:
        logger.info("Closed employee store: %s", db.store.path)
        db.store = None

def get_store() -> EmployeeStore:
    if db.store is None:
        connect_store()
    return db.store

def insert_sample_data(store: Optional[EmployeeStore] = None) -> bool:
    store = store or get_store()
    with store.lock:
        if store.load():
            logger.info("Sample data already exists. Skipping insertion.")
            return False

        employees = [
            {"name": "John Doe", "email": "john.doe@example.com", "phone": "5550100001",
             "role": "Account Manager", "department": "Sales", "salary": 52000,
             "date_of_joining": "2021-03-15", "status": "Active"},
            {"name": "Jane Smith", "email": "jane.smith@example.com", "phone": "5550100002",
             "role": "Content Lead", "department": "Marketing", "salary": 58000,
             "date_of_joining": "2020-07-01", "status": "Active"},
            {"name": "Bob Johnson", "email": "bob.johnson@example.com", "phone": "5550100003",
             "role": "Backend Developer", "department": "IT", "salary": 67000,
             "date_of_joining": "2019-11-20", "status": "Inactive"},
        ]
        records = [
            EmployeeModel(id=index, **employee)
            for index, employee in enumerate(employees, start=1)
        ]
        store.save(records)

    logger.info("Sample data inserted successfully!")
    return True
