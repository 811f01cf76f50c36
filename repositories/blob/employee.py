import logging
from collections.abc import Generator
from datetime import datetime
from typing import Any

from models import Employee, EmployeeStatus
from repositories import DuplicateEmailError, EmployeeNotFoundError, EmployeeRepository
from repositories.codec import from_record, to_record

from .store import BlobStore

EMPLOYEES_KEY = 'corehr_employees'


class BlobEmployeeRepository(EmployeeRepository):
    def __init__(self, store: BlobStore) -> None:
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)

    def _load(self) -> list[dict[str, Any]]:
        employees: list[dict[str, Any]] | None = self.store.load(EMPLOYEES_KEY)
        return [] if employees is None else employees

    @staticmethod
    def _index_of(employees: list[dict[str, Any]], employee_id: str) -> int | None:
        for idx, data in enumerate(employees):
            if data['id'] == employee_id:
                return idx

        return None

    @staticmethod
    def _email_taken(employees: list[dict[str, Any]], email: str, employee_id: str) -> bool:
        return any(data['email'] == email and data['id'] != employee_id for data in employees)

    def get(self, employee_id: str) -> Employee | None:
        employees = self._load()
        idx = self._index_of(employees, employee_id)

        if idx is None:
            return None

        return from_record(Employee, employees[idx])

    def get_all(self) -> Generator[Employee, None, None]:
        for data in self._load():
            yield from_record(Employee, data)

    def find_by_email(self, email: str) -> Employee | None:
        matches = [data for data in self._load() if data['email'] == email]

        if len(matches) == 0:
            return None

        if len(matches) > 1:
            self.logger.error('Multiple employees found with email %s', email)
            return None

        return from_record(Employee, matches[0])

    def create(self, employee: Employee) -> None:
        with self.store.lock:
            employees = self._load()

            if self._email_taken(employees, employee.email, employee.id):
                raise DuplicateEmailError(employee.email)

            employees.append(to_record(employee))
            self.store.save(EMPLOYEES_KEY, employees)

    def update(self, employee: Employee) -> None:
        with self.store.lock:
            employees = self._load()
            idx = self._index_of(employees, employee.id)

            if idx is None:
                raise EmployeeNotFoundError(employee.id)

            if self._email_taken(employees, employee.email, employee.id):
                raise DuplicateEmailError(employee.email)

            employees[idx] = to_record(employee)
            self.store.save(EMPLOYEES_KEY, employees)

    def set_status(self, employee_id: str, status: EmployeeStatus, updated_at: datetime) -> Employee:
        with self.store.lock:
            employees = self._load()
            idx = self._index_of(employees, employee_id)

            if idx is None:
                raise EmployeeNotFoundError(employee_id)

            employee = from_record(Employee, employees[idx])
            employee.status = status
            employee.updated_at = updated_at

            employees[idx] = to_record(employee)
            self.store.save(EMPLOYEES_KEY, employees)

        return employee

    def delete(self, employee_id: str) -> None:
        with self.store.lock:
            employees = self._load()
            idx = self._index_of(employees, employee_id)

            if idx is None:
                raise EmployeeNotFoundError(employee_id)

            del employees[idx]
            self.store.save(EMPLOYEES_KEY, employees)

    def delete_all(self) -> None:
        self.store.remove(EMPLOYEES_KEY)
