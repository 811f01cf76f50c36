from collections.abc import Generator
from datetime import datetime

from models import Employee, EmployeeStatus


class EmployeeRepository:
    def get(self, employee_id: str) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def get_all(self) -> Generator[Employee, None, None]:
        raise NotImplementedError  # pragma: no cover

    def find_by_email(self, email: str) -> Employee | None:
        raise NotImplementedError  # pragma: no cover

    def create(self, employee: Employee) -> None:
        raise NotImplementedError  # pragma: no cover

    def update(self, employee: Employee) -> None:
        raise NotImplementedError  # pragma: no cover

    def set_status(self, employee_id: str, status: EmployeeStatus, updated_at: datetime) -> Employee:
        raise NotImplementedError  # pragma: no cover

    def delete(self, employee_id: str) -> None:
        raise NotImplementedError  # pragma: no cover

    def delete_all(self) -> None:
        raise NotImplementedError  # pragma: no cover
