from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class EmployeeStatus(StrEnum):
    ONBOARDING = 'onboarding'
    ACTIVE = 'active'
    EXIT = 'exit'


@dataclass
class Employee:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    department: str
    designation: str
    salary: float
    joining_date: date
    status: EmployeeStatus
    created_at: datetime
    updated_at: datetime
    address: str | None = None
    emergency_contact: str | None = None
    avatar: str | None = None
