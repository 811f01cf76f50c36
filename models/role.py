from enum import StrEnum


class Role(StrEnum):
    ADMIN = 'admin'
    EMPLOYEE = 'employee'
