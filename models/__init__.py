from .employee import Employee, EmployeeStatus
from .role import Role
from .session import Session
from .user import Credential, User

__all__ = ['Credential', 'Employee', 'EmployeeStatus', 'Role', 'Session', 'User']
