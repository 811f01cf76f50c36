from .employee import EmployeeRepository
from .errors import DuplicateEmailError, EmployeeNotFoundError
from .session import SessionRepository
from .user import UserRepository

__all__ = ['DuplicateEmailError', 'EmployeeNotFoundError', 'EmployeeRepository', 'SessionRepository', 'UserRepository']
