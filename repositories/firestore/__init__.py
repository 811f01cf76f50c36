from .employee import FirestoreEmployeeRepository
from .session import FirestoreSessionRepository
from .user import FirestoreUserRepository

__all__ = ['FirestoreEmployeeRepository', 'FirestoreSessionRepository', 'FirestoreUserRepository']
