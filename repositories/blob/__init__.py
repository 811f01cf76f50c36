from .employee import EMPLOYEES_KEY, BlobEmployeeRepository
from .session import SESSIONS_KEY, BlobSessionRepository
from .store import BlobStore, FileBlobStore, MemoryBlobStore
from .user import USERS_KEY, BlobUserRepository

__all__ = [
    'EMPLOYEES_KEY',
    'SESSIONS_KEY',
    'USERS_KEY',
    'BlobEmployeeRepository',
    'BlobSessionRepository',
    'BlobStore',
    'BlobUserRepository',
    'FileBlobStore',
    'MemoryBlobStore',
]
