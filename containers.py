from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer, WiringConfiguration

from repositories.blob import BlobEmployeeRepository, BlobSessionRepository, BlobUserRepository, FileBlobStore, MemoryBlobStore
from repositories.firestore import FirestoreEmployeeRepository, FirestoreSessionRepository, FirestoreUserRepository


class Container(DeclarativeContainer):
    wiring_config = WiringConfiguration(packages=['blueprints'])
    config = providers.Configuration()

    blob_store = providers.Selector(
        config.storage.backend,
        file=providers.ThreadSafeSingleton(FileBlobStore, path=config.storage.path),
        memory=providers.ThreadSafeSingleton(MemoryBlobStore),
    )

    blob_user_repo = providers.ThreadSafeSingleton(BlobUserRepository, store=blob_store)
    blob_session_repo = providers.ThreadSafeSingleton(BlobSessionRepository, store=blob_store)
    blob_employee_repo = providers.ThreadSafeSingleton(BlobEmployeeRepository, store=blob_store)

    user_repo = providers.Selector(
        config.storage.backend,
        file=blob_user_repo,
        memory=blob_user_repo,
        firestore=providers.ThreadSafeSingleton(FirestoreUserRepository, database=config.firestore.database),
    )
    session_repo = providers.Selector(
        config.storage.backend,
        file=blob_session_repo,
        memory=blob_session_repo,
        firestore=providers.ThreadSafeSingleton(FirestoreSessionRepository, database=config.firestore.database),
    )
    employee_repo = providers.Selector(
        config.storage.backend,
        file=blob_employee_repo,
        memory=blob_employee_repo,
        firestore=providers.ThreadSafeSingleton(FirestoreEmployeeRepository, database=config.firestore.database),
    )
