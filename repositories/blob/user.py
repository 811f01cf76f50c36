import logging
from collections.abc import Generator
from typing import Any

from models import Credential, User
from repositories import DuplicateEmailError, UserRepository
from repositories.codec import from_record, to_record

from .store import BlobStore

USERS_KEY = 'corehr_users'


class BlobUserRepository(UserRepository):
    def __init__(self, store: BlobStore) -> None:
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)

    def _load(self) -> dict[str, dict[str, Any]]:
        users: dict[str, dict[str, Any]] | None = self.store.load(USERS_KEY)
        return {} if users is None else users

    def find_by_email(self, email: str) -> Credential | None:
        data = self._load().get(email)

        if data is None:
            return None

        return from_record(Credential, data)

    def get_all(self) -> Generator[Credential, None, None]:
        for data in self._load().values():
            yield from_record(Credential, data)

    def create(self, credential: Credential) -> None:
        with self.store.lock:
            users = self._load()

            if credential.user.email in users:
                raise DuplicateEmailError(credential.user.email)

            users[credential.user.email] = to_record(credential)
            self.store.save(USERS_KEY, users)

    def update_user(self, user: User) -> None:
        with self.store.lock:
            users = self._load()
            data = users.get(user.email)

            if data is None or data['user']['id'] != user.id:
                self.logger.error('No credential found for user %s', user.id)
                return

            data['user'] = to_record(user)
            self.store.save(USERS_KEY, users)

    def delete_all(self) -> None:
        self.store.remove(USERS_KEY)
