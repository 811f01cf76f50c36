import logging
from typing import Any

from models import Session, User
from repositories import SessionRepository
from repositories.codec import from_record, to_record

from .store import BlobStore

SESSIONS_KEY = 'corehr_sessions'


class BlobSessionRepository(SessionRepository):
    def __init__(self, store: BlobStore) -> None:
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)

    def _load(self) -> dict[str, dict[str, Any]]:
        sessions: dict[str, dict[str, Any]] | None = self.store.load(SESSIONS_KEY)
        return {} if sessions is None else sessions

    def get(self, token: str) -> Session | None:
        data = self._load().get(token)

        if data is None:
            return None

        return from_record(Session, data)

    def create(self, session: Session) -> None:
        with self.store.lock:
            sessions = self._load()
            sessions[session.token] = to_record(session)
            self.store.save(SESSIONS_KEY, sessions)

    def delete(self, token: str) -> None:
        with self.store.lock:
            sessions = self._load()
            if sessions.pop(token, None) is not None:
                self.store.save(SESSIONS_KEY, sessions)

    def update_user(self, user: User) -> None:
        with self.store.lock:
            sessions = self._load()
            user_data = to_record(user)

            for data in sessions.values():
                if data['user']['id'] == user.id:
                    data['user'] = user_data

            self.store.save(SESSIONS_KEY, sessions)

    def delete_all(self) -> None:
        self.store.remove(SESSIONS_KEY)
