import logging
from collections.abc import Generator
from typing import Any, cast

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore_v1 import DocumentReference, DocumentSnapshot
from google.cloud.firestore_v1.base_query import FieldFilter

from models import Session, User
from repositories import SessionRepository
from repositories.codec import from_record, to_record


class FirestoreSessionRepository(SessionRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def get(self, token: str) -> Session | None:
        doc = self.db.collection('sessions').document(token).get()

        if not doc.exists:
            return None

        return from_record(Session, cast(dict[str, Any], doc.to_dict()))

    def create(self, session: Session) -> None:
        self.db.collection('sessions').document(session.token).set(to_record(session))

    def delete(self, token: str) -> None:
        self.db.collection('sessions').document(token).delete()

    def update_user(self, user: User) -> None:
        stream: Generator[DocumentSnapshot, None, None] = (
            self.db.collection('sessions').where(filter=FieldFilter('user.id', '==', user.id)).stream()  # type: ignore[no-untyped-call]
        )
        user_dict = to_record(user)
        for doc in stream:
            cast(DocumentReference, doc.reference).update({'user': user_dict})

    def delete_all(self) -> None:
        stream: Generator[DocumentSnapshot, None, None] = self.db.collection('sessions').stream()
        for doc in stream:
            cast(DocumentReference, doc.reference).delete()
