import logging
from collections.abc import Generator
from typing import Any, cast

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore import transactional
from google.cloud.firestore_v1 import DocumentReference, DocumentSnapshot, Transaction
from google.cloud.firestore_v1.base_query import FieldFilter

from models import Credential, User
from repositories import DuplicateEmailError, UserRepository
from repositories.codec import from_record, to_record


class FirestoreUserRepository(UserRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_credential(self, doc: DocumentSnapshot) -> Credential:
        return from_record(Credential, cast(dict[str, Any], doc.to_dict()))

    def _find_by_email(self, email: str, transaction: Transaction | None = None) -> DocumentSnapshot | None:
        docs = (
            self.db.collection('users').where(filter=FieldFilter('user.email', '==', email)).get(transaction=transaction)  # type: ignore[no-untyped-call]
        )

        if len(docs) == 0:
            return None

        if len(docs) > 1:
            self.logger.error('Multiple users found with email %s', email)
            return None

        return cast(DocumentSnapshot, docs[0])

    def find_by_email(self, email: str) -> Credential | None:
        doc = self._find_by_email(email)

        if doc is None:
            return None

        return self.doc_to_credential(doc)

    def get_all(self) -> Generator[Credential, None, None]:
        stream: Generator[DocumentSnapshot, None, None] = self.db.collection('users').stream()
        for doc in stream:
            yield self.doc_to_credential(doc)

    def create(self, credential: Credential) -> None:
        user_ref = self.db.collection('users').document(credential.user.id)

        @transactional  # type: ignore[misc]
        def create_user_transaction(transaction: Transaction, credential_dict_trans: dict[str, Any]) -> None:
            if self._find_by_email(credential_dict_trans['user']['email'], transaction) is not None:
                raise DuplicateEmailError(credential_dict_trans['user']['email'])

            transaction.create(user_ref, credential_dict_trans)

        create_user_transaction(self.db.transaction(), to_record(credential))

    def update_user(self, user: User) -> None:
        user_ref = self.db.collection('users').document(user.id)

        if not user_ref.get().exists:
            self.logger.error('No credential found for user %s', user.id)
            return

        user_ref.update({'user': to_record(user)})

    def delete_all(self) -> None:
        stream: Generator[DocumentSnapshot, None, None] = self.db.collection('users').stream()
        for doc in stream:
            cast(DocumentReference, doc.reference).delete()
