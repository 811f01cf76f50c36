import logging
from collections.abc import Generator
from datetime import datetime
from typing import Any, cast

from google.cloud.firestore import Client as FirestoreClient  # type: ignore[import-untyped]
from google.cloud.firestore import transactional
from google.cloud.firestore_v1 import DocumentReference, DocumentSnapshot, Transaction
from google.cloud.firestore_v1.base_query import FieldFilter

from models import Employee, EmployeeStatus
from repositories import DuplicateEmailError, EmployeeNotFoundError, EmployeeRepository
from repositories.codec import from_record, to_record


class FirestoreEmployeeRepository(EmployeeRepository):
    def __init__(self, database: str) -> None:
        self.db = FirestoreClient(database=database)
        self.logger = logging.getLogger(self.__class__.__name__)

    def doc_to_employee(self, doc: DocumentSnapshot) -> Employee:
        return from_record(
            Employee,
            {
                # Can never be None, as it's a Firestore DocumentSnapshot and therefore always exists
                **cast(dict[str, Any], doc.to_dict()),
                'id': doc.id,
            },
        )

    @staticmethod
    def employee_to_doc(employee: Employee) -> dict[str, Any]:
        employee_dict = to_record(employee)
        del employee_dict['id']
        return employee_dict

    def get(self, employee_id: str) -> Employee | None:
        doc = self.db.collection('employees').document(employee_id).get()

        if not doc.exists:
            return None

        return self.doc_to_employee(doc)

    def get_all(self) -> Generator[Employee, None, None]:
        stream: Generator[DocumentSnapshot, None, None] = self.db.collection('employees').order_by('created_at').stream()
        for doc in stream:
            yield self.doc_to_employee(doc)

    def _find_by_email(self, email: str, transaction: Transaction | None = None) -> DocumentSnapshot | None:
        docs = (
            self.db.collection('employees').where(filter=FieldFilter('email', '==', email)).get(transaction=transaction)  # type: ignore[no-untyped-call]
        )

        if len(docs) == 0:
            return None

        if len(docs) > 1:
            self.logger.error('Multiple employees found with email %s', email)
            return None

        return cast(DocumentSnapshot, docs[0])

    def find_by_email(self, email: str) -> Employee | None:
        doc = self._find_by_email(email)

        if doc is None:
            return None

        return self.doc_to_employee(doc)

    def create(self, employee: Employee) -> None:
        employee_ref = self.db.collection('employees').document(employee.id)

        @transactional  # type: ignore[misc]
        def create_employee_transaction(transaction: Transaction, employee_dict_trans: dict[str, Any]) -> None:
            if self._find_by_email(employee_dict_trans['email'], transaction) is not None:
                raise DuplicateEmailError(employee_dict_trans['email'])

            transaction.create(employee_ref, employee_dict_trans)

        create_employee_transaction(self.db.transaction(), self.employee_to_doc(employee))

    def update(self, employee: Employee) -> None:
        employee_ref = self.db.collection('employees').document(employee.id)

        @transactional  # type: ignore[misc]
        def update_employee_transaction(transaction: Transaction, employee_dict_trans: dict[str, Any]) -> None:
            if not employee_ref.get(transaction=transaction).exists:
                raise EmployeeNotFoundError(employee.id)

            other = self._find_by_email(employee_dict_trans['email'], transaction)
            if other is not None and other.id != employee.id:
                raise DuplicateEmailError(employee_dict_trans['email'])

            transaction.set(employee_ref, employee_dict_trans)

        update_employee_transaction(self.db.transaction(), self.employee_to_doc(employee))

    def set_status(self, employee_id: str, status: EmployeeStatus, updated_at: datetime) -> Employee:
        employee_ref = self.db.collection('employees').document(employee_id)

        @transactional  # type: ignore[misc]
        def set_status_transaction(transaction: Transaction) -> Employee:
            doc = employee_ref.get(transaction=transaction)
            if not doc.exists:
                raise EmployeeNotFoundError(employee_id)

            employee = self.doc_to_employee(doc)
            employee.status = status
            employee.updated_at = updated_at

            transaction.update(employee_ref, {'status': status.value, 'updated_at': updated_at.isoformat()})
            return employee

        return cast(Employee, set_status_transaction(self.db.transaction()))

    def delete(self, employee_id: str) -> None:
        employee_ref = self.db.collection('employees').document(employee_id)

        @transactional  # type: ignore[misc]
        def delete_employee_transaction(transaction: Transaction) -> None:
            if not employee_ref.get(transaction=transaction).exists:
                raise EmployeeNotFoundError(employee_id)

            transaction.delete(employee_ref)

        delete_employee_transaction(self.db.transaction())

    def delete_all(self) -> None:
        stream: Generator[DocumentSnapshot, None, None] = self.db.collection('employees').stream()
        for e in stream:
            cast(DocumentReference, e.reference).delete()
