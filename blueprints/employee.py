import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

import marshmallow.validate
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView
from marshmallow import ValidationError

from analytics import monthly_gross
from containers import Container
from models import Employee, EmployeeStatus, Role, Session
from repositories import DuplicateEmailError, EmployeeNotFoundError, EmployeeRepository

from .util import class_route, error_response, json_response, requires_role, requires_token, validation_error_response

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'
STATUS_ALL = 'all'


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        'id': employee.id,
        'firstName': employee.first_name,
        'lastName': employee.last_name,
        'email': employee.email,
        'phone': employee.phone,
        'department': employee.department,
        'designation': employee.designation,
        'salary': employee.salary,
        'joiningDate': employee.joining_date.isoformat(),
        'status': employee.status.value,
        'address': employee.address,
        'emergencyContact': employee.emergency_contact,
        'avatar': employee.avatar,
        'createdAt': employee.created_at.isoformat(),
        'updatedAt': employee.updated_at.isoformat(),
    }


# Employee validation classes
@dataclass
class EmployeeBody:
    firstName: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})  # noqa: N815
    lastName: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})  # noqa: N815
    email: str = field(metadata={'validate': [marshmallow.validate.Email(), marshmallow.validate.Length(min=1, max=60)]})
    phone: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=30)})
    department: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})
    designation: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})
    salary: float = field(metadata={'validate': marshmallow.validate.Range(min=0)})
    joiningDate: date  # noqa: N815
    status: str = field(
        default=EmployeeStatus.ONBOARDING.value,
        metadata={'validate': marshmallow.validate.OneOf([status.value for status in EmployeeStatus])},
    )
    address: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=200)})
    emergencyContact: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=100)})  # noqa: N815
    avatar: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=500)})


@dataclass
class UpdateEmployeeBody:
    firstName: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(min=1, max=60)})  # noqa: N815
    lastName: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(min=1, max=60)})  # noqa: N815
    email: str | None = field(
        default=None, metadata={'validate': [marshmallow.validate.Email(), marshmallow.validate.Length(min=1, max=60)]}
    )
    phone: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(min=1, max=30)})
    department: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(min=1, max=60)})
    designation: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(min=1, max=60)})
    salary: float | None = field(default=None, metadata={'validate': marshmallow.validate.Range(min=0)})
    joiningDate: date | None = None  # noqa: N815
    status: str | None = field(
        default=None, metadata={'validate': marshmallow.validate.OneOf([status.value for status in EmployeeStatus])}
    )
    address: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=200)})
    emergencyContact: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=100)})  # noqa: N815
    avatar: str | None = field(default=None, metadata={'validate': marshmallow.validate.Length(max=500)})


# Request field -> Employee attribute
UPDATABLE_FIELDS = {
    'firstName': 'first_name',
    'lastName': 'last_name',
    'email': 'email',
    'phone': 'phone',
    'department': 'department',
    'designation': 'designation',
    'salary': 'salary',
    'joiningDate': 'joining_date',
    'status': 'status',
    'address': 'address',
    'emergencyContact': 'emergency_contact',
    'avatar': 'avatar',
}


def now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


def matches_filters(employee: Employee, search: str, status: str, department: str) -> bool:
    if search:
        haystack = (employee.first_name, employee.last_name, employee.email, employee.department)
        if not any(search in value.lower() for value in haystack):
            return False

    if status != STATUS_ALL and employee.status.value != status:
        return False

    return department in (STATUS_ALL, employee.department)


@class_route(blp, '/api/v1/employees/me')
class EmployeeProfile(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.EMPLOYEE)
    def get(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employee = employee_repo.find_by_email(session.user.email)

        if employee is None:
            return error_response('No employee record is linked to your account.', 404)

        return json_response({**employee_to_dict(employee), 'monthlyGross': monthly_gross(employee.salary)}, 200)


@class_route(blp, '/api/v1/employees')
class EmployeeList(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def get(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        search = request.args.get('search', '').strip().lower()
        status = request.args.get('status', STATUS_ALL)
        department = request.args.get('department', STATUS_ALL)

        # Validate the value of status
        allowed_statuses = [STATUS_ALL] + [s.value for s in EmployeeStatus]
        if status not in allowed_statuses:
            return error_response(f'Invalid status. Allowed values are {allowed_statuses}.', 400)

        employees = list(employee_repo.get_all())
        filtered = [employee for employee in employees if matches_filters(employee, search, status, department)]

        response_data = {
            'employees': [employee_to_dict(employee) for employee in filtered],
            'departments': list(dict.fromkeys(employee.department for employee in employees)),
            'totalEmployees': len(employees),
            'matchingEmployees': len(filtered),
        }

        return json_response(response_data, 200)


@class_route(blp, '/api/v1/employees')
class EmployeeCreate(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def post(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employee_schema = marshmallow_dataclass.class_schema(EmployeeBody)()
        req_json = request.get_json(silent=True)

        if req_json is None:
            return error_response(JSON_VALIDATION_ERROR, 400)

        # Validate request body
        try:
            data: EmployeeBody = employee_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        timestamp = now()
        employee = Employee(
            id=str(uuid.uuid4()),
            first_name=data.firstName,
            last_name=data.lastName,
            email=data.email.lower(),
            phone=data.phone,
            department=data.department,
            designation=data.designation,
            salary=data.salary,
            joining_date=data.joiningDate,
            status=EmployeeStatus(data.status),
            created_at=timestamp,
            updated_at=timestamp,
            address=data.address,
            emergency_contact=data.emergencyContact,
            avatar=data.avatar,
        )

        try:
            employee_repo.create(employee)
        except DuplicateEmailError:
            return error_response('Email already registered.', 409)

        return json_response(employee_to_dict(employee), 201)


@class_route(blp, '/api/v1/employees/<employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def get(
        self, employee_id: str, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]
    ) -> Response:
        employee = employee_repo.get(employee_id)

        if employee is None:
            return error_response('Employee not found.', 404)

        return json_response(employee_to_dict(employee), 200)

    @requires_token
    @requires_role(Role.ADMIN)
    def patch(
        self, employee_id: str, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]
    ) -> Response:
        update_schema = marshmallow_dataclass.class_schema(UpdateEmployeeBody)()
        req_json = request.get_json(silent=True)

        if req_json is None:
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: UpdateEmployeeBody = update_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        employee = employee_repo.get(employee_id)

        if employee is None:
            return error_response('Employee not found.', 404)

        changes: dict[str, Any] = {}
        for body_field, attribute in UPDATABLE_FIELDS.items():
            value = getattr(data, body_field)
            if value is not None:
                changes[attribute] = value

        if 'status' in changes:
            changes['status'] = EmployeeStatus(changes['status'])
        if 'email' in changes:
            changes['email'] = changes['email'].lower()

        employee = dataclasses.replace(employee, **changes, updated_at=now())

        try:
            employee_repo.update(employee)
        except EmployeeNotFoundError:
            return error_response('Employee not found.', 404)
        except DuplicateEmailError:
            return error_response('Email already registered.', 409)

        return json_response(employee_to_dict(employee), 200)

    @requires_token
    @requires_role(Role.ADMIN)
    def delete(
        self, employee_id: str, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]
    ) -> Response:
        try:
            employee_repo.delete(employee_id)
        except EmployeeNotFoundError:
            return error_response('Employee not found.', 404)

        return json_response({'message': 'Employee deleted successfully.'}, 200)


@class_route(blp, '/api/v1/employees/<employee_id>/status/<status>')
class EmployeeStatusUpdate(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def post(
        self,
        employee_id: str,
        status: str,
        session: Session,
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
    ) -> Response:
        try:
            new_status = EmployeeStatus(status)
        except ValueError:
            return error_response('Invalid status.', 400)

        try:
            employee = employee_repo.set_status(employee_id, new_status, now())
        except EmployeeNotFoundError:
            return error_response('Employee not found.', 404)

        return json_response(employee_to_dict(employee), 200)
