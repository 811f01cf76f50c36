from datetime import UTC, datetime

from dependency_injector.wiring import Provide
from flask import Blueprint, Response
from flask.views import MethodView

from analytics import (
    build_analytics,
    department_distribution,
    monthly_gross,
    recent_joiners,
    status_counts,
    team_size,
    tenure_months,
)
from containers import Container
from models import Role, Session
from repositories import EmployeeRepository

from .employee import employee_to_dict
from .util import class_route, error_response, json_response, requires_role, requires_token

blp = Blueprint('Dashboard', __name__)


@class_route(blp, '/api/v1/analytics')
class Analytics(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def get(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employees = list(employee_repo.get_all())

        return json_response(build_analytics(employees, datetime.now(UTC).date()), 200)


@class_route(blp, '/api/v1/dashboard/admin')
class AdminDashboard(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.ADMIN)
    def get(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employees = list(employee_repo.get_all())
        today = datetime.now(UTC).date()

        return json_response(
            {
                'stats': status_counts(employees),
                'departmentDistribution': department_distribution(employees),
                'recentJoiners': [employee_to_dict(employee) for employee in recent_joiners(employees, today)],
            },
            200,
        )


@class_route(blp, '/api/v1/dashboard/employee')
class EmployeeDashboard(MethodView):
    init_every_request = False

    @requires_token
    @requires_role(Role.EMPLOYEE)
    def get(self, session: Session, employee_repo: EmployeeRepository = Provide[Container.employee_repo]) -> Response:
        employee = employee_repo.find_by_email(session.user.email)

        if employee is None:
            return error_response('No employee record is linked to your account.', 404)

        today = datetime.now(UTC).date()

        return json_response(
            {
                'employee': employee_to_dict(employee),
                'tenureMonths': tenure_months(employee.joining_date, today),
                'teamSize': team_size(employee, employee_repo.get_all()),
                'monthlyGross': monthly_gross(employee.salary),
            },
            200,
        )
