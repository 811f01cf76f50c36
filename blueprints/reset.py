from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

import demo
from containers import Container
from repositories import EmployeeRepository, SessionRepository, UserRepository

from .util import class_route, json_response

blp = Blueprint('Reset database', __name__)


@class_route(blp, '/api/v1/reset')
class ResetDB(MethodView):
    init_every_request = False

    @inject
    def post(
        self,
        session_repo: SessionRepository = Provide[Container.session_repo],
        employee_repo: EmployeeRepository = Provide[Container.employee_repo],
        user_repo: UserRepository = Provide[Container.user_repo],
    ) -> Response:
        session_repo.delete_all()
        employee_repo.delete_all()
        user_repo.delete_all()

        if request.args.get('demo', 'false') == 'true':
            for credential in demo.credentials:
                user_repo.create(credential)

            for employee in demo.employees:
                employee_repo.create(employee)

        return json_response({'status': 'Ok'}, 200)
