from flask import Blueprint, Response, request
from flask.views import MethodView

from guard import UnknownViewError, navigate

from .util import class_route, current_session, error_response, json_response

blp = Blueprint('Navigation', __name__)


@class_route(blp, '/api/v1/navigation')
class Navigation(MethodView):
    init_every_request = False

    def get(self) -> Response:
        path = request.args.get('path')

        if not path:
            return error_response('The path query parameter is required.', 400)

        session = current_session()

        try:
            result = navigate(None if session is None else session.user, path)
        except UnknownViewError:
            return error_response('View not found.', 404)

        return json_response(
            {
                'path': result.path,
                'access': result.access.value,
                'redirect': result.redirect,
            },
            200,
        )
