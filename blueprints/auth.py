import datetime
import logging
import secrets
import typing
import uuid
from dataclasses import dataclass, field, replace

import jwt
import marshmallow.validate
import marshmallow_dataclass
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView
from marshmallow import ValidationError
from passlib.hash import pbkdf2_sha256

from containers import Container
from guard import home_path
from models import Credential, Role, Session, User
from repositories import DuplicateEmailError, SessionRepository, UserRepository

from .util import class_route, error_response, json_response, requires_token, signing_key_bytes, validation_error_response

blp = Blueprint('Authentication', __name__)

logger = logging.getLogger(__name__)

JSON_VALIDATION_ERROR = 'The request body could not be parsed as valid JSON.'


class JWTPayload(typing.TypedDict):
    iss: str
    sub: str
    email: str
    role: str
    aud: str
    iat: int
    jti: str


@dataclass
class LoginBody:
    email: str
    password: str


@dataclass
class RegisterBody:
    name: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})
    email: str = field(metadata={'validate': [marshmallow.validate.Email(), marshmallow.validate.Length(min=1, max=60)]})
    password: str = field(metadata={'validate': marshmallow.validate.Length(min=8)})
    role: str = field(metadata={'validate': marshmallow.validate.OneOf([role.value for role in Role])})


@dataclass
class UpdateUserBody:
    name: str = field(metadata={'validate': marshmallow.validate.Length(min=1, max=60)})


def user_to_dict(user: User) -> dict[str, typing.Any]:
    return {
        'id': user.id,
        'email': user.email,
        'name': user.name,
        'role': user.role.value,
    }


@inject
def issue_token(
    user: User,
    jwt_issuer: str = Provide[Container.config.jwt.issuer.required()],
    jwt_private_key: str | bytes = Provide[Container.config.jwt.private_key.required()],
) -> str:
    time_issued = datetime.datetime.now(datetime.UTC)

    # Sessions end on logout, so the token carries no expiry
    payload: JWTPayload = {
        'iss': jwt_issuer,
        'sub': user.id,
        'email': user.email,
        'role': user.role.value,
        'aud': user.role.value,
        'iat': int(time_issued.timestamp()),
        'jti': secrets.token_hex(16),
    }

    return jwt.encode(typing.cast(dict[str, typing.Any], payload), signing_key_bytes(jwt_private_key), algorithm='EdDSA')


@inject
def start_session(user: User, session_repo: SessionRepository = Provide[Container.session_repo]) -> dict[str, typing.Any]:
    token = issue_token(user)
    session_repo.create(Session(token=token, user=user, created_at=datetime.datetime.now(datetime.UTC).replace(microsecond=0)))

    return {
        'token': token,
        'user': user_to_dict(user),
        'redirect': home_path(user.role),
    }


@class_route(blp, '/api/v1/auth/login')
class AuthLogin(MethodView):
    init_every_request = False

    def post(self, user_repo: UserRepository = Provide[Container.user_repo]) -> Response:
        login_schema = marshmallow_dataclass.class_schema(LoginBody)()
        req_json = request.get_json(silent=True)
        if req_json is None:
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: LoginBody = login_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        credential = user_repo.find_by_email(data.email.lower())

        if credential is None or not pbkdf2_sha256.verify(data.password, credential.password):
            logger.info('Rejected login for %s', data.email)
            return error_response('Invalid email or password.', 401)

        logger.info('User %s logged in', credential.user.id)
        return json_response(start_session(credential.user), 200)


@class_route(blp, '/api/v1/auth/register')
class AuthRegister(MethodView):
    init_every_request = False

    def post(self, user_repo: UserRepository = Provide[Container.user_repo]) -> Response:
        register_schema = marshmallow_dataclass.class_schema(RegisterBody)()
        req_json = request.get_json(silent=True)
        if req_json is None:
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: RegisterBody = register_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        user = User(
            id=str(uuid.uuid4()),
            email=data.email.lower(),
            name=data.name,
            role=Role(data.role),
        )

        try:
            user_repo.create(Credential(password=pbkdf2_sha256.hash(data.password), user=user))
        except DuplicateEmailError:
            return error_response('Email already registered.', 409)

        logger.info('Registered user %s with role %s', user.id, user.role.value)
        return json_response(start_session(user), 201)


@class_route(blp, '/api/v1/auth/logout')
class AuthLogout(MethodView):
    init_every_request = False

    @requires_token
    def post(self, session: Session, session_repo: SessionRepository = Provide[Container.session_repo]) -> Response:
        session_repo.delete(session.token)

        logger.info('User %s logged out', session.user.id)
        return json_response({'message': 'Logged out successfully.'}, 200)


@class_route(blp, '/api/v1/auth/me')
class AuthMe(MethodView):
    init_every_request = False

    @requires_token
    def get(self, session: Session) -> Response:
        return json_response(user_to_dict(session.user), 200)

    @requires_token
    def patch(
        self,
        session: Session,
        user_repo: UserRepository = Provide[Container.user_repo],
        session_repo: SessionRepository = Provide[Container.session_repo],
    ) -> Response:
        update_schema = marshmallow_dataclass.class_schema(UpdateUserBody)()
        req_json = request.get_json(silent=True)
        if req_json is None:
            return error_response(JSON_VALIDATION_ERROR, 400)

        try:
            data: UpdateUserBody = update_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        user = replace(session.user, name=data.name)
        user_repo.update_user(user)
        session_repo.update_user(user)

        return json_response(user_to_dict(user), 200)
