import functools
import json
from collections.abc import Callable
from typing import Any, TypeVar, cast

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView
from marshmallow import ValidationError

from containers import Container
from guard import Access, check_access
from models import Role, Session
from repositories import SessionRepository

F = TypeVar('F', bound=Callable[..., Any])
V = TypeVar('V', bound=type[MethodView])


def class_route(blp: Blueprint, rule: str, **options: Any) -> Callable[[V], V]:
    def decorator(cls: V) -> V:
        blp.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: Any, status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(message: str, status: int) -> Response:
    return json_response({'code': status, 'message': message}, status)


def validation_error_response(err: ValidationError) -> Response:
    messages = err.normalized_messages()
    parts = []
    for field, field_messages in messages.items():
        text = ' '.join(str(m) for m in field_messages) if isinstance(field_messages, list) else str(field_messages)
        parts.append(f'Invalid value for {field}: {text}')

    return error_response(' '.join(parts), 400)


def signing_key_bytes(private_key: str | bytes) -> bytes:
    return private_key.encode() if isinstance(private_key, str) else private_key


@inject
def decode_token(
    token: str,
    jwt_issuer: str = Provide[Container.config.jwt.issuer.required()],
    jwt_private_key: str | bytes = Provide[Container.config.jwt.private_key.required()],
) -> dict[str, Any]:
    private_key = cast(Ed25519PrivateKey, serialization.load_pem_private_key(signing_key_bytes(jwt_private_key), password=None))

    return jwt.decode(
        token,
        private_key.public_key(),
        algorithms=['EdDSA'],
        audience=[role.value for role in Role],
        issuer=jwt_issuer,
        options={'require': ['iss', 'sub', 'aud', 'iat', 'jti']},
    )


@inject
def find_session(token: str, session_repo: SessionRepository = Provide[Container.session_repo]) -> Session | None:
    try:
        decode_token(token)
    except jwt.InvalidTokenError:
        return None

    return session_repo.get(token)


def bearer_token() -> str | None:
    scheme, _, token = request.headers.get('Authorization', '').partition(' ')

    if scheme.lower() != 'bearer' or token.strip() == '':
        return None

    return token.strip()


def current_session() -> Session | None:
    """Session of the request's bearer token, or None for anonymous requests."""
    token = bearer_token()

    if token is None:
        return None

    return find_session(token)


def requires_token(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        token = bearer_token()
        if token is None:
            return error_response('Authentication required.', 401)

        session = find_session(token)
        if session is None:
            return error_response('Invalid or expired session.', 401)

        return func(*args, session=session, **kwargs)

    return cast(F, wrapper)


def requires_role(*roles: Role) -> Callable[[F], F]:
    allowed_roles = frozenset(roles)

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, session: Session, **kwargs: Any) -> Any:
            if check_access(session.user, allowed_roles) != Access.GRANTED:
                return error_response('Forbidden: You do not have access to this resource.', 403)

            return func(*args, session=session, **kwargs)

        return cast(F, wrapper)

    return decorator
