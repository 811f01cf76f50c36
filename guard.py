"""Role-based access policy for the dashboard views.

A view declares the roles allowed to open it (`None` for public views). Anonymous
visitors of a protected view are sent to the login view, signed-in users lacking the
role to the unauthorized view. The same policy backs the role checks of the API.
"""

from dataclasses import dataclass
from enum import Enum

from werkzeug.exceptions import NotFound
from werkzeug.routing import Map, RequestRedirect, Rule

from models import Role, User

LOGIN_PATH = '/login'
UNAUTHORIZED_PATH = '/unauthorized'

PUBLIC: frozenset[Role] | None = None
ADMIN_ONLY = frozenset({Role.ADMIN})
EMPLOYEE_ONLY = frozenset({Role.EMPLOYEE})

VIEWS: dict[str, frozenset[Role] | None] = {
    '/': PUBLIC,
    LOGIN_PATH: PUBLIC,
    '/register': PUBLIC,
    UNAUTHORIZED_PATH: PUBLIC,
    '/admin/dashboard': ADMIN_ONLY,
    '/admin/employees': ADMIN_ONLY,
    '/admin/add-employee': ADMIN_ONLY,
    '/admin/edit-employee/<employee_id>': ADMIN_ONLY,
    '/admin/analytics': ADMIN_ONLY,
    '/employee/dashboard': EMPLOYEE_ONLY,
    '/employee/profile': EMPLOYEE_ONLY,
}

HOME_PATHS: dict[Role, str] = {
    Role.ADMIN: '/admin/dashboard',
    Role.EMPLOYEE: '/employee/dashboard',
}

view_map = Map([Rule(path, endpoint=path) for path in VIEWS])


class Access(Enum):
    GRANTED = 'granted'
    LOGIN_REQUIRED = 'login_required'
    FORBIDDEN = 'forbidden'


@dataclass
class Navigation:
    path: str
    access: Access
    redirect: str | None


class UnknownViewError(Exception):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No view is registered for '{path}'.")


def check_access(user: User | None, allowed_roles: frozenset[Role] | None) -> Access:
    if allowed_roles is None:
        return Access.GRANTED

    if user is None:
        return Access.LOGIN_REQUIRED

    if user.role not in allowed_roles:
        return Access.FORBIDDEN

    return Access.GRANTED


def allowed_roles_for(path: str) -> frozenset[Role] | None:
    try:
        endpoint, _ = view_map.bind('localhost').match(path)
    except (NotFound, RequestRedirect) as err:
        raise UnknownViewError(path) from err

    return VIEWS[endpoint]


def navigate(user: User | None, path: str) -> Navigation:
    access = check_access(user, allowed_roles_for(path))

    redirect = None
    if access == Access.LOGIN_REQUIRED:
        redirect = LOGIN_PATH
    elif access == Access.FORBIDDEN:
        redirect = UNAUTHORIZED_PATH

    return Navigation(path=path, access=access, redirect=redirect)


def home_path(role: Role) -> str:
    return HOME_PATHS[role]
