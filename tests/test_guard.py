from typing import cast

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from guard import LOGIN_PATH, UNAUTHORIZED_PATH, Access, UnknownViewError, home_path, navigate
from models import Role, User


class TestGuard(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()

    def gen_user(self, role: Role) -> User:
        return User(id=cast(str, self.faker.uuid4()), email=self.faker.email(), name=self.faker.name(), role=role)

    @parametrize(
        ('path', 'role', 'access', 'redirect'),
        [
            ('/', None, Access.GRANTED, None),
            ('/login', None, Access.GRANTED, None),
            ('/register', Role.ADMIN, Access.GRANTED, None),
            ('/unauthorized', Role.EMPLOYEE, Access.GRANTED, None),
            ('/admin/dashboard', None, Access.LOGIN_REQUIRED, LOGIN_PATH),
            ('/admin/dashboard', Role.ADMIN, Access.GRANTED, None),
            ('/admin/dashboard', Role.EMPLOYEE, Access.FORBIDDEN, UNAUTHORIZED_PATH),
            ('/admin/edit-employee/42', Role.ADMIN, Access.GRANTED, None),
            ('/admin/edit-employee/42', Role.EMPLOYEE, Access.FORBIDDEN, UNAUTHORIZED_PATH),
            ('/admin/analytics', None, Access.LOGIN_REQUIRED, LOGIN_PATH),
            ('/employee/profile', Role.EMPLOYEE, Access.GRANTED, None),
            ('/employee/dashboard', Role.ADMIN, Access.FORBIDDEN, UNAUTHORIZED_PATH),
            ('/employee/dashboard', None, Access.LOGIN_REQUIRED, LOGIN_PATH),
        ],
    )
    def test_navigate(self, path: str, role: Role | None, access: Access, redirect: str | None) -> None:
        user = None if role is None else self.gen_user(role)

        result = navigate(user, path)

        self.assertEqual(result.path, path)
        self.assertEqual(result.access, access)
        self.assertEqual(result.redirect, redirect)

    @parametrize(
        ('path',),
        [
            ('/admin',),
            ('/admin/edit-employee',),
            ('/does-not-exist',),
        ],
    )
    def test_navigate_unknown_view(self, path: str) -> None:
        with self.assertRaises(UnknownViewError):
            navigate(None, path)

    def test_home_path(self) -> None:
        self.assertEqual(home_path(Role.ADMIN), '/admin/dashboard')
        self.assertEqual(home_path(Role.EMPLOYEE), '/employee/dashboard')
