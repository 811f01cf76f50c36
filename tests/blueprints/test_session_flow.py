import json
from typing import Any, cast

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize
from werkzeug.test import TestResponse

import demo
from app import create_app
from models import Role


class TestSessionFlow(ParametrizedTestCase):
    """Runs the API end to end against the in-memory store."""

    def setUp(self) -> None:
        self.faker = Faker()
        self.app = create_app()
        self.app.container.config.storage.backend.override('memory')
        jwt_private_key = Ed25519PrivateKey.generate()
        self.app.container.config.jwt.private_key.override(
            jwt_private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )

        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.container.unwire()

    def register(self, role: Role, email: str | None = None, password: str | None = None) -> TestResponse:
        return self.client.post(
            '/api/v1/auth/register',
            json={
                'name': self.faker.name(),
                'email': email or self.faker.unique.email(),
                'password': password or self.faker.password(length=12),
                'role': role.value,
            },
        )

    def login(self, email: str, password: str) -> TestResponse:
        return self.client.post('/api/v1/auth/login', json={'email': email, 'password': password})

    def bearer(self, resp: TestResponse) -> dict[str, str]:
        return {'Authorization': f'Bearer {json.loads(resp.get_data())["token"]}'}

    def admin_headers(self) -> dict[str, str]:
        resp = self.register(Role.ADMIN)
        self.assertEqual(resp.status_code, 201)
        return self.bearer(resp)

    def add_employee(self, headers: dict[str, str], **fields: Any) -> dict[str, Any]:
        body = {
            'firstName': self.faker.first_name(),
            'lastName': self.faker.last_name(),
            'email': self.faker.unique.email(),
            'phone': '+1 555 0100',
            'department': self.faker.random_element(['Engineering', 'Marketing', 'Sales']),
            'designation': self.faker.job()[:60],
            'salary': self.faker.random_int(min=20_000, max=250_000),
            'joiningDate': self.faker.past_date(start_date='-3y').isoformat(),
            **fields,
        }
        resp = self.client.post('/api/v1/employees', json=body, headers=headers)
        self.assertEqual(resp.status_code, 201)
        return cast(dict[str, Any], json.loads(resp.get_data()))

    def list_employees(self, headers: dict[str, str]) -> list[dict[str, Any]]:
        resp = self.client.get('/api/v1/employees', headers=headers)
        self.assertEqual(resp.status_code, 200)
        return cast(list[dict[str, Any]], json.loads(resp.get_data())['employees'])

    @parametrize(
        'role',
        [
            (Role.ADMIN,),
            (Role.EMPLOYEE,),
        ],
    )
    def test_register_login_logout(self, role: Role) -> None:
        email = self.faker.unique.email()
        password = self.faker.password(length=12)

        resp = self.register(role, email, password)
        self.assertEqual(resp.status_code, 201)
        headers = self.bearer(resp)

        resp = self.client.get('/api/v1/auth/me', headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data())['email'], email)

        resp = self.client.post('/api/v1/auth/logout', headers=headers)
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get('/api/v1/auth/me', headers=headers)
        self.assertEqual(resp.status_code, 401)

        resp = self.client.get('/api/v1/navigation', query_string={'path': '/employee/dashboard'}, headers=headers)
        self.assertEqual(json.loads(resp.get_data())['redirect'], '/login')

        resp = self.login(email, password)
        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['user']['email'], email)
        self.assertEqual(resp_data['user']['role'], role.value)

        resp = self.client.get('/api/v1/auth/me', headers=self.bearer(resp))
        self.assertEqual(resp.status_code, 200)

    def test_login_rejected(self) -> None:
        email = self.faker.unique.email()
        password = self.faker.password(length=12)
        self.register(Role.EMPLOYEE, email, password)

        self.assertEqual(self.login(email, password + 'x').status_code, 401)
        self.assertEqual(self.login(self.faker.unique.email(), password).status_code, 401)

    def test_register_duplicate(self) -> None:
        email = self.faker.unique.email()

        self.assertEqual(self.register(Role.EMPLOYEE, email).status_code, 201)
        self.assertEqual(self.register(Role.ADMIN, email.upper()).status_code, 409)

    def test_update_me_refreshes_session_and_credential(self) -> None:
        email = self.faker.unique.email()
        password = self.faker.password(length=12)
        headers = self.bearer(self.register(Role.EMPLOYEE, email, password))

        resp = self.client.patch('/api/v1/auth/me', json={'name': 'Renamed User'}, headers=headers)
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get('/api/v1/auth/me', headers=headers)
        self.assertEqual(json.loads(resp.get_data())['name'], 'Renamed User')

        resp = self.login(email, password)
        self.assertEqual(json.loads(resp.get_data())['user']['name'], 'Renamed User')

    def test_add_employees(self) -> None:
        headers = self.admin_headers()
        before = self.list_employees(headers)
        count = self.faker.random_int(min=1, max=5)

        added = [self.add_employee(headers) for _ in range(count)]

        after = self.list_employees(headers)
        self.assertEqual(after, before + added)
        self.assertEqual(len({employee['id'] for employee in after}), len(after))

    def test_unknown_id_leaves_list_unchanged(self) -> None:
        headers = self.admin_headers()
        for _ in range(3):
            self.add_employee(headers)

        before = self.list_employees(headers)
        unknown_id = self.faker.uuid4()

        resp = self.client.patch(f'/api/v1/employees/{unknown_id}', json={'salary': 1}, headers=headers)
        self.assertEqual(resp.status_code, 404)
        resp = self.client.delete(f'/api/v1/employees/{unknown_id}', headers=headers)
        self.assertEqual(resp.status_code, 404)
        resp = self.client.post(f'/api/v1/employees/{unknown_id}/status/exit', headers=headers)
        self.assertEqual(resp.status_code, 404)

        self.assertEqual(self.list_employees(headers), before)

    def test_employee_lifecycle(self) -> None:
        headers = self.admin_headers()
        employee = self.add_employee(headers, status='onboarding')

        resp = self.client.post(f'/api/v1/employees/{employee["id"]}/status/active', headers=headers)
        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['status'], 'active')
        self.assertEqual(resp_data['salary'], employee['salary'])

        resp = self.client.patch(f'/api/v1/employees/{employee["id"]}', json={'department': 'Finance'}, headers=headers)
        self.assertEqual(json.loads(resp.get_data())['department'], 'Finance')

        resp = self.client.get(f'/api/v1/employees/{employee["id"]}', headers=headers)
        resp_data = json.loads(resp.get_data())
        self.assertEqual(resp_data['department'], 'Finance')
        self.assertEqual(resp_data['status'], 'active')

        resp = self.client.delete(f'/api/v1/employees/{employee["id"]}', headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.list_employees(headers), [])

    def test_analytics_buckets_sum_to_total(self) -> None:
        headers = self.admin_headers()
        for salary in (40000, 60000, 80000, 120000, 200000):
            self.add_employee(headers, salary=salary)

        resp = self.client.get('/api/v1/analytics', headers=headers)
        self.assertEqual(resp.status_code, 200)
        resp_data = json.loads(resp.get_data())

        self.assertEqual(resp_data['totalEmployees'], 5)
        self.assertEqual(
            resp_data['activeEmployees'] + resp_data['onboardingEmployees'] + resp_data['exitEmployees'],
            resp_data['totalEmployees'],
        )
        self.assertEqual([bucket['count'] for bucket in resp_data['salaryDistribution']], [1, 1, 1, 1, 1])

    def test_demo_reset(self) -> None:
        headers = self.admin_headers()
        self.add_employee(headers)

        resp = self.client.post('/api/v1/reset?demo=true')
        self.assertEqual(resp.status_code, 200)

        # Sessions are wiped with everything else
        self.assertEqual(self.client.get('/api/v1/auth/me', headers=headers).status_code, 401)

        resp = self.login('admin@corehr.com', 'admin123')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data())['redirect'], '/admin/dashboard')

        employees = self.list_employees(self.bearer(resp))
        self.assertEqual([employee['id'] for employee in employees], [employee.id for employee in demo.employees])

        resp = self.login('john.smith@company.com', 'employee123')
        self.assertEqual(resp.status_code, 200)

        resp = self.client.get('/api/v1/dashboard/employee', headers=self.bearer(resp))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data())['employee']['email'], 'john.smith@company.com')
