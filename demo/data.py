from datetime import UTC, date, datetime

from passlib.hash import pbkdf2_sha256

from models import Credential, Employee, EmployeeStatus, Role, User

admin_user = User(
    id='5f0c2f4e-6a51-4d0b-9a53-3d2f8c1e7a10',
    email='admin@corehr.com',
    name='Admin User',
    role=Role.ADMIN,
)

employee_user = User(
    id='b7e3c9a2-1f44-4c6e-8d2b-6a0f5e9c3d21',
    email='john.smith@company.com',
    name='John Smith',
    role=Role.EMPLOYEE,
)

credentials = [
    Credential(password=pbkdf2_sha256.hash('admin123'), user=admin_user),
    Credential(password=pbkdf2_sha256.hash('employee123'), user=employee_user),
]

employees = [
    Employee(
        id='0c6f3b1e-9d2a-4f57-8e61-2b4a7c9d1e01',
        first_name='John',
        last_name='Smith',
        email='john.smith@company.com',
        phone='+1 (555) 123-4567',
        department='Engineering',
        designation='Senior Developer',
        salary=95000,
        joining_date=date(2023, 1, 15),
        status=EmployeeStatus.ACTIVE,
        created_at=datetime(2023, 1, 15, tzinfo=UTC),
        updated_at=datetime(2024, 1, 10, tzinfo=UTC),
    ),
    Employee(
        id='1d7a4c2f-8e3b-4a68-9f72-3c5b8d0e2f02',
        first_name='Sarah',
        last_name='Johnson',
        email='sarah.johnson@company.com',
        phone='+1 (555) 234-5678',
        department='Marketing',
        designation='Marketing Manager',
        salary=85000,
        joining_date=date(2023, 3, 20),
        status=EmployeeStatus.ACTIVE,
        created_at=datetime(2023, 3, 20, tzinfo=UTC),
        updated_at=datetime(2024, 1, 8, tzinfo=UTC),
    ),
    Employee(
        id='2e8b5d3a-7f4c-4b79-8a83-4d6c9e1f3a03',
        first_name='Michael',
        last_name='Brown',
        email='michael.brown@company.com',
        phone='+1 (555) 345-6789',
        department='Sales',
        designation='Sales Representative',
        salary=65000,
        joining_date=date(2023, 6, 1),
        status=EmployeeStatus.ACTIVE,
        created_at=datetime(2023, 6, 1, tzinfo=UTC),
        updated_at=datetime(2024, 1, 5, tzinfo=UTC),
    ),
    Employee(
        id='3f9c6e4b-6a5d-4c8a-9b94-5e7d0f2a4b04',
        first_name='Emily',
        last_name='Davis',
        email='emily.davis@company.com',
        phone='+1 (555) 456-7890',
        department='Human Resources',
        designation='HR Coordinator',
        salary=55000,
        joining_date=date(2024, 1, 2),
        status=EmployeeStatus.ONBOARDING,
        created_at=datetime(2024, 1, 2, tzinfo=UTC),
        updated_at=datetime(2024, 1, 2, tzinfo=UTC),
    ),
    Employee(
        id='4a0d7f5c-5b6e-4d9b-8ca5-6f8e1a3b5c05',
        first_name='David',
        last_name='Wilson',
        email='david.wilson@company.com',
        phone='+1 (555) 567-8901',
        department='Engineering',
        designation='Junior Developer',
        salary=60000,
        joining_date=date(2022, 8, 15),
        status=EmployeeStatus.EXIT,
        created_at=datetime(2022, 8, 15, tzinfo=UTC),
        updated_at=datetime(2024, 1, 12, tzinfo=UTC),
    ),
    Employee(
        id='5b1e8a6d-4c7f-4eac-9db6-7a9f2b4c6d06',
        first_name='Jessica',
        last_name='Martinez',
        email='jessica.martinez@company.com',
        phone='+1 (555) 678-9012',
        department='Finance',
        designation='Financial Analyst',
        salary=75000,
        joining_date=date(2023, 9, 10),
        status=EmployeeStatus.ACTIVE,
        created_at=datetime(2023, 9, 10, tzinfo=UTC),
        updated_at=datetime(2024, 1, 10, tzinfo=UTC),
    ),
    Employee(
        id='6c2f9b7e-3d8a-4fbd-8ec7-8b0a3c5d7e07',
        first_name='Robert',
        last_name='Taylor',
        email='robert.taylor@company.com',
        phone='+1 (555) 789-0123',
        department='Engineering',
        designation='Tech Lead',
        salary=120000,
        joining_date=date(2021, 5, 20),
        status=EmployeeStatus.ACTIVE,
        created_at=datetime(2021, 5, 20, tzinfo=UTC),
        updated_at=datetime(2024, 1, 15, tzinfo=UTC),
    ),
    Employee(
        id='7d3a0c8f-2e9b-4ace-9fd8-9c1b4d6e8f08',
        first_name='Amanda',
        last_name='Anderson',
        email='amanda.anderson@company.com',
        phone='+1 (555) 890-1234',
        department='Marketing',
        designation='Content Strategist',
        salary=70000,
        joining_date=date(2024, 1, 8),
        status=EmployeeStatus.ONBOARDING,
        created_at=datetime(2024, 1, 8, tzinfo=UTC),
        updated_at=datetime(2024, 1, 8, tzinfo=UTC),
    ),
]
