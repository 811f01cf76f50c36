import calendar
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Any

from models import Employee, EmployeeStatus

# (label, lower bound inclusive, upper bound exclusive)
SALARY_BUCKETS: list[tuple[str, float, float]] = [
    ('0-50k', 0, 50_000),
    ('50k-75k', 50_000, 75_000),
    ('75k-100k', 75_000, 100_000),
    ('100k-150k', 100_000, 150_000),
    ('150k+', 150_000, float('inf')),
]

JOINER_WINDOW_MONTHS = 6
RECENT_JOINER_DAYS = 30
RECENT_JOINER_LIMIT = 5


def status_counts(employees: Sequence[Employee]) -> dict[str, int]:
    counts = {
        'total': len(employees),
        EmployeeStatus.ACTIVE.value: 0,
        EmployeeStatus.ONBOARDING.value: 0,
        EmployeeStatus.EXIT.value: 0,
    }

    for employee in employees:
        counts[employee.status.value] += 1

    return counts


def department_distribution(employees: Iterable[Employee]) -> dict[str, int]:
    departments: dict[str, int] = {}
    for employee in employees:
        departments[employee.department] = departments.get(employee.department, 0) + 1

    return departments


def salary_bucket(salary: float) -> str:
    for label, lower, upper in SALARY_BUCKETS:
        if lower <= salary < upper:
            return label

    # Only reached by negative salaries, which request validation rejects
    return SALARY_BUCKETS[0][0]


def salary_distribution(employees: Iterable[Employee]) -> dict[str, int]:
    distribution = {label: 0 for label, _, _ in SALARY_BUCKETS}
    for employee in employees:
        distribution[salary_bucket(employee.salary)] += 1

    return distribution


def month_label(year: int, month: int) -> str:
    return f'{calendar.month_abbr[month]} {year}'


def monthly_joiners(employees: Iterable[Employee], today: date) -> list[dict[str, Any]]:
    """Joiners per month over the trailing window ending at the month of `today`.

    Months without joiners are reported with a count of 0; joining dates outside the
    window are ignored.
    """
    current = today.year * 12 + today.month - 1
    months: dict[tuple[int, int], int] = {}
    for offset in range(JOINER_WINDOW_MONTHS - 1, -1, -1):
        year, month_idx = divmod(current - offset, 12)
        months[(year, month_idx + 1)] = 0

    for employee in employees:
        key = (employee.joining_date.year, employee.joining_date.month)
        if key in months:
            months[key] += 1

    return [{'month': month_label(year, month), 'count': count} for (year, month), count in months.items()]


def average_salary(employees: Sequence[Employee]) -> float:
    if len(employees) == 0:
        return 0

    return sum(employee.salary for employee in employees) / len(employees)


def exit_ratio(employees: Sequence[Employee]) -> float:
    """Percentage of employees in exit status, rounded to one decimal."""
    if len(employees) == 0:
        return 0

    exiting = sum(1 for employee in employees if employee.status == EmployeeStatus.EXIT)
    return round(exiting / len(employees) * 100, 1)


def recent_joiners(employees: Iterable[Employee], today: date) -> list[Employee]:
    since = today - timedelta(days=RECENT_JOINER_DAYS)
    joiners = [employee for employee in employees if employee.joining_date >= since]
    joiners.sort(key=lambda employee: employee.joining_date, reverse=True)

    return joiners[:RECENT_JOINER_LIMIT]


def tenure_months(joining_date: date, today: date) -> int:
    # Whole 30-day periods, a joining date in the future counts as 0
    return max((today - joining_date).days // 30, 0)


def team_size(employee: Employee, employees: Iterable[Employee]) -> int:
    return sum(1 for other in employees if other.department == employee.department)


def monthly_gross(salary: float) -> int:
    return round(salary / 12)


def build_analytics(employees: Sequence[Employee], today: date) -> dict[str, Any]:
    counts = status_counts(employees)

    return {
        'totalEmployees': counts['total'],
        'activeEmployees': counts[EmployeeStatus.ACTIVE.value],
        'onboardingEmployees': counts[EmployeeStatus.ONBOARDING.value],
        'exitEmployees': counts[EmployeeStatus.EXIT.value],
        'departmentDistribution': department_distribution(employees),
        'salaryDistribution': [{'range': label, 'count': count} for label, count in salary_distribution(employees).items()],
        'monthlyJoiners': monthly_joiners(employees, today),
        'averageSalary': average_salary(employees),
        'exitRatio': exit_ratio(employees),
    }
