from .summary import (
    SALARY_BUCKETS,
    average_salary,
    build_analytics,
    department_distribution,
    exit_ratio,
    monthly_gross,
    monthly_joiners,
    recent_joiners,
    salary_bucket,
    salary_distribution,
    status_counts,
    team_size,
    tenure_months,
)

__all__ = [
    'SALARY_BUCKETS',
    'average_salary',
    'build_analytics',
    'department_distribution',
    'exit_ratio',
    'monthly_gross',
    'monthly_joiners',
    'recent_joiners',
    'salary_bucket',
    'salary_distribution',
    'status_counts',
    'team_size',
    'tenure_months',
]
