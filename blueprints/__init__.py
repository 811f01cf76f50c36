# ruff: noqa: N812

from .auth import blp as BlueprintAuth
from .dashboard import blp as BlueprintDashboard
from .employee import blp as BlueprintEmployee
from .health import blp as BlueprintHealth
from .navigation import blp as BlueprintNavigation
from .reset import blp as BlueprintReset

__all__ = [
    'BlueprintAuth',
    'BlueprintDashboard',
    'BlueprintEmployee',
    'BlueprintHealth',
    'BlueprintNavigation',
    'BlueprintReset',
]
