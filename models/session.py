from dataclasses import dataclass
from datetime import datetime

from .user import User


@dataclass
class Session:
    token: str
    user: User
    created_at: datetime
