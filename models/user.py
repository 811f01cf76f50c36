from dataclasses import dataclass

from .role import Role


@dataclass
class User:
    id: str
    email: str
    name: str
    role: Role


@dataclass
class Credential:
    password: str
    user: User
