from collections.abc import Generator

from models import Credential, User


class UserRepository:
    def find_by_email(self, email: str) -> Credential | None:
        raise NotImplementedError  # pragma: no cover

    def get_all(self) -> Generator[Credential, None, None]:
        raise NotImplementedError  # pragma: no cover

    def create(self, credential: Credential) -> None:
        raise NotImplementedError  # pragma: no cover

    def update_user(self, user: User) -> None:
        raise NotImplementedError  # pragma: no cover

    def delete_all(self) -> None:
        raise NotImplementedError  # pragma: no cover
