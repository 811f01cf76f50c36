from models import Session, User


class SessionRepository:
    def get(self, token: str) -> Session | None:
        raise NotImplementedError  # pragma: no cover

    def create(self, session: Session) -> None:
        raise NotImplementedError  # pragma: no cover

    def delete(self, token: str) -> None:
        raise NotImplementedError  # pragma: no cover

    def update_user(self, user: User) -> None:
        raise NotImplementedError  # pragma: no cover

    def delete_all(self) -> None:
        raise NotImplementedError  # pragma: no cover
