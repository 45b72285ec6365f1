"""User data-access layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.useradmin.entities.core._base import utcnow

from .entity import User
from .schemas import ListUsersRequest
from .table import UserTable

_MUTABLE_FIELDS = ("name", "email", "phone", "status")


def _not_deleted():
    return UserTable.deleted_at.is_(None)


class AbstractUserRepository(ABC):
    """Persistence operations the user service depends on.

    ``find_*`` return ``None`` when no live record matches. Any other
    failure is raised as the store's own exception.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> User:
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list(self, query: ListUsersRequest) -> tuple[list[User], int]:
        raise NotImplementedError


class UserRepository(AbstractUserRepository):
    """SQLModel implementation of the user repository.

    Each write commits its own transaction and rolls back before re-raising
    on failure, leaving the session usable for the rest of the request.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _live():
        """Select over users that have not been soft-deleted."""
        return select(UserTable).where(_not_deleted())

    @staticmethod
    def _to_entity(row: UserTable) -> User:
        return User.model_validate(row, from_attributes=True)

    def _commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def save(self, user: User) -> User:
        row = UserTable(**user.model_dump())
        row.status = user.status.value
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, user_id: str) -> User | None:
        row = self._session.exec(self._live().where(UserTable.id == user_id)).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_email(self, email: str) -> User | None:
        row = self._session.exec(self._live().where(UserTable.email == email)).first()
        if row is None:
            return None
        return self._to_entity(row)

    def update(self, user: User) -> User:
        row = self._session.get(UserTable, user.id)
        if row is None:
            row = UserTable(id=user.id, created_at=user.created_at)

        for field, value in user.model_dump(include=set(_MUTABLE_FIELDS), mode="json").items():
            setattr(row, field, value)
        row.updated_at = utcnow()

        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, user_id: str) -> bool:
        row = self._session.exec(self._live().where(UserTable.id == user_id)).first()
        if row is None:
            return False

        now = utcnow()
        row.deleted_at = now
        row.updated_at = now
        self._session.add(row)
        self._commit()
        return True

    def list(self, query: ListUsersRequest) -> tuple[list[User], int]:
        conditions = [_not_deleted()]
        if query.keyword:
            keyword = query.keyword.lower()
            conditions.append(
                func.lower(UserTable.name).contains(keyword, autoescape=True)
                | func.lower(UserTable.email).contains(keyword, autoescape=True)
            )
        if query.status is not None:
            conditions.append(UserTable.status == query.status.value)

        count_statement = select(func.count()).select_from(UserTable).where(*conditions)
        total = self._session.exec(count_statement).one()

        statement = (
            select(UserTable)
            .where(*conditions)
            .order_by(UserTable.created_at.desc())
            .offset(query.offset)
            .limit(query.size)
        )
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows], total
