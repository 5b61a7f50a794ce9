"""
User registry storage.

The auth service only talks to ``UserRepository``; which implementation backs
it is chosen once per application (``AUTH_STORE``) and owned by that app.
"""
import datetime as dt
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from storefront.models.user import User


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass
class UserRecord:
    """A registered user as the auth layer sees it."""
    id: int
    email: str
    password_hash: str
    name: str
    role: str = "user"
    created_at: dt.datetime = field(default_factory=utc_now)

    def public(self) -> dict:
        """Projection safe to return to clients (no password hash)."""
        return {"id": self.id, "email": self.email, "name": self.name}


class UserRepository(ABC):
    """User registry abstract base class"""

    async def open(self) -> None:
        """Prepare the store before the first request. No-op by default."""

    async def close(self) -> None:
        """Release the store on shutdown. No-op by default."""

    @abstractmethod
    async def add(self, email: str, password_hash: str, name: str, role: str = "user") -> UserRecord:
        """
        Store a new user and return it with its assigned id.

        Callers check email uniqueness first; implementations may still
        refuse a duplicate at the storage level.
        """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        pass

    @abstractmethod
    async def list(self) -> List[UserRecord]:
        """All users, newest id first."""

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Remove a user. Returns False when the id is unknown."""

    @abstractmethod
    async def has_role(self, role: str) -> bool:
        pass


class InMemoryUserRepository(UserRepository):
    """
    Registry kept in process memory; contents are lost on restart.

    There is no locking: none of the methods awaits between reading and
    writing ``_users``, so they are atomic on a single event loop. Sharing one
    instance across threads is not supported.
    """

    def __init__(self):
        self._users: List[UserRecord] = []
        self._ids = itertools.count(1)

    async def close(self) -> None:
        self._users.clear()

    async def add(self, email: str, password_hash: str, name: str, role: str = "user") -> UserRecord:
        record = UserRecord(
            id=next(self._ids),
            email=email,
            password_hash=password_hash,
            name=name,
            role=role,
        )
        self._users.append(record)
        return record

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self._users if u.email == email), None)

    async def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        return next((u for u in self._users if u.id == user_id), None)

    async def list(self) -> List[UserRecord]:
        return sorted(self._users, key=lambda u: u.id, reverse=True)

    async def delete(self, user_id: int) -> bool:
        for i, u in enumerate(self._users):
            if u.id == user_id:
                del self._users[i]
                return True
        return False

    async def has_role(self, role: str) -> bool:
        return any(u.role == role for u in self._users)


class TortoiseUserRepository(UserRepository):
    """Registry persisted in the ``users`` table (AUTH_STORE=db)."""

    @staticmethod
    def _to_record(u: User) -> UserRecord:
        return UserRecord(
            id=u.id,
            email=u.email,
            password_hash=u.password_hash,
            name=u.name,
            role=u.role,
            created_at=u.created_at,
        )

    async def add(self, email: str, password_hash: str, name: str, role: str = "user") -> UserRecord:
        u = await User.create(email=email, password_hash=password_hash, name=name, role=role)
        return self._to_record(u)

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        u = await User.get_or_none(email=email)
        return self._to_record(u) if u else None

    async def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        u = await User.get_or_none(id=user_id)
        return self._to_record(u) if u else None

    async def list(self) -> List[UserRecord]:
        rows = await User.all().order_by("-id")
        return [self._to_record(u) for u in rows]

    async def delete(self, user_id: int) -> bool:
        deleted = await User.filter(id=user_id).delete()
        return deleted > 0

    async def has_role(self, role: str) -> bool:
        return await User.filter(role=role).exists()


def build_user_repository(kind: str) -> UserRepository:
    """
    Create the repository selected by ``AUTH_STORE``.

    Raises:
        ValueError: For an unknown store name
    """
    kind = (kind or "memory").lower()
    if kind == "memory":
        return InMemoryUserRepository()
    if kind == "db":
        return TortoiseUserRepository()
    raise ValueError(f"Unknown AUTH_STORE: {kind!r} (expected 'memory' or 'db')")
