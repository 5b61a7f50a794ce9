from .users import (
    UserRecord,
    UserRepository,
    InMemoryUserRepository,
    TortoiseUserRepository,
    build_user_repository,
)

__all__ = [
    "UserRecord",
    "UserRepository",
    "InMemoryUserRepository",
    "TortoiseUserRepository",
    "build_user_repository",
]
