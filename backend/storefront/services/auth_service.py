"""
Auth service: registration, login and user administration over a UserRepository.
"""
import logging
from typing import List

from storefront.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from storefront.core.security import create_access_token, hash_password, verify_password
from storefront.repositories.users import UserRecord, UserRepository

logger = logging.getLogger("uvicorn.error")


class AuthService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register(self, email: str, password: str, name: str) -> dict:
        """
        Register a new user.

        Returns:
            dict: Public projection {id, email, name}

        Raises:
            ValidationError: email, password or name is empty
            ConflictError: email already registered
        """
        if not email or not password or not name:
            raise ValidationError("email, password and name are required")
        if await self.repository.get_by_email(email):
            raise ConflictError("Email already registered")

        user = await self.repository.add(email=email, password_hash=hash_password(password), name=name)
        logger.info("[auth] registered user id=%s", user.id)
        return user.public()

    async def login(self, email: str, password: str) -> dict:
        """
        Check credentials and issue a signed access token.

        Returns:
            dict: {token, id, email, name}

        Raises:
            ValidationError: email or password is empty
            AuthError: unknown email or wrong password (same message for both)
        """
        if not email or not password:
            raise ValidationError("email and password are required")

        user = await self.repository.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise AuthError("Invalid email or password")

        token = create_access_token(str(user.id), user.role)
        return {"token": token, **user.public()}

    async def list_users(self) -> List[UserRecord]:
        return await self.repository.list()

    async def delete_user(self, user_id: int) -> None:
        if not await self.repository.delete(user_id):
            raise NotFoundError("User not found")
        logger.info("[auth] deleted user id=%s", user_id)
