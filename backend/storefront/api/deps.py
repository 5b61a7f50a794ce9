# storefront/api/deps.py
import jwt
from fastapi import Depends, Header, HTTPException, Request, status

from storefront.core.security import TOKEN_COOKIE, user_id_from_token
from storefront.repositories.users import UserRecord, UserRepository
from storefront.services.auth_service import AuthService


def _unauthorized(code: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=code)


def get_user_repository(request: Request) -> UserRepository:
    """The user registry owned by the running application (see create_app)."""
    return request.app.state.user_repository


def get_auth_service(repository: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(repository)


def _bearer(authorization: str | None) -> str | None:
    scheme, _, credentials = (authorization or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    repository: UserRepository = Depends(get_user_repository),
) -> UserRecord:
    """
    Resolve the caller from ``Authorization: Bearer <token>``, falling back to
    the ``accessToken`` cookie set at login.

    401 details:
        AUTH_REQUIRED        no token at all
        AUTH_INVALID_TOKEN   bad signature, expired, or no usable subject
        AUTH_USER_NOT_FOUND  token is fine but the user was deleted
    """
    token = _bearer(authorization) or request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise _unauthorized("AUTH_REQUIRED")

    try:
        user_id = user_id_from_token(token)
    except jwt.InvalidTokenError:
        raise _unauthorized("AUTH_INVALID_TOKEN")

    user = await repository.get_by_id(user_id)
    if user is None:
        raise _unauthorized("AUTH_USER_NOT_FOUND")
    return user


async def require_admin(current: UserRecord = Depends(get_current_user)) -> UserRecord:
    if current.role != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_ADMIN_ONLY")
    return current
