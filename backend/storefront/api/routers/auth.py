# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from storefront.api.deps import get_auth_service, get_current_user, require_admin
from storefront.core.security import TOKEN_COOKIE
from storefront.repositories.users import UserRecord
from storefront.schemas.auth import LoginIn, RegisterIn, UserDetailOut
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_to_dict(u: UserRecord) -> dict:
    """
    Convert a registry record to the detailed API shape (never includes the hash).
    """
    return UserDetailOut(
        id=u.id,
        email=u.email,
        name=u.name,
        role=u.role,
        createdAt=u.created_at.isoformat() if u.created_at else None,
    ).model_dump()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user account.

    Args:
        body: Request body containing email, password and name (all required)

    Returns:
        dict: {success, message, user: {id, email, name}} with status 201

    Error responses:
        - 400: A field is missing or empty
        - 409: Email already registered
    """
    user = await service.register(body.email, body.password, body.name)
    return {"success": True, "message": "Registration successful", "user": user}


@router.post("/login")
async def login(payload: LoginIn, response: Response, service: AuthService = Depends(get_auth_service)):
    """
    Authenticate user and create access token.

    The token is returned in the response body and also set as an HttpOnly
    cookie for browser-based clients.

    Returns:
        dict: {success, message, token, user: {id, email, name}}

    Error responses:
        - 400: email or password missing
        - 401: Unknown email or wrong password
    """
    result = await service.login(payload.email, payload.password)
    token = result.pop("token")
    response.set_cookie(TOKEN_COOKIE, token, httponly=True, secure=False, samesite="lax")
    return {"success": True, "message": "Login successful", "token": token, "user": result}


@router.get("/me")
async def me(user: UserRecord = Depends(get_current_user)):
    """
    Get current authenticated user information.

    Raises:
        HTTPException (401): If user is not authenticated
    """
    return {"success": True, "data": _user_to_dict(user)}


@router.post("/logout")
async def logout(response: Response):
    """
    Clear the access token cookie. The JWT itself stays valid until it expires.
    """
    response.delete_cookie(TOKEN_COOKIE)
    return {"success": True}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(service: AuthService = Depends(get_auth_service)):
    """
    List registered users, newest first (admin only).
    """
    users = await service.list_users()
    data = [_user_to_dict(u) for u in users]
    return {"success": True, "count": len(data), "data": data}


@router.delete("/users/{user_id}", dependencies=[Depends(require_admin)])
async def delete_user(user_id: int, service: AuthService = Depends(get_auth_service)):
    """
    Delete a user (admin only).

    Error responses:
        - 404: No user with this id
    """
    await service.delete_user(user_id)
    return {"success": True, "message": "User deleted"}
