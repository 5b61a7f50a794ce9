# storefront/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and user information.
"""
from pydantic import BaseModel


class RegisterIn(BaseModel):
    """
    Request model for the register endpoint.
    Fields default to "" so a missing field is reported as a 400 by the
    service instead of a schema error.
    """
    email: str = ""
    password: str = ""
    name: str = ""


class LoginIn(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    email: str = ""
    password: str = ""  # Plain text, verified against the stored hash


class UserOut(BaseModel):
    """
    Public projection of a user. Never carries the password hash.
    """
    id: int
    email: str
    name: str


class UserDetailOut(UserOut):
    """User projection for /me and the admin user list."""
    role: str = "user"
    createdAt: str | None = None  # ISO timestamp
