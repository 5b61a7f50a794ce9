# storefront/core/security.py
"""
Credentials for the user registry.

Passwords are kept only as argon2 hashes. A successful login is answered with
a signed HS256 token whose ``sub`` is the numeric user id (as a string) and
whose ``role`` lets admin routes be checked without another lookup. The same
token is also handed to browsers in the ``accessToken`` cookie.
"""
import os
import datetime as dt
from pathlib import Path

import jwt  # PyJWT
from dotenv import load_dotenv
from passlib.context import CryptContext
from passlib.exc import UnknownHashError

load_dotenv(dotenv_path=Path(__file__).resolve().parents[3] / ".env")

JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")  # override outside development
JWT_ALG = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

TOKEN_COOKIE = "accessToken"

_hasher = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain: str) -> str:
    """Salted argon2 hash of ``plain``; two calls never return the same text."""
    return _hasher.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    # A corrupted or foreign hash counts as a wrong password
    try:
        return _hasher.verify(plain, hashed)
    except (UnknownHashError, ValueError):
        return False


def create_access_token(user_id: str, role: str) -> str:
    issued = dt.datetime.now(dt.timezone.utc)
    claims = {
        "sub": user_id,
        "role": role,
        "iat": issued,
        "exp": issued + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Return the verified claims of ``token``.

    Raises:
        jwt.ExpiredSignatureError: past ``exp``
        jwt.InvalidTokenError: bad signature or not a JWT at all
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])


def user_id_from_token(token: str) -> int:
    """
    Numeric user id carried by ``token``.

    Raises:
        jwt.InvalidTokenError: token rejected, or ``sub`` is not a user id
    """
    sub = decode_access_token(token).get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise jwt.InvalidTokenError("subject is not a user id")
