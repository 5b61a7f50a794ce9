# storefront/core/bootstrap.py
"""
First-start provisioning of the administrator account.

Reads ADMIN_EMAIL (default "admin@example.com"), ADMIN_NAME (default
"Administrator") and ADMIN_PASSWORD. Without ADMIN_PASSWORD nothing is
created, so a fresh deployment never ships with a guessable admin login.
"""
import os
import logging

from storefront.core.security import hash_password
from storefront.repositories.users import UserRecord, UserRepository

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin(repository: UserRepository) -> UserRecord | None:
    """Add the configured admin to ``repository`` unless one is already there."""
    if await repository.has_role("admin"):
        return None

    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        logger.warning("[bootstrap] registry has no admin and ADMIN_PASSWORD is unset; skipping")
        return None

    email = os.getenv("ADMIN_EMAIL", "admin@example.com")
    if await repository.get_by_email(email):
        # Never promote an existing regular account
        logger.warning("[bootstrap] %s belongs to a regular user; skipping", email)
        return None

    admin = await repository.add(
        email=email,
        password_hash=hash_password(password),
        name=os.getenv("ADMIN_NAME", "Administrator"),
        role="admin",
    )
    logger.warning("[bootstrap] created admin id=%s email=%s", admin.id, admin.email)
    return admin
