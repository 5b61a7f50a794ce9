# storefront/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Storefront Admin API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # CORS origins for the admin/user frontend (comma separated). Credentials
    # (the accessToken cookie) are only allowed when "*" is not listed.
    CORS_ORIGINS: list[str] = _env_list(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000",
    )

    # Record store (connection URL lives in core/db.py, shared with aerich)
    # Create missing tables on startup; turn off once aerich migrations manage the schema
    generate_schemas: bool = _env_flag("DB_GENERATE_SCHEMAS", "true")

    # User registry backend: "memory" (process lifetime) or "db" (users table)
    auth_store: str = os.getenv("AUTH_STORE", "memory")

    # Shared secret for the one-shot seed endpoint
    seed_secret: str = os.getenv("SEED_SECRET", "seed-data-2024")

    # Optional route groups
    mount_faq: bool = _env_flag("MOUNT_FAQ", "true")
    mount_seed: bool = _env_flag("MOUNT_SEED", "true")

    # Image uploads: storage directory (served at /uploads) and size cap
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    upload_max_bytes: int = int(os.getenv("UPLOAD_MAX_BYTES", str(5 * 1024 * 1024)))


settings = Settings()  # Instantiate configuration
