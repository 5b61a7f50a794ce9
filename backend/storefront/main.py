# storefront/main.py
import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# Configuration and DB
from storefront.config import Settings, settings as default_settings
from storefront.core.db import init_db, close_db
from storefront.core.errors import AppError
from storefront.core.bootstrap import ensure_default_admin
from storefront.repositories.users import build_user_repository

from storefront.api.routers import auth, blog, events, faq, reservation, seed, shop, upload

logger = logging.getLogger("uvicorn.error")


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Missing/invalid fields are reported like any other ValidationError (400)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal server error"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    The app owns one user repository (``app.state.user_repository``), chosen
    by ``settings.auth_store``; it is opened on startup and closed on shutdown.
    The FAQ and seed route groups are mounted only when enabled in settings.
    """
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.user_repository = build_user_repository(settings.auth_store)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        await init_db(generate_schemas=settings.generate_schemas)
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        await app.state.user_repository.open()
        # Ensure there's a default admin account on first run
        await ensure_default_admin(app.state.user_repository)
        logger.info("[startup] auth_store=%s faq=%s seed=%s",
                    settings.auth_store, settings.mount_faq, settings.mount_seed)

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.user_repository.close()
        await close_db()

    # REST
    app.include_router(auth.router, prefix="/api")
    app.include_router(blog.router, prefix="/api")
    app.include_router(shop.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(reservation.router, prefix="/api")
    app.include_router(upload.router, prefix="/api")
    if settings.mount_faq:
        app.include_router(faq.router, prefix="/api")
    if settings.mount_seed:
        app.include_router(seed.router, prefix="/api")

    # Uploaded images; the directory is created on startup or first upload
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Serve the default app with uvicorn on HOST:PORT (default port 4000)."""
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
