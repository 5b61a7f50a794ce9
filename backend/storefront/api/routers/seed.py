# storefront/api/routers/seed.py
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from storefront.core.errors import AppError
from storefront.schemas.seed import SeedRunIn
from storefront.services.seed_service import run_seed

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/seed", tags=["seed"])


@router.post("/run")
async def run(body: SeedRunIn, request: Request):
    """
    Insert sample blog posts, products and events.

    Not idempotent: every accepted call inserts another 3 posts, 3 products
    and 2 events.

    Returns:
        dict: {success, message, data: {blogPosts, products, events}}

    Error responses:
        - 403: Wrong or missing secret (nothing inserted)
        - 500: Store failure; the body carries the error text under "error"
    """
    try:
        counts = await run_seed(body.secret, request.app.state.settings.seed_secret)
    except AppError:
        raise
    except Exception as e:
        logger.exception("[seed] failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Seed failed", "error": str(e)},
        )
    return {"success": True, "message": "Seed completed", "data": counts.model_dump()}
