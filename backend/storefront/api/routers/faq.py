# storefront/api/routers/faq.py
from fastapi import APIRouter, Query, status

from storefront.schemas.faq import FaqCreateIn, FaqUpdateIn
from storefront.services import faq_service

router = APIRouter(prefix="/faq", tags=["faq"])


@router.get("/items")
async def list_items(
    category: str | None = Query(default=None, description='Category filter; "all" means no filter'),
    search: str | None = Query(default=None, description="Case-insensitive match on question, answer and tags"),
):
    """
    List FAQ entries ordered by id.

    Returns:
        dict: {success, count, data: FAQ[]}
    """
    items = await faq_service.list_faqs(category=category, search=search)
    return {"success": True, "count": len(items), "data": [f.model_dump() for f in items]}


@router.get("/items/{faq_id}")
async def get_item(faq_id: int):
    """
    Get one FAQ entry.

    Error responses:
        - 404: No FAQ with this id
    """
    faq = await faq_service.get_faq(faq_id)
    return {"success": True, "data": faq.model_dump()}


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def create_item(body: FaqCreateIn):
    """
    Create a FAQ entry. ``tags`` defaults to an empty list.

    Error responses:
        - 400: category, question or answer missing, or category is "all"
    """
    faq = await faq_service.create_faq(body)
    return {"success": True, "data": faq.model_dump()}


@router.put("/items/{faq_id}")
async def update_item(faq_id: int, body: FaqUpdateIn):
    """
    Partially update a FAQ entry; omitted fields are left untouched.

    Error responses:
        - 404: No FAQ with this id
    """
    faq = await faq_service.update_faq(faq_id, body)
    return {"success": True, "data": faq.model_dump()}


@router.delete("/items/{faq_id}")
async def delete_item(faq_id: int):
    """
    Delete a FAQ entry.

    Error responses:
        - 404: No FAQ with this id
    """
    await faq_service.delete_faq(faq_id)
    return {"success": True, "message": "FAQ deleted"}


@router.get("/categories")
async def categories():
    """Return "all" followed by every category in use."""
    return {"success": True, "data": await faq_service.list_categories()}


@router.get("/counts")
async def counts():
    """Return the number of FAQs per category, with the total under "all"."""
    return {"success": True, "data": await faq_service.count_by_category()}
