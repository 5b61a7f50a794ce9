# storefront/api/routers/shop.py
from fastapi import APIRouter, Query
from tortoise.expressions import Q

from storefront.core.errors import NotFoundError
from storefront.models.product import Product
from storefront.schemas.tags import parse_tags

router = APIRouter(prefix="/shop", tags=["shop"])

# sort key -> ORM ordering; absent or unknown keys sort newest first
SORT_ORDERINGS = {
    "popular": ("-review_count", "-id"),
    "price_low": ("price", "-id"),
    "price_high": ("-price", "-id"),
    "rating": ("-rating", "-id"),
    "newest": ("-id",),
}


def _product_to_dict(p: Product) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "originalPrice": p.original_price,
        "category": p.category,
        "tags": parse_tags(p.tags),
        "rating": p.rating,
        "reviewCount": p.review_count,
        "stock": p.stock,
        "isNew": p.is_new,
        "isBest": p.is_best,
        "brand": p.brand,
    }


@router.get("/products")
async def list_products(
    category: str | None = Query(default=None),
    search: str | None = Query(default=None, description="Substring of name or description"),
    sort: str | None = Query(default=None),
):
    """
    List products.

    Args:
        category: Exact category match
        search: Case-insensitive substring of name or description
        sort: popular (most reviewed), price_low, price_high, rating;
            anything else, e.g. "latest", is newest first

    Returns:
        dict: {success, count, data}
    """
    qs = Product.all()
    if category and category != "all":
        qs = qs.filter(category=category)
    if search:
        qs = qs.filter(Q(name__icontains=search) | Q(description__icontains=search))
    rows = await qs.order_by(*SORT_ORDERINGS.get(sort, SORT_ORDERINGS["newest"]))
    data = [_product_to_dict(p) for p in rows]
    return {"success": True, "count": len(data), "data": data}


@router.get("/products/{product_id}")
async def get_product(product_id: int):
    product = await Product.get_or_none(id=product_id)
    if not product:
        raise NotFoundError("Product not found")
    return {"success": True, "data": _product_to_dict(product)}
