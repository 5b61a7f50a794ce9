# storefront/api/routers/blog.py
from fastapi import APIRouter, Query
from tortoise.expressions import Q

from storefront.core.errors import NotFoundError
from storefront.models.blog_post import BlogPost
from storefront.schemas.tags import parse_tags

router = APIRouter(prefix="/blog", tags=["blog"])

POPULAR_LIMIT = 5

# "no filter" category values; the first one heads /categories
ALL_CATEGORIES = ("전체", "all")


def _post_to_dict(p: BlogPost) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "excerpt": p.excerpt,
        "content": p.content,
        "category": p.category,
        "tags": parse_tags(p.tags),
        "date": p.date.isoformat() if p.date else None,
        "views": p.views,
        "thumbnail": p.thumbnail,
        "author": p.author,
    }


@router.get("/posts")
async def list_posts(
    category: str | None = Query(default=None, description='"전체" or "all" means no filter'),
    tag: str | None = Query(default=None, description="Exact tag match"),
    search: str | None = Query(default=None, description="Substring of title, excerpt or content"),
):
    """
    List blog posts, newest first.

    Returns:
        dict: {success, count, data}
    """
    qs = BlogPost.all().order_by("-date", "-id")
    if category and category not in ALL_CATEGORIES:
        qs = qs.filter(category=category)
    if search:
        qs = qs.filter(Q(title__icontains=search) | Q(excerpt__icontains=search) | Q(content__icontains=search))

    posts = [_post_to_dict(p) for p in await qs]
    # Tags are JSON text in the store, so the tag filter runs after decoding
    if tag:
        posts = [p for p in posts if tag in p["tags"]]
    return {"success": True, "count": len(posts), "data": posts}


@router.get("/posts/{post_id}")
async def get_post(post_id: int):
    post = await BlogPost.get_or_none(id=post_id)
    if not post:
        raise NotFoundError("Post not found")
    return {"success": True, "data": _post_to_dict(post)}


@router.get("/categories")
async def categories():
    rows = await BlogPost.all().order_by("id").values_list("category", flat=True)
    return {"success": True, "data": [ALL_CATEGORIES[0], *dict.fromkeys(rows)]}


@router.get("/tags")
async def tags():
    """Distinct tags across all posts, in first-seen order."""
    rows = await BlogPost.all().order_by("id").values_list("tags", flat=True)
    seen = dict.fromkeys(t for raw in rows for t in parse_tags(raw))
    return {"success": True, "data": list(seen)}


@router.get("/popular")
async def popular():
    """The most viewed posts."""
    rows = await BlogPost.all().order_by("-views", "id").limit(POPULAR_LIMIT)
    return {"success": True, "data": [_post_to_dict(p) for p in rows]}
