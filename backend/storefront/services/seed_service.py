"""
One-shot sample data loader for demo/staging databases.

Every accepted run inserts the same 3 blog posts, 3 products and 2 events
again; nothing is deleted first, so repeated runs duplicate rows.
"""
import datetime as dt
import hmac
import logging
from typing import List

from storefront.core.errors import ForbiddenError
from storefront.models.blog_post import BlogPost
from storefront.models.event import Event
from storefront.models.product import Product
from storefront.schemas.seed import SeedCountsOut
from storefront.schemas.tags import dump_tags

logger = logging.getLogger("uvicorn.error")


def _days(n: int) -> dt.timedelta:
    return dt.timedelta(days=n)


def sample_blog_posts(now: dt.datetime) -> List[dict]:
    return [
        {"title": "React 19의 새로운 기능", "excerpt": "React 19 주요 기능", "content": "React 19 내용...",
         "category": "기술", "tags": dump_tags(["React"]), "date": now - _days(1), "views": 1250,
         "author": "김개발"},
        {"title": "TypeScript 5.0 가이드", "excerpt": "TS 5.0 업그레이드", "content": "TypeScript 내용...",
         "category": "기술", "tags": dump_tags(["TypeScript"]), "date": now - _days(2), "views": 980,
         "author": "이코딩"},
        {"title": "효율적인 상태 관리", "excerpt": "React 상태관리", "content": "상태관리 내용...",
         "category": "튜토리얼", "tags": dump_tags(["React"]), "date": now - _days(3), "views": 2100,
         "author": "박프론트"},
    ]


def sample_products() -> List[dict]:
    return [
        {"name": "프리미엄 코트", "description": "따뜻한 겨울 코트", "price": 299000, "original_price": 350000,
         "category": "의류", "tags": dump_tags(["겨울"]), "rating": 4.8, "review_count": 156, "stock": 25,
         "is_new": True, "is_best": True, "brand": "럭셔리"},
        {"name": "데님 팬츠", "description": "슬림핏 데님", "price": 79000, "original_price": 89000,
         "category": "의류", "tags": dump_tags(["데님"]), "rating": 4.5, "review_count": 89, "stock": 120,
         "brand": "데님마스터"},
        {"name": "블루투스 이어폰", "description": "고음질 무선 이어폰", "price": 159000, "original_price": 199000,
         "category": "전자기기", "tags": dump_tags(["이어폰"]), "rating": 4.7, "review_count": 523, "stock": 80,
         "is_new": True, "is_best": True, "brand": "사운드테크"},
    ]


def sample_events(now: dt.datetime) -> List[dict]:
    return [
        {"title": "신규 가입 20% 할인", "subtitle": "첫 구매 특별 혜택", "category": "discount",
         "start_date": now - _days(7), "end_date": now + _days(30), "content": "신규 가입 고객 20% 할인"},
        {"title": "매일 출석체크", "subtitle": "출석하고 포인트 받자", "category": "attendance",
         "start_date": now - _days(14), "end_date": now + _days(60), "content": "매일 출석하고 포인트 적립"},
    ]


async def run_seed(secret: str | None, expected_secret: str) -> SeedCountsOut:
    """
    Insert the sample content.

    Args:
        secret: Value supplied by the caller
        expected_secret: Configured shared secret (SEED_SECRET)

    Returns:
        SeedCountsOut: Rows inserted per table

    Raises:
        ForbiddenError: secret does not match; nothing is written
    """
    if secret is None or not hmac.compare_digest(secret.encode(), expected_secret.encode()):
        raise ForbiddenError("Forbidden")

    logger.info("[seed] starting")
    now = dt.datetime.now(dt.timezone.utc)

    posts = sample_blog_posts(now)
    for post in posts:
        await BlogPost.create(**post)

    products = sample_products()
    for product in products:
        await Product.create(**product)

    events = sample_events(now)
    for event in events:
        await Event.create(**event)

    counts = SeedCountsOut(blogPosts=len(posts), products=len(products), events=len(events))
    logger.info("[seed] done: %s", counts.model_dump())
    return counts
