"""
FAQ service

CRUD over the ``faqs`` table plus in-process filtering, category listing and
per-category counts. Rows are always handed out as ``FaqOut`` so tags are
decoded in exactly one place.
"""
from typing import Dict, Iterable, List, Optional

from storefront.core.errors import NotFoundError, ValidationError
from storefront.models.faq import Faq
from storefront.schemas.faq import FaqCreateIn, FaqOut, FaqUpdateIn
from storefront.schemas.tags import dump_tags

ALL_CATEGORIES = "all"  # Sentinel meaning "no category filter"


def filter_faqs(items: Iterable[FaqOut], category: Optional[str] = None,
                search: Optional[str] = None) -> List[FaqOut]:
    """
    Apply the category and search filters to already decoded FAQs.

    - category: kept when equal to the row category; None, "" and "all" keep everything
    - search: case-insensitive substring of the question, the answer or any tag
    """
    result = list(items)
    if category and category != ALL_CATEGORIES:
        result = [f for f in result if f.category == category]
    if search:
        needle = search.lower()
        result = [
            f for f in result
            if needle in f.question.lower()
            or needle in f.answer.lower()
            or any(needle in t.lower() for t in f.tags)
        ]
    return result


def categories_of(categories: Iterable[str]) -> List[str]:
    """"all" followed by the distinct categories in first-seen order."""
    return [ALL_CATEGORIES, *dict.fromkeys(categories)]


def count_categories(categories: Iterable[str]) -> Dict[str, int]:
    """Total under "all" plus one count per category."""
    categories = list(categories)
    counts: Dict[str, int] = {ALL_CATEGORIES: len(categories)}
    for c in categories:
        counts[c] = counts.get(c, 0) + 1
    return counts


def _check_category(category: Optional[str]) -> None:
    # A row filed under "all" would break the counts map
    if category == ALL_CATEGORIES:
        raise ValidationError(f'"{ALL_CATEGORIES}" is reserved and cannot be used as a category')


async def _get_row(faq_id: int) -> Faq:
    faq = await Faq.get_or_none(id=faq_id)
    if not faq:
        raise NotFoundError("FAQ not found")
    return faq


async def list_faqs(category: Optional[str] = None, search: Optional[str] = None) -> List[FaqOut]:
    rows = await Faq.all().order_by("id")
    return filter_faqs((FaqOut.from_model(r) for r in rows), category, search)


async def get_faq(faq_id: int) -> FaqOut:
    return FaqOut.from_model(await _get_row(faq_id))


async def create_faq(body: FaqCreateIn) -> FaqOut:
    _check_category(body.category)
    faq = await Faq.create(
        category=body.category,
        question=body.question,
        answer=body.answer,
        tags=dump_tags(body.tags),
    )
    return FaqOut.from_model(faq)


async def update_faq(faq_id: int, body: FaqUpdateIn) -> FaqOut:
    """
    Partial update. Fields left out of the body (or sent as null) keep their
    stored value; tags are re-serialized only when provided.
    """
    _check_category(body.category)
    faq = await _get_row(faq_id)
    changes = body.model_dump(exclude_none=True)
    if "tags" in changes:
        changes["tags"] = dump_tags(changes["tags"])
    if changes:
        faq.update_from_dict(changes)
        await faq.save()
    return FaqOut.from_model(faq)


async def delete_faq(faq_id: int) -> None:
    faq = await _get_row(faq_id)
    await faq.delete()


async def list_categories() -> List[str]:
    rows = await Faq.all().order_by("id").values_list("category", flat=True)
    return categories_of(rows)


async def count_by_category() -> Dict[str, int]:
    rows = await Faq.all().values_list("category", flat=True)
    return count_categories(rows)
