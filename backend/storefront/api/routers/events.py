# storefront/api/routers/events.py
import datetime as dt
from typing import Literal

from fastapi import APIRouter, Query

from storefront.core.errors import NotFoundError
from storefront.models.event import Event

router = APIRouter(prefix="/event", tags=["event"])


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _event_to_dict(e: Event) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "subtitle": e.subtitle,
        "category": e.category,
        "startDate": e.start_date.isoformat() if e.start_date else None,
        "endDate": e.end_date.isoformat() if e.end_date else None,
        "content": e.content,
    }


@router.get("/events")
async def list_events(
    status: Literal["all", "ongoing", "ended"] = Query(default="all"),
    category: str | None = Query(default=None, description='"all" means no filter'),
):
    """
    List events, most recently started first.

    Args:
        status: "ongoing" keeps events whose end date has not passed,
            "ended" keeps the rest, "all" keeps everything
        category: Exact category match

    Returns:
        dict: {success, count, data}
    """
    qs = Event.all()
    now = utc_now()
    if status == "ongoing":
        qs = qs.filter(end_date__gte=now)
    elif status == "ended":
        qs = qs.filter(end_date__lt=now)
    if category and category != "all":
        qs = qs.filter(category=category)
    rows = await qs.order_by("-start_date", "-id")
    data = [_event_to_dict(e) for e in rows]
    return {"success": True, "count": len(data), "data": data}


@router.get("/events/{event_id}")
async def get_event(event_id: int):
    event = await Event.get_or_none(id=event_id)
    if not event:
        raise NotFoundError("Event not found")
    return {"success": True, "data": _event_to_dict(event)}


@router.get("/categories")
async def categories():
    rows = await Event.all().order_by("id").values_list("category", flat=True)
    return {"success": True, "data": ["all", *dict.fromkeys(rows)]}
