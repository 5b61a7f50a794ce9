# storefront/api/routers/reservation.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Query, status
from tortoise.expressions import Q

from storefront.core.errors import NotFoundError, ValidationError
from storefront.models.reservation import Reservation
from storefront.schemas.reservation import ReservationCreateIn, ReservationUpdateIn

router = APIRouter(prefix="/reservation", tags=["reservation"])

# Bookable hourly slots, 09:00 through 21:00
ALL_TIMES: List[str] = [f"{h:02d}:00" for h in range(9, 22)]
# Reservations in these states hold their slot
HOLDING_STATUSES = ["pending", "confirmed"]

# API field -> model field
_FIELD_MAP = {
    "customerName": "customer_name",
    "email": "email",
    "phone": "phone",
    "date": "date",
    "time": "time",
    "people": "people",
    "status": "status",
    "memo": "memo",
}
# Optional text fields where "" means "clear"
_NULLABLE_TEXT = {"email", "phone", "memo"}


def _reservation_to_dict(r: Reservation) -> dict:
    return {
        "id": r.id,
        "customerName": r.customer_name,
        "email": r.email,
        "phone": r.phone,
        "date": r.date.isoformat(),  # YYYY-MM-DD
        "time": r.time,
        "people": r.people,
        "status": r.status,
        "memo": r.memo,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
        "updatedAt": r.updated_at.isoformat() if r.updated_at else None,
    }


async def _get_or_404(reservation_id: int) -> Reservation:
    r = await Reservation.get_or_none(id=reservation_id)
    if not r:
        raise NotFoundError("Reservation not found")
    return r


@router.get("/items")
async def list_items(
    status: Optional[str] = Query(default=None, description='"all" means no filter'),
    startDate: Optional[dt.date] = Query(default=None),
    endDate: Optional[dt.date] = Query(default=None),
    search: Optional[str] = Query(default=None, description="Substring of customer name, email or phone"),
):
    """
    List reservations, latest date and time first.

    Returns:
        dict: {success, count, data}
    """
    qs = Reservation.all()
    if status and status != "all":
        qs = qs.filter(status=status)
    if startDate:
        qs = qs.filter(date__gte=startDate)
    if endDate:
        qs = qs.filter(date__lte=endDate)
    if search:
        qs = qs.filter(
            Q(customer_name__contains=search) | Q(email__contains=search) | Q(phone__contains=search)
        )
    rows = await qs.order_by("-date", "-time")
    data = [_reservation_to_dict(r) for r in rows]
    return {"success": True, "count": len(data), "data": data}


@router.get("/lookup")
async def lookup(
    phone: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
):
    """
    Find a customer's reservations by phone number or email (either matches).

    Error responses:
        - 400: Neither phone nor email given
    """
    if not phone and not email:
        raise ValidationError("phone or email is required")

    if phone and email:
        cond = Q(phone=phone) | Q(email=email)
    elif phone:
        cond = Q(phone=phone)
    else:
        cond = Q(email=email)

    rows = await Reservation.filter(cond).order_by("-date", "-time")
    data = [_reservation_to_dict(r) for r in rows]
    return {"success": True, "count": len(data), "data": data}


@router.get("/available-times")
async def available_times(date: Optional[dt.date] = Query(default=None)):
    """
    Hourly slots on ``date`` not held by a pending or confirmed reservation.

    Error responses:
        - 400: date missing
    """
    if date is None:
        raise ValidationError("date is required")

    booked = set(
        await Reservation.filter(date=date, status__in=HOLDING_STATUSES).values_list("time", flat=True)
    )
    return {"success": True, "data": [t for t in ALL_TIMES if t not in booked]}


@router.get("/items/{reservation_id}")
async def get_item(reservation_id: int):
    r = await _get_or_404(reservation_id)
    return {"success": True, "data": _reservation_to_dict(r)}


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def create_item(body: ReservationCreateIn):
    """
    Create a reservation. Status defaults to "pending".

    Error responses:
        - 400: customerName, date, time or people missing/invalid
    """
    r = await Reservation.create(
        customer_name=body.customerName,
        email=body.email or None,
        phone=body.phone or None,
        date=body.date,
        time=body.time,
        people=body.people,
        status=body.status,
        memo=body.memo or None,
    )
    return {"success": True, "data": _reservation_to_dict(r)}


@router.put("/items/{reservation_id}")
async def update_item(reservation_id: int, body: ReservationUpdateIn):
    """
    Partially update a reservation; only fields present in the body change.

    Error responses:
        - 404: No reservation with this id
    """
    r = await _get_or_404(reservation_id)
    changes = {}
    for key, value in body.model_dump(exclude_unset=True).items():
        if key in _NULLABLE_TEXT:
            changes[_FIELD_MAP[key]] = value or None
        elif value is not None:
            changes[_FIELD_MAP[key]] = value
    if changes:
        r.update_from_dict(changes)
        await r.save()
    return {"success": True, "data": _reservation_to_dict(r)}


@router.delete("/items/{reservation_id}")
async def delete_item(reservation_id: int):
    r = await _get_or_404(reservation_id)
    await r.delete()
    return {"success": True, "message": "Reservation deleted"}
