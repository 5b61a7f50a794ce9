# storefront/schemas/reservation.py
"""
Pydantic schemas for reservation endpoints.
"""
from __future__ import annotations
import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field

ReservationStatus = Literal["pending", "confirmed", "cancelled", "completed"]

# "HH:MM", 24h clock
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReservationCreateIn(BaseModel):
    """
    Request model for creating a reservation.
    customerName, date, time and people are required.
    """
    customerName: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date: dt.date  # YYYY-MM-DD
    time: str = Field(pattern=TIME_PATTERN)
    people: int = Field(ge=1)
    status: ReservationStatus = "pending"
    memo: Optional[str] = None


class ReservationUpdateIn(BaseModel):
    """
    Request model for a partial reservation update.
    Only fields present in the body are written; an empty email, phone or
    memo clears the stored value.
    """
    customerName: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    people: Optional[int] = Field(default=None, ge=1)
    status: Optional[ReservationStatus] = None
    memo: Optional[str] = None
