# storefront/models/reservation.py
"""
Database model for customer reservations.
"""
from tortoise import fields, models


class Reservation(models.Model):
    """
    Reservation database model.

    A reservation holds one hourly slot (``time`` as "HH:MM") on ``date``.
    Slots held by "pending" or "confirmed" reservations are not offered again.
    """
    id = fields.IntField(pk=True)
    customer_name = fields.CharField(max_length=128)
    email = fields.CharField(max_length=256, null=True)
    phone = fields.CharField(max_length=32, null=True)
    date = fields.DateField(index=True)
    time = fields.CharField(max_length=5)  # "HH:MM"
    people = fields.IntField()
    status = fields.CharField(max_length=16, default="pending")  # pending | confirmed | cancelled | completed
    memo = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "reservations"
