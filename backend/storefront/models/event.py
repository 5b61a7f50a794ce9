# storefront/models/event.py
from tortoise import fields, models


class Event(models.Model):
    """Promotional event (discount, attendance, coupon, ...). Created by the seed operation."""
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=256)
    subtitle = fields.CharField(max_length=256, null=True)
    category = fields.CharField(max_length=64, index=True)
    start_date = fields.DatetimeField()
    end_date = fields.DatetimeField()  # An event is "ongoing" until this moment
    content = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "events"
