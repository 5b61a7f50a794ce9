# storefront/models/faq.py
"""
Database model for FAQ entries shown on the customer FAQ page.
"""
from tortoise import fields, models


class Faq(models.Model):
    """
    FAQ database model.

    Tags are kept as JSON-encoded text (e.g. '["결제", "카드"]'); readers go
    through storefront.schemas.tags.parse_tags, which falls back to an empty
    list for missing or malformed values.
    """
    id = fields.IntField(pk=True)
    category = fields.CharField(max_length=64, index=True)  # e.g. "결제", "배송"
    question = fields.TextField()
    answer = fields.TextField()
    tags = fields.TextField(null=True)  # JSON array text
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "faqs"
