# storefront/models/product.py
from tortoise import fields, models


class Product(models.Model):
    """
    Shop product. Created by the seed operation.

    Prices are whole KRW amounts, so integers are enough.
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=256)
    description = fields.TextField()
    price = fields.IntField()
    original_price = fields.IntField(null=True)  # List price before discount
    category = fields.CharField(max_length=64, index=True)
    tags = fields.TextField(null=True)  # JSON array text
    rating = fields.FloatField(default=0)
    review_count = fields.IntField(default=0)
    stock = fields.IntField(default=0)
    is_new = fields.BooleanField(default=False)
    is_best = fields.BooleanField(default=False)
    brand = fields.CharField(max_length=128, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "products"
