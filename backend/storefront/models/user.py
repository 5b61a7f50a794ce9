# storefront/models/user.py
from tortoise import fields, models


class User(models.Model):
    """
    Persistent user registry row, used only with AUTH_STORE=db.

    The default registry lives in process memory
    (storefront.repositories.users.InMemoryUserRepository); both expose the
    same UserRecord shape to the auth service.
    """
    id = fields.IntField(pk=True)
    email = fields.CharField(max_length=256, unique=True, index=True)
    password_hash = fields.CharField(max_length=255)
    name = fields.CharField(max_length=128)
    role = fields.CharField(max_length=16, default="user")  # "user" | "admin"
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "users"
