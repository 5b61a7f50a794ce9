# storefront/models/blog_post.py
from tortoise import fields, models


class BlogPost(models.Model):
    """Blog post shown on the user blog page. Created by the seed operation."""
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=256)
    excerpt = fields.TextField()
    content = fields.TextField()
    category = fields.CharField(max_length=64, index=True)
    tags = fields.TextField(null=True)  # JSON array text
    date = fields.DatetimeField()  # Publication date
    views = fields.IntField(default=0)
    thumbnail = fields.CharField(max_length=512, null=True)
    author = fields.CharField(max_length=128, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "blog_posts"
