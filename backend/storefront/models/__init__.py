# storefront/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: User account model (only used when AUTH_STORE=db)
- Faq: FAQ entry
- BlogPost, Product, Event: sample content written by the seed operation
- Reservation: customer reservation
"""
from .user import User
from .faq import Faq
from .blog_post import BlogPost
from .product import Product
from .event import Event
from .reservation import Reservation
