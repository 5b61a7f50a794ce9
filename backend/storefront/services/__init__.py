"""
Services Module

Business logic behind the HTTP routes:
- auth_service: registration, login and user administration over a UserRepository
- faq_service: FAQ CRUD, filtering, categories and counts
- seed_service: one-shot sample data insertion
"""
from .auth_service import AuthService
from . import faq_service, seed_service

__all__ = [
    "AuthService",
    "faq_service",
    "seed_service",
]
