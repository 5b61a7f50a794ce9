# storefront/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default admin creation on startup
- db: Database configuration and connection management
- errors: Error taxonomy mapped onto HTTP statuses
- security: Password hashing and JWT access tokens
"""
