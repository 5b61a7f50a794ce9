# storefront/schemas/seed.py
from typing import Optional

from pydantic import BaseModel


class SeedRunIn(BaseModel):
    """Request body for the seed endpoint. A missing secret is simply wrong."""
    secret: Optional[str] = None


class SeedCountsOut(BaseModel):
    """Number of rows inserted per table by one seed run."""
    blogPosts: int
    products: int
    events: int
