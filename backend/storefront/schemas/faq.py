# storefront/schemas/faq.py
"""
Pydantic schemas for FAQ endpoints.
"""
from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from storefront.schemas.tags import parse_tags


class FaqCreateIn(BaseModel):
    """
    Request model for creating a FAQ entry.
    Tags are optional and default to an empty list.
    """
    category: str = Field(min_length=1)
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    tags: Optional[List[str]] = None


class FaqUpdateIn(BaseModel):
    """
    Request model for a partial FAQ update.
    Omitted (or null) fields keep their stored value; sent text must be non-empty.
    """
    category: Optional[str] = Field(default=None, min_length=1)
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[List[str]] = None


class FaqOut(BaseModel):
    """
    FAQ as returned to clients. ``tags`` accepts the stored JSON text and is
    always exposed as a list of strings.
    """
    id: int
    category: str
    question: str
    answer: str
    tags: List[str] = []
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _decode_tags(cls, value):
        return parse_tags(value)

    @classmethod
    def from_model(cls, faq) -> "FaqOut":
        """Build the output model from a ``Faq`` row."""
        return cls(
            id=faq.id,
            category=faq.category,
            question=faq.question,
            answer=faq.answer,
            tags=faq.tags,
            createdAt=faq.created_at.isoformat() if faq.created_at else None,
            updatedAt=faq.updated_at.isoformat() if faq.updated_at else None,
        )
