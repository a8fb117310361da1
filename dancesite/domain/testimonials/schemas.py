"""Testimonial schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import as_utc


class TestimonialCreate(BaseModel):
    """Schema for submitting a testimonial; it waits for approval"""

    clientName: str = Field(min_length=1, max_length=100)
    role: Optional[str] = Field(default=None, max_length=100)
    text: str = Field(min_length=1, max_length=1000)
    rating: int = Field(ge=1, le=5)


class TestimonialResponse(BaseModel):
    """Schema for testimonial response"""

    id: int
    clientName: str
    role: Optional[str] = None
    text: str
    rating: int
    isApproved: bool
    createdAtUtc: datetime

    @field_validator("createdAtUtc")
    @classmethod
    def mark_utc(cls, v):
        return as_utc(v)
