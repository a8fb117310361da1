"""Service offering schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...models import ServiceType
from ...shared.validators import as_utc


class ServiceOfferingCreate(BaseModel):
    """Schema for creating a new service offering; it starts out active"""

    name: str = Field(min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    serviceType: ServiceType
    basePriceSek: Optional[float] = Field(default=None, ge=0, le=20000)
    durationMinutes: Optional[int] = Field(default=None, ge=10, le=300)

    @field_validator("serviceType", mode="before")
    @classmethod
    def parse_service_type(cls, v):
        return ServiceType.parse(v)


class ServiceOfferingUpdate(ServiceOfferingCreate):
    """Schema for replacing a service offering's editable fields"""

    isActive: bool


class ServiceOfferingResponse(BaseModel):
    """Schema for service offering response"""

    id: int
    name: str
    description: Optional[str] = None
    serviceType: ServiceType
    basePriceSek: Optional[float] = None
    durationMinutes: Optional[int] = None
    isActive: bool
    createdAtUtc: datetime

    @field_validator("createdAtUtc")
    @classmethod
    def mark_utc(cls, v):
        return as_utc(v)
