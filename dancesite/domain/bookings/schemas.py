"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ...models import BookingStatus, LocationType
from ...shared.validators import as_utc, to_naive_utc


class BookingCreate(BaseModel):
    """Schema for creating a new booking.

    Status is not accepted: every booking starts out Pending.
    """

    clientId: int = Field(gt=0)
    serviceOfferingId: int = Field(gt=0)
    preferredDateTime: datetime
    locationType: Optional[LocationType] = None
    locationDetails: Optional[str] = None
    message: Optional[str] = None

    @field_validator("locationType", mode="before")
    @classmethod
    def parse_location_type(cls, v):
        if v is None:
            return v
        return LocationType.parse(v)

    @field_validator("preferredDateTime")
    @classmethod
    def normalize_preferred_date_time(cls, v):
        return to_naive_utc(v)


class BookingUpdate(BaseModel):
    """Schema for a partial booking update.

    Only the fields present in the request body are applied; see ``changes``.
    """

    preferredDateTime: Optional[datetime] = None
    locationType: Optional[LocationType] = None
    locationDetails: Optional[str] = None
    message: Optional[str] = None
    status: Optional[BookingStatus] = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        if v is None:
            return v
        return BookingStatus.parse(v)

    @field_validator("locationType", mode="before")
    @classmethod
    def parse_location_type(cls, v):
        if v is None:
            return v
        return LocationType.parse(v)

    @field_validator("preferredDateTime")
    @classmethod
    def normalize_preferred_date_time(cls, v):
        return to_naive_utc(v)

    def changes(self) -> dict[str, Any]:
        """Column name -> new value for every field the caller actually sent.

        A null date, location type or status means "leave unchanged"; a null
        location details or message clears the stored text.
        """
        supplied = self.model_fields_set
        result: dict[str, Any] = {}

        if "preferredDateTime" in supplied and self.preferredDateTime is not None:
            result["preferred_date_time"] = self.preferredDateTime
        if "locationType" in supplied and self.locationType is not None:
            result["location_type"] = self.locationType
        if "locationDetails" in supplied:
            result["location_details"] = self.locationDetails
        if "message" in supplied:
            result["message"] = self.message
        if "status" in supplied and self.status is not None:
            result["status"] = self.status

        return result


class BookingSearchQuery(BaseModel):
    """Query string for GET /api/Bookings/search"""

    status: Optional[BookingStatus] = None
    clientId: Optional[int] = None
    serviceOfferingId: Optional[int] = None
    fromDate: Optional[datetime] = None
    toDate: Optional[datetime] = None
    sortBy: Optional[str] = "date"
    descending: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        if v is None or v == "":
            return None
        return BookingStatus.parse(v)

    @field_validator("fromDate", "toDate")
    @classmethod
    def normalize_bounds(cls, v):
        return to_naive_utc(v)


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: int
    clientId: int
    serviceOfferingId: int
    preferredDateTime: datetime
    locationType: LocationType
    locationDetails: Optional[str] = None
    message: Optional[str] = None
    status: BookingStatus
    createdAtUtc: datetime

    @field_validator("preferredDateTime", "createdAtUtc")
    @classmethod
    def mark_utc(cls, v):
        return as_utc(v)
