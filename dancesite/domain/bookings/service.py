"""Booking service - Business logic for booking operations"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from ...errors import ValidationError
from ...models import Booking, BookingStatus, LocationType, utcnow
from . import lifecycle
from .repository import BookingRepository
from .schemas import BookingCreate, BookingSearchQuery, BookingUpdate

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.repo = BookingRepository()
        self.clock = clock

    def get_bookings(self) -> list[Booking]:
        """Get all bookings"""
        return self.repo.get_bookings(self.db)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """Get a specific booking, or None when it does not exist"""
        return self.repo.get_booking_by_id(self.db, booking_id)

    def create_booking(self, data: BookingCreate) -> Booking:
        """Validate and create a booking; it always starts out Pending"""
        lifecycle.validate_preferred_date_time(data.preferredDateTime, self.clock())

        if not self.repo.client_exists(self.db, data.clientId):
            raise ValidationError(f"Client with ID {data.clientId} does not exist.")

        if not self.repo.service_offering_exists(self.db, data.serviceOfferingId):
            raise ValidationError(
                f"Service offering with ID {data.serviceOfferingId} does not exist."
            )

        lifecycle.validate_location_details(data.locationDetails)
        lifecycle.validate_message(data.message)

        booking = self.repo.create_booking(
            self.db,
            client_id=data.clientId,
            service_offering_id=data.serviceOfferingId,
            preferred_date_time=data.preferredDateTime,
            location_type=data.locationType or LocationType.ON_SITE,
            location_details=data.locationDetails,
            message=data.message,
            status=BookingStatus.PENDING,
            created_at_utc=self.clock(),
        )
        logger.info(
            f"Created booking {booking.id} for client {booking.client_id}, "
            f"service offering {booking.service_offering_id}"
        )
        return booking

    def update_booking(self, booking_id: int, data: BookingUpdate) -> Optional[Booking]:
        """Apply a partial update; returns None when the booking does not exist"""
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if booking is None:
            return None

        changes = data.changes()

        if "preferred_date_time" in changes:
            lifecycle.validate_preferred_date_time(changes["preferred_date_time"], self.clock())

        if "location_details" in changes:
            lifecycle.validate_location_details(changes["location_details"])

        if "message" in changes:
            lifecycle.validate_message(changes["message"])

        if "status" in changes:
            lifecycle.validate_status_change(booking.status, changes["status"])

        previous_status = booking.status
        booking = self.repo.update_booking(self.db, booking, changes)

        if booking.status != previous_status:
            logger.info(
                f"Booking {booking.id} status changed: "
                f"{previous_status.value} -> {booking.status.value}"
            )
        else:
            logger.info(f"Updated booking {booking.id} fields: {sorted(changes)}")
        return booking

    def delete_booking(self, booking_id: int) -> bool:
        """Delete a booking; False when it does not exist"""
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if booking is None:
            return False

        self.repo.delete_booking(self.db, booking)
        logger.info(f"Deleted booking {booking_id}")
        return True

    def search_bookings(self, query: BookingSearchQuery) -> list[Booking]:
        """Filter and sort bookings for listing pages"""
        return self.repo.search_bookings(
            self.db,
            status=query.status,
            client_id=query.clientId,
            service_offering_id=query.serviceOfferingId,
            from_date=query.fromDate,
            to_date=query.toDate,
            sort_by=query.sortBy,
            descending=query.descending,
        )
