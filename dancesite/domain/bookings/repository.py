"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import case
from sqlalchemy.orm import Session

from ...models import Booking, BookingStatus, Client, ServiceOffering

DEFAULT_SORT = "date"

# Status sorts in lifecycle order, not alphabetically
STATUS_ORDER = case(
    *[(Booking.status == status, status.ordinal) for status in BookingStatus],
    else_=len(BookingStatus),
)

SORT_COLUMNS = {
    "date": Booking.preferred_date_time,
    "created": Booking.created_at_utc,
    "status": STATUS_ORDER,
}


def resolve_sort_key(sort_by: Optional[str]) -> str:
    """Map a sortBy value to a known key; anything unrecognized sorts by date"""
    key = (sort_by or DEFAULT_SORT).strip().lower()
    return key if key in SORT_COLUMNS else DEFAULT_SORT


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_bookings(db: Session) -> list[Booking]:
        """Get all bookings"""
        return db.query(Booking).order_by(Booking.id.asc()).all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        """Get a specific booking by ID"""
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def client_exists(db: Session, client_id: int) -> bool:
        return db.query(Client.id).filter(Client.id == client_id).first() is not None

    @staticmethod
    def service_offering_exists(db: Session, service_offering_id: int) -> bool:
        return (
            db.query(ServiceOffering.id).filter(ServiceOffering.id == service_offering_id).first()
            is not None
        )

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Create a new booking"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, changes: dict[str, Any]) -> Booking:
        """Apply exactly the given column changes; None values are written as None"""
        for key, value in changes.items():
            setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def delete_booking(db: Session, booking: Booking) -> None:
        """Delete a booking"""
        db.delete(booking)
        db.commit()

    # Search and Filter Methods
    @staticmethod
    def search_bookings(
        db: Session,
        status: Optional[BookingStatus] = None,
        client_id: Optional[int] = None,
        service_offering_id: Optional[int] = None,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
        sort_by: Optional[str] = DEFAULT_SORT,
        descending: bool = False,
    ) -> list[Booking]:
        """Filter bookings (all criteria ANDed) and sort them"""
        query = db.query(Booking)

        if status is not None:
            query = query.filter(Booking.status == status)

        if client_id is not None:
            query = query.filter(Booking.client_id == client_id)

        if service_offering_id is not None:
            query = query.filter(Booking.service_offering_id == service_offering_id)

        if from_date is not None:
            query = query.filter(Booking.preferred_date_time >= from_date)

        if to_date is not None:
            query = query.filter(Booking.preferred_date_time <= to_date)

        sort_column = SORT_COLUMNS[resolve_sort_key(sort_by)]
        if descending:
            query = query.order_by(sort_column.desc(), Booking.id.desc())
        else:
            query = query.order_by(sort_column.asc(), Booking.id.asc())

        return query.all()
