"""Booking router - FastAPI endpoints for booking operations"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import NotFoundError
from ...models import Booking
from .schemas import BookingCreate, BookingResponse, BookingSearchQuery, BookingUpdate
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


def to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        clientId=booking.client_id,
        serviceOfferingId=booking.service_offering_id,
        preferredDateTime=booking.preferred_date_time,
        locationType=booking.location_type,
        locationDetails=booking.location_details,
        message=booking.message,
        status=booking.status,
        createdAtUtc=booking.created_at_utc,
    )


@router.get("", response_model=list[BookingResponse])
def get_bookings(service: BookingService = Depends(get_booking_service)):
    """Get all bookings"""
    logger.info("Fetching all bookings")
    return [to_response(b) for b in service.get_bookings()]


@router.get("/search", response_model=list[BookingResponse])
def search_bookings(
    query: Annotated[BookingSearchQuery, Query()],
    service: BookingService = Depends(get_booking_service),
):
    """Search bookings by status, client, service offering and date range"""
    logger.info(
        f"Searching bookings with status={query.status}, clientId={query.clientId}, "
        f"serviceOfferingId={query.serviceOfferingId}, fromDate={query.fromDate}, "
        f"toDate={query.toDate}, sortBy={query.sortBy}, descending={query.descending}"
    )
    return [to_response(b) for b in service.search_bookings(query)]


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    """Get a specific booking"""
    logger.info(f"Fetching booking with ID {booking_id}")
    booking = service.get_booking(booking_id)
    if booking is None:
        logger.warning(f"Booking with ID {booking_id} not found")
        raise NotFoundError("Booking", booking_id)
    return to_response(booking)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    request: Request,
    response: Response,
    service: BookingService = Depends(get_booking_service),
):
    """Create a new booking request"""
    logger.info(
        f"Creating new booking for clientId {data.clientId}, "
        f"serviceOfferingId {data.serviceOfferingId}, preferredDateTime {data.preferredDateTime}"
    )
    booking = service.create_booking(data)
    response.headers["Location"] = str(request.url_for("get_booking", booking_id=booking.id))
    return to_response(booking)


@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(
    booking_id: int,
    data: BookingUpdate,
    service: BookingService = Depends(get_booking_service),
):
    """Update the supplied fields of a booking"""
    logger.info(f"Updating booking with ID {booking_id}")
    booking = service.update_booking(booking_id, data)
    if booking is None:
        logger.warning(f"Update failed: booking with ID {booking_id} not found")
        raise NotFoundError("Booking", booking_id)
    return to_response(booking)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    """Delete a booking"""
    logger.info(f"Deleting booking with ID {booking_id}")
    if not service.delete_booking(booking_id):
        logger.warning(f"Delete failed: booking with ID {booking_id} not found")
        raise NotFoundError("Booking", booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = [
    "router",
    "get_bookings",
    "search_bookings",
    "get_booking",
    "create_booking",
    "update_booking",
    "delete_booking",
]
