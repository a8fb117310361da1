"""Service offering router - FastAPI endpoints for service offerings"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import NotFoundError
from ...models import ServiceOffering
from .schemas import ServiceOfferingCreate, ServiceOfferingResponse, ServiceOfferingUpdate
from .service import ServiceOfferingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ServiceOfferings", tags=["ServiceOfferings"])


def get_service_offering_service(db: Session = Depends(get_db)) -> ServiceOfferingService:
    """Dependency injection for ServiceOfferingService"""
    return ServiceOfferingService(db)


def to_response(offering: ServiceOffering) -> ServiceOfferingResponse:
    return ServiceOfferingResponse(
        id=offering.id,
        name=offering.name,
        description=offering.description,
        serviceType=offering.service_type,
        basePriceSek=offering.base_price_sek,
        durationMinutes=offering.duration_minutes,
        isActive=offering.is_active,
        createdAtUtc=offering.created_at_utc,
    )


@router.get("", response_model=list[ServiceOfferingResponse])
def get_service_offerings(
    activeOnly: bool = Query(False, description="Only list offerings that can be booked"),
    service: ServiceOfferingService = Depends(get_service_offering_service),
):
    """Get all service offerings"""
    logger.info("Fetching all service offerings")
    return [to_response(o) for o in service.get_service_offerings(activeOnly)]


@router.get("/{offering_id}", response_model=ServiceOfferingResponse)
def get_service_offering(
    offering_id: int,
    service: ServiceOfferingService = Depends(get_service_offering_service),
):
    """Get a specific service offering"""
    logger.info(f"Fetching service offering with ID {offering_id}")
    offering = service.get_service_offering(offering_id)
    if offering is None:
        logger.warning(f"Service offering with ID {offering_id} not found")
        raise NotFoundError("Service offering", offering_id)
    return to_response(offering)


@router.post("", response_model=ServiceOfferingResponse, status_code=status.HTTP_201_CREATED)
def create_service_offering(
    data: ServiceOfferingCreate,
    request: Request,
    response: Response,
    service: ServiceOfferingService = Depends(get_service_offering_service),
):
    """Create a new service offering"""
    logger.info(f"Creating new service offering: {data.name}")
    offering = service.create_service_offering(data)
    response.headers["Location"] = str(
        request.url_for("get_service_offering", offering_id=offering.id)
    )
    return to_response(offering)


@router.put("/{offering_id}", response_model=ServiceOfferingResponse)
def update_service_offering(
    offering_id: int,
    data: ServiceOfferingUpdate,
    service: ServiceOfferingService = Depends(get_service_offering_service),
):
    """Replace a service offering's editable fields"""
    logger.info(f"Updating service offering with ID {offering_id}")
    offering = service.update_service_offering(offering_id, data)
    if offering is None:
        logger.warning(f"Update failed: service offering with ID {offering_id} not found")
        raise NotFoundError("Service offering", offering_id)
    return to_response(offering)


@router.delete("/{offering_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service_offering(
    offering_id: int,
    service: ServiceOfferingService = Depends(get_service_offering_service),
):
    """Delete a service offering and its bookings"""
    logger.info(f"Deleting service offering with ID {offering_id}")
    if not service.delete_service_offering(offering_id):
        logger.warning(f"Delete failed: service offering with ID {offering_id} not found")
        raise NotFoundError("Service offering", offering_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = [
    "router",
    "get_service_offerings",
    "get_service_offering",
    "create_service_offering",
    "update_service_offering",
    "delete_service_offering",
]
