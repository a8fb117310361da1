"""Testimonial router - FastAPI endpoints for testimonials"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import NotFoundError
from ...models import Testimonial
from .schemas import TestimonialCreate, TestimonialResponse
from .service import TestimonialService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Testimonials", tags=["Testimonials"])


def get_testimonial_service(db: Session = Depends(get_db)) -> TestimonialService:
    """Dependency injection for TestimonialService"""
    return TestimonialService(db)


def to_response(testimonial: Testimonial) -> TestimonialResponse:
    return TestimonialResponse(
        id=testimonial.id,
        clientName=testimonial.client_name,
        role=testimonial.role,
        text=testimonial.text,
        rating=testimonial.rating,
        isApproved=testimonial.is_approved,
        createdAtUtc=testimonial.created_at_utc,
    )


@router.get("", response_model=list[TestimonialResponse])
def get_testimonials(
    includeUnapproved: bool = Query(False, description="Also list testimonials awaiting approval"),
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Get testimonials, newest first"""
    logger.info(f"Fetching testimonials (includeUnapproved={includeUnapproved})")
    return [to_response(t) for t in service.get_testimonials(includeUnapproved)]


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
def get_testimonial(
    testimonial_id: int,
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Get a specific testimonial"""
    logger.info(f"Fetching testimonial with ID {testimonial_id}")
    testimonial = service.get_testimonial(testimonial_id)
    if testimonial is None:
        logger.warning(f"Testimonial with ID {testimonial_id} not found")
        raise NotFoundError("Testimonial", testimonial_id)
    return to_response(testimonial)


@router.post("", response_model=TestimonialResponse, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    data: TestimonialCreate,
    request: Request,
    response: Response,
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Submit a testimonial for approval"""
    logger.info(f"Creating new testimonial from {data.clientName} (rating {data.rating})")
    testimonial = service.create_testimonial(data)
    response.headers["Location"] = str(
        request.url_for("get_testimonial", testimonial_id=testimonial.id)
    )
    return to_response(testimonial)


@router.put("/{testimonial_id}/approve", response_model=TestimonialResponse)
def approve_testimonial(
    testimonial_id: int,
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Publish a testimonial on the site"""
    logger.info(f"Approving testimonial with ID {testimonial_id}")
    testimonial = service.approve_testimonial(testimonial_id)
    if testimonial is None:
        logger.warning(f"Approve failed: testimonial with ID {testimonial_id} not found")
        raise NotFoundError("Testimonial", testimonial_id)
    return to_response(testimonial)


@router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_testimonial(
    testimonial_id: int,
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Delete a testimonial"""
    logger.info(f"Deleting testimonial with ID {testimonial_id}")
    if not service.delete_testimonial(testimonial_id):
        logger.warning(f"Delete failed: testimonial with ID {testimonial_id} not found")
        raise NotFoundError("Testimonial", testimonial_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
