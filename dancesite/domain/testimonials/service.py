"""Testimonial service - moderation of client testimonials"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Testimonial, utcnow
from .repository import TestimonialRepository
from .schemas import TestimonialCreate

logger = logging.getLogger(__name__)


class TestimonialService:
    """Service layer for testimonials"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TestimonialRepository()

    def get_testimonials(self, include_unapproved: bool = False) -> list[Testimonial]:
        return self.repo.get_testimonials(self.db, approved_only=not include_unapproved)

    def get_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        return self.repo.get_testimonial_by_id(self.db, testimonial_id)

    def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        """Store a submitted testimonial; it is hidden until approved"""
        testimonial = self.repo.create_testimonial(
            self.db,
            client_name=data.clientName.strip(),
            role=data.role,
            text=data.text.strip(),
            rating=data.rating,
            is_approved=False,
            created_at_utc=utcnow(),
        )
        logger.info(f"Testimonial {testimonial.id} submitted (rating {testimonial.rating})")
        return testimonial

    def approve_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        testimonial = self.repo.get_testimonial_by_id(self.db, testimonial_id)
        if testimonial is None:
            return None

        testimonial = self.repo.set_approved(self.db, testimonial, True)
        logger.info(f"Testimonial {testimonial_id} approved")
        return testimonial

    def delete_testimonial(self, testimonial_id: int) -> bool:
        testimonial = self.repo.get_testimonial_by_id(self.db, testimonial_id)
        if testimonial is None:
            return False

        self.repo.delete_testimonial(self.db, testimonial)
        logger.info(f"Deleted testimonial {testimonial_id}")
        return True
