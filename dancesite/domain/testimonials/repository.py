"""Testimonial repository - Database operations for testimonials"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Testimonial


class TestimonialRepository:
    """Repository for testimonial database operations"""

    @staticmethod
    def get_testimonials(db: Session, approved_only: bool = True) -> list[Testimonial]:
        """Newest first"""
        query = db.query(Testimonial)

        if approved_only:
            query = query.filter(Testimonial.is_approved.is_(True))

        return query.order_by(Testimonial.created_at_utc.desc(), Testimonial.id.desc()).all()

    @staticmethod
    def get_testimonial_by_id(db: Session, testimonial_id: int) -> Optional[Testimonial]:
        return db.query(Testimonial).filter(Testimonial.id == testimonial_id).first()

    @staticmethod
    def create_testimonial(db: Session, **testimonial_data) -> Testimonial:
        testimonial = Testimonial(**testimonial_data)
        db.add(testimonial)
        db.commit()
        db.refresh(testimonial)
        return testimonial

    @staticmethod
    def set_approved(db: Session, testimonial: Testimonial, approved: bool) -> Testimonial:
        testimonial.is_approved = approved
        db.commit()
        db.refresh(testimonial)
        return testimonial

    @staticmethod
    def delete_testimonial(db: Session, testimonial: Testimonial) -> None:
        db.delete(testimonial)
        db.commit()
