"""Service offering repository - Database operations for service offerings"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ServiceOffering


class ServiceOfferingRepository:
    """Repository for service offering database operations"""

    @staticmethod
    def get_service_offerings(db: Session, active_only: bool = False) -> list[ServiceOffering]:
        """Get all service offerings, optionally only the active ones"""
        query = db.query(ServiceOffering)

        if active_only:
            query = query.filter(ServiceOffering.is_active.is_(True))

        return query.order_by(ServiceOffering.id.asc()).all()

    @staticmethod
    def get_service_offering_by_id(db: Session, offering_id: int) -> Optional[ServiceOffering]:
        """Get a specific service offering by ID"""
        return db.query(ServiceOffering).filter(ServiceOffering.id == offering_id).first()

    @staticmethod
    def create_service_offering(db: Session, **offering_data) -> ServiceOffering:
        """Create a new service offering"""
        offering = ServiceOffering(**offering_data)
        db.add(offering)
        db.commit()
        db.refresh(offering)
        return offering

    @staticmethod
    def update_service_offering(db: Session, offering: ServiceOffering, **updates) -> ServiceOffering:
        """Overwrite the given fields, None included"""
        for key, value in updates.items():
            setattr(offering, key, value)

        db.commit()
        db.refresh(offering)
        return offering

    @staticmethod
    def delete_service_offering(db: Session, offering: ServiceOffering) -> None:
        """Delete a service offering together with its bookings"""
        db.delete(offering)
        db.commit()
