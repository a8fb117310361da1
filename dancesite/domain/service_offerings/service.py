"""Service offering service - Business logic for the bookable services"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import ServiceOffering, utcnow
from .repository import ServiceOfferingRepository
from .schemas import ServiceOfferingCreate, ServiceOfferingUpdate

logger = logging.getLogger(__name__)


class ServiceOfferingService:
    """Service layer for service offering business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceOfferingRepository()

    def get_service_offerings(self, active_only: bool = False) -> list[ServiceOffering]:
        return self.repo.get_service_offerings(self.db, active_only)

    def get_service_offering(self, offering_id: int) -> Optional[ServiceOffering]:
        return self.repo.get_service_offering_by_id(self.db, offering_id)

    def create_service_offering(self, data: ServiceOfferingCreate) -> ServiceOffering:
        """Create an offering; new offerings are always active"""
        offering = self.repo.create_service_offering(
            self.db,
            name=data.name,
            description=data.description,
            service_type=data.serviceType,
            base_price_sek=data.basePriceSek,
            duration_minutes=data.durationMinutes,
            is_active=True,
            created_at_utc=utcnow(),
        )
        logger.info(f"Created service offering {offering.id}: {offering.name}")
        return offering

    def update_service_offering(
        self, offering_id: int, data: ServiceOfferingUpdate
    ) -> Optional[ServiceOffering]:
        """Replace an offering's editable fields; None when it does not exist"""
        offering = self.repo.get_service_offering_by_id(self.db, offering_id)
        if offering is None:
            return None

        offering = self.repo.update_service_offering(
            self.db,
            offering,
            name=data.name,
            description=data.description,
            service_type=data.serviceType,
            base_price_sek=data.basePriceSek,
            duration_minutes=data.durationMinutes,
            is_active=data.isActive,
        )
        if not offering.is_active:
            logger.info(f"Service offering {offering.id} is now inactive")
        return offering

    def delete_service_offering(self, offering_id: int) -> bool:
        """Hard delete; prefer deactivating through update"""
        offering = self.repo.get_service_offering_by_id(self.db, offering_id)
        if offering is None:
            return False

        self.repo.delete_service_offering(self.db, offering)
        logger.info(f"Deleted service offering {offering_id}")
        return True
