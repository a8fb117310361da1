"""Client service - Business logic for client operations"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Client, ClientType, utcnow
from .repository import ClientRepository
from .schemas import ClientCreate, ClientUpdate

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def get_clients(self) -> list[Client]:
        """Get all clients"""
        return self.repo.get_clients(self.db)

    def get_client(self, client_id: int) -> Optional[Client]:
        """Get a specific client, or None"""
        return self.repo.get_client_by_id(self.db, client_id)

    def create_client(self, data: ClientCreate) -> Client:
        """Create a new client"""
        client = self.repo.create_client(
            self.db,
            name=data.fullName,
            email=data.email,
            phone=data.phone,
            client_type=data.clientType or ClientType.OTHER,
            notes=data.notes,
            created_at_utc=utcnow(),
        )
        logger.info(f"Created client {client.id} ({client.client_type.value})")
        return client

    def update_client(self, client_id: int, data: ClientUpdate) -> Optional[Client]:
        """Update a client; None when it does not exist"""
        client = self.repo.get_client_by_id(self.db, client_id)
        if client is None:
            return None

        changes = data.changes()
        client = self.repo.update_client(self.db, client, changes)
        logger.info(f"Updated client {client.id} fields: {sorted(changes)}")
        return client

    def delete_client(self, client_id: int) -> bool:
        """Delete a client and, by cascade, its bookings"""
        client = self.repo.get_client_by_id(self.db, client_id)
        if client is None:
            return False

        booking_count = len(client.bookings)
        self.repo.delete_client(self.db, client)
        logger.info(f"Deleted client {client_id} and {booking_count} booking(s)")
        return True
