"""Client repository - Database operations for clients"""

from typing import Any, Optional

from sqlalchemy.orm import Session

from ...models import Client


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_clients(db: Session) -> list[Client]:
        """Get all clients"""
        return db.query(Client).order_by(Client.id.asc()).all()

    @staticmethod
    def get_client_by_id(db: Session, client_id: int) -> Optional[Client]:
        """Get a specific client by ID"""
        return db.query(Client).filter(Client.id == client_id).first()

    @staticmethod
    def create_client(db: Session, **client_data) -> Client:
        """Create a new client"""
        client = Client(**client_data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def update_client(db: Session, client: Client, changes: dict[str, Any]) -> Client:
        """Update a client with the given column values"""
        for key, value in changes.items():
            setattr(client, key, value)

        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def delete_client(db: Session, client: Client) -> None:
        """Delete a client together with its bookings"""
        db.delete(client)
        db.commit()
