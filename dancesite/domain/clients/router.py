"""Client router - FastAPI endpoints for client operations"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import NotFoundError
from ...models import Client
from .schemas import ClientCreate, ClientResponse, ClientUpdate
from .service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Clients", tags=["Clients"])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


def to_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=client.id,
        fullName=client.name,
        email=client.email,
        phone=client.phone,
        clientType=client.client_type,
        notes=client.notes,
        createdAtUtc=client.created_at_utc,
    )


@router.get("", response_model=list[ClientResponse])
def get_clients(service: ClientService = Depends(get_client_service)):
    """Get all clients"""
    logger.info("Fetching all clients")
    return [to_response(c) for c in service.get_clients()]


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Get a specific client"""
    logger.info(f"Fetching client with ID {client_id}")
    client = service.get_client(client_id)
    if client is None:
        logger.warning(f"Client with ID {client_id} not found")
        raise NotFoundError("Client", client_id)
    return to_response(client)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    data: ClientCreate,
    request: Request,
    response: Response,
    service: ClientService = Depends(get_client_service),
):
    """Register a new client"""
    logger.info("Creating new client")
    client = service.create_client(data)
    response.headers["Location"] = str(request.url_for("get_client", client_id=client.id))
    return to_response(client)


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: int,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
):
    """Update a client"""
    logger.info(f"Updating client with ID {client_id}")
    client = service.update_client(client_id, data)
    if client is None:
        logger.warning(f"Update failed: client with ID {client_id} not found")
        raise NotFoundError("Client", client_id)
    return to_response(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Delete a client and its bookings"""
    logger.info(f"Deleting client with ID {client_id}")
    if not service.delete_client(client_id):
        logger.warning(f"Delete failed: client with ID {client_id} not found")
        raise NotFoundError("Client", client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = [
    "router",
    "get_clients",
    "get_client",
    "create_client",
    "update_client",
    "delete_client",
]
