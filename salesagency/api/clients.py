"""
Clients API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_client_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.campaign import Campaign
from salesagency.models.client import Client, Service
from salesagency.models.enums import ClientStatus
from salesagency.schemas.client import (
    AssignServicesRequest, ClientCreate, ClientFilter, ClientUpdate
)
from salesagency.schemas.common import DeleteResponse
from salesagency.services.client_service import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post("/", response_model=Client, status_code=201)
async def create_client(
    client_data: ClientCreate,
    client_service: ClientService = Depends(get_client_service)
):
    """Create a client, optionally with its services."""
    return await client_service.create(client_data)


@router.get("/", response_model=List[Client])
async def list_clients(
    status: Optional[ClientStatus] = None,
    pagination: PaginationParams = Depends(get_pagination),
    client_service: ClientService = Depends(get_client_service)
):
    """List clients by name."""
    return await client_service.list(ClientFilter(status=status), pagination.limit, pagination.offset)


@router.get("/{client_id}", response_model=Client)
async def get_client(
    client_id: uuid.UUID,
    client_service: ClientService = Depends(get_client_service)
):
    """Get a client by ID."""
    client = await client_service.get(client_id)
    if not client:
        raise_not_found("Client", str(client_id))
    return client


@router.patch("/{client_id}", response_model=Client)
async def update_client(
    client_id: uuid.UUID,
    client_data: ClientUpdate,
    client_service: ClientService = Depends(get_client_service)
):
    """Update only the provided fields of a client."""
    return await client_service.update(client_id, client_data)


@router.delete("/{client_id}", response_model=DeleteResponse)
async def delete_client(
    client_id: uuid.UUID,
    client_service: ClientService = Depends(get_client_service)
):
    """Delete a client."""
    return DeleteResponse(deleted=await client_service.delete(client_id))


@router.post("/{client_id}/services", response_model=Client)
async def assign_services(
    client_id: uuid.UUID,
    assignment: AssignServicesRequest,
    client_service: ClientService = Depends(get_client_service)
):
    """Attach services to a client; all or none are attached."""
    return await client_service.assign_services(client_id, assignment.service_ids)


@router.get("/{client_id}/services", response_model=List[Service])
async def get_client_services(
    client_id: uuid.UUID,
    client_service: ClientService = Depends(get_client_service)
):
    """Services the client subscribes to."""
    return await client_service.active_services(client_id)


@router.get("/{client_id}/campaigns", response_model=List[Campaign])
async def get_client_campaigns(
    client_id: uuid.UUID,
    client_service: ClientService = Depends(get_client_service)
):
    """Campaigns run for the client."""
    return await client_service.campaigns(client_id)
