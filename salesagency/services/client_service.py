"""
Client service - clients, their services and campaigns.
"""
import logging
import uuid
from typing import List

from salesagency.models.campaign import Campaign
from salesagency.models.client import Client, Service
from salesagency.models.enums import ClientStatus
from salesagency.repositories.campaign_repo import CampaignRepository
from salesagency.repositories.client_repo import ClientRepository, ServiceRepository
from salesagency.schemas.client import ClientCreate, ServiceCreate
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)


class ClientService(CrudService[Client]):
    """Service for client operations."""

    resource = "Client"

    def __init__(
        self,
        client_repo: ClientRepository,
        service_repo: ServiceRepository,
        campaign_repo: CampaignRepository
    ):
        super().__init__(client_repo)
        self.client_repo = client_repo
        self.service_repo = service_repo
        self.campaign_repo = campaign_repo

    async def create(self, client_data: ClientCreate) -> Client:
        """
        Create a client, then attach `service_ids` if given.
        The attachment is its own transaction; a failure there leaves
        the client in place and is reported to the caller.
        """
        data = client_data.model_dump(exclude={"service_ids", "status"})
        client = Client(**data, status=client_data.status or ClientStatus.ACTIVE)
        client = await self.client_repo.create(client)
        logger.info(f"Client {client.id} created")

        if client_data.service_ids is not None:
            await self.assign_services(client.id, client_data.service_ids)
        return client

    async def assign_services(self, client_id: uuid.UUID, service_ids: List[uuid.UUID]) -> Client:
        """Attach services to a client, all or none."""
        client = await self.get_or_raise(client_id)
        await self.client_repo.assign_services(client.id, service_ids)
        logger.info(f"Assigned {len(service_ids)} service(s) to client {client_id}")
        return client

    async def active_services(self, client_id: uuid.UUID) -> List[Service]:
        """Client.activeServices field."""
        return await self.service_repo.list_for_client(client_id)

    async def campaigns(self, client_id: uuid.UUID) -> List[Campaign]:
        """Client.campaigns field."""
        return await self.campaign_repo.list_for_client(client_id)


class ServiceCatalogService(CrudService[Service]):
    """Service offerings sold to clients."""

    resource = "Service"

    def __init__(self, service_repo: ServiceRepository):
        super().__init__(service_repo)

    async def create(self, service_data: ServiceCreate) -> Service:
        service = Service(
            name=service_data.name,
            description=service_data.description,
            price=service_data.price,
            features=service_data.features or [],
        )
        return await self.repo.create(service)
