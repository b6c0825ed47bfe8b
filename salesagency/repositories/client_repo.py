"""
Client and service repositories.
"""
import uuid
from typing import Optional, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import insert

from salesagency.models.client import Client, Service
from salesagency.models.links import ClientServiceLink
from salesagency.repositories.base import BaseRepository
from salesagency.schemas.client import ServiceFilter


class ClientRepository(BaseRepository[Client]):
    """Repository for Client operations."""

    resource = "client"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def assign_services(self, client_id: uuid.UUID, service_ids: List[uuid.UUID]) -> None:
        """Attach every service or none of them."""
        async with self.transaction("error assigning service to client"):
            for service_id in service_ids:
                await self.session.execute(
                    insert(ClientServiceLink).values(client_id=client_id, service_id=service_id)
                )


class ServiceRepository(BaseRepository[Service]):
    """Repository for Service operations."""

    resource = "service"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(Service, session)

    def filter_conditions(self, filters: Optional[ServiceFilter]) -> list:
        if filters is None or filters.max_price is None:
            return []
        return [Service.price <= filters.max_price]

    async def list_for_client(self, client_id: uuid.UUID) -> List[Service]:
        """Services a client subscribes to."""
        query = (
            select(Service)
            .join(ClientServiceLink, ClientServiceLink.service_id == Service.id)
            .where(ClientServiceLink.client_id == client_id)
            .order_by(Service.name)
        )
        return await self.fetch_all(query, "error querying services")
