"""Tests for clients, the service catalog and the client-service association."""

import uuid
from datetime import datetime

import pytest

from salesagency.core.exceptions import NotFoundError, TransactionError
from salesagency.models.enums import ClientStatus
from salesagency.schemas.campaign import CampaignCreate
from salesagency.schemas.client import (
    ClientCreate, ClientFilter, ClientUpdate, ServiceCreate, ServiceFilter
)


def _client_data(**overrides) -> ClientCreate:
    data = dict(
        name="Globex",
        industry="Manufacturing",
        contact_person="Hank Scorpio",
        email="hank@globex.com",
        start_date=datetime(2024, 2, 1),
    )
    data.update(overrides)
    return ClientCreate(**data)


class TestClients:

    @pytest.mark.asyncio
    async def test_create_defaults_to_active(self, acme) -> None:
        assert acme.status == ClientStatus.ACTIVE
        assert acme.industry == "SaaS"

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, client_service, acme) -> None:
        await client_service.create(_client_data(name="Initech"))
        await client_service.create(_client_data(name="Globex", status=ClientStatus.ONBOARDING))

        clients = await client_service.list()
        assert [c.name for c in clients] == ["Acme Corp", "Globex", "Initech"]

        onboarding = await client_service.list(ClientFilter(status=ClientStatus.ONBOARDING))
        assert [c.name for c in onboarding] == ["Globex"]

    @pytest.mark.asyncio
    async def test_update_status_only(self, client_service, acme) -> None:
        updated = await client_service.update(acme.id, ClientUpdate(status=ClientStatus.CHURNED))
        assert updated.status == ClientStatus.CHURNED
        assert updated.contact_person == "Wile E."

    @pytest.mark.asyncio
    async def test_delete_twice(self, client_service, acme) -> None:
        client_id = acme.id
        assert await client_service.delete(client_id) is True
        assert await client_service.delete(client_id) is False


class TestServiceAssignment:

    @pytest.mark.asyncio
    async def test_assign_services(self, client_service, service_catalog, acme, seo) -> None:
        ads = await service_catalog.create(ServiceCreate(name="Ads management", price=999.0))
        await client_service.assign_services(acme.id, [seo.id, ads.id])

        services = await client_service.active_services(acme.id)
        assert [s.name for s in services] == ["Ads management", "SEO audit"]

    @pytest.mark.asyncio
    async def test_assignment_is_all_or_nothing(self, client_service, acme, seo) -> None:
        client_id = acme.id
        with pytest.raises(TransactionError):
            await client_service.assign_services(client_id, [seo.id, uuid.uuid4()])

        assert await client_service.active_services(client_id) == []

    @pytest.mark.asyncio
    async def test_create_with_service_ids(self, client_service, seo) -> None:
        client = await client_service.create(_client_data(service_ids=[seo.id]))
        services = await client_service.active_services(client.id)
        assert [s.id for s in services] == [seo.id]

    @pytest.mark.asyncio
    async def test_assign_to_missing_client(self, client_service, seo) -> None:
        with pytest.raises(NotFoundError):
            await client_service.assign_services(uuid.uuid4(), [seo.id])

    @pytest.mark.asyncio
    async def test_client_without_services_or_campaigns(self, client_service, acme) -> None:
        assert await client_service.active_services(acme.id) == []
        assert await client_service.campaigns(acme.id) == []

    @pytest.mark.asyncio
    async def test_campaigns_for_client(self, client_service, campaign_service, acme) -> None:
        await campaign_service.create(CampaignCreate(
            name="Acme launch", client_id=acme.id, start_date=datetime(2024, 3, 1)
        ))
        campaigns = await client_service.campaigns(acme.id)
        assert [c.name for c in campaigns] == ["Acme launch"]


class TestServiceCatalog:

    @pytest.mark.asyncio
    async def test_max_price(self, service_catalog, seo) -> None:
        await service_catalog.create(ServiceCreate(name="Full funnel", price=4999.0))
        cheap = await service_catalog.list(ServiceFilter(max_price=500))
        assert [s.name for s in cheap] == ["SEO audit"]

    @pytest.mark.asyncio
    async def test_features_default_empty(self, service_catalog) -> None:
        service = await service_catalog.create(ServiceCreate(name="Consulting", price=150.0))
        assert service.features == []
