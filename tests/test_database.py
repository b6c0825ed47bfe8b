"""Tests for the connection manager and repository transactions."""

import pytest
from sqlalchemy import insert

from salesagency.core.exceptions import DatabaseConnectionError
from salesagency.database import Database
from salesagency.models.links import ClientServiceLink
from salesagency.repositories.client_repo import ClientRepository


class TestDatabase:

    @pytest.mark.asyncio
    async def test_unreachable_database_is_fatal(self, tmp_path) -> None:
        url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'crm.db'}"
        with pytest.raises(DatabaseConnectionError):
            await Database.initialize(url, connect_timeout=2.0)

    @pytest.mark.asyncio
    async def test_ping(self, db) -> None:
        await db.ping()

    @pytest.mark.asyncio
    async def test_schema_creation_is_repeatable(self, db) -> None:
        await db.create_schema()


class TestTransaction:

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, session, client_service, acme, seo) -> None:
        client_id, service_id = acme.id, seo.id
        repo = ClientRepository(session)

        with pytest.raises(RuntimeError):
            async with repo.transaction("error assigning service to client"):
                await session.execute(
                    insert(ClientServiceLink).values(client_id=client_id, service_id=service_id)
                )
                raise RuntimeError("abort")

        assert await client_service.active_services(client_id) == []

    @pytest.mark.asyncio
    async def test_commits_on_clean_exit(self, session, client_service, acme, seo) -> None:
        client_id, service_id = acme.id, seo.id
        repo = ClientRepository(session)

        async with repo.transaction("error assigning service to client"):
            await session.execute(
                insert(ClientServiceLink).values(client_id=client_id, service_id=service_id)
            )

        services = await client_service.active_services(client_id)
        assert [s.id for s in services] == [service_id]
