"""Shared fixtures: a throwaway SQLite database per test and services wired like the API."""

from datetime import datetime

import pytest
import pytest_asyncio

from salesagency.api import deps
from salesagency.database import Database
from salesagency.schemas.agent import AIAgentCreate
from salesagency.schemas.campaign import CampaignCreate
from salesagency.schemas.client import ClientCreate, ServiceCreate
from salesagency.schemas.lead import LeadCreate


@pytest_asyncio.fixture
async def db(tmp_path):
    database = await Database.initialize(f"sqlite+aiosqlite:///{tmp_path / 'crm.db'}")
    await database.create_schema()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(db):
    async with db.session() as session:
        yield session


# ---------------------------------------------------------------------------
# Services, built by the same factories the routes depend on
# ---------------------------------------------------------------------------


@pytest.fixture
def lead_service(session):
    return deps.get_lead_service(session)


@pytest.fixture
def client_service(session):
    return deps.get_client_service(session)


@pytest.fixture
def service_catalog(session):
    return deps.get_service_catalog(session)


@pytest.fixture
def agent_service(session):
    return deps.get_agent_service(session)


@pytest.fixture
def stats_service(session):
    return deps.get_agent_stats_service(session)


@pytest.fixture
def campaign_service(session):
    return deps.get_campaign_service(session)


@pytest.fixture
def target_service(session):
    return deps.get_target_service(session)


@pytest.fixture
def metrics_service(session):
    return deps.get_metrics_service(session)


@pytest.fixture
def interaction_service(session):
    return deps.get_interaction_service(session)


@pytest.fixture
def template_service(session):
    return deps.get_template_service(session)


@pytest.fixture
def user_service(session):
    return deps.get_user_service(session)


@pytest.fixture
def program_service(session):
    return deps.get_program_service(session)


@pytest.fixture
def module_service(session):
    return deps.get_module_service(session)


# ---------------------------------------------------------------------------
# Sample records
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def jane(lead_service):
    """Lead created with only the required fields."""
    return await lead_service.create(LeadCreate(name="Jane Doe", email="jane@acme.com"))


@pytest_asyncio.fixture
async def agent(agent_service):
    return await agent_service.create(AIAgentCreate(name="Outreach Bot", purpose="outreach"))


@pytest_asyncio.fixture
async def acme(client_service):
    return await client_service.create(ClientCreate(
        name="Acme Corp",
        industry="SaaS",
        contact_person="Wile E.",
        email="wile@acme.com",
        start_date=datetime(2024, 1, 1),
    ))


@pytest_asyncio.fixture
async def seo(service_catalog):
    return await service_catalog.create(ServiceCreate(name="SEO audit", price=499.0, features=["report"]))


@pytest_asyncio.fixture
async def campaign(campaign_service):
    return await campaign_service.create(CampaignCreate(
        name="Q1 outbound",
        start_date=datetime(2024, 1, 8),
    ))
