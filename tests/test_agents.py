"""Tests for AI agents: stats provisioning, lifecycle status and associations."""

import uuid
from datetime import datetime

import pytest

from salesagency.core.exceptions import NotFoundError, TransactionError
from salesagency.models.agent import AgentStats
from salesagency.models.enums import AgentStatus, Channel
from salesagency.repositories.agent_repo import AgentStatsRepository
from salesagency.schemas.agent import (
    AgentStatsCreate, AgentStatsFilter, AgentStatsUpdate, AIAgentCreate, AIAgentFilter
)
from salesagency.schemas.lead import LeadCreate
from salesagency.schemas.template import TemplateCreate


class TestStats:

    @pytest.mark.asyncio
    async def test_create_provisions_stats(self, agent_service, agent) -> None:
        stats = await agent_service.find_stats(agent.id)
        assert stats is not None
        assert stats.period == "all"
        assert stats.leads_engaged == 0
        assert stats.messages_delivered == 0
        assert stats.response_rate == 0.0
        assert stats.conversion_rate == 0.0
        assert stats.avg_response_time == 0.0

    @pytest.mark.asyncio
    async def test_stats_created_on_first_read_then_reused(self, agent_service, session) -> None:
        agent = await agent_service.create(AIAgentCreate(name="Closer", purpose="qualification"))
        # Drop the provisioned row so the agent has no stats at all
        stats_repo = AgentStatsRepository(session)
        provisioned = await stats_repo.get_latest(agent.id)
        await stats_repo.delete(provisioned.id)
        assert await agent_service.find_stats(agent.id) is None

        first = await agent_service.stats(agent.id)
        second = await agent_service.stats(agent.id)

        assert first.id == second.id
        assert first.period == "all"
        assert first.leads_engaged == 0
        rows = await stats_repo.list(AgentStatsFilter(agent_id=agent.id))
        assert len(rows) == 1

    @pytest.mark.asyncio
    async def test_latest_row_wins(self, agent_service, stats_service, agent) -> None:
        await stats_service.create(AgentStatsCreate(
            agent_id=agent.id, leads_engaged=12, response_rate=0.25, period="2024-03"
        ))
        stats = await agent_service.stats(agent.id)
        assert stats.period == "2024-03"
        assert stats.leads_engaged == 12

    @pytest.mark.asyncio
    async def test_update_counters(self, agent_service, stats_service, agent) -> None:
        stats = await agent_service.stats(agent.id)
        updated = await stats_service.update(stats.id, AgentStatsUpdate(messages_delivered=40))
        assert updated.messages_delivered == 40
        assert updated.leads_engaged == 0

    @pytest.mark.asyncio
    async def test_stats_removed_with_agent(self, agent_service, stats_service, agent) -> None:
        agent_id = agent.id
        assert await agent_service.delete(agent_id) is True
        assert await stats_service.list(AgentStatsFilter(agent_id=agent_id)) == []

    @pytest.mark.asyncio
    async def test_find_stats_for_unknown_agent_is_none(self, agent_service) -> None:
        assert await agent_service.find_stats(uuid.uuid4()) is None


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_defaults(self, agent) -> None:
        assert agent.status == AgentStatus.ACTIVE
        assert agent.last_run is None

    @pytest.mark.asyncio
    async def test_trigger_pause_resume(self, agent_service, agent) -> None:
        assert await agent_service.trigger_run(agent.id) is True
        running = await agent_service.get(agent.id)
        assert running.status == AgentStatus.RUNNING
        assert running.last_run is not None

        assert await agent_service.pause(agent.id) is True
        assert (await agent_service.get(agent.id)).status == AgentStatus.PAUSED

        assert await agent_service.resume(agent.id) is True
        assert (await agent_service.get(agent.id)).status == AgentStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_lifecycle_on_missing_agent(self, agent_service) -> None:
        missing = uuid.uuid4()
        assert await agent_service.trigger_run(missing) is False
        assert await agent_service.pause(missing) is False
        assert await agent_service.resume(missing) is False

    @pytest.mark.asyncio
    async def test_filter_by_status(self, agent_service, agent) -> None:
        other = await agent_service.create(AIAgentCreate(name="Nurturer", purpose="follow_up"))
        await agent_service.pause(other.id)

        paused = await agent_service.list(AIAgentFilter(status=AgentStatus.PAUSED))
        assert [a.name for a in paused] == ["Nurturer"]
        outreach = await agent_service.list(AIAgentFilter(purpose="outreach"))
        assert [a.name for a in outreach] == ["Outreach Bot"]


class TestAssociations:

    @pytest.mark.asyncio
    async def test_new_agent_has_no_links(self, agent_service, agent) -> None:
        assert await agent_service.leads(agent.id) == []
        assert await agent_service.campaigns(agent.id) == []
        assert await agent_service.templates(agent.id) == []

    @pytest.mark.asyncio
    async def test_leads_most_recently_assigned_first(self, agent_service, lead_service, agent) -> None:
        first = await lead_service.create(LeadCreate(name="First", email="f@acme.com"))
        second = await lead_service.create(LeadCreate(name="Second", email="s@acme.com"))
        await lead_service.assign_to_agent(first.id, agent.id)
        await lead_service.assign_to_agent(second.id, agent.id)

        leads = await agent_service.leads(agent.id)
        assert [lead.name for lead in leads] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_assign_lead_twice_fails(self, lead_service, agent, jane) -> None:
        lead_id, agent_id = jane.id, agent.id
        await lead_service.assign_to_agent(lead_id, agent_id)
        with pytest.raises(TransactionError):
            await lead_service.assign_to_agent(lead_id, agent_id)

    @pytest.mark.asyncio
    async def test_assign_missing_lead(self, lead_service, agent) -> None:
        with pytest.raises(NotFoundError):
            await lead_service.assign_to_agent(uuid.uuid4(), agent.id)

    @pytest.mark.asyncio
    async def test_templates(self, agent_service, template_service, agent) -> None:
        template = await template_service.create(TemplateCreate(
            name="Intro", content="Hi {{name}}", variables=["name"],
            channel=Channel.EMAIL, purpose="introduction"
        ))
        await agent_service.assign_template(agent.id, template.id)

        templates = await agent_service.templates(agent.id)
        assert [t.id for t in templates] == [template.id]

    @pytest.mark.asyncio
    async def test_campaigns(self, agent_service, campaign_service, agent, campaign) -> None:
        await campaign_service.assign_agent(campaign.id, agent.id)
        campaigns = await agent_service.campaigns(agent.id)
        assert [c.id for c in campaigns] == [campaign.id]
        agents = await campaign_service.ai_agents(campaign.id)
        assert [a.id for a in agents] == [agent.id]


def test_stats_model_defaults() -> None:
    stats = AgentStats(agent_id=uuid.uuid4())
    assert stats.period == "all"
    assert stats.leads_engaged == 0
    assert isinstance(stats.created_at, datetime)


class TestUnknownReferences:

    @pytest.mark.asyncio
    async def test_stats_for_unknown_agent_not_provisioned(self, agent_service, stats_service) -> None:
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError):
            await agent_service.stats(missing)
        assert await stats_service.list(AgentStatsFilter(agent_id=missing)) == []

    @pytest.mark.asyncio
    async def test_assign_lead_to_unknown_agent(self, lead_service, jane) -> None:
        with pytest.raises(NotFoundError):
            await lead_service.assign_to_agent(jane.id, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_assign_unknown_template(self, agent_service, agent) -> None:
        with pytest.raises(NotFoundError):
            await agent_service.assign_template(agent.id, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_assign_unknown_agent_to_campaign(self, campaign_service, campaign) -> None:
        with pytest.raises(NotFoundError):
            await campaign_service.assign_agent(campaign.id, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_metrics_for_unknown_campaign(self, campaign_service) -> None:
        with pytest.raises(NotFoundError):
            await campaign_service.metrics(uuid.uuid4())
