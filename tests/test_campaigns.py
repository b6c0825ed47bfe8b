"""Tests for campaigns, their targets, templates and metrics."""

import uuid
from datetime import datetime

import pytest

from salesagency.core.exceptions import NotFoundError
from salesagency.models.enums import CampaignStatus, Channel
from salesagency.schemas.campaign import (
    CampaignCreate, CampaignFilter, CampaignMetricsCreate, CampaignMetricsFilter,
    CampaignMetricsUpdate, CampaignUpdate, TargetAudienceCreate, TargetAudienceFilter,
)
from salesagency.schemas.template import TemplateCreate


class TestCampaigns:

    @pytest.mark.asyncio
    async def test_defaults_to_draft(self, campaign) -> None:
        assert campaign.status == CampaignStatus.DRAFT
        assert campaign.client_id is None

    @pytest.mark.asyncio
    async def test_client_resolution(self, campaign_service, campaign, acme) -> None:
        assert await campaign_service.client(campaign) is None

        linked = await campaign_service.create(CampaignCreate(
            name="Acme launch", client_id=acme.id, start_date=datetime(2024, 3, 1)
        ))
        client = await campaign_service.client(linked)
        assert client.id == acme.id

    @pytest.mark.asyncio
    async def test_filters(self, campaign_service, acme) -> None:
        await campaign_service.create(CampaignCreate(
            name="Early", start_date=datetime(2024, 1, 1), status=CampaignStatus.ACTIVE
        ))
        await campaign_service.create(CampaignCreate(
            name="Late", client_id=acme.id, start_date=datetime(2024, 6, 1),
            status=CampaignStatus.PAUSED
        ))
        await campaign_service.create(CampaignCreate(
            name="Done", start_date=datetime(2024, 3, 1), status=CampaignStatus.COMPLETED
        ))

        running = await campaign_service.list(
            CampaignFilter(status=[CampaignStatus.ACTIVE, CampaignStatus.PAUSED])
        )
        assert {c.name for c in running} == {"Early", "Late"}

        for_acme = await campaign_service.list(CampaignFilter(client_id=acme.id))
        assert [c.name for c in for_acme] == ["Late"]

        window = await campaign_service.list(CampaignFilter(
            start_date_after=datetime(2024, 2, 1), start_date_before=datetime(2024, 5, 1)
        ))
        assert [c.name for c in window] == ["Done"]

    @pytest.mark.asyncio
    async def test_update_keeps_unsent_fields(self, campaign_service, campaign) -> None:
        updated = await campaign_service.update(
            campaign.id, CampaignUpdate(status=CampaignStatus.ACTIVE, budget=2500.0)
        )
        assert updated.status == CampaignStatus.ACTIVE
        assert updated.budget == 2500.0
        assert updated.name == "Q1 outbound"

    @pytest.mark.asyncio
    async def test_delete_removes_targets(self, campaign_service, target_service, campaign) -> None:
        await target_service.create(TargetAudienceCreate(
            name="CTOs", industry="SaaS", campaign_id=campaign.id
        ))
        campaign_id = campaign.id
        assert await campaign_service.delete(campaign_id) is True
        assert await target_service.list(TargetAudienceFilter(campaign_id=campaign_id)) == []
        assert await campaign_service.delete(campaign_id) is False

    @pytest.mark.asyncio
    async def test_assign_agent_to_missing_campaign(self, campaign_service, agent) -> None:
        with pytest.raises(NotFoundError):
            await campaign_service.assign_agent(uuid.uuid4(), agent.id)


class TestRelationships:

    @pytest.mark.asyncio
    async def test_empty_campaign(self, campaign_service, campaign) -> None:
        assert await campaign_service.targets(campaign.id) == []
        assert await campaign_service.messages(campaign.id) == []
        assert await campaign_service.ai_agents(campaign.id) == []

    @pytest.mark.asyncio
    async def test_targets_and_messages(
        self, campaign_service, target_service, template_service, campaign
    ) -> None:
        target = await target_service.create(TargetAudienceCreate(
            name="Heads of Sales", industry="SaaS", pain_points=["pipeline"],
            campaign_id=campaign.id
        ))
        assert target.pain_points == ["pipeline"]
        await template_service.create(TemplateCreate(
            name="Follow up", content="Any thoughts?", channel=Channel.LINKEDIN,
            purpose="follow_up", campaign_id=campaign.id
        ))
        await template_service.create(TemplateCreate(
            name="Unrelated", content="Hello", channel=Channel.EMAIL, purpose="introduction"
        ))

        assert [t.id for t in await campaign_service.targets(campaign.id)] == [target.id]
        assert [m.name for m in await campaign_service.messages(campaign.id)] == ["Follow up"]


class TestMetrics:

    @pytest.mark.asyncio
    async def test_metrics_created_on_first_read(self, campaign_service, metrics_service, campaign) -> None:
        assert await campaign_service.find_metrics(campaign.id) is None

        first = await campaign_service.metrics(campaign.id)
        second = await campaign_service.metrics(campaign.id)
        assert first.id == second.id
        assert first.period == "all"
        assert first.messages_sent == 0
        assert first.cost_per_lead is None

        rows = await metrics_service.list(CampaignMetricsFilter(campaign_id=campaign.id))
        assert len(rows) == 1

    @pytest.mark.asyncio
    async def test_recorded_metrics(self, campaign_service, metrics_service, campaign) -> None:
        recorded = await metrics_service.create(CampaignMetricsCreate(
            campaign_id=campaign.id, leads_generated=30, conversions=3,
            conversion_rate=0.1, cost_per_lead=12.5, period="2024-Q1"
        ))
        assert (await campaign_service.metrics(campaign.id)).id == recorded.id

        updated = await metrics_service.update(recorded.id, CampaignMetricsUpdate(cost_per_lead=None))
        assert updated.cost_per_lead is None
        assert updated.leads_generated == 30
