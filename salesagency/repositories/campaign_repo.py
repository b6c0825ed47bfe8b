"""
Campaign, target audience and campaign metrics repositories.
"""
import uuid
from typing import Optional, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import insert

from salesagency.models.campaign import Campaign, TargetAudience, CampaignMetrics
from salesagency.models.links import CampaignAgentLink
from salesagency.repositories.base import BaseRepository
from salesagency.schemas.campaign import CampaignFilter


class CampaignRepository(BaseRepository[Campaign]):
    """Repository for Campaign operations."""

    resource = "campaign"

    def __init__(self, session: AsyncSession):
        super().__init__(Campaign, session)

    def filter_conditions(self, filters: Optional[CampaignFilter]) -> list:
        conditions = []
        if filters is None:
            return conditions
        if filters.status:
            conditions.append(Campaign.status.in_(filters.status))
        if filters.client_id is not None:
            conditions.append(Campaign.client_id == filters.client_id)
        if filters.start_date_after is not None:
            conditions.append(Campaign.start_date >= filters.start_date_after)
        if filters.start_date_before is not None:
            conditions.append(Campaign.start_date <= filters.start_date_before)
        return conditions

    async def list_for_client(self, client_id: uuid.UUID) -> List[Campaign]:
        """Campaigns run for a client."""
        query = self.ordered(select(Campaign).where(Campaign.client_id == client_id))
        return await self.fetch_all(query, "error querying campaigns")

    async def list_for_agent(self, ai_agent_id: uuid.UUID) -> List[Campaign]:
        """Campaigns an AI agent works on."""
        query = self.ordered(
            select(Campaign)
            .join(CampaignAgentLink, CampaignAgentLink.campaign_id == Campaign.id)
            .where(CampaignAgentLink.ai_agent_id == ai_agent_id)
        )
        return await self.fetch_all(query, "error querying campaigns for AI agent")

    async def assign_agent(self, campaign_id: uuid.UUID, ai_agent_id: uuid.UUID) -> None:
        async with self.transaction("error assigning AI agent to campaign"):
            await self.session.execute(
                insert(CampaignAgentLink).values(campaign_id=campaign_id, ai_agent_id=ai_agent_id)
            )


class TargetAudienceRepository(BaseRepository[TargetAudience]):
    """Repository for TargetAudience operations."""

    resource = "target audience"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(TargetAudience, session)

    async def list_for_campaign(self, campaign_id: uuid.UUID) -> List[TargetAudience]:
        query = self.ordered(select(TargetAudience).where(TargetAudience.campaign_id == campaign_id))
        return await self.fetch_all(query, "error querying target audiences")


class CampaignMetricsRepository(BaseRepository[CampaignMetrics]):
    """Repository for CampaignMetrics operations."""

    resource = "campaign metrics"

    def __init__(self, session: AsyncSession):
        super().__init__(CampaignMetrics, session)

    async def get_latest(self, campaign_id: uuid.UUID) -> Optional[CampaignMetrics]:
        """Newest metrics row for a campaign, or None. Read-only."""
        query = (
            select(CampaignMetrics)
            .where(CampaignMetrics.campaign_id == campaign_id)
            .order_by(CampaignMetrics.created_at.desc())
            .limit(1)
        )
        async with self._guard("error fetching campaign metrics"):
            result = await self.session.exec(query)
            return result.first()

    async def ensure(self, campaign_id: uuid.UUID) -> CampaignMetrics:
        """Latest metrics row, creating a zeroed "all" row when missing."""
        metrics = await self.get_latest(campaign_id)
        if metrics is not None:
            return metrics
        return await self.create(CampaignMetrics(campaign_id=campaign_id, period="all"))
