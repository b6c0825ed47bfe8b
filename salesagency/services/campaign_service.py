"""
Campaign service - campaigns, target audiences and metrics.
"""
import logging
import uuid
from typing import List, Optional

from salesagency.core.exceptions import NotFoundError
from salesagency.models.agent import AIAgent
from salesagency.models.campaign import Campaign, CampaignMetrics, TargetAudience
from salesagency.models.client import Client
from salesagency.models.enums import CampaignStatus
from salesagency.models.template import MessageTemplate
from salesagency.repositories.agent_repo import AIAgentRepository
from salesagency.repositories.campaign_repo import (
    CampaignRepository,
    CampaignMetricsRepository,
    TargetAudienceRepository,
)
from salesagency.repositories.client_repo import ClientRepository
from salesagency.repositories.template_repo import MessageTemplateRepository
from salesagency.schemas.campaign import (
    CampaignCreate,
    CampaignMetricsCreate,
    TargetAudienceCreate,
)
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)


class CampaignService(CrudService[Campaign]):
    """Service for campaign operations."""

    resource = "Campaign"

    def __init__(
        self,
        campaign_repo: CampaignRepository,
        client_repo: ClientRepository,
        target_repo: TargetAudienceRepository,
        template_repo: MessageTemplateRepository,
        agent_repo: AIAgentRepository,
        metrics_repo: CampaignMetricsRepository
    ):
        super().__init__(campaign_repo)
        self.campaign_repo = campaign_repo
        self.client_repo = client_repo
        self.target_repo = target_repo
        self.template_repo = template_repo
        self.agent_repo = agent_repo
        self.metrics_repo = metrics_repo

    async def create(self, campaign_data: CampaignCreate) -> Campaign:
        """Create a new campaign (draft unless a status is given)."""
        data = campaign_data.model_dump(exclude={"status"})
        campaign = Campaign(**data, status=campaign_data.status or CampaignStatus.DRAFT)
        campaign = await self.campaign_repo.create(campaign)
        logger.info(f"Campaign {campaign.id} created")
        return campaign

    async def assign_agent(self, campaign_id: uuid.UUID, ai_agent_id: uuid.UUID) -> Campaign:
        campaign = await self.get_or_raise(campaign_id)
        if await self.agent_repo.get(ai_agent_id) is None:
            raise NotFoundError("AI agent", str(ai_agent_id))
        await self.campaign_repo.assign_agent(campaign.id, ai_agent_id)
        logger.info(f"AI agent {ai_agent_id} assigned to campaign {campaign_id}")
        return campaign

    async def client(self, campaign: Campaign) -> Optional[Client]:
        """Campaign.client field; None for campaigns without a client."""
        if campaign.client_id is None:
            return None
        return await self.client_repo.get(campaign.client_id)

    async def targets(self, campaign_id: uuid.UUID) -> List[TargetAudience]:
        """Campaign.targets field."""
        return await self.target_repo.list_for_campaign(campaign_id)

    async def messages(self, campaign_id: uuid.UUID) -> List[MessageTemplate]:
        """Campaign.messages field."""
        return await self.template_repo.list_for_campaign(campaign_id)

    async def ai_agents(self, campaign_id: uuid.UUID) -> List[AIAgent]:
        """Campaign.aiAgents field."""
        return await self.agent_repo.list_for_campaign(campaign_id)

    async def metrics(self, campaign_id: uuid.UUID) -> CampaignMetrics:
        """Campaign.metrics field; provisions a zeroed "all" row on first read."""
        await self.get_or_raise(campaign_id)
        metrics = await self.metrics_repo.get_latest(campaign_id)
        if metrics is None:
            metrics = await self.metrics_repo.ensure(campaign_id)
            logger.info(f"Provisioned default metrics for campaign {campaign_id}")
        return metrics

    async def find_metrics(self, campaign_id: uuid.UUID) -> Optional[CampaignMetrics]:
        """Read-only metrics lookup."""
        return await self.metrics_repo.get_latest(campaign_id)


class TargetAudienceService(CrudService[TargetAudience]):
    """Service for target audiences."""

    resource = "Target audience"

    def __init__(self, target_repo: TargetAudienceRepository):
        super().__init__(target_repo)

    async def create(self, target_data: TargetAudienceCreate) -> TargetAudience:
        data = target_data.model_dump(exclude={"pain_points"})
        target = TargetAudience(**data, pain_points=target_data.pain_points or [])
        return await self.repo.create(target)


class CampaignMetricsService(CrudService[CampaignMetrics]):
    resource = "Campaign metrics"

    def __init__(self, metrics_repo: CampaignMetricsRepository):
        super().__init__(metrics_repo)

    async def create(self, metrics_data: CampaignMetricsCreate) -> CampaignMetrics:
        return await self.repo.create(CampaignMetrics(**metrics_data.model_dump()))
