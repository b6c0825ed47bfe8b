"""
AI agent service - agents, their assignments, stats and lifecycle.

Lifecycle mutations only persist a status; no agent is executed here.
"""
import logging
import uuid
from typing import List, Optional

from salesagency.core.exceptions import NotFoundError
from salesagency.models.agent import AIAgent, AgentStats
from salesagency.models.campaign import Campaign
from salesagency.models.enums import AgentStatus
from salesagency.models.lead import Lead
from salesagency.models.template import MessageTemplate
from salesagency.repositories.agent_repo import AIAgentRepository, AgentStatsRepository
from salesagency.repositories.campaign_repo import CampaignRepository
from salesagency.repositories.lead_repo import LeadRepository
from salesagency.repositories.template_repo import MessageTemplateRepository
from salesagency.schemas.agent import AIAgentCreate, AgentStatsCreate
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)


class AIAgentService(CrudService[AIAgent]):
    """Service for AI agent operations."""

    resource = "AI agent"

    def __init__(
        self,
        agent_repo: AIAgentRepository,
        stats_repo: AgentStatsRepository,
        lead_repo: LeadRepository,
        campaign_repo: CampaignRepository,
        template_repo: MessageTemplateRepository
    ):
        super().__init__(agent_repo)
        self.agent_repo = agent_repo
        self.stats_repo = stats_repo
        self.lead_repo = lead_repo
        self.campaign_repo = campaign_repo
        self.template_repo = template_repo

    async def create(self, agent_data: AIAgentCreate) -> AIAgent:
        """Create an agent and provision its zeroed "all" stats row."""
        agent = AIAgent(
            name=agent_data.name,
            purpose=agent_data.purpose,
            description=agent_data.description,
            status=agent_data.status or AgentStatus.ACTIVE,
        )
        agent = await self.agent_repo.create(agent)
        await self.stats_repo.ensure(agent.id)
        logger.info(f"AI agent {agent.id} created")
        return agent

    async def leads(self, ai_agent_id: uuid.UUID) -> List[Lead]:
        """AIAgent.leads field."""
        return await self.lead_repo.list_for_agent(ai_agent_id)

    async def campaigns(self, ai_agent_id: uuid.UUID) -> List[Campaign]:
        """AIAgent.campaigns field."""
        return await self.campaign_repo.list_for_agent(ai_agent_id)

    async def templates(self, ai_agent_id: uuid.UUID) -> List[MessageTemplate]:
        """AIAgent.templates field."""
        return await self.template_repo.list_for_agent(ai_agent_id)

    async def stats(self, ai_agent_id: uuid.UUID) -> AgentStats:
        """
        AIAgent.stats field.

        Writes on first read: an agent without stats gets a zeroed row
        for period "all", which later calls return unchanged.
        """
        await self.get_or_raise(ai_agent_id)
        stats = await self.stats_repo.get_latest(ai_agent_id)
        if stats is None:
            stats = await self.stats_repo.ensure(ai_agent_id)
            logger.info(f"Provisioned default stats for AI agent {ai_agent_id}")
        return stats

    async def find_stats(self, ai_agent_id: uuid.UUID) -> Optional[AgentStats]:
        """Read-only stats lookup."""
        return await self.stats_repo.get_latest(ai_agent_id)

    async def assign_template(self, ai_agent_id: uuid.UUID, template_id: uuid.UUID) -> AIAgent:
        agent = await self.get_or_raise(ai_agent_id)
        if await self.template_repo.get(template_id) is None:
            raise NotFoundError("Message template", str(template_id))
        await self.agent_repo.assign_template(agent.id, template_id)
        logger.info(f"Template {template_id} assigned to AI agent {ai_agent_id}")
        return agent

    async def trigger_run(self, ai_agent_id: uuid.UUID) -> bool:
        """Mark a run as started. False when the agent does not exist."""
        triggered = await self.agent_repo.record_run(ai_agent_id)
        if triggered:
            logger.info(f"AI agent {ai_agent_id} run triggered")
        return triggered

    async def pause(self, ai_agent_id: uuid.UUID) -> bool:
        paused = await self.agent_repo.update_status(ai_agent_id, AgentStatus.PAUSED)
        if paused:
            logger.info(f"AI agent {ai_agent_id} paused")
        return paused

    async def resume(self, ai_agent_id: uuid.UUID) -> bool:
        resumed = await self.agent_repo.update_status(ai_agent_id, AgentStatus.ACTIVE)
        if resumed:
            logger.info(f"AI agent {ai_agent_id} resumed")
        return resumed


class AgentStatsService(CrudService[AgentStats]):
    """Direct access to stats rows."""

    resource = "Agent stats"

    def __init__(self, stats_repo: AgentStatsRepository):
        super().__init__(stats_repo)

    async def create(self, stats_data: AgentStatsCreate) -> AgentStats:
        return await self.repo.create(AgentStats(**stats_data.model_dump()))
