"""
AI agent and agent stats repositories.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import insert, update

from salesagency.models.agent import AIAgent, AgentStats
from salesagency.models.enums import AgentStatus
from salesagency.models.links import CampaignAgentLink, AgentTemplateLink
from salesagency.repositories.base import BaseRepository


class AIAgentRepository(BaseRepository[AIAgent]):
    """Repository for AIAgent operations."""

    resource = "AI agent"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(AIAgent, session)

    async def list_for_campaign(self, campaign_id: uuid.UUID) -> List[AIAgent]:
        """Agents working a campaign."""
        query = (
            select(AIAgent)
            .join(CampaignAgentLink, CampaignAgentLink.ai_agent_id == AIAgent.id)
            .where(CampaignAgentLink.campaign_id == campaign_id)
            .order_by(AIAgent.name)
        )
        return await self.fetch_all(query, "error querying AI agents for campaign")

    async def assign_template(self, ai_agent_id: uuid.UUID, template_id: uuid.UUID) -> None:
        async with self.transaction("error assigning template to AI agent"):
            await self.session.execute(
                insert(AgentTemplateLink).values(ai_agent_id=ai_agent_id, template_id=template_id)
            )

    async def update_status(self, ai_agent_id: uuid.UUID, status: AgentStatus) -> bool:
        """Set status only. False when the agent does not exist."""
        return await self._update_columns(ai_agent_id, status=status)

    async def record_run(self, ai_agent_id: uuid.UUID) -> bool:
        """Mark the agent as running now. Execution itself happens elsewhere."""
        now = datetime.utcnow()
        return await self._update_columns(ai_agent_id, status=AgentStatus.RUNNING, last_run=now)

    async def _update_columns(self, ai_agent_id: uuid.UUID, **values) -> bool:
        values["updated_at"] = datetime.utcnow()
        async with self._guard("error updating AI agent status"):
            result = await self.session.execute(
                update(AIAgent).where(AIAgent.id == ai_agent_id).values(**values)
            )
            await self.session.commit()
        return result.rowcount > 0


class AgentStatsRepository(BaseRepository[AgentStats]):
    """Repository for AgentStats operations."""

    resource = "agent stats"

    def __init__(self, session: AsyncSession):
        super().__init__(AgentStats, session)

    async def get_latest(self, agent_id: uuid.UUID) -> Optional[AgentStats]:
        """Newest stats row for an agent, or None. Read-only."""
        query = (
            select(AgentStats)
            .where(AgentStats.agent_id == agent_id)
            .order_by(AgentStats.created_at.desc())
            .limit(1)
        )
        async with self._guard("error fetching agent stats"):
            result = await self.session.exec(query)
            return result.first()

    async def ensure(self, agent_id: uuid.UUID) -> AgentStats:
        """
        Return the latest stats row, creating a zeroed one for period
        "all" when the agent has none yet.
        """
        stats = await self.get_latest(agent_id)
        if stats is not None:
            return stats
        return await self.create(AgentStats(agent_id=agent_id, period="all"))
