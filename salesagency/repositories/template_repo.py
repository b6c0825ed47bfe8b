"""
Message template repository.
"""
import uuid
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from salesagency.models.template import MessageTemplate
from salesagency.models.links import AgentTemplateLink
from salesagency.repositories.base import BaseRepository


class MessageTemplateRepository(BaseRepository[MessageTemplate]):
    """Repository for MessageTemplate operations."""

    resource = "message template"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(MessageTemplate, session)

    async def list_for_campaign(self, campaign_id: uuid.UUID) -> List[MessageTemplate]:
        query = self.ordered(select(MessageTemplate).where(MessageTemplate.campaign_id == campaign_id))
        return await self.fetch_all(query, "error querying message templates")

    async def list_for_agent(self, ai_agent_id: uuid.UUID) -> List[MessageTemplate]:
        query = self.ordered(
            select(MessageTemplate)
            .join(AgentTemplateLink, AgentTemplateLink.template_id == MessageTemplate.id)
            .where(AgentTemplateLink.ai_agent_id == ai_agent_id)
        )
        return await self.fetch_all(query, "error querying message templates for AI agent")
