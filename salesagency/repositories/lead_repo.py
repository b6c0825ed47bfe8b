"""
Lead repository with filtering and agent assignment.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import insert

from salesagency.models.lead import Lead
from salesagency.models.links import LeadAgentLink
from salesagency.repositories.base import BaseRepository
from salesagency.schemas.lead import LeadFilter


class LeadRepository(BaseRepository[Lead]):
    """Repository for Lead operations."""

    resource = "lead"

    def __init__(self, session: AsyncSession):
        super().__init__(Lead, session)

    def filter_conditions(self, filters: Optional[LeadFilter]) -> list:
        conditions = []
        if filters is None:
            return conditions
        if filters.status:
            conditions.append(Lead.status.in_(filters.status))
        if filters.min_intent_score is not None:
            conditions.append(Lead.intent_score >= filters.min_intent_score)
        if filters.tags:
            # Any of the filter tags on the lead
            conditions.append(self.array_overlap(Lead.tags, filters.tags))
        if filters.source is not None:
            conditions.append(Lead.source == filters.source)
        if filters.last_contact_after is not None:
            conditions.append(Lead.last_contact >= filters.last_contact_after)
        if filters.last_contact_before is not None:
            conditions.append(Lead.last_contact <= filters.last_contact_before)
        return conditions

    async def list_for_agent(self, ai_agent_id: uuid.UUID) -> List[Lead]:
        """Leads assigned to an AI agent."""
        query = (
            select(Lead)
            .join(LeadAgentLink, LeadAgentLink.lead_id == Lead.id)
            .where(LeadAgentLink.ai_agent_id == ai_agent_id)
            .order_by(LeadAgentLink.assigned_at.desc())
        )
        return await self.fetch_all(query, "error querying leads for AI agent")

    async def assign_to_agent(self, lead_id: uuid.UUID, ai_agent_id: uuid.UUID) -> Optional[Lead]:
        """Link a lead to an AI agent and return the lead."""
        async with self.transaction("error assigning lead to AI agent"):
            await self.session.execute(
                insert(LeadAgentLink).values(
                    lead_id=lead_id,
                    ai_agent_id=ai_agent_id,
                    assigned_at=datetime.utcnow()
                )
            )
        return await self.get(lead_id)
