"""
Lead service - lead management and agent assignment.
"""
import logging
import uuid
from typing import List

from salesagency.core.exceptions import NotFoundError
from salesagency.models.enums import LeadStatus
from salesagency.models.interaction import Interaction
from salesagency.models.lead import Lead
from salesagency.repositories.agent_repo import AIAgentRepository
from salesagency.repositories.interaction_repo import InteractionRepository
from salesagency.repositories.lead_repo import LeadRepository
from salesagency.schemas.lead import LeadCreate
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)

DEFAULT_LEAD_STATUS = LeadStatus.NEW
DEFAULT_INTENT_SCORE = 0.5


class LeadService(CrudService[Lead]):
    """Service for lead operations."""

    resource = "Lead"

    def __init__(
        self,
        lead_repo: LeadRepository,
        interaction_repo: InteractionRepository,
        agent_repo: AIAgentRepository
    ):
        super().__init__(lead_repo)
        self.lead_repo = lead_repo
        self.interaction_repo = interaction_repo
        self.agent_repo = agent_repo

    async def create(self, lead_data: LeadCreate) -> Lead:
        """Create a new lead; unset status/intent score fall back to defaults."""
        lead = Lead(
            name=lead_data.name,
            email=lead_data.email,
            phone=lead_data.phone,
            company=lead_data.company,
            position=lead_data.position,
            status=lead_data.status or DEFAULT_LEAD_STATUS,
            intent_score=(
                lead_data.intent_score
                if lead_data.intent_score is not None
                else DEFAULT_INTENT_SCORE
            ),
            tags=lead_data.tags or [],
            source=lead_data.source,
            notes=lead_data.notes,
        )
        lead = await self.lead_repo.create(lead)
        logger.info(f"Lead {lead.id} created")
        return lead

    async def assign_to_agent(self, lead_id: uuid.UUID, ai_agent_id: uuid.UUID) -> Lead:
        """Link a lead to an AI agent."""
        lead = await self.get_or_raise(lead_id)
        if await self.agent_repo.get(ai_agent_id) is None:
            raise NotFoundError("AI agent", str(ai_agent_id))
        lead = await self.lead_repo.assign_to_agent(lead.id, ai_agent_id)
        logger.info(f"Lead {lead_id} assigned to AI agent {ai_agent_id}")
        return lead

    async def interactions(self, lead_id: uuid.UUID) -> List[Interaction]:
        """Lead.interactions field."""
        return await self.interaction_repo.list_for_lead(lead_id)
