"""
Interaction service.
"""
import logging
from datetime import datetime

from salesagency.models.enums import InteractionStatus
from salesagency.models.interaction import Interaction
from salesagency.repositories.interaction_repo import InteractionRepository
from salesagency.schemas.interaction import InteractionCreate
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)


class InteractionService(CrudService[Interaction]):
    """Service for interaction operations."""

    resource = "Interaction"

    def __init__(self, interaction_repo: InteractionRepository):
        super().__init__(interaction_repo)

    async def create(self, interaction_data: InteractionCreate) -> Interaction:
        """Log an interaction; pending and timestamped now unless specified."""
        data = interaction_data.model_dump(exclude={"status", "timestamp"})
        interaction = Interaction(
            **data,
            status=interaction_data.status or InteractionStatus.PENDING,
            timestamp=interaction_data.timestamp or datetime.utcnow(),
        )
        interaction = await self.repo.create(interaction)
        logger.info(f"Interaction {interaction.id} logged for lead {interaction.lead_id}")
        return interaction
