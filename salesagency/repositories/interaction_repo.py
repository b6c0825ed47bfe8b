"""
Interaction repository.
"""
import uuid
from typing import Optional, List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from salesagency.models.interaction import Interaction
from salesagency.repositories.base import BaseRepository
from salesagency.schemas.interaction import InteractionFilter


class InteractionRepository(BaseRepository[Interaction]):
    """Repository for Interaction operations."""

    resource = "interaction"
    order_by = "timestamp"

    def __init__(self, session: AsyncSession):
        super().__init__(Interaction, session)

    def filter_conditions(self, filters: Optional[InteractionFilter]) -> list:
        if filters is None:
            return []
        data = filters.model_dump(exclude_none=True)
        after = data.pop("after", None)
        before = data.pop("before", None)
        conditions = [getattr(Interaction, field) == value for field, value in data.items()]
        if after is not None:
            conditions.append(Interaction.timestamp >= after)
        if before is not None:
            conditions.append(Interaction.timestamp <= before)
        return conditions

    async def list_for_lead(self, lead_id: uuid.UUID) -> List[Interaction]:
        """Interactions with a lead, newest first."""
        query = self.ordered(select(Interaction).where(Interaction.lead_id == lead_id))
        return await self.fetch_all(query, "error querying interactions")
