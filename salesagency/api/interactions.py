"""
Interactions API routes.
"""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_interaction_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.enums import Channel, InteractionStatus, InteractionType
from salesagency.models.interaction import Interaction
from salesagency.schemas.common import DeleteResponse
from salesagency.schemas.interaction import (
    InteractionCreate, InteractionFilter, InteractionUpdate
)
from salesagency.services.interaction_service import InteractionService

router = APIRouter(prefix="/interactions", tags=["interactions"])


@router.post("/", response_model=Interaction, status_code=201)
async def create_interaction(
    interaction_data: InteractionCreate,
    interaction_service: InteractionService = Depends(get_interaction_service)
):
    """Log an interaction with a lead."""
    return await interaction_service.create(interaction_data)


@router.get("/", response_model=List[Interaction])
async def list_interactions(
    lead_id: Optional[uuid.UUID] = None,
    ai_agent_id: Optional[uuid.UUID] = None,
    type: Optional[InteractionType] = None,
    channel: Optional[Channel] = None,
    status: Optional[InteractionStatus] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    pagination: PaginationParams = Depends(get_pagination),
    interaction_service: InteractionService = Depends(get_interaction_service)
):
    """List interactions, newest first."""
    filters = InteractionFilter(
        lead_id=lead_id,
        ai_agent_id=ai_agent_id,
        type=type,
        channel=channel,
        status=status,
        after=after,
        before=before
    )
    return await interaction_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{interaction_id}", response_model=Interaction)
async def get_interaction(
    interaction_id: uuid.UUID,
    interaction_service: InteractionService = Depends(get_interaction_service)
):
    interaction = await interaction_service.get(interaction_id)
    if not interaction:
        raise_not_found("Interaction", str(interaction_id))
    return interaction


@router.patch("/{interaction_id}", response_model=Interaction)
async def update_interaction(
    interaction_id: uuid.UUID,
    interaction_data: InteractionUpdate,
    interaction_service: InteractionService = Depends(get_interaction_service)
):
    return await interaction_service.update(interaction_id, interaction_data)


@router.delete("/{interaction_id}", response_model=DeleteResponse)
async def delete_interaction(
    interaction_id: uuid.UUID,
    interaction_service: InteractionService = Depends(get_interaction_service)
):
    return DeleteResponse(deleted=await interaction_service.delete(interaction_id))
