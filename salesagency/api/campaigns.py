"""
Campaigns API routes.
"""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from salesagency.api.deps import get_campaign_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.agent import AIAgent
from salesagency.models.campaign import Campaign, CampaignMetrics, TargetAudience
from salesagency.models.client import Client
from salesagency.models.enums import CampaignStatus
from salesagency.models.template import MessageTemplate
from salesagency.schemas.agent import AgentAssignmentRequest
from salesagency.schemas.campaign import CampaignCreate, CampaignFilter, CampaignUpdate
from salesagency.schemas.common import DeleteResponse
from salesagency.services.campaign_service import CampaignService

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


async def _get_campaign(campaign_id: uuid.UUID, campaign_service: CampaignService) -> Campaign:
    campaign = await campaign_service.get(campaign_id)
    if not campaign:
        raise_not_found("Campaign", str(campaign_id))
    return campaign


@router.post("/", response_model=Campaign, status_code=201)
async def create_campaign(
    campaign_data: CampaignCreate,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Create a new campaign."""
    return await campaign_service.create(campaign_data)


@router.get("/", response_model=List[Campaign])
async def list_campaigns(
    status: Optional[List[CampaignStatus]] = Query(None),
    client_id: Optional[uuid.UUID] = None,
    start_date_after: Optional[datetime] = None,
    start_date_before: Optional[datetime] = None,
    pagination: PaginationParams = Depends(get_pagination),
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """List campaigns with optional filters, newest first."""
    filters = CampaignFilter(
        status=status,
        client_id=client_id,
        start_date_after=start_date_after,
        start_date_before=start_date_before
    )
    return await campaign_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{campaign_id}", response_model=Campaign)
async def get_campaign(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Get a campaign by ID."""
    return await _get_campaign(campaign_id, campaign_service)


@router.patch("/{campaign_id}", response_model=Campaign)
async def update_campaign(
    campaign_id: uuid.UUID,
    campaign_data: CampaignUpdate,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Update a campaign."""
    return await campaign_service.update(campaign_id, campaign_data)


@router.delete("/{campaign_id}", response_model=DeleteResponse)
async def delete_campaign(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Delete a campaign."""
    return DeleteResponse(deleted=await campaign_service.delete(campaign_id))


@router.post("/{campaign_id}/agents", response_model=Campaign)
async def assign_agent(
    campaign_id: uuid.UUID,
    assignment: AgentAssignmentRequest,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Put an AI agent on the campaign."""
    return await campaign_service.assign_agent(campaign_id, assignment.ai_agent_id)


@router.get("/{campaign_id}/client", response_model=Optional[Client])
async def get_campaign_client(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    campaign = await _get_campaign(campaign_id, campaign_service)
    return await campaign_service.client(campaign)


@router.get("/{campaign_id}/targets", response_model=List[TargetAudience])
async def get_campaign_targets(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    return await campaign_service.targets(campaign_id)


@router.get("/{campaign_id}/messages", response_model=List[MessageTemplate])
async def get_campaign_messages(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    return await campaign_service.messages(campaign_id)


@router.get("/{campaign_id}/agents", response_model=List[AIAgent])
async def get_campaign_agents(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    return await campaign_service.ai_agents(campaign_id)


@router.get("/{campaign_id}/metrics", response_model=CampaignMetrics)
async def get_campaign_metrics(
    campaign_id: uuid.UUID,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Latest metrics; a zeroed row is created on first access."""
    return await campaign_service.metrics(campaign_id)
