"""
Leads API routes.
"""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from salesagency.api.deps import get_lead_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.enums import LeadStatus
from salesagency.models.interaction import Interaction
from salesagency.models.lead import Lead
from salesagency.schemas.common import DeleteResponse
from salesagency.schemas.lead import AssignLeadRequest, LeadCreate, LeadFilter, LeadUpdate
from salesagency.services.lead_service import LeadService

router = APIRouter(prefix="/leads", tags=["leads"])


@router.post("/", response_model=Lead, status_code=201)
async def create_lead(
    lead_data: LeadCreate,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Create a new lead."""
    return await lead_service.create(lead_data)


@router.get("/", response_model=List[Lead])
async def list_leads(
    status: Optional[List[LeadStatus]] = Query(None),
    min_intent_score: Optional[float] = Query(None, ge=0, le=1),
    tags: Optional[List[str]] = Query(None),
    source: Optional[str] = None,
    last_contact_after: Optional[datetime] = None,
    last_contact_before: Optional[datetime] = None,
    pagination: PaginationParams = Depends(get_pagination),
    lead_service: LeadService = Depends(get_lead_service)
):
    """List leads with filtering and pagination, newest first."""
    filters = LeadFilter(
        status=status,
        min_intent_score=min_intent_score,
        tags=tags,
        source=source,
        last_contact_after=last_contact_after,
        last_contact_before=last_contact_before
    )
    return await lead_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{lead_id}", response_model=Lead)
async def get_lead(
    lead_id: uuid.UUID,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Get a lead by ID."""
    lead = await lead_service.get(lead_id)
    if not lead:
        raise_not_found("Lead", str(lead_id))
    return lead


@router.patch("/{lead_id}", response_model=Lead)
async def update_lead(
    lead_id: uuid.UUID,
    lead_data: LeadUpdate,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Update only the provided fields of a lead."""
    return await lead_service.update(lead_id, lead_data)


@router.delete("/{lead_id}", response_model=DeleteResponse)
async def delete_lead(
    lead_id: uuid.UUID,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Delete a lead."""
    return DeleteResponse(deleted=await lead_service.delete(lead_id))


@router.post("/{lead_id}/assign", response_model=Lead)
async def assign_lead_to_agent(
    lead_id: uuid.UUID,
    assignment: AssignLeadRequest,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Assign a lead to an AI agent."""
    return await lead_service.assign_to_agent(lead_id, assignment.ai_agent_id)


@router.get("/{lead_id}/interactions", response_model=List[Interaction])
async def get_lead_interactions(
    lead_id: uuid.UUID,
    lead_service: LeadService = Depends(get_lead_service)
):
    """Interactions with a lead, newest first."""
    return await lead_service.interactions(lead_id)
