"""
AI agents API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_agent_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.agent import AIAgent, AgentStats
from salesagency.models.campaign import Campaign
from salesagency.models.enums import AgentStatus
from salesagency.models.lead import Lead
from salesagency.models.template import MessageTemplate
from salesagency.schemas.agent import AIAgentCreate, AIAgentFilter, AIAgentUpdate
from salesagency.schemas.common import DeleteResponse, StatusResponse
from salesagency.services.agent_service import AIAgentService

router = APIRouter(prefix="/ai-agents", tags=["ai-agents"])


@router.post("/", response_model=AIAgent, status_code=201)
async def create_agent(
    agent_data: AIAgentCreate,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """Create an AI agent."""
    return await agent_service.create(agent_data)


@router.get("/", response_model=List[AIAgent])
async def list_agents(
    status: Optional[AgentStatus] = None,
    purpose: Optional[str] = None,
    pagination: PaginationParams = Depends(get_pagination),
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """List AI agents by name."""
    filters = AIAgentFilter(status=status, purpose=purpose)
    return await agent_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{agent_id}", response_model=AIAgent)
async def get_agent(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """Get an AI agent by ID."""
    agent = await agent_service.get(agent_id)
    if not agent:
        raise_not_found("AI agent", str(agent_id))
    return agent


@router.patch("/{agent_id}", response_model=AIAgent)
async def update_agent(
    agent_id: uuid.UUID,
    agent_data: AIAgentUpdate,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return await agent_service.update(agent_id, agent_data)


@router.delete("/{agent_id}", response_model=DeleteResponse)
async def delete_agent(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return DeleteResponse(deleted=await agent_service.delete(agent_id))


@router.post("/{agent_id}/run", response_model=StatusResponse)
async def trigger_agent_run(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """Mark the agent as running."""
    return StatusResponse(success=await agent_service.trigger_run(agent_id))


@router.post("/{agent_id}/pause", response_model=StatusResponse)
async def pause_agent(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return StatusResponse(success=await agent_service.pause(agent_id))


@router.post("/{agent_id}/resume", response_model=StatusResponse)
async def resume_agent(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return StatusResponse(success=await agent_service.resume(agent_id))


@router.post("/{agent_id}/templates/{template_id}", response_model=AIAgent)
async def assign_template(
    agent_id: uuid.UUID,
    template_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """Make a message template available to the agent."""
    return await agent_service.assign_template(agent_id, template_id)


@router.get("/{agent_id}/leads", response_model=List[Lead])
async def get_agent_leads(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return await agent_service.leads(agent_id)


@router.get("/{agent_id}/campaigns", response_model=List[Campaign])
async def get_agent_campaigns(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return await agent_service.campaigns(agent_id)


@router.get("/{agent_id}/templates", response_model=List[MessageTemplate])
async def get_agent_templates(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    return await agent_service.templates(agent_id)


@router.get("/{agent_id}/stats", response_model=AgentStats)
async def get_agent_stats(
    agent_id: uuid.UUID,
    agent_service: AIAgentService = Depends(get_agent_service)
):
    """Latest stats; a zeroed row is created on first access."""
    return await agent_service.stats(agent_id)
