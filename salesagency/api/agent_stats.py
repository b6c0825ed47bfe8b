"""
Agent stats API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_agent_stats_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.agent import AgentStats
from salesagency.schemas.agent import AgentStatsCreate, AgentStatsFilter, AgentStatsUpdate
from salesagency.schemas.common import DeleteResponse
from salesagency.services.agent_service import AgentStatsService

router = APIRouter(prefix="/agent-stats", tags=["agent-stats"])


@router.post("/", response_model=AgentStats, status_code=201)
async def create_agent_stats(
    stats_data: AgentStatsCreate,
    stats_service: AgentStatsService = Depends(get_agent_stats_service)
):
    return await stats_service.create(stats_data)


@router.get("/", response_model=List[AgentStats])
async def list_agent_stats(
    agent_id: Optional[uuid.UUID] = None,
    period: Optional[str] = None,
    pagination: PaginationParams = Depends(get_pagination),
    stats_service: AgentStatsService = Depends(get_agent_stats_service)
):
    filters = AgentStatsFilter(agent_id=agent_id, period=period)
    return await stats_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{stats_id}", response_model=AgentStats)
async def get_agent_stats_row(
    stats_id: uuid.UUID,
    stats_service: AgentStatsService = Depends(get_agent_stats_service)
):
    stats = await stats_service.get(stats_id)
    if not stats:
        raise_not_found("Agent stats", str(stats_id))
    return stats


@router.patch("/{stats_id}", response_model=AgentStats)
async def update_agent_stats(
    stats_id: uuid.UUID,
    stats_data: AgentStatsUpdate,
    stats_service: AgentStatsService = Depends(get_agent_stats_service)
):
    return await stats_service.update(stats_id, stats_data)


@router.delete("/{stats_id}", response_model=DeleteResponse)
async def delete_agent_stats(
    stats_id: uuid.UUID,
    stats_service: AgentStatsService = Depends(get_agent_stats_service)
):
    return DeleteResponse(deleted=await stats_service.delete(stats_id))
