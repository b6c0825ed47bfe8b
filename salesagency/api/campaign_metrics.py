"""
Campaign metrics API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_metrics_service, get_pagination
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.campaign import CampaignMetrics
from salesagency.schemas.campaign import (
    CampaignMetricsCreate, CampaignMetricsFilter, CampaignMetricsUpdate
)
from salesagency.schemas.common import DeleteResponse
from salesagency.services.campaign_service import CampaignMetricsService

router = APIRouter(prefix="/campaign-metrics", tags=["campaign-metrics"])


@router.post("/", response_model=CampaignMetrics, status_code=201)
async def create_metrics(
    metrics_data: CampaignMetricsCreate,
    metrics_service: CampaignMetricsService = Depends(get_metrics_service)
):
    return await metrics_service.create(metrics_data)


@router.get("/", response_model=List[CampaignMetrics])
async def list_metrics(
    campaign_id: Optional[uuid.UUID] = None,
    period: Optional[str] = None,
    pagination: PaginationParams = Depends(get_pagination),
    metrics_service: CampaignMetricsService = Depends(get_metrics_service)
):
    filters = CampaignMetricsFilter(campaign_id=campaign_id, period=period)
    return await metrics_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{metrics_id}", response_model=CampaignMetrics)
async def get_metrics(
    metrics_id: uuid.UUID,
    metrics_service: CampaignMetricsService = Depends(get_metrics_service)
):
    metrics = await metrics_service.get(metrics_id)
    if not metrics:
        raise_not_found("Campaign metrics", str(metrics_id))
    return metrics


@router.patch("/{metrics_id}", response_model=CampaignMetrics)
async def update_metrics(
    metrics_id: uuid.UUID,
    metrics_data: CampaignMetricsUpdate,
    metrics_service: CampaignMetricsService = Depends(get_metrics_service)
):
    return await metrics_service.update(metrics_id, metrics_data)


@router.delete("/{metrics_id}", response_model=DeleteResponse)
async def delete_metrics(
    metrics_id: uuid.UUID,
    metrics_service: CampaignMetricsService = Depends(get_metrics_service)
):
    return DeleteResponse(deleted=await metrics_service.delete(metrics_id))
