"""
Target audiences API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_pagination, get_target_service
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.campaign import TargetAudience
from salesagency.schemas.campaign import (
    TargetAudienceCreate, TargetAudienceFilter, TargetAudienceUpdate
)
from salesagency.schemas.common import DeleteResponse
from salesagency.services.campaign_service import TargetAudienceService

router = APIRouter(prefix="/target-audiences", tags=["target-audiences"])


@router.post("/", response_model=TargetAudience, status_code=201)
async def create_target(
    target_data: TargetAudienceCreate,
    target_service: TargetAudienceService = Depends(get_target_service)
):
    return await target_service.create(target_data)


@router.get("/", response_model=List[TargetAudience])
async def list_targets(
    campaign_id: Optional[uuid.UUID] = None,
    industry: Optional[str] = None,
    pagination: PaginationParams = Depends(get_pagination),
    target_service: TargetAudienceService = Depends(get_target_service)
):
    filters = TargetAudienceFilter(campaign_id=campaign_id, industry=industry)
    return await target_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{target_id}", response_model=TargetAudience)
async def get_target(
    target_id: uuid.UUID,
    target_service: TargetAudienceService = Depends(get_target_service)
):
    target = await target_service.get(target_id)
    if not target:
        raise_not_found("Target audience", str(target_id))
    return target


@router.patch("/{target_id}", response_model=TargetAudience)
async def update_target(
    target_id: uuid.UUID,
    target_data: TargetAudienceUpdate,
    target_service: TargetAudienceService = Depends(get_target_service)
):
    return await target_service.update(target_id, target_data)


@router.delete("/{target_id}", response_model=DeleteResponse)
async def delete_target(
    target_id: uuid.UUID,
    target_service: TargetAudienceService = Depends(get_target_service)
):
    return DeleteResponse(deleted=await target_service.delete(target_id))
