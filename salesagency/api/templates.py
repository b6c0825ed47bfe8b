"""
Message templates API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_pagination, get_template_service
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.enums import Channel
from salesagency.models.template import MessageTemplate
from salesagency.schemas.common import DeleteResponse
from salesagency.schemas.template import TemplateCreate, TemplateFilter, TemplateUpdate
from salesagency.services.template_service import MessageTemplateService

router = APIRouter(prefix="/templates", tags=["templates"])


@router.post("/", response_model=MessageTemplate, status_code=201)
async def create_template(
    template_data: TemplateCreate,
    template_service: MessageTemplateService = Depends(get_template_service)
):
    """Create a message template."""
    return await template_service.create(template_data)


@router.get("/", response_model=List[MessageTemplate])
async def list_templates(
    channel: Optional[Channel] = None,
    purpose: Optional[str] = None,
    campaign_id: Optional[uuid.UUID] = None,
    pagination: PaginationParams = Depends(get_pagination),
    template_service: MessageTemplateService = Depends(get_template_service)
):
    """List templates by name."""
    filters = TemplateFilter(channel=channel, purpose=purpose, campaign_id=campaign_id)
    return await template_service.list(filters, pagination.limit, pagination.offset)


@router.get("/{template_id}", response_model=MessageTemplate)
async def get_template(
    template_id: uuid.UUID,
    template_service: MessageTemplateService = Depends(get_template_service)
):
    template = await template_service.get(template_id)
    if not template:
        raise_not_found("Message template", str(template_id))
    return template


@router.patch("/{template_id}", response_model=MessageTemplate)
async def update_template(
    template_id: uuid.UUID,
    template_data: TemplateUpdate,
    template_service: MessageTemplateService = Depends(get_template_service)
):
    return await template_service.update(template_id, template_data)


@router.delete("/{template_id}", response_model=DeleteResponse)
async def delete_template(
    template_id: uuid.UUID,
    template_service: MessageTemplateService = Depends(get_template_service)
):
    return DeleteResponse(deleted=await template_service.delete(template_id))
