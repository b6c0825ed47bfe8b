"""
Service catalog API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from salesagency.api.deps import get_pagination, get_service_catalog
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.client import Service
from salesagency.schemas.client import ServiceCreate, ServiceFilter, ServiceUpdate
from salesagency.schemas.common import DeleteResponse
from salesagency.services.client_service import ServiceCatalogService

router = APIRouter(prefix="/services", tags=["services"])


@router.post("/", response_model=Service, status_code=201)
async def create_service(
    service_data: ServiceCreate,
    catalog: ServiceCatalogService = Depends(get_service_catalog)
):
    return await catalog.create(service_data)


@router.get("/", response_model=List[Service])
async def list_services(
    max_price: Optional[float] = Query(None, ge=0),
    pagination: PaginationParams = Depends(get_pagination),
    catalog: ServiceCatalogService = Depends(get_service_catalog)
):
    return await catalog.list(ServiceFilter(max_price=max_price), pagination.limit, pagination.offset)


@router.get("/{service_id}", response_model=Service)
async def get_service(
    service_id: uuid.UUID,
    catalog: ServiceCatalogService = Depends(get_service_catalog)
):
    service = await catalog.get(service_id)
    if not service:
        raise_not_found("Service", str(service_id))
    return service


@router.patch("/{service_id}", response_model=Service)
async def update_service(
    service_id: uuid.UUID,
    service_data: ServiceUpdate,
    catalog: ServiceCatalogService = Depends(get_service_catalog)
):
    return await catalog.update(service_id, service_data)


@router.delete("/{service_id}", response_model=DeleteResponse)
async def delete_service(
    service_id: uuid.UUID,
    catalog: ServiceCatalogService = Depends(get_service_catalog)
):
    return DeleteResponse(deleted=await catalog.delete(service_id))
