"""
Training programs and modules API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_module_service, get_pagination, get_program_service
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.enums import UserRole
from salesagency.models.training import TrainingModule, TrainingProgram
from salesagency.schemas.common import DeleteResponse
from salesagency.schemas.training import (
    TrainingModuleCreate, TrainingModuleFilter, TrainingModuleUpdate,
    TrainingProgramCreate, TrainingProgramFilter, TrainingProgramUpdate,
)
from salesagency.services.training_service import TrainingModuleService, TrainingProgramService

router = APIRouter(prefix="/training", tags=["training"])


# Programs
@router.post("/programs", response_model=TrainingProgram, status_code=201)
async def create_program(
    program_data: TrainingProgramCreate,
    program_service: TrainingProgramService = Depends(get_program_service)
):
    return await program_service.create(program_data)


@router.get("/programs", response_model=List[TrainingProgram])
async def list_programs(
    target_role: Optional[UserRole] = None,
    pagination: PaginationParams = Depends(get_pagination),
    program_service: TrainingProgramService = Depends(get_program_service)
):
    filters = TrainingProgramFilter(target_role=target_role)
    return await program_service.list(filters, pagination.limit, pagination.offset)


@router.get("/programs/{program_id}", response_model=TrainingProgram)
async def get_program(
    program_id: uuid.UUID,
    program_service: TrainingProgramService = Depends(get_program_service)
):
    program = await program_service.get(program_id)
    if not program:
        raise_not_found("Training program", str(program_id))
    return program


@router.patch("/programs/{program_id}", response_model=TrainingProgram)
async def update_program(
    program_id: uuid.UUID,
    program_data: TrainingProgramUpdate,
    program_service: TrainingProgramService = Depends(get_program_service)
):
    return await program_service.update(program_id, program_data)


@router.delete("/programs/{program_id}", response_model=DeleteResponse)
async def delete_program(
    program_id: uuid.UUID,
    program_service: TrainingProgramService = Depends(get_program_service)
):
    return DeleteResponse(deleted=await program_service.delete(program_id))


@router.get("/programs/{program_id}/modules", response_model=List[TrainingModule])
async def get_program_modules(
    program_id: uuid.UUID,
    program_service: TrainingProgramService = Depends(get_program_service)
):
    """Modules of the program in course order."""
    return await program_service.modules(program_id)


# Modules
@router.post("/modules", response_model=TrainingModule, status_code=201)
async def create_module(
    module_data: TrainingModuleCreate,
    module_service: TrainingModuleService = Depends(get_module_service)
):
    return await module_service.create(module_data)


@router.get("/modules", response_model=List[TrainingModule])
async def list_modules(
    program_id: Optional[uuid.UUID] = None,
    pagination: PaginationParams = Depends(get_pagination),
    module_service: TrainingModuleService = Depends(get_module_service)
):
    filters = TrainingModuleFilter(program_id=program_id)
    return await module_service.list(filters, pagination.limit, pagination.offset)


@router.get("/modules/{module_id}", response_model=TrainingModule)
async def get_module(
    module_id: uuid.UUID,
    module_service: TrainingModuleService = Depends(get_module_service)
):
    module = await module_service.get(module_id)
    if not module:
        raise_not_found("Training module", str(module_id))
    return module


@router.patch("/modules/{module_id}", response_model=TrainingModule)
async def update_module(
    module_id: uuid.UUID,
    module_data: TrainingModuleUpdate,
    module_service: TrainingModuleService = Depends(get_module_service)
):
    return await module_service.update(module_id, module_data)


@router.delete("/modules/{module_id}", response_model=DeleteResponse)
async def delete_module(
    module_id: uuid.UUID,
    module_service: TrainingModuleService = Depends(get_module_service)
):
    return DeleteResponse(deleted=await module_service.delete(module_id))
