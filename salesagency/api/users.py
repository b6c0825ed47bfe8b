"""
Users API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends

from salesagency.api.deps import get_pagination, get_user_service
from salesagency.core.exceptions import raise_not_found
from salesagency.core.pagination import PaginationParams
from salesagency.models.enums import UserRole
from salesagency.models.user import User
from salesagency.schemas.common import DeleteResponse
from salesagency.schemas.user import UserCreate, UserFilter, UserUpdate
from salesagency.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=User, status_code=201)
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.create(user_data)


@router.get("/", response_model=List[User])
async def list_users(
    role: Optional[UserRole] = None,
    active: Optional[bool] = None,
    pagination: PaginationParams = Depends(get_pagination),
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.list(UserFilter(role=role, active=active), pagination.limit, pagination.offset)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: uuid.UUID,
    user_service: UserService = Depends(get_user_service)
):
    user = await user_service.get(user_id)
    if not user:
        raise_not_found("User", str(user_id))
    return user


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: uuid.UUID,
    user_data: UserUpdate,
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.update(user_id, user_data)


@router.delete("/{user_id}", response_model=DeleteResponse)
async def delete_user(
    user_id: uuid.UUID,
    user_service: UserService = Depends(get_user_service)
):
    return DeleteResponse(deleted=await user_service.delete(user_id))
