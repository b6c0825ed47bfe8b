"""
User schemas.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr

from salesagency.models.enums import UserRole
from salesagency.schemas.common import PatchModel


class UserCreate(BaseModel):
    """Create a user."""
    name: str
    email: EmailStr
    role: Optional[UserRole] = None
    active: Optional[bool] = None


class UserUpdate(PatchModel):
    """Update a user."""
    not_nullable = ("name", "email", "role", "active")

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    active: Optional[bool] = None


class UserFilter(BaseModel):
    """User filtering options."""
    role: Optional[UserRole] = None
    active: Optional[bool] = None
