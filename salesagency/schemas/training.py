"""
Training program and module schemas.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from salesagency.models.enums import UserRole
from salesagency.schemas.common import PatchModel


class TrainingProgramCreate(BaseModel):
    name: str
    description: Optional[str] = None
    target_role: Optional[UserRole] = None


class TrainingProgramUpdate(PatchModel):
    not_nullable = ("name",)

    name: Optional[str] = None
    description: Optional[str] = None
    target_role: Optional[UserRole] = None


class TrainingProgramFilter(BaseModel):
    target_role: Optional[UserRole] = None


class TrainingModuleCreate(BaseModel):
    program_id: uuid.UUID
    title: str
    content: Optional[str] = None
    position: int = Field(default=0, ge=0)
    duration_minutes: Optional[int] = Field(default=None, ge=0)


class TrainingModuleUpdate(PatchModel):
    not_nullable = ("program_id", "title", "position")

    program_id: Optional[uuid.UUID] = None
    title: Optional[str] = None
    content: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    duration_minutes: Optional[int] = Field(default=None, ge=0)


class TrainingModuleFilter(BaseModel):
    program_id: Optional[uuid.UUID] = None
