"""
Training models - onboarding programs and their ordered modules.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from salesagency.models.enums import UserRole


class TrainingProgram(SQLModel, table=True):
    """Training program, optionally aimed at one user role."""
    __tablename__ = "training_programs"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    target_role: Optional[UserRole] = Field(default=None, index=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None


class TrainingModule(SQLModel, table=True):
    """A module inside a program; `position` orders modules."""
    __tablename__ = "training_modules"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    program_id: uuid.UUID = Field(foreign_key="training_programs.id", index=True, ondelete="CASCADE")
    title: str
    content: Optional[str] = None
    position: int = Field(default=0)
    duration_minutes: Optional[int] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
