"""
User model - agency staff members.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from salesagency.models.enums import UserRole


class User(SQLModel, table=True):
    """Agency user. Authentication is handled outside this service."""
    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    email: str = Field(unique=True, index=True)
    role: UserRole = Field(default=UserRole.SALES_REP, index=True)
    active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
