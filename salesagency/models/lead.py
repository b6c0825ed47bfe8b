"""
Lead model - core entity of the sales pipeline.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field
from sqlalchemy import Column

from salesagency.models.enums import LeadStatus
from salesagency.models.types import StringArray


class Lead(SQLModel, table=True):
    """
    Lead entity - a potential customer/contact.
    Linked to AI agents through the lead_ai_agent table.
    """
    __tablename__ = "leads"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Basic info
    name: str = Field(index=True)
    email: str = Field(index=True)
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None

    # Qualification
    status: LeadStatus = Field(default=LeadStatus.NEW, index=True)
    intent_score: float = Field(default=0.5, index=True)  # 0.0 - 1.0
    tags: List[str] = Field(default=[], sa_column=Column(StringArray, nullable=False))
    source: Optional[str] = Field(default=None, index=True)  # website, referral, linkedin, ...

    # Follow-up tracking
    last_contact: Optional[datetime] = None
    next_follow_up: Optional[datetime] = None

    notes: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: Optional[datetime] = None
