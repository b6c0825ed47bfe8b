"""
Interaction model - a single touchpoint with a lead.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from salesagency.models.enums import Channel, InteractionStatus, InteractionType


class Interaction(SQLModel, table=True):
    """
    Message, call or meeting exchanged with a lead, optionally
    sent by an AI agent from a template.
    """
    __tablename__ = "interactions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    lead_id: uuid.UUID = Field(foreign_key="leads.id", index=True, ondelete="CASCADE")

    type: InteractionType = Field(index=True)
    channel: Channel = Field(index=True)
    message: Optional[str] = None

    ai_agent_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="ai_agents.id", index=True, ondelete="SET NULL"
    )
    template_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="message_templates.id", ondelete="SET NULL"
    )

    timestamp: datetime = Field(default_factory=datetime.utcnow, index=True)
    response: Optional[str] = None
    status: InteractionStatus = Field(default=InteractionStatus.PENDING, index=True)
    notes: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
