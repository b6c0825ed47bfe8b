"""
Interaction schemas.
"""
import uuid
from typing import Optional
from datetime import datetime
from pydantic import BaseModel

from salesagency.models.enums import Channel, InteractionStatus, InteractionType
from salesagency.schemas.common import PatchModel


class InteractionCreate(BaseModel):
    """Log an interaction with a lead. Timestamp defaults to now."""
    lead_id: uuid.UUID
    type: InteractionType
    channel: Channel
    message: Optional[str] = None
    ai_agent_id: Optional[uuid.UUID] = None
    template_id: Optional[uuid.UUID] = None
    timestamp: Optional[datetime] = None
    response: Optional[str] = None
    status: Optional[InteractionStatus] = None
    notes: Optional[str] = None


class InteractionUpdate(PatchModel):
    """Update an interaction (e.g. record the lead's response)."""
    not_nullable = ("type", "channel", "timestamp", "status")

    type: Optional[InteractionType] = None
    channel: Optional[Channel] = None
    message: Optional[str] = None
    ai_agent_id: Optional[uuid.UUID] = None
    template_id: Optional[uuid.UUID] = None
    timestamp: Optional[datetime] = None
    response: Optional[str] = None
    status: Optional[InteractionStatus] = None
    notes: Optional[str] = None


class InteractionFilter(BaseModel):
    """Interaction filtering options."""
    lead_id: Optional[uuid.UUID] = None
    ai_agent_id: Optional[uuid.UUID] = None
    type: Optional[InteractionType] = None
    channel: Optional[Channel] = None
    status: Optional[InteractionStatus] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
