"""
Message template schemas.
"""
import uuid
from typing import Optional, List
from pydantic import BaseModel

from salesagency.models.enums import Channel
from salesagency.schemas.common import PatchModel


class TemplateCreate(BaseModel):
    """Create a message template."""
    name: str
    content: str
    variables: Optional[List[str]] = None
    channel: Channel
    purpose: str
    campaign_id: Optional[uuid.UUID] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Initial Outreach",
                "channel": "EMAIL",
                "purpose": "introduction",
                "content": "Hi {{name}}, I noticed your work at {{company}}...",
                "variables": ["name", "company"]
            }
        }


class TemplateUpdate(PatchModel):
    """Update a message template."""
    not_nullable = ("name", "content", "variables", "channel", "purpose")

    name: Optional[str] = None
    content: Optional[str] = None
    variables: Optional[List[str]] = None
    channel: Optional[Channel] = None
    purpose: Optional[str] = None
    campaign_id: Optional[uuid.UUID] = None


class TemplateFilter(BaseModel):
    """Template filtering options."""
    channel: Optional[Channel] = None
    purpose: Optional[str] = None
    campaign_id: Optional[uuid.UUID] = None
