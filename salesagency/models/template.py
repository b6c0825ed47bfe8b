"""
Message template model.
Templates belong to a campaign (optional) and can be shared with
AI agents through the ai_agent_template table.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field
from sqlalchemy import Column

from salesagency.models.enums import Channel
from salesagency.models.types import StringArray


class MessageTemplate(SQLModel, table=True):
    """
    Template for outreach messages.
    Supports variables for personalization.
    """
    __tablename__ = "message_templates"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    content: str

    # Variables available in template (e.g., ["name", "company", "position"])
    variables: List[str] = Field(default=[], sa_column=Column(StringArray, nullable=False))

    channel: Channel = Field(index=True)
    purpose: str = Field(index=True)  # introduction, follow_up, meeting_request, ...
    campaign_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="campaigns.id", index=True, ondelete="SET NULL"
    )

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
