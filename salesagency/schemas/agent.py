"""
AI agent and agent stats schemas.
"""
import uuid
from typing import Optional
from pydantic import BaseModel, Field

from salesagency.models.enums import AgentStatus
from salesagency.schemas.common import PatchModel


class AIAgentCreate(BaseModel):
    """Create an AI agent."""
    name: str
    purpose: str
    description: Optional[str] = None
    status: Optional[AgentStatus] = None


class AIAgentUpdate(PatchModel):
    """Update an AI agent."""
    not_nullable = ("name", "purpose", "status")

    name: Optional[str] = None
    purpose: Optional[str] = None
    description: Optional[str] = None
    status: Optional[AgentStatus] = None


class AIAgentFilter(BaseModel):
    """AI agent filtering options."""
    status: Optional[AgentStatus] = None
    purpose: Optional[str] = None


class AgentAssignmentRequest(BaseModel):
    """Link an AI agent to a campaign or template."""
    ai_agent_id: uuid.UUID


class AgentStatsCreate(BaseModel):
    """Record stats for an agent and period."""
    agent_id: uuid.UUID
    leads_engaged: int = Field(default=0, ge=0)
    messages_delivered: int = Field(default=0, ge=0)
    response_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    conversion_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    avg_response_time: float = Field(default=0.0, ge=0.0)
    period: str = "all"


class AgentStatsUpdate(PatchModel):
    """Update agent stats counters."""
    not_nullable = (
        "leads_engaged", "messages_delivered", "response_rate",
        "conversion_rate", "avg_response_time", "period"
    )

    leads_engaged: Optional[int] = Field(default=None, ge=0)
    messages_delivered: Optional[int] = Field(default=None, ge=0)
    response_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    conversion_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    avg_response_time: Optional[float] = Field(default=None, ge=0.0)
    period: Optional[str] = None


class AgentStatsFilter(BaseModel):
    """Agent stats filtering options."""
    agent_id: Optional[uuid.UUID] = None
    period: Optional[str] = None
