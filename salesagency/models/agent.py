"""
AI agent models.
An agent automates outreach for leads and campaigns; AgentStats
holds its aggregated counters (one row per period).
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from salesagency.models.enums import AgentStatus


class AIAgent(SQLModel, table=True):
    """
    AI agent record. Status is a label only; runs are not executed here.
    """
    __tablename__ = "ai_agents"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    purpose: str = Field(index=True)  # outreach, follow_up, qualification, ...
    description: Optional[str] = None
    status: AgentStatus = Field(default=AgentStatus.ACTIVE, index=True)
    last_run: Optional[datetime] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None


class AgentStats(SQLModel, table=True):
    """Performance counters for an AI agent."""
    __tablename__ = "agent_stats"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    agent_id: uuid.UUID = Field(foreign_key="ai_agents.id", index=True, ondelete="CASCADE")

    leads_engaged: int = Field(default=0)
    messages_delivered: int = Field(default=0)
    response_rate: float = Field(default=0.0)
    conversion_rate: float = Field(default=0.0)
    avg_response_time: float = Field(default=0.0)  # minutes

    period: str = Field(default="all")  # all, 2024-01, 2024-W05, ...

    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: Optional[datetime] = None
