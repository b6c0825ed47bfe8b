"""
Association tables for many-to-many relationships.
Rows are removed together with either side.
"""
import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field


class LeadAgentLink(SQLModel, table=True):
    """Lead assigned to an AI agent."""
    __tablename__ = "lead_ai_agent"

    lead_id: uuid.UUID = Field(foreign_key="leads.id", primary_key=True, ondelete="CASCADE")
    ai_agent_id: uuid.UUID = Field(foreign_key="ai_agents.id", primary_key=True, ondelete="CASCADE")
    assigned_at: datetime = Field(default_factory=datetime.utcnow)


class ClientServiceLink(SQLModel, table=True):
    """Service subscribed by a client."""
    __tablename__ = "client_service"

    client_id: uuid.UUID = Field(foreign_key="clients.id", primary_key=True, ondelete="CASCADE")
    service_id: uuid.UUID = Field(foreign_key="services.id", primary_key=True, ondelete="CASCADE")


class CampaignAgentLink(SQLModel, table=True):
    """AI agent working a campaign."""
    __tablename__ = "campaign_ai_agent"

    campaign_id: uuid.UUID = Field(foreign_key="campaigns.id", primary_key=True, ondelete="CASCADE")
    ai_agent_id: uuid.UUID = Field(foreign_key="ai_agents.id", primary_key=True, ondelete="CASCADE")


class AgentTemplateLink(SQLModel, table=True):
    """Message template available to an AI agent."""
    __tablename__ = "ai_agent_template"

    ai_agent_id: uuid.UUID = Field(foreign_key="ai_agents.id", primary_key=True, ondelete="CASCADE")
    template_id: uuid.UUID = Field(foreign_key="message_templates.id", primary_key=True, ondelete="CASCADE")
