"""
Campaign models - campaigns, their target audiences and metrics.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field
from sqlalchemy import Column

from salesagency.models.enums import CampaignStatus
from salesagency.models.types import StringArray


class Campaign(SQLModel, table=True):
    """
    Campaign entity - an outreach campaign, optionally run for a client.
    """
    __tablename__ = "campaigns"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    client_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="clients.id", index=True, ondelete="SET NULL"
    )

    # Scheduling
    start_date: datetime
    end_date: Optional[datetime] = None

    status: CampaignStatus = Field(default=CampaignStatus.DRAFT, index=True)
    budget: Optional[float] = None

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: Optional[datetime] = None


class TargetAudience(SQLModel, table=True):
    """Audience segment targeted by a campaign."""
    __tablename__ = "target_audiences"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    industry: str = Field(index=True)
    company_size: Optional[str] = None
    location: Optional[str] = None
    decision_maker_role: Optional[str] = None
    pain_points: List[str] = Field(default=[], sa_column=Column(StringArray, nullable=False))
    campaign_id: uuid.UUID = Field(foreign_key="campaigns.id", index=True, ondelete="CASCADE")

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None


class CampaignMetrics(SQLModel, table=True):
    """Aggregated campaign performance (one row per period)."""
    __tablename__ = "campaign_metrics"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    campaign_id: uuid.UUID = Field(foreign_key="campaigns.id", index=True, ondelete="CASCADE")

    leads_generated: int = Field(default=0)
    messages_sent: int = Field(default=0)
    responses_received: int = Field(default=0)
    conversions: int = Field(default=0)
    response_rate: float = Field(default=0.0)
    conversion_rate: float = Field(default=0.0)
    cost_per_lead: Optional[float] = None

    period: str = Field(default="all")

    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: Optional[datetime] = None
