"""
Campaign, target audience and campaign metrics schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from salesagency.models.enums import CampaignStatus
from salesagency.schemas.common import PatchModel


class CampaignCreate(BaseModel):
    """Create a new campaign."""
    name: str
    description: Optional[str] = None
    client_id: Optional[uuid.UUID] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    status: Optional[CampaignStatus] = None
    budget: Optional[float] = Field(default=None, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Q1 SaaS outbound",
                "start_date": "2024-01-08T00:00:00",
                "budget": 5000
            }
        }


class CampaignUpdate(PatchModel):
    """Update an existing campaign."""
    not_nullable = ("name", "start_date", "status")

    name: Optional[str] = None
    description: Optional[str] = None
    client_id: Optional[uuid.UUID] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[CampaignStatus] = None
    budget: Optional[float] = Field(default=None, ge=0)


class CampaignFilter(BaseModel):
    """Campaign filtering options."""
    status: Optional[List[CampaignStatus]] = None  # any of
    client_id: Optional[uuid.UUID] = None
    start_date_after: Optional[datetime] = None
    start_date_before: Optional[datetime] = None


class TargetAudienceCreate(BaseModel):
    """Create a target audience for a campaign."""
    name: str
    industry: str
    company_size: Optional[str] = None
    location: Optional[str] = None
    decision_maker_role: Optional[str] = None
    pain_points: Optional[List[str]] = None
    campaign_id: uuid.UUID


class TargetAudienceUpdate(PatchModel):
    """Update a target audience."""
    not_nullable = ("name", "industry", "pain_points", "campaign_id")

    name: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    location: Optional[str] = None
    decision_maker_role: Optional[str] = None
    pain_points: Optional[List[str]] = None
    campaign_id: Optional[uuid.UUID] = None


class TargetAudienceFilter(BaseModel):
    """Target audience filtering options."""
    campaign_id: Optional[uuid.UUID] = None
    industry: Optional[str] = None


class CampaignMetricsCreate(BaseModel):
    """Record metrics for a campaign and period."""
    campaign_id: uuid.UUID
    leads_generated: int = Field(default=0, ge=0)
    messages_sent: int = Field(default=0, ge=0)
    responses_received: int = Field(default=0, ge=0)
    conversions: int = Field(default=0, ge=0)
    response_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    conversion_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    cost_per_lead: Optional[float] = Field(default=None, ge=0)
    period: str = "all"


class CampaignMetricsUpdate(PatchModel):
    """Update campaign metrics."""
    not_nullable = (
        "leads_generated", "messages_sent", "responses_received",
        "conversions", "response_rate", "conversion_rate", "period"
    )

    leads_generated: Optional[int] = Field(default=None, ge=0)
    messages_sent: Optional[int] = Field(default=None, ge=0)
    responses_received: Optional[int] = Field(default=None, ge=0)
    conversions: Optional[int] = Field(default=None, ge=0)
    response_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    conversion_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    cost_per_lead: Optional[float] = Field(default=None, ge=0)
    period: Optional[str] = None


class CampaignMetricsFilter(BaseModel):
    """Campaign metrics filtering options."""
    campaign_id: Optional[uuid.UUID] = None
    period: Optional[str] = None
