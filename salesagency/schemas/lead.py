"""
Lead schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from salesagency.models.enums import LeadStatus
from salesagency.schemas.common import PatchModel


class LeadCreate(BaseModel):
    """Create a new lead. Status and intent score default when omitted."""
    name: str
    email: EmailStr
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[LeadStatus] = None
    intent_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tags: Optional[List[str]] = None
    source: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@acme.com",
                "company": "Acme",
                "position": "Head of Sales",
                "tags": ["inbound", "saas"]
            }
        }


class LeadUpdate(PatchModel):
    """Update an existing lead."""
    not_nullable = ("name", "email", "status", "intent_score", "tags")

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[LeadStatus] = None
    intent_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tags: Optional[List[str]] = None
    source: Optional[str] = None
    last_contact: Optional[datetime] = None
    next_follow_up: Optional[datetime] = None
    notes: Optional[str] = None


class LeadFilter(BaseModel):
    """Lead filtering options. Every set field narrows the result."""
    status: Optional[List[LeadStatus]] = None  # any of
    min_intent_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    tags: Optional[List[str]] = None  # overlaps
    source: Optional[str] = None
    last_contact_after: Optional[datetime] = None
    last_contact_before: Optional[datetime] = None


class AssignLeadRequest(BaseModel):
    """Assign a lead to an AI agent."""
    ai_agent_id: uuid.UUID
