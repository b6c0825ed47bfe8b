"""
Client and service schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from salesagency.models.enums import ClientStatus
from salesagency.schemas.common import PatchModel


class ClientCreate(BaseModel):
    """Create a client, optionally subscribing it to services."""
    name: str
    industry: str
    website: Optional[str] = None
    contact_person: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    start_date: datetime
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None
    service_ids: Optional[List[uuid.UUID]] = None


class ClientUpdate(PatchModel):
    """Update an existing client."""
    not_nullable = ("name", "industry", "contact_person", "email", "start_date", "status")

    name: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    start_date: Optional[datetime] = None
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None


class ClientFilter(BaseModel):
    """Client filtering options."""
    status: Optional[ClientStatus] = None


class AssignServicesRequest(BaseModel):
    """Attach services to a client."""
    service_ids: List[uuid.UUID]


class ServiceCreate(BaseModel):
    """Create a service offering."""
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    features: Optional[List[str]] = None


class ServiceUpdate(PatchModel):
    """Update a service offering."""
    not_nullable = ("name", "price", "features")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    features: Optional[List[str]] = None


class ServiceFilter(BaseModel):
    """Service filtering options."""
    max_price: Optional[float] = Field(default=None, ge=0)
