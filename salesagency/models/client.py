"""
Client and Service models.
Clients subscribe to services through the client_service table.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field
from sqlalchemy import Column

from salesagency.models.enums import ClientStatus
from salesagency.models.types import StringArray


class Client(SQLModel, table=True):
    """
    Client entity - a company the agency sells on behalf of.
    """
    __tablename__ = "clients"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    name: str = Field(index=True)
    industry: str = Field(index=True)
    website: Optional[str] = None

    # Contact
    contact_person: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None

    start_date: datetime
    status: ClientStatus = Field(default=ClientStatus.ACTIVE, index=True)
    notes: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None


class Service(SQLModel, table=True):
    """Service offering sold to clients."""
    __tablename__ = "services"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    price: float
    features: List[str] = Field(default=[], sa_column=Column(StringArray, nullable=False))

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
