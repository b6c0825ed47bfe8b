"""
Closed value sets for status and kind columns.
Stored by name; any member may transition to any other.
"""
from enum import Enum


class LeadStatus(str, Enum):
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    ENGAGED = "ENGAGED"
    QUALIFIED = "QUALIFIED"
    CONVERTED = "CONVERTED"
    LOST = "LOST"


class ClientStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ONBOARDING = "ONBOARDING"
    CHURNED = "CHURNED"


class AgentStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    RUNNING = "RUNNING"
    INACTIVE = "INACTIVE"
    ERROR = "ERROR"


class CampaignStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class InteractionType(str, Enum):
    OUTREACH = "OUTREACH"
    FOLLOW_UP = "FOLLOW_UP"
    RESPONSE = "RESPONSE"
    MEETING = "MEETING"
    CALL = "CALL"
    NOTE = "NOTE"


class InteractionStatus(str, Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    DELIVERED = "DELIVERED"
    OPENED = "OPENED"
    RESPONDED = "RESPONDED"
    FAILED = "FAILED"


class Channel(str, Enum):
    EMAIL = "EMAIL"
    LINKEDIN = "LINKEDIN"
    PHONE = "PHONE"
    SMS = "SMS"
    WHATSAPP = "WHATSAPP"
    WEBSITE = "WEBSITE"


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    SALES_REP = "SALES_REP"
    VIEWER = "VIEWER"
