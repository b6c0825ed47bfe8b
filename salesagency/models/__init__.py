# Models package - database tables for the CRM
from salesagency.models.enums import (
    LeadStatus, ClientStatus, AgentStatus, CampaignStatus,
    InteractionType, InteractionStatus, Channel, UserRole
)
from salesagency.models.lead import Lead
from salesagency.models.client import Client, Service
from salesagency.models.agent import AIAgent, AgentStats
from salesagency.models.campaign import Campaign, TargetAudience, CampaignMetrics
from salesagency.models.template import MessageTemplate
from salesagency.models.interaction import Interaction
from salesagency.models.user import User
from salesagency.models.training import TrainingProgram, TrainingModule
from salesagency.models.links import LeadAgentLink, ClientServiceLink, CampaignAgentLink, AgentTemplateLink
