"""
API dependencies - sessions and service wiring shared across all routes.

Each request gets its own session from the pool; services receive
their repositories here instead of reaching for a global handle.
"""
from typing import AsyncIterator, Optional

from fastapi import Depends, Query, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from salesagency.core.pagination import PaginationParams
from salesagency.database import Database
from salesagency.repositories.agent_repo import AIAgentRepository, AgentStatsRepository
from salesagency.repositories.campaign_repo import (
    CampaignRepository,
    CampaignMetricsRepository,
    TargetAudienceRepository,
)
from salesagency.repositories.client_repo import ClientRepository, ServiceRepository
from salesagency.repositories.interaction_repo import InteractionRepository
from salesagency.repositories.lead_repo import LeadRepository
from salesagency.repositories.template_repo import MessageTemplateRepository
from salesagency.repositories.training_repo import (
    TrainingModuleRepository,
    TrainingProgramRepository,
)
from salesagency.repositories.user_repo import UserRepository
from salesagency.services.agent_service import AIAgentService, AgentStatsService
from salesagency.services.campaign_service import (
    CampaignService,
    CampaignMetricsService,
    TargetAudienceService,
)
from salesagency.services.client_service import ClientService, ServiceCatalogService
from salesagency.services.interaction_service import InteractionService
from salesagency.services.lead_service import LeadService
from salesagency.services.template_service import MessageTemplateService
from salesagency.services.training_service import TrainingModuleService, TrainingProgramService
from salesagency.services.user_service import UserService


def get_database(request: Request) -> Database:
    return request.app.state.db


async def get_session(db: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    async with db.session() as session:
        yield session


def get_pagination(
    limit: Optional[int] = Query(None, ge=0),
    offset: Optional[int] = Query(None, ge=0)
) -> PaginationParams:
    return PaginationParams(limit=limit, offset=offset)


def get_lead_service(session: AsyncSession = Depends(get_session)) -> LeadService:
    return LeadService(
        LeadRepository(session),
        InteractionRepository(session),
        AIAgentRepository(session)
    )


def get_client_service(session: AsyncSession = Depends(get_session)) -> ClientService:
    return ClientService(
        ClientRepository(session),
        ServiceRepository(session),
        CampaignRepository(session)
    )


def get_service_catalog(session: AsyncSession = Depends(get_session)) -> ServiceCatalogService:
    return ServiceCatalogService(ServiceRepository(session))


def get_agent_service(session: AsyncSession = Depends(get_session)) -> AIAgentService:
    return AIAgentService(
        AIAgentRepository(session),
        AgentStatsRepository(session),
        LeadRepository(session),
        CampaignRepository(session),
        MessageTemplateRepository(session)
    )


def get_agent_stats_service(session: AsyncSession = Depends(get_session)) -> AgentStatsService:
    return AgentStatsService(AgentStatsRepository(session))


def get_campaign_service(session: AsyncSession = Depends(get_session)) -> CampaignService:
    return CampaignService(
        CampaignRepository(session),
        ClientRepository(session),
        TargetAudienceRepository(session),
        MessageTemplateRepository(session),
        AIAgentRepository(session),
        CampaignMetricsRepository(session)
    )


def get_target_service(session: AsyncSession = Depends(get_session)) -> TargetAudienceService:
    return TargetAudienceService(TargetAudienceRepository(session))


def get_metrics_service(session: AsyncSession = Depends(get_session)) -> CampaignMetricsService:
    return CampaignMetricsService(CampaignMetricsRepository(session))


def get_interaction_service(session: AsyncSession = Depends(get_session)) -> InteractionService:
    return InteractionService(InteractionRepository(session))


def get_template_service(session: AsyncSession = Depends(get_session)) -> MessageTemplateService:
    return MessageTemplateService(MessageTemplateRepository(session))


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session))


def get_program_service(session: AsyncSession = Depends(get_session)) -> TrainingProgramService:
    return TrainingProgramService(
        TrainingProgramRepository(session),
        TrainingModuleRepository(session)
    )


def get_module_service(session: AsyncSession = Depends(get_session)) -> TrainingModuleService:
    return TrainingModuleService(TrainingModuleRepository(session))
