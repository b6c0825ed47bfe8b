"""
Message template service.
"""
from salesagency.models.template import MessageTemplate
from salesagency.repositories.template_repo import MessageTemplateRepository
from salesagency.schemas.template import TemplateCreate
from salesagency.services.base import CrudService


class MessageTemplateService(CrudService[MessageTemplate]):
    """Service for message templates."""

    resource = "Message template"

    def __init__(self, template_repo: MessageTemplateRepository):
        super().__init__(template_repo)

    async def create(self, template_data: TemplateCreate) -> MessageTemplate:
        data = template_data.model_dump(exclude={"variables"})
        template = MessageTemplate(**data, variables=template_data.variables or [])
        return await self.repo.create(template)
