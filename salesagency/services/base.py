"""
Shared resolver behaviour: lookups, filtered lists, partial updates, deletes.
"""
import logging
import uuid
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel
from sqlmodel import SQLModel

from salesagency.core.exceptions import NotFoundError
from salesagency.repositories.base import BaseRepository
from salesagency.schemas.common import PatchModel

ModelType = TypeVar("ModelType", bound=SQLModel)

logger = logging.getLogger(__name__)


class CrudService(Generic[ModelType]):
    """
    Base for entity services. The repository is injected; nothing is
    shared between instances.
    """

    resource: str = "Resource"

    def __init__(self, repo: BaseRepository[ModelType]):
        self.repo = repo

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        """None when absent; a missing row is not an error for reads."""
        return await self.repo.get(id)

    async def list(
        self,
        filters: Optional[BaseModel] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[ModelType]:
        return await self.repo.list(filters, limit, offset)

    async def get_or_raise(self, id: uuid.UUID) -> ModelType:
        obj = await self.repo.get(id)
        if obj is None:
            raise NotFoundError(self.resource, str(id))
        return obj

    async def update(self, id: uuid.UUID, data: PatchModel) -> ModelType:
        """
        Load, overwrite only the provided fields, persist.
        Raises NotFoundError rather than creating a new row.
        """
        obj = await self.get_or_raise(id)
        for field, value in data.changes().items():
            setattr(obj, field, value)
        obj.updated_at = datetime.utcnow()
        return await self.repo.update(obj)

    async def delete(self, id: uuid.UUID) -> bool:
        deleted = await self.repo.delete(id)
        if deleted:
            logger.info(f"{self.resource} {id} deleted")
        return deleted
