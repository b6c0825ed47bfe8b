"""
Base repository with generic CRUD operations.
"""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import TypeVar, Generic, Type, Optional, List, Any

from pydantic import BaseModel
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError

from salesagency.core.exceptions import QueryError, TransactionError
from salesagency.core.pagination import paginate

ModelType = TypeVar("ModelType", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository with CRUD operations.
    Inherit and specify the model class.
    """

    # Human-readable name used in error context, e.g. "error creating lead"
    resource: str = "record"

    # Default ordering for list()
    order_by: str = "created_at"
    order_desc: bool = True

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    @asynccontextmanager
    async def _guard(self, context: str):
        """Wrap driver errors with context; roll back so the session stays usable."""
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"{context}: {exc}")
            raise QueryError(context, exc) from exc

    @asynccontextmanager
    async def transaction(self, context: str):
        """
        All-or-nothing unit: commit on clean exit, roll back on any
        exception (including early exits through raise).
        """
        try:
            yield self.session
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"{context}: {exc}")
            raise TransactionError(context, exc) from exc
        except BaseException:
            await self.session.rollback()
            raise
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"error committing transaction: {exc}")
            raise TransactionError("error committing transaction", exc) from exc

    async def create(self, obj: ModelType) -> ModelType:
        """Insert a record; id and created_at are filled by the model defaults."""
        async with self._guard(f"error creating {self.resource}"):
            self.session.add(obj)
            await self.session.commit()
            await self.session.refresh(obj)
            return obj

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        """Get a record by ID, or None when no row matches."""
        async with self._guard(f"error fetching {self.resource}"):
            return await self.session.get(self.model, id)

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """Get a record by a specific field."""
        query = select(self.model).where(getattr(self.model, field) == value)
        async with self._guard(f"error fetching {self.resource}"):
            result = await self.session.exec(query)
            return result.first()

    def filter_conditions(self, filters: Optional[BaseModel]) -> list:
        """
        Translate a filter object into WHERE clauses.
        Default: equality on every filter field that is set and maps to a column.
        """
        conditions = []
        if filters is None:
            return conditions
        for field, value in filters.model_dump(exclude_none=True).items():
            if hasattr(self.model, field):
                conditions.append(getattr(self.model, field) == value)
        return conditions

    def array_overlap(self, column, values: List[str]):
        """`column && values` for array columns, portable to the JSON fallback."""
        if self.session.bind.dialect.name == "postgresql":
            return column.overlap(values)
        elements = func.json_each(column).table_valued("value")
        return select(elements.c.value).where(elements.c.value.in_(values)).exists()

    def ordered(self, query):
        order_column = getattr(self.model, self.order_by)
        return query.order_by(order_column.desc() if self.order_desc else order_column.asc())

    async def list(
        self,
        filters: Optional[BaseModel] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[ModelType]:
        """List records matching all set filter fields, with optional pagination."""
        query = select(self.model)
        for condition in self.filter_conditions(filters):
            query = query.where(condition)
        query = paginate(self.ordered(query), limit, offset)
        return await self.fetch_all(query, f"error querying {self.resource} records")

    async def fetch_all(self, query, context: str) -> List[ModelType]:
        async with self._guard(context):
            result = await self.session.exec(query)
            return list(result.all())

    async def update(self, obj: ModelType) -> ModelType:
        """
        Rewrite the full row from the given instance.
        Partial-update merging happens in the service layer.
        """
        async with self._guard(f"error updating {self.resource}"):
            obj = await self.session.merge(obj)
            await self.session.commit()
            await self.session.refresh(obj)
            return obj

    async def delete(self, id: uuid.UUID) -> bool:
        """Delete a record. False when no row matched."""
        async with self._guard(f"error deleting {self.resource}"):
            result = await self.session.execute(delete(self.model).where(self.model.id == id))
            await self.session.commit()
        return result.rowcount > 0
