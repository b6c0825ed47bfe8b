"""
User service - agency staff records.
"""
import logging
import uuid

from salesagency.core.exceptions import ValidationError
from salesagency.models.enums import UserRole
from salesagency.models.user import User
from salesagency.repositories.user_repo import UserRepository
from salesagency.schemas.user import UserCreate, UserUpdate
from salesagency.services.base import CrudService

logger = logging.getLogger(__name__)


class UserService(CrudService[User]):
    """Service for user operations."""

    resource = "User"

    def __init__(self, user_repo: UserRepository):
        super().__init__(user_repo)
        self.user_repo = user_repo

    async def create(self, user_data: UserCreate) -> User:
        """Create a user; emails are unique."""
        existing = await self.user_repo.get_by_email(user_data.email)
        if existing:
            raise ValidationError("email already registered", field="email")

        user = User(
            name=user_data.name,
            email=user_data.email,
            role=user_data.role or UserRole.SALES_REP,
            active=user_data.active if user_data.active is not None else True,
        )
        user = await self.user_repo.create(user)
        logger.info(f"User {user.id} created")
        return user

    async def update(self, id: uuid.UUID, data: UserUpdate) -> User:
        """Partial update; a changed email must not belong to another user."""
        email = data.changes().get("email")
        if email is not None:
            existing = await self.user_repo.get_by_email(email)
            if existing and existing.id != id:
                raise ValidationError("email already registered", field="email")
        return await super().update(id, data)
