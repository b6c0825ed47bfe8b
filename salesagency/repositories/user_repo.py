"""
User repository.
"""
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from salesagency.models.user import User
from salesagency.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    resource = "user"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return await self.get_by_field("email", email)
