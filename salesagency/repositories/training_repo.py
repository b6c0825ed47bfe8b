"""
Training program and module repositories.
"""
import uuid
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from salesagency.models.training import TrainingProgram, TrainingModule
from salesagency.repositories.base import BaseRepository


class TrainingProgramRepository(BaseRepository[TrainingProgram]):
    resource = "training program"
    order_by = "name"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(TrainingProgram, session)


class TrainingModuleRepository(BaseRepository[TrainingModule]):
    resource = "training module"
    order_by = "position"
    order_desc = False

    def __init__(self, session: AsyncSession):
        super().__init__(TrainingModule, session)

    async def list_for_program(self, program_id: uuid.UUID) -> List[TrainingModule]:
        """Modules of a program in course order."""
        query = self.ordered(select(TrainingModule).where(TrainingModule.program_id == program_id))
        return await self.fetch_all(query, "error querying training modules")
