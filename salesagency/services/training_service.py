"""
Training service - programs and their modules.
"""
import uuid
from typing import List

from salesagency.models.training import TrainingModule, TrainingProgram
from salesagency.repositories.training_repo import (
    TrainingModuleRepository,
    TrainingProgramRepository,
)
from salesagency.schemas.training import TrainingModuleCreate, TrainingProgramCreate
from salesagency.services.base import CrudService


class TrainingProgramService(CrudService[TrainingProgram]):
    resource = "Training program"

    def __init__(self, program_repo: TrainingProgramRepository, module_repo: TrainingModuleRepository):
        super().__init__(program_repo)
        self.module_repo = module_repo

    async def create(self, program_data: TrainingProgramCreate) -> TrainingProgram:
        return await self.repo.create(TrainingProgram(**program_data.model_dump()))

    async def modules(self, program_id: uuid.UUID) -> List[TrainingModule]:
        """TrainingProgram.modules field, in course order."""
        return await self.module_repo.list_for_program(program_id)


class TrainingModuleService(CrudService[TrainingModule]):
    resource = "Training module"

    def __init__(self, module_repo: TrainingModuleRepository):
        super().__init__(module_repo)

    async def create(self, module_data: TrainingModuleCreate) -> TrainingModule:
        return await self.repo.create(TrainingModule(**module_data.model_dump()))
