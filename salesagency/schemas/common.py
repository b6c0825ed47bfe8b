"""
Common schemas used across multiple entities.
"""
from typing import ClassVar, Tuple
from pydantic import BaseModel, model_validator


class PatchModel(BaseModel):
    """
    Partial-update input.

    A field the caller did not send is left untouched; a field sent as
    null clears the stored value. Columns listed in `not_nullable` may
    be omitted but not cleared.
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_on_required(self):
        for field in self.not_nullable:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields explicitly provided."""
        return self.model_dump(exclude_unset=True)


class DeleteResponse(BaseModel):
    """Delete outcome; false when nothing matched."""
    deleted: bool


class StatusResponse(BaseModel):
    """Outcome of a status-only mutation."""
    success: bool


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
