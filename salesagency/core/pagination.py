"""
Pagination utilities for the Sales Agency API.
Limit and offset are both optional and applied independently.
"""
from typing import Optional
from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    """Pagination query parameters."""
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)

    class Config:
        json_schema_extra = {
            "example": {"limit": 20, "offset": 40}
        }


def paginate(query, limit: Optional[int] = None, offset: Optional[int] = None):
    """
    Apply limit/offset to a select.

    Args:
        query: SQLModel select query
        limit: Max rows to return, or None for no cap
        offset: Rows to skip, or None to start at the first row

    Returns:
        The query with pagination applied
    """
    if limit is not None:
        query = query.limit(limit)
    if offset is not None:
        query = query.offset(offset)
    return query
