"""Response model for stored format templates."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FormatTemplateRead(BaseModel):
    """A format template as returned by GET /api/templates."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    description: str
    prompt: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
