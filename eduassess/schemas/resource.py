# eduassess/schemas/resource.py
from datetime import datetime

from pydantic import Field

from eduassess.models.enums import ResourceType
from eduassess.schemas.common import CamelModel


class ResourceBase(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    type: ResourceType
    category: str = Field(min_length=1)
    difficulty: int = Field(ge=1, le=5)
    url: str = Field(min_length=1)
    tags: list[str] = []
    author: str | None = None
    thumbnail: str | None = None


class ResourceCreate(ResourceBase):
    pass


class ResourceUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    type: ResourceType | None = None
    category: str | None = Field(default=None, min_length=1)
    difficulty: int | None = Field(default=None, ge=1, le=5)
    url: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = None
    author: str | None = None
    thumbnail: str | None = None


class ResourcePublic(ResourceBase):
    id: int
    type: str
    assessment_id: int
    created_by: int | None = None
    created_at: datetime | None = None
