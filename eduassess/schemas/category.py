# eduassess/schemas/category.py
from datetime import datetime

from pydantic import Field

from eduassess.models.enums import Level
from eduassess.schemas.common import CamelModel


class VideoResource(CamelModel):
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: str | None = None


class CategoryBase(CamelModel):
    name: str = Field(min_length=1)
    description: str | None = None
    engineering_field: str = Field(min_length=1)
    level: Level
    topics: list[str] = []
    recommended_duration: int | None = Field(default=None, gt=0)  # weeks
    resource_url: str | None = None
    video_resources: list[VideoResource] = []


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    engineering_field: str | None = Field(default=None, min_length=1)
    level: Level | None = None
    topics: list[str] | None = None
    recommended_duration: int | None = Field(default=None, gt=0)
    resource_url: str | None = None
    video_resources: list[VideoResource] | None = None


class CategoryPublic(CategoryBase):
    id: int
    level: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategoryInitResponse(CamelModel):
    success: bool = True
    message: str
    count: int
