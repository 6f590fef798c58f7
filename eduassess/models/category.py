# eduassess/models/category.py
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.sql import func

from eduassess.db.base import Base


class Category(Base):
    """Learning-path bucket matched against assessment results."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    engineering_field = Column(String(100), nullable=False)
    level = Column(String(20), nullable=False, index=True)
    topics = Column(JSON, nullable=False, default=list)
    recommended_duration = Column(Integer, nullable=True)  # weeks
    resource_url = Column(String(500), nullable=True)
    # [{"title": ..., "url": ..., "description": ...}]
    video_resources = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )
