# eduassess/models/resource.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from eduassess.db.base import Base


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)  # video / article / book / exercise
    category = Column(String(100), nullable=False)
    difficulty = Column(Integer, nullable=False)  # 1-5
    url = Column(String(500), nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    author = Column(String(255), nullable=True)
    thumbnail = Column(String(500), nullable=True)

    assessment_id = Column(
        Integer, ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    assessment = relationship("Assessment", back_populates="resources")
