import uuid
from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from models.base import Base

MEDIA_IMAGE = "image"
MEDIA_VIDEO = "video"
MEDIA_YOUTUBE = "youtube"
MEDIA_KINDS = (MEDIA_IMAGE, MEDIA_VIDEO, MEDIA_YOUTUBE)


class MediaItem(Base):
    __tablename__ = "project_media"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    media_type = Column(String(16), nullable=False)
    # Upload URL path for files, raw URL for YouTube links
    media_path = Column(String(1024), nullable=False)
    media_description = Column(Text, nullable=False, default="")
    sort_order = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="media")

Index("idx_project_media_order", MediaItem.project_id, MediaItem.sort_order, MediaItem.created_at)
