import uuid
from sqlalchemy import Column, String, Text, Index
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin

class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=False)
    project_type = Column(String(128), nullable=False)
    # Copy of a media path, not a foreign key; may go stale if that media disappears
    cover_image = Column(String(1024), nullable=True)

    media = relationship(
        "MediaItem",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[MediaItem.sort_order, MediaItem.created_at, MediaItem.id]",
    )

Index("idx_projects_created_at", Project.created_at.desc())
