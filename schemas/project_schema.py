from datetime import datetime
from pydantic import BaseModel
from schemas.media_schema import MediaItemResponse


class ProjectBase(BaseModel):
    name: str
    short_description: str
    project_type: str


class ProjectCreate(ProjectBase):
    """Core fields of a new project. Media arrive separately as a manifest."""
    pass


class ProjectUpdate(ProjectBase):
    pass


class ProjectResponse(ProjectBase):
    id: str
    cover_image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProjectDetailResponse(ProjectResponse):
    media: list[MediaItemResponse] = []
