from datetime import datetime
from typing import Literal
from pydantic import BaseModel


class MediaSlot(BaseModel):
    """One declared entry of the submitted manifest, in form order."""
    kind: str
    caption: str = ""
    youtube_link: str | None = None


class StoredUpload(BaseModel):
    """A file already written to the upload root."""
    filename: str
    content_type: str = "application/octet-stream"
    original_name: str | None = None


class MediaItemCreate(BaseModel):
    media_type: Literal["image", "video", "youtube"]
    media_path: str
    media_description: str = ""
    sort_order: int


class CaptionUpdate(BaseModel):
    media_id: str
    caption: str = ""


class MediaItemResponse(MediaItemCreate):
    id: str
    project_id: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
