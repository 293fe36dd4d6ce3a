import logging
import uuid
from sqlalchemy.orm import Session
from sqlalchemy import desc
from core.database import commit_or_raise
from core.storage import remove_media_files
from crud.media_crud import apply_captions, get_project_media, stage_media
from models.media import MEDIA_YOUTUBE
from models.project import Project
from schemas.media_schema import CaptionUpdate, MediaItemCreate
from schemas.project_schema import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


def get_project(db: Session, project_id: str):
    return db.query(Project).filter(Project.id == project_id).first()


def list_projects(db: Session, skip: int = 0, limit: int = 100):
    return db.query(Project).order_by(desc(Project.created_at), desc(Project.id)).offset(skip).limit(limit).all()


def create_project(db: Session, payload: ProjectCreate, media: list[MediaItemCreate] | None = None):
    """Insert the project and its reconciled media in a single transaction."""
    # Id set up front so no SQL runs outside commit_or_raise
    proj = Project(id=str(uuid.uuid4()), **payload.model_dump())
    db.add(proj)
    stage_media(db, proj.id, media or [])
    commit_or_raise(db, "save project")
    db.refresh(proj)
    logger.info("Created project %s (%s) with %d media item(s)", proj.id, proj.name, len(media or []))
    return proj


def update_project(
    db: Session,
    project_id: str,
    payload: ProjectUpdate,
    captions: list[CaptionUpdate] | None = None,
):
    proj = get_project(db, project_id)
    if not proj:
        return None
    proj.name = payload.name
    proj.short_description = payload.short_description
    proj.project_type = payload.project_type
    if captions:
        apply_captions(db, project_id, captions)
    commit_or_raise(db, "update project")
    db.refresh(proj)
    return proj


def set_cover_image(db: Session, project_id: str, media_id: str):
    """Copy a media path into the project's cover. Returns None, leaving the
    project untouched, when the media is not one of this project's items."""
    proj = get_project(db, project_id)
    if not proj:
        return None
    media = get_project_media(db, project_id, media_id)
    if not media:
        return None
    proj.cover_image = media.media_path
    commit_or_raise(db, "set cover image")
    db.refresh(proj)
    logger.info("Project %s cover set to media %s", project_id, media_id)
    return proj


def delete_project(db: Session, project_id: str) -> bool:
    proj = get_project(db, project_id)
    if not proj:
        return False
    file_paths = [m.media_path for m in proj.media if m.media_type != MEDIA_YOUTUBE]
    db.delete(proj)
    commit_or_raise(db, "delete project")
    # Files go only after the rows are gone, so a failed delete leaves media intact
    removed = remove_media_files(file_paths)
    logger.info("Deleted project %s and %d media file(s)", project_id, removed)
    return True
