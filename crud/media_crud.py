from sqlalchemy.orm import Session
from sqlalchemy import func
from core.database import commit_or_raise
from models.media import MediaItem
from schemas.media_schema import CaptionUpdate, MediaItemCreate


def list_media(db: Session, project_id: str):
    return (
        db.query(MediaItem)
        .filter(MediaItem.project_id == project_id)
        .order_by(MediaItem.sort_order, MediaItem.created_at, MediaItem.id)
        .all()
    )


def get_project_media(db: Session, project_id: str, media_id: str):
    """Media item by id, only if it belongs to the given project."""
    return (
        db.query(MediaItem)
        .filter(MediaItem.id == media_id, MediaItem.project_id == project_id)
        .first()
    )


def next_sort_order(db: Session, project_id: str) -> int:
    current = db.query(func.max(MediaItem.sort_order)).filter(MediaItem.project_id == project_id).scalar()
    return (current or 0) + 1


def stage_media(db: Session, project_id: str, items: list[MediaItemCreate]) -> list[MediaItem]:
    """Add media rows to the session without committing."""
    rows = [MediaItem(project_id=project_id, **item.model_dump()) for item in items]
    db.add_all(rows)
    return rows


def add_media(db: Session, project_id: str, items: list[MediaItemCreate]) -> list[MediaItem]:
    rows = stage_media(db, project_id, items)
    commit_or_raise(db, "save project media")
    return rows


def apply_captions(db: Session, project_id: str, updates: list[CaptionUpdate]) -> int:
    """Overwrite captions of media owned by the project; ids that are unknown or
    belong elsewhere are skipped. Does not commit. Returns the number updated."""
    updated = 0
    for upd in updates:
        media = get_project_media(db, project_id, upd.media_id)
        if media is None:
            continue
        media.media_description = upd.caption
        updated += 1
    return updated


def update_captions(db: Session, project_id: str, updates: list[CaptionUpdate]) -> int:
    updated = apply_captions(db, project_id, updates)
    commit_or_raise(db, "update media captions")
    return updated
