from datetime import datetime, timezone
from sqlalchemy.orm import Session
from core.database import commit_or_raise
from models.session import AdminSession
from schemas.session_schema import AdminSessionCreate


def get_session(db: Session, session_id: str):
    return db.query(AdminSession).filter(AdminSession.id == session_id).first()


def get_session_by_token(db: Session, token: str):
    return db.query(AdminSession).filter(AdminSession.token == token).first()


def create_session(db: Session, payload: AdminSessionCreate):
    s = AdminSession(**payload.model_dump())
    db.add(s)
    commit_or_raise(db, "create admin session")
    db.refresh(s)
    return s


def grant_edit(db: Session, session_id: str):
    s = get_session(db, session_id)
    if not s:
        return None
    s.can_edit = True
    commit_or_raise(db, "unlock edit access")
    db.refresh(s)
    return s


def delete_session(db: Session, session_id: str) -> bool:
    s = get_session(db, session_id)
    if not s:
        return False
    db.delete(s)
    commit_or_raise(db, "delete admin session")
    return True


def purge_expired_sessions(db: Session) -> int:
    count = (
        db.query(AdminSession)
        .filter(AdminSession.expires_at < datetime.now(timezone.utc))
        .delete(synchronize_session=False)
    )
    commit_or_raise(db, "purge expired sessions")
    return count
