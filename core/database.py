import logging

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from core.config import settings
from core.exceptions import PersistenceError
# Use the same Base as models to ensure one metadata registry
from models.base import Base

logger = logging.getLogger(__name__)

_is_sqlite = settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
    future=True
)

if _is_sqlite:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_raise(db: Session, action: str) -> None:
    """Commit the unit of work, or roll it back and raise PersistenceError."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database error while trying to %s", action)
        raise PersistenceError(f"Could not {action}") from exc
