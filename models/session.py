import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Index
from models.base import Base, TimestampMixin

class AdminSession(Base, TimestampMixin):
    __tablename__ = "admin_session"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    expires_at = Column(DateTime(timezone=True), nullable=False)
    token = Column(String(512), unique=True, nullable=False, index=True)
    can_edit = Column(Boolean, default=False, nullable=False)
    ip_address = Column(String(128), nullable=True)
    user_agent = Column(String(512), nullable=True)

Index("idx_admin_session_expires_at", AdminSession.expires_at)
