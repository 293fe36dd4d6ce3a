from datetime import datetime
from pydantic import BaseModel


class AdminSessionCreate(BaseModel):
    token: str
    expires_at: datetime
    can_edit: bool = False
    ip_address: str | None = None
    user_agent: str | None = None


class AdminContext(BaseModel):
    """Authorization context handed to every admin handler."""
    session_id: str
    can_edit: bool
    expires_at: datetime


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    can_edit: bool
    expires_at: datetime
