import hmac
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.exceptions import AuthenticationError, AuthorizationError
from crud.session_crud import get_session_by_token
from schemas.session_schema import AdminContext


def passwords_match(supplied: str | None, expected: str | None) -> bool:
    """Constant-time comparison; an unset expected password never matches."""
    if not supplied or not expected:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_admin_context(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> AdminContext:
    token = _extract_bearer_token(authorization) or request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise AuthenticationError("Not authenticated")

    s = get_session_by_token(db, token)
    if not s:
        raise AuthenticationError("Invalid token")

    if s.expires_at is None or _as_aware(s.expires_at) < datetime.now(timezone.utc):
        raise AuthenticationError("Token expired")

    return AdminContext(session_id=s.id, can_edit=bool(s.can_edit), expires_at=_as_aware(s.expires_at))


def require_edit_access(ctx: AdminContext = Depends(get_admin_context)) -> AdminContext:
    if not ctx.can_edit:
        raise AuthorizationError("Edit access required")
    return ctx
