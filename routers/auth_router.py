import logging
import uuid
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from core.auth import get_admin_context, passwords_match
from core.config import settings
from core.database import get_db
from core.exceptions import AuthenticationError
from crud.session_crud import create_session, delete_session, grant_edit, purge_expired_sessions
from schemas.session_schema import AdminContext, AdminSessionCreate, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin authentication"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: Request,
    response: Response,
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    """
    Exchange the shared admin password for a session token.

    The edit password, when configured, also logs in and grants edit access
    straight away. Without an edit password every admin session can edit.
    """
    if passwords_match(password, settings.ADMIN_PASSWORD):
        can_edit = not settings.ADMIN_EDIT_PASSWORD
    elif passwords_match(password, settings.ADMIN_EDIT_PASSWORD):
        can_edit = True
    else:
        logger.warning("Rejected admin login from %s", request.client.host if request.client else "unknown")
        raise AuthenticationError("Incorrect password")

    purge_expired_sessions(db)

    token = uuid.uuid4().hex
    expires_at = datetime.now(timezone.utc) + timedelta(hours=settings.SESSION_TTL_HOURS)
    s = create_session(
        db,
        payload=AdminSessionCreate(
            token=token,
            expires_at=expires_at,
            can_edit=can_edit,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        ),
    )
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        s.token,
        max_age=settings.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
    )
    logger.info("Admin session %s opened (can_edit=%s)", s.id, can_edit)
    return LoginResponse(access_token=s.token, can_edit=can_edit, expires_at=expires_at)


@router.post("/unlock-edit", response_model=AdminContext)
def unlock_edit(
    password: str = Form(""),
    ctx: AdminContext = Depends(get_admin_context),
    db: Session = Depends(get_db),
):
    if ctx.can_edit:
        return ctx
    if not passwords_match(password, settings.ADMIN_EDIT_PASSWORD):
        raise AuthenticationError("Incorrect password")
    s = grant_edit(db, ctx.session_id)
    if not s:
        raise AuthenticationError("Invalid token")
    logger.info("Edit access granted to admin session %s", ctx.session_id)
    return AdminContext(session_id=s.id, can_edit=True, expires_at=ctx.expires_at)


@router.get("/session", response_model=AdminContext)
def current_session(ctx: AdminContext = Depends(get_admin_context)):
    return ctx


@router.post("/logout")
def logout(ctx: AdminContext = Depends(get_admin_context), db: Session = Depends(get_db)):
    delete_session(db, ctx.session_id)
    logger.info("Admin session %s closed", ctx.session_id)
    resp = RedirectResponse(url="/", status_code=303)
    resp.delete_cookie(settings.SESSION_COOKIE_NAME)
    return resp
