import logging

from fastapi import APIRouter, Depends, Form, Request, UploadFile
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile as FormFile

from core.auth import get_admin_context, require_edit_access
from core.config import settings
from core.database import get_db
from core.exceptions import NotFoundError, PersistenceError, ValidationError
from core.manifest import SLOT_FILE, build_slots, media_url, reconcile_manifest
from core.storage import remove_media_files, save_uploads
from crud.media_crud import add_media, next_sort_order
from crud.project_crud import create_project, delete_project, get_project, set_cover_image, update_project
from schemas.media_schema import CaptionUpdate, StoredUpload
from schemas.project_schema import ProjectCreate, ProjectResponse, ProjectUpdate
from schemas.session_schema import AdminContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/projects", tags=["Admin projects"])

REQUIRED_FIELDS_MESSAGE = "All fields are required"


def _core_fields(project_name: str, project_short_description: str, project_type: str) -> dict:
    """Validate the three required project fields, echoing them back on failure."""
    values = {
        "project_name": project_name or "",
        "project_short_description": project_short_description or "",
        "project_type": project_type or "",
    }
    if not all(v.strip() for v in values.values()):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, details={"values": values})
    return {
        "name": values["project_name"].strip(),
        "short_description": values["project_short_description"].strip(),
        "project_type": values["project_type"].strip(),
    }


def _discard(stored: list[StoredUpload]) -> None:
    remove_media_files(media_url(settings.MEDIA_URL_PATH, s.filename) for s in stored)


async def form_uploads(request: Request) -> list[UploadFile]:
    """File parts of the submitted form under any field name, in arrival order."""
    form = await request.form()
    return [value for _, value in form.multi_items() if isinstance(value, FormFile)]


@router.post("")
def create(
    project_name: str = Form(""),
    project_short_description: str = Form(""),
    project_type: str = Form(""),
    media_type: list[str] = Form([]),
    media_desc: list[str] = Form([]),
    media_youtube: list[str] = Form([]),
    uploads: list[UploadFile] = Depends(form_uploads),
    db: Session = Depends(get_db),
    ctx: AdminContext = Depends(get_admin_context),
):
    fields = _core_fields(project_name, project_short_description, project_type)

    stored = save_uploads(uploads)
    slots = build_slots(media_type, media_desc, media_youtube)
    records = reconcile_manifest(slots, stored, settings.MEDIA_URL_PATH)
    file_slots = sum(1 for s in slots if s.kind == SLOT_FILE)
    if len(stored) > file_slots:
        logger.warning("Received %d file(s) for %d file slot(s); extras are not attached", len(stored), file_slots)

    try:
        proj = create_project(db, ProjectCreate(**fields), records)
    except PersistenceError:
        _discard(stored)
        raise

    logger.info("Admin session %s created project %s", ctx.session_id, proj.id)
    return RedirectResponse(url="/projects", status_code=303)


@router.post("/{project_id}/media")
def append_media(
    project_id: str,
    media_type: list[str] = Form([]),
    media_desc: list[str] = Form([]),
    media_youtube: list[str] = Form([]),
    uploads: list[UploadFile] = Depends(form_uploads),
    db: Session = Depends(get_db),
    ctx: AdminContext = Depends(require_edit_access),
):
    if not get_project(db, project_id):
        raise NotFoundError("Project not found", details={"project_id": project_id})

    stored = save_uploads(uploads)
    slots = build_slots(media_type, media_desc, media_youtube)
    records = reconcile_manifest(slots, stored, settings.MEDIA_URL_PATH, start_order=next_sort_order(db, project_id))

    try:
        add_media(db, project_id, records)
    except PersistenceError:
        _discard(stored)
        raise

    logger.info("Admin session %s added %d media item(s) to project %s", ctx.session_id, len(records), project_id)
    return RedirectResponse(url=f"/projects/{project_id}", status_code=303)


@router.post("/{project_id}")
def edit(
    project_id: str,
    project_name: str = Form(""),
    project_short_description: str = Form(""),
    project_type: str = Form(""),
    media_id: list[str] = Form([]),
    media_desc: list[str] = Form([]),
    db: Session = Depends(get_db),
    ctx: AdminContext = Depends(require_edit_access),
):
    if not get_project(db, project_id):
        raise NotFoundError("Project not found", details={"project_id": project_id})
    fields = _core_fields(project_name, project_short_description, project_type)
    captions = [
        CaptionUpdate(media_id=mid, caption=media_desc[i] if i < len(media_desc) else "")
        for i, mid in enumerate(media_id)
    ]

    proj = update_project(db, project_id, ProjectUpdate(**fields), captions)
    if not proj:
        raise NotFoundError("Project not found", details={"project_id": project_id})

    logger.info("Admin session %s edited project %s", ctx.session_id, project_id)
    return RedirectResponse(url=f"/projects/{project_id}", status_code=303)


@router.post("/{project_id}/cover", response_model=ProjectResponse)
def choose_cover(
    project_id: str,
    media_id: str = Form(""),
    db: Session = Depends(get_db),
    ctx: AdminContext = Depends(require_edit_access),
):
    if not get_project(db, project_id):
        raise NotFoundError("Project not found", details={"project_id": project_id})
    proj = set_cover_image(db, project_id, media_id)
    if not proj:
        raise NotFoundError("Media not found for this project", details={"project_id": project_id, "media_id": media_id})
    return proj


@router.delete("/{project_id}", status_code=204)
def delete(
    project_id: str,
    db: Session = Depends(get_db),
    ctx: AdminContext = Depends(require_edit_access),
):
    ok = delete_project(db, project_id)
    if not ok:
        raise NotFoundError("Project not found", details={"project_id": project_id})
    logger.info("Admin session %s deleted project %s", ctx.session_id, project_id)
    return None
