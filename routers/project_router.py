from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.exceptions import NotFoundError
from crud.media_crud import list_media
from crud.project_crud import list_projects, get_project
from schemas.media_schema import MediaItemResponse
from schemas.project_schema import ProjectDetailResponse, ProjectResponse


router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
def list_all(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_projects(db, skip=skip, limit=limit)


@router.get("/{project_id}", response_model=ProjectDetailResponse)
def read_one(project_id: str, db: Session = Depends(get_db)):
    proj = get_project(db, project_id)
    if not proj:
        raise NotFoundError("Project not found", details={"project_id": project_id})
    return ProjectDetailResponse(
        **ProjectResponse.model_validate(proj).model_dump(),
        media=[MediaItemResponse.model_validate(m) for m in list_media(db, project_id)],
    )
