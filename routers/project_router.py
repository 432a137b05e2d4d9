import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from core.auth import get_current_user
from core.config import settings
from core.database import get_store
from core.dependencies import get_owned_project_or_404
from crud.project_crud import (
    count_by_brand,
    create_project,
    delete_project,
    disable_sharing,
    enable_sharing,
    list_projects,
    update_project,
)
from crud.brand_crud import project_labels
from crud.store import EntityStore, clear_nulls, in_
from crud.task_crud import upcoming_tasks
from models.project import BrandType, ProjectStatus
from schemas.project_schema import (
    BrandCountsResponse,
    DuplicateResponse,
    ProgressResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    ProjectWithProgress,
    ShareResponse,
)
from schemas.task_schema import TaskResponse
from services.progress import compute_progress, project_progress
from services.replication import ProjectReplicator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


def _share_response(project: dict) -> ShareResponse:
    share_url = None
    if project["is_shared"] and project["share_token"]:
        share_url = f"{settings.FRONTEND_URL.rstrip('/')}?share={project['share_token']}"
    return ShareResponse(
        is_shared=project["is_shared"],
        share_token=project["share_token"],
        shared_at=project["shared_at"],
        share_url=share_url,
    )


@router.get("/", response_model=list[ProjectWithProgress])
def list_all(
    brand_type: BrandType | None = None,
    status: list[ProjectStatus] | None = Query(None),
    q: str | None = None,
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    projects = list_projects(
        store,
        user_id=current_user.id,
        brand_type=brand_type.value if brand_type else None,
        statuses=[s.value for s in status] if status else None,
        search=q,
    )
    if not projects:
        return []
    by_project: dict[str, list[str]] = {p["id"]: [] for p in projects}
    for task in store.select("tasks", {"project_id": in_(by_project)}):
        by_project[task["project_id"]].append(task["status"])
    labels = project_labels(store, list(by_project))
    return [
        dict(p, progress=compute_progress(by_project[p["id"]]).as_dict(), **labels.get(p["id"], {}))
        for p in projects
    ]


@router.get("/counts", response_model=BrandCountsResponse)
def brand_counts(store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    return count_by_brand(store, current_user.id)


@router.post("/", response_model=ProjectResponse, status_code=201)
def create(payload: ProjectCreate, store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    project = create_project(store, payload, user_id=current_user.id)
    logger.info("User %s created project %s", current_user.id, project["id"])
    return project


@router.get("/{project_id}", response_model=ProjectResponse)
def read_one(project=Depends(get_owned_project_or_404)):
    return project


@router.patch("/{project_id}", response_model=ProjectResponse)
def update(payload: ProjectUpdate, project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    values, rejected = clear_nulls("projects", payload.model_dump(exclude_unset=True, mode="json"))
    if rejected:
        raise HTTPException(status_code=422, detail=f"Cannot clear required field(s): {', '.join(rejected)}")
    updated = update_project(store, project["id"], values)
    if not updated:
        raise HTTPException(status_code=404, detail="Project not found")
    return updated


@router.delete("/{project_id}", status_code=204)
def delete(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    ok = delete_project(store, project["id"])
    if not ok:
        raise HTTPException(status_code=404, detail="Project not found")
    return None


@router.get("/{project_id}/progress", response_model=ProgressResponse)
def progress(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    return project_progress(store, project["id"]).as_dict()


@router.get("/{project_id}/upcoming-tasks", response_model=list[TaskResponse])
def upcoming(limit: int = Query(5, ge=1, le=50), project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    return upcoming_tasks(store, project["id"], limit=limit)


@router.post("/{project_id}/duplicate", response_model=DuplicateResponse, status_code=201)
def duplicate(
    project=Depends(get_owned_project_or_404),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    result = ProjectReplicator(store).duplicate(project["id"], owner_id=current_user.id)
    return DuplicateResponse(
        project=result.project,
        status=result.status,
        message=result.summary(),
        copied=result.copied,
        errors=result.errors,
        failed_sections=result.failed_sections,
    )


@router.get("/{project_id}/share", response_model=ShareResponse)
def share_status(project=Depends(get_owned_project_or_404)):
    return _share_response(project)


@router.post("/{project_id}/share", response_model=ShareResponse)
def share(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    updated = enable_sharing(store, project["id"])
    if not updated:
        raise HTTPException(status_code=404, detail="Project not found")
    return _share_response(updated)


@router.delete("/{project_id}/share", response_model=ShareResponse)
def unshare(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    updated = disable_sharing(store, project["id"])
    if not updated:
        raise HTTPException(status_code=404, detail="Project not found")
    return _share_response(updated)
