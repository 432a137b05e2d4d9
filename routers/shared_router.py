import logging

from fastapi import APIRouter, Depends, HTTPException

from core.database import get_store
from crud.project_crud import get_shared_project
from crud.section_crud import list_rows
from crud.store import EntityStore
from crud.task_crud import list_tasks
from routers.section_router import SECTIONS
from schemas.shared_schema import SharedProjectResponse
from services.hierarchy import build_hierarchy
from services.progress import compute_progress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shared", tags=["Sharing"])


@router.get("/{share_token}", response_model=SharedProjectResponse)
def read_shared(share_token: str, store: EntityStore = Depends(get_store)):
    """
    Read-only view of a shared project. Unknown tokens and projects whose
    sharing was turned off both read as 404.
    """
    project = get_shared_project(store, share_token)
    if not project:
        raise HTTPException(status_code=404, detail="Shared project not found")

    tasks = list_tasks(store, project["id"])
    sections = {}
    for section in SECTIONS:
        rows = list_rows(store, section.table, project["id"])
        sections[section.path] = [section.response_schema.model_validate(r).model_dump(mode="json") for r in rows]
    logger.debug("Served shared project %s", project["id"])
    return SharedProjectResponse(
        project=project,
        tasks=[node.to_dict() for node in build_hierarchy(tasks)],
        sections=sections,
        progress=compute_progress(t["status"] for t in tasks).as_dict(),
    )
