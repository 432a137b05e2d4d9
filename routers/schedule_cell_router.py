from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from core.auth import get_current_user
from core.database import get_store
from crud.brand_crud import project_labels
from crud.project_crud import get_owned_project, list_projects
from crud.schedule_cell_crud import list_cells, save_cell
from crud.store import EntityStore
from models.project import BrandType, ProjectStatus
from schemas.schedule_cell_schema import ScheduleCellResponse, ScheduleCellUpsert, ScheduleProjectRow

router = APIRouter(prefix="/schedule-cells", tags=["Schedule"])

# Projects shown on the schedule unless the caller asks for other statuses
SCHEDULE_STATUSES = (ProjectStatus.IN_PROGRESS, ProjectStatus.PICKS)


def _schedule_projects(store: EntityStore, user_id: str, brand_type: BrandType | None,
                       status: list[ProjectStatus] | None):
    return list_projects(
        store,
        user_id=user_id,
        brand_type=brand_type.value if brand_type else None,
        statuses=[s.value for s in (status or SCHEDULE_STATUSES)],
    )


@router.get("/", response_model=list[ScheduleCellResponse])
def list_all(
    start: date | None = None,
    end: date | None = None,
    brand_type: BrandType | None = None,
    status: list[ProjectStatus] | None = Query(None),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    """
    Cells of the caller's projects by date. Only in-progress and PICKS
    projects are included unless ``status`` is given.
    """
    projects = _schedule_projects(store, current_user.id, brand_type, status)
    return list_cells(store, [p["id"] for p in projects], start=start, end=end)


@router.get("/projects", response_model=list[ScheduleProjectRow])
def list_rows(
    brand_type: BrandType | None = None,
    status: list[ProjectStatus] | None = Query(None),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    projects = _schedule_projects(store, current_user.id, brand_type, status)
    labels = project_labels(store, [p["id"] for p in projects])
    return [dict(p, **labels.get(p["id"], {})) for p in projects]


@router.put("/", response_model=ScheduleCellResponse | None)
def upsert(payload: ScheduleCellUpsert, store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    """
    Save one (project, date) cell. Blank content clears the cell and returns null.
    """
    if not get_owned_project(store, payload.project_id, current_user.id):
        raise HTTPException(status_code=404, detail="Project not found")
    return save_cell(
        store,
        payload.project_id,
        payload.date,
        payload.content,
        user_id=current_user.id,
        background_color=payload.background_color,
        text_color=payload.text_color,
    )
