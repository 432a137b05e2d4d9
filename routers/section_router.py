"""
Project overview sections.

Every section is a flat list of rows under a project and shares the same
list/create/update/delete routes; orderable sections also get a move route.
The routes are registered per section from ``SECTIONS``.
"""
from dataclasses import dataclass

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.auth import get_current_user
from core.database import get_store
from core.dependencies import get_owned_project_or_404, get_sequencer
from crud.section_crud import (
    create_row,
    delete_row,
    duplicate_return,
    is_orderable,
    list_rows,
    move_row,
    update_row,
)
from crud.store import EntityStore, clear_nulls
from schemas import section_schema as s
from services.ordering import OrderSequencer

router = APIRouter(prefix="/projects/{project_id}", tags=["Sections"])


@dataclass(frozen=True)
class Section:
    path: str
    table: str
    label: str
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]


SECTIONS = (
    Section("notes", "project_notes", "Note", s.ProjectNoteCreate, s.ProjectNoteUpdate, s.ProjectNoteResponse),
    Section("schedules", "schedules", "Schedule", s.ScheduleCreate, s.ScheduleUpdate, s.ScheduleResponse),
    Section("documents", "documents", "Document", s.DocumentCreate, s.DocumentUpdate, s.DocumentResponse),
    Section("meetings", "meetings", "Meeting", s.MeetingCreate, s.MeetingUpdate, s.MeetingResponse),
    Section("returns", "returns", "Return", s.ReturnCreate, s.ReturnUpdate, s.ReturnResponse),
    Section(
        "design-requirements",
        "design_requirements",
        "Design requirement",
        s.DesignRequirementCreate,
        s.DesignRequirementUpdate,
        s.DesignRequirementResponse,
    ),
    Section(
        "text-content-requirements",
        "text_content_requirements",
        "Text content requirement",
        s.TextContentRequirementCreate,
        s.TextContentRequirementUpdate,
        s.TextContentRequirementResponse,
    ),
    Section(
        "video-requirements",
        "video_requirements",
        "Video requirement",
        s.VideoRequirementCreate,
        s.VideoRequirementUpdate,
        s.VideoRequirementResponse,
    ),
    Section("image-assets", "image_assets", "Image asset", s.ImageAssetCreate, s.ImageAssetUpdate, s.ImageAssetResponse),
)


def _register(section: Section) -> None:
    table = section.table
    not_found = f"{section.label} not found"
    CreateSchema = section.create_schema
    UpdateSchema = section.update_schema

    def list_all(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
        return list_rows(store, table, project["id"])

    def create(
        payload: CreateSchema,
        project=Depends(get_owned_project_or_404),
        store: EntityStore = Depends(get_store),
        sequencer: OrderSequencer = Depends(get_sequencer),
        current_user=Depends(get_current_user),
    ):
        return create_row(store, sequencer, table, project["id"], current_user.id, payload.model_dump())

    def update(
        row_id: str,
        payload: UpdateSchema,
        project=Depends(get_owned_project_or_404),
        store: EntityStore = Depends(get_store),
    ):
        values, rejected = clear_nulls(table, payload.model_dump(exclude_unset=True))
        if rejected:
            raise HTTPException(status_code=422, detail=f"Cannot clear required field(s): {', '.join(rejected)}")
        row = update_row(store, table, project["id"], row_id, values)
        if not row:
            raise HTTPException(status_code=404, detail=not_found)
        return row

    def delete(row_id: str, project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
        if not delete_row(store, table, project["id"], row_id):
            raise HTTPException(status_code=404, detail=not_found)
        return None

    base = f"/{section.path}"
    router.add_api_route(base, list_all, methods=["GET"], response_model=list[section.response_schema],
                         name=f"list_{table}")
    router.add_api_route(base, create, methods=["POST"], response_model=section.response_schema,
                         status_code=201, name=f"create_{table}")
    router.add_api_route(f"{base}/{{row_id}}", update, methods=["PATCH"], response_model=section.response_schema,
                         name=f"update_{table}")
    router.add_api_route(f"{base}/{{row_id}}", delete, methods=["DELETE"], status_code=204,
                         name=f"delete_{table}")

    if is_orderable(table):
        def move(
            row_id: str,
            payload: s.MoveRequest,
            project=Depends(get_owned_project_or_404),
            store: EntityStore = Depends(get_store),
            sequencer: OrderSequencer = Depends(get_sequencer),
        ):
            moved = move_row(store, sequencer, table, project["id"], row_id, payload.direction)
            if moved is None:
                raise HTTPException(status_code=404, detail=not_found)
            return {"moved": moved}

        router.add_api_route(f"{base}/{{row_id}}/move", move, methods=["POST"], name=f"move_{table}")


for _section in SECTIONS:
    _register(_section)


@router.post("/returns/{row_id}/duplicate", response_model=s.ReturnResponse, status_code=201)
def duplicate_one_return(
    row_id: str,
    project=Depends(get_owned_project_or_404),
    store: EntityStore = Depends(get_store),
    sequencer: OrderSequencer = Depends(get_sequencer),
    current_user=Depends(get_current_user),
):
    row = duplicate_return(store, sequencer, project["id"], row_id, current_user.id)
    if not row:
        raise HTTPException(status_code=404, detail="Return not found")
    return row
