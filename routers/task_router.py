import logging

from fastapi import APIRouter, Depends, HTTPException

from core.auth import get_current_user
from core.database import get_store
from core.dependencies import get_owned_project_or_404, get_sequencer
from crud.store import EntityStore, clear_nulls
from crud.task_crud import (
    create_subtask,
    create_task,
    create_task_note,
    delete_subtask,
    delete_task,
    delete_task_note,
    get_project_task,
    get_subtask,
    list_subtasks,
    list_task_notes,
    list_tasks,
    move_task,
    update_subtask,
    update_task,
)
from schemas.section_schema import MoveRequest
from schemas.task_schema import (
    SubtaskCreate,
    SubtaskResponse,
    SubtaskUpdate,
    TaskCreate,
    TaskNoteCreate,
    TaskNoteResponse,
    TaskResponse,
    TaskStatusUpdate,
    TaskTreeNode,
    TaskUpdate,
)
from services.hierarchy import build_hierarchy
from services.ordering import OrderSequencer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["Tasks"])


def get_task_or_404(
    task_id: str,
    project=Depends(get_owned_project_or_404),
    store: EntityStore = Depends(get_store),
):
    task = get_project_task(store, project["id"], task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("/", response_model=list[TaskTreeNode])
def read_tree(project=Depends(get_owned_project_or_404), store: EntityStore = Depends(get_store)):
    """
    Tasks of the project as a forest, siblings in display order.
    """
    return [node.to_dict() for node in build_hierarchy(list_tasks(store, project["id"]))]


@router.post("/", response_model=TaskResponse, status_code=201)
def create(
    payload: TaskCreate,
    project=Depends(get_owned_project_or_404),
    store: EntityStore = Depends(get_store),
    sequencer: OrderSequencer = Depends(get_sequencer),
    current_user=Depends(get_current_user),
):
    if payload.parent_id and not get_project_task(store, project["id"], payload.parent_id):
        raise HTTPException(status_code=400, detail="Parent task not found in this project")
    return create_task(store, sequencer, project["id"], current_user.id, payload)


@router.get("/{task_id}", response_model=TaskResponse)
def read_one(task=Depends(get_task_or_404)):
    return task


@router.patch("/{task_id}", response_model=TaskResponse)
def update(payload: TaskUpdate, task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    values = payload.model_dump(exclude_unset=True)
    if values.get("title") is not None:
        values["title"] = values["title"].strip()
    if values.get("status") is not None:
        values["status"] = values["status"].value
    values, rejected = clear_nulls("tasks", values)
    if rejected:
        raise HTTPException(status_code=422, detail=f"Cannot clear required field(s): {', '.join(rejected)}")
    if not values:
        return task
    updated = update_task(store, task["id"], values)
    if not updated:
        raise HTTPException(status_code=404, detail="Task not found")
    return updated


@router.patch("/{task_id}/status", response_model=TaskResponse)
def change_status(payload: TaskStatusUpdate, task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    updated = update_task(store, task["id"], {"status": payload.status.value})
    if not updated:
        raise HTTPException(status_code=404, detail="Task not found")
    return updated


@router.delete("/{task_id}", status_code=204)
def delete(task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    removed = delete_task(store, task)
    logger.info("Deleted task %s with %d descendants", task["id"], removed - 1)
    return None


@router.post("/{task_id}/move")
def move(
    payload: MoveRequest,
    task=Depends(get_task_or_404),
    store: EntityStore = Depends(get_store),
    sequencer: OrderSequencer = Depends(get_sequencer),
):
    moved = move_task(store, sequencer, task, payload.direction)
    return {"moved": moved}


# -- subtasks -----------------------------------------------------------------

@router.get("/{task_id}/subtasks", response_model=list[SubtaskResponse])
def read_subtasks(task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    return list_subtasks(store, task["id"])


@router.post("/{task_id}/subtasks", response_model=SubtaskResponse, status_code=201)
def add_subtask(
    payload: SubtaskCreate,
    task=Depends(get_task_or_404),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return create_subtask(store, task["id"], current_user.id, payload)


@router.patch("/{task_id}/subtasks/{subtask_id}", response_model=SubtaskResponse)
def edit_subtask(
    subtask_id: str,
    payload: SubtaskUpdate,
    task=Depends(get_task_or_404),
    store: EntityStore = Depends(get_store),
):
    if not get_subtask(store, task["id"], subtask_id):
        raise HTTPException(status_code=404, detail="Subtask not found")
    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    updated = update_subtask(store, subtask_id, values) if values else get_subtask(store, task["id"], subtask_id)
    if not updated:
        raise HTTPException(status_code=404, detail="Subtask not found")
    return updated


@router.delete("/{task_id}/subtasks/{subtask_id}", status_code=204)
def remove_subtask(subtask_id: str, task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    if not get_subtask(store, task["id"], subtask_id) or not delete_subtask(store, subtask_id):
        raise HTTPException(status_code=404, detail="Subtask not found")
    return None


# -- notes --------------------------------------------------------------------

@router.get("/{task_id}/notes", response_model=list[TaskNoteResponse])
def read_notes(task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    return list_task_notes(store, task["id"])


@router.post("/{task_id}/notes", response_model=TaskNoteResponse, status_code=201)
def add_note(
    payload: TaskNoteCreate,
    task=Depends(get_task_or_404),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    return create_task_note(store, task["id"], current_user.id, payload.content)


@router.delete("/{task_id}/notes/{note_id}", status_code=204)
def remove_note(note_id: str, task=Depends(get_task_or_404), store: EntityStore = Depends(get_store)):
    if not delete_task_note(store, task["id"], note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return None
