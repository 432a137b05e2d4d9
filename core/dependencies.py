from fastapi import Depends, HTTPException

from core.auth import get_current_user
from core.database import get_store
from crud.project_crud import get_owned_project
from crud.store import EntityStore
from services.ordering import OptimisticOrderSequencer, OrderSequencer


def get_sequencer(store: EntityStore = Depends(get_store)) -> OrderSequencer:
    return OptimisticOrderSequencer(store)


def get_owned_project_or_404(
    project_id: str,
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    # Other users' projects read as missing rather than forbidden
    project = get_owned_project(store, project_id, current_user.id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
