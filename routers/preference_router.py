from fastapi import APIRouter, Depends, HTTPException

from core.auth import get_optional_user, get_session_id
from core.database import get_store
from crud.preference_crud import get_expanded, set_expanded
from crud.project_crud import get_project
from crud.store import EntityStore
from schemas.preference_schema import PreferenceResponse, PreferenceUpdate

router = APIRouter(prefix="/projects/{project_id}/preferences", tags=["Preferences"])


def _resolve_owner(project_id: str, store: EntityStore, user, session_id: str | None):
    project = get_project(store, project_id)
    if user is not None:
        # Signed-in viewers of a shared project keep their own preferences
        if not project or (project["user_id"] != user.id and not project["is_shared"]):
            raise HTTPException(status_code=404, detail="Project not found")
        return user.id, None
    # Signed-out visitors only reach projects through a share link
    if not project or not project["is_shared"]:
        raise HTTPException(status_code=404, detail="Project not found")
    if not session_id:
        raise HTTPException(status_code=400, detail="X-Session-Id header is required when signed out")
    return None, session_id


@router.get("/{section_name}", response_model=PreferenceResponse)
def read_one(
    project_id: str,
    section_name: str,
    store: EntityStore = Depends(get_store),
    user=Depends(get_optional_user),
    session_id: str | None = Depends(get_session_id),
):
    user_id, session_id = _resolve_owner(project_id, store, user, session_id)
    is_expanded = get_expanded(store, project_id, section_name, user_id=user_id, session_id=session_id)
    return PreferenceResponse(project_id=project_id, section_name=section_name, is_expanded=is_expanded)


@router.put("/{section_name}", response_model=PreferenceResponse)
def update(
    project_id: str,
    section_name: str,
    payload: PreferenceUpdate,
    store: EntityStore = Depends(get_store),
    user=Depends(get_optional_user),
    session_id: str | None = Depends(get_session_id),
):
    user_id, session_id = _resolve_owner(project_id, store, user, session_id)
    row = set_expanded(store, project_id, section_name, user_id=user_id, session_id=session_id,
                       is_expanded=payload.is_expanded)
    return PreferenceResponse(project_id=project_id, section_name=section_name, is_expanded=row["is_expanded"])
