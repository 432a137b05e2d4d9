from crud.store import EntityStore


def _owner_filter(user_id: str | None, session_id: str | None) -> tuple[dict, list[str]]:
    if user_id:
        return {"user_id": user_id}, ["user_id", "project_id", "section_name"]
    return {"session_id": session_id, "user_id": None}, ["session_id", "project_id", "section_name"]


def get_expanded(store: EntityStore, project_id: str, section_name: str,
                 user_id: str | None, session_id: str | None, default: bool = True) -> bool:
    owner, _ = _owner_filter(user_id, session_id)
    row = store.select_one("ui_preferences", dict(owner, project_id=project_id, section_name=section_name))
    return row["is_expanded"] if row else default


def set_expanded(store: EntityStore, project_id: str, section_name: str,
                 user_id: str | None, session_id: str | None, is_expanded: bool):
    owner, conflict_keys = _owner_filter(user_id, session_id)
    row = dict(owner, project_id=project_id, section_name=section_name, is_expanded=is_expanded)
    return store.upsert("ui_preferences", row, conflict_keys=conflict_keys)
