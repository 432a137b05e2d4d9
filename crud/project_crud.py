import secrets
from crud.store import EntityStore
from models.base import utcnow
from models.project import BrandType
from schemas.project_schema import ProjectCreate


def get_project(store: EntityStore, project_id: str):
    return store.select_one("projects", {"id": project_id})


def get_owned_project(store: EntityStore, project_id: str, user_id: str):
    return store.select_one("projects", {"id": project_id, "user_id": user_id})


def list_projects(
    store: EntityStore,
    user_id: str,
    brand_type: str | None = None,
    statuses: list[str] | None = None,
    search: str | None = None,
):
    filters = {"user_id": user_id}
    if brand_type:
        filters["brand_type"] = brand_type
    rows = store.select("projects", filters, order=["-updated_at", "id"])
    if statuses:
        rows = [p for p in rows if p["status"] in statuses]
    if search:
        needle = search.strip().lower()
        rows = [p for p in rows if needle in p["name"].lower() or needle in (p["description"] or "").lower()]
    return rows


def count_by_brand(store: EntityStore, user_id: str) -> dict[str, int]:
    counts = {b.value: 0 for b in BrandType}
    for p in store.select("projects", {"user_id": user_id}):
        counts[p["brand_type"]] = counts.get(p["brand_type"], 0) + 1
    return counts


def create_project(store: EntityStore, payload: ProjectCreate, user_id: str):
    return store.insert(
        "projects",
        {
            "name": payload.name.strip(),
            "description": payload.description,
            "status": payload.status.value,
            "brand_type": payload.brand_type.value,
            "user_id": user_id,
        },
    )


def update_project(store: EntityStore, project_id: str, values: dict):
    """Apply already validated column values; see ``clear_nulls`` for explicit nulls."""
    if "name" in values:
        values["name"] = values["name"].strip()
    rows = store.update("projects", values, {"id": project_id})
    return rows[0] if rows else None


def delete_project(store: EntityStore, project_id: str) -> bool:
    # Dependent rows go with it through ON DELETE CASCADE
    return store.delete("projects", {"id": project_id}) > 0


def enable_sharing(store: EntityStore, project_id: str):
    project = get_project(store, project_id)
    if not project:
        return None
    values = {"is_shared": True, "shared_at": utcnow()}
    if not project["share_token"]:
        values["share_token"] = secrets.token_urlsafe(24)
    return store.update("projects", values, {"id": project_id})[0]


def disable_sharing(store: EntityStore, project_id: str):
    # The token is kept so re-enabling restores the same link
    rows = store.update("projects", {"is_shared": False, "shared_at": None}, {"id": project_id})
    return rows[0] if rows else None


def get_shared_project(store: EntityStore, share_token: str):
    if not share_token:
        return None
    return store.select_one("projects", {"share_token": share_token, "is_shared": True})
