from crud.store import EntityStore, in_


def list_brands(store: EntityStore, user_id: str):
    """Newest first, each with the ids of its linked projects."""
    brands = store.select("brands", {"user_id": user_id}, order=["-created_at", "id"])
    if not brands:
        return []
    links: dict[str, list[str]] = {b["id"]: [] for b in brands}
    for link in store.select("brand_projects", {"brand_id": in_(links)}, order=["created_at", "id"]):
        links[link["brand_id"]].append(link["project_id"])
    return [dict(b, project_ids=links[b["id"]]) for b in brands]


def get_owned_brand(store: EntityStore, brand_id: str, user_id: str):
    return store.select_one("brands", {"id": brand_id, "user_id": user_id})


def create_brand(store: EntityStore, user_id: str, payload):
    row = store.insert(
        "brands",
        {"user_id": user_id, "name": payload.name.strip(), "theme": payload.theme, "features": payload.features},
    )
    return dict(row, project_ids=[])


def update_brand(store: EntityStore, brand_id: str, values: dict):
    rows = store.update("brands", values, {"id": brand_id})
    if not rows:
        return None
    return dict(rows[0], project_ids=linked_project_ids(store, brand_id))


def delete_brand(store: EntityStore, brand_id: str) -> bool:
    # Project links and creator links go with it through ON DELETE CASCADE
    return store.delete("brands", {"id": brand_id}) > 0


def linked_project_ids(store: EntityStore, brand_id: str) -> list[str]:
    return [r["project_id"] for r in store.select("brand_projects", {"brand_id": brand_id}, order=["created_at", "id"])]


def link_project(store: EntityStore, brand_id: str, project_id: str):
    """Idempotent: linking an already linked project returns the existing link."""
    existing = store.select_one("brand_projects", {"brand_id": brand_id, "project_id": project_id})
    if existing:
        return existing
    return store.insert("brand_projects", {"brand_id": brand_id, "project_id": project_id})


def unlink_project(store: EntityStore, brand_id: str, project_id: str) -> bool:
    return store.delete("brand_projects", {"brand_id": brand_id, "project_id": project_id}) > 0


def project_labels(store: EntityStore, project_ids: list[str]) -> dict[str, dict]:
    """
    Brand and creator names per project, for listings.

    A project shows the first brand it was linked to, and that brand's first
    creator. Projects without a brand are absent from the result.
    """
    if not project_ids:
        return {}
    links = store.select("brand_projects", {"project_id": in_(project_ids)}, order=["created_at", "id"])
    brand_for: dict[str, str] = {}
    for link in links:
        brand_for.setdefault(link["project_id"], link["brand_id"])
    if not brand_for:
        return {}

    brand_ids = set(brand_for.values())
    brand_names = {b["id"]: b["name"] for b in store.select("brands", {"id": in_(brand_ids)})}
    creator_for: dict[str, str] = {}
    for link in store.select("creator_brands", {"brand_id": in_(brand_ids)}, order=["created_at", "id"]):
        creator_for.setdefault(link["brand_id"], link["creator_id"])
    creator_names = {}
    if creator_for:
        creators = store.select("creators", {"id": in_(set(creator_for.values()))})
        creator_names = {c["id"]: c["name"] for c in creators}

    labels = {}
    for project_id, brand_id in brand_for.items():
        labels[project_id] = {
            "brand_name": brand_names.get(brand_id),
            "creator_name": creator_names.get(creator_for.get(brand_id)),
        }
    return labels
