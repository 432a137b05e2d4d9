from crud.store import EntityStore, in_


def list_creators(store: EntityStore, user_id: str):
    creators = store.select("creators", {"user_id": user_id}, order=["name", "id"])
    if not creators:
        return []
    brands: dict[str, list[str]] = {c["id"]: [] for c in creators}
    for link in store.select("creator_brands", {"creator_id": in_(brands)}, order=["created_at", "id"]):
        brands[link["creator_id"]].append(link["brand_id"])
    return [dict(c, brand_ids=brands[c["id"]]) for c in creators]


def get_owned_creator(store: EntityStore, creator_id: str, user_id: str):
    return store.select_one("creators", {"id": creator_id, "user_id": user_id})


def create_creator(store: EntityStore, user_id: str, name: str):
    return dict(store.insert("creators", {"user_id": user_id, "name": name.strip()}), brand_ids=[])


def rename_creator(store: EntityStore, creator_id: str, name: str):
    rows = store.update("creators", {"name": name.strip()}, {"id": creator_id})
    if not rows:
        return None
    links = store.select("creator_brands", {"creator_id": creator_id}, order=["created_at", "id"])
    return dict(rows[0], brand_ids=[link["brand_id"] for link in links])


def delete_creator(store: EntityStore, creator_id: str) -> bool:
    return store.delete("creators", {"id": creator_id}) > 0


def link_brand(store: EntityStore, creator_id: str, brand_id: str):
    existing = store.select_one("creator_brands", {"creator_id": creator_id, "brand_id": brand_id})
    if existing:
        return existing
    return store.insert("creator_brands", {"creator_id": creator_id, "brand_id": brand_id})


def unlink_brand(store: EntityStore, creator_id: str, brand_id: str) -> bool:
    return store.delete("creator_brands", {"creator_id": creator_id, "brand_id": brand_id}) > 0
