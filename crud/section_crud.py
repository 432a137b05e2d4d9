from crud.store import EntityStore
from services.ordering import ORDERABLE_TABLES, OrderSequencer, sort_siblings


def is_orderable(table: str) -> bool:
    return table in ORDERABLE_TABLES


def list_rows(store: EntityStore, table: str, project_id: str):
    if is_orderable(table):
        return sort_siblings(store.select(table, {"project_id": project_id}, order=["order_index", "created_at", "id"]))
    return store.select(table, {"project_id": project_id}, order=["created_at", "id"])


def get_row(store: EntityStore, table: str, project_id: str, row_id: str):
    return store.select_one(table, {"id": row_id, "project_id": project_id})


def create_row(store: EntityStore, sequencer: OrderSequencer, table: str, project_id: str, user_id: str, values: dict):
    row = dict(values, project_id=project_id, user_id=user_id)
    if is_orderable(table):
        row["order_index"] = sequencer.next_order_index(table, {"project_id": project_id})
    return store.insert(table, row)


def update_row(store: EntityStore, table: str, project_id: str, row_id: str, values: dict):
    rows = store.update(table, values, {"id": row_id, "project_id": project_id})
    return rows[0] if rows else None


def delete_row(store: EntityStore, table: str, project_id: str, row_id: str) -> bool:
    return store.delete(table, {"id": row_id, "project_id": project_id}) > 0


def move_row(store: EntityStore, sequencer: OrderSequencer, table: str, project_id: str, row_id: str, direction: str):
    """Returns None when the row is not in the project, else whether anything moved."""
    rows = list_rows(store, table, project_id)
    index = next((i for i, r in enumerate(rows) if r["id"] == row_id), None)
    if index is None:
        return None
    if direction == "up":
        return sequencer.move_up(table, rows, index)
    return sequencer.move_down(table, rows, index)


def duplicate_return(store: EntityStore, sequencer: OrderSequencer, project_id: str, row_id: str, user_id: str):
    source = get_row(store, "returns", project_id, row_id)
    if not source:
        return None
    values = {
        "name": f"{source['name']} (copy)",
        "price_range": source["price_range"],
        "description": source["description"],
        "status": source["status"],
    }
    return create_row(store, sequencer, "returns", project_id, user_id, values)
