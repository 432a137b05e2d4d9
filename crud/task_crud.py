from crud.store import EntityStore, NOT_NULL, neq
from models.task import TaskStatus
from services.hierarchy import descendant_ids
from services.ordering import OrderSequencer, sibling_scope, sort_siblings

TASK_ORDER = ["order_index", "created_at", "id"]


def list_tasks(store: EntityStore, project_id: str):
    return store.select("tasks", {"project_id": project_id}, order=TASK_ORDER)


def get_project_task(store: EntityStore, project_id: str, task_id: str):
    return store.select_one("tasks", {"id": task_id, "project_id": project_id})


def create_task(store: EntityStore, sequencer: OrderSequencer, project_id: str, user_id: str, payload):
    order_index = sequencer.next_order_index("tasks", sibling_scope("tasks", project_id, payload.parent_id))
    return store.insert(
        "tasks",
        {
            "project_id": project_id,
            "parent_id": payload.parent_id,
            "user_id": user_id,
            "title": payload.title.strip(),
            "description": payload.description,
            "status": payload.status.value,
            "due_date": payload.due_date,
            "order_index": order_index,
        },
    )


def update_task(store: EntityStore, task_id: str, values: dict):
    rows = store.update("tasks", values, {"id": task_id})
    return rows[0] if rows else None


def delete_task(store: EntityStore, task: dict) -> int:
    """Delete a task and every task below it; subtasks and notes follow by cascade."""
    ids = [task["id"]] + descendant_ids(list_tasks(store, task["project_id"]), task["id"])
    # Deepest first: a partial failure leaves only whole subtrees behind
    for task_id in reversed(ids):
        store.delete("tasks", {"id": task_id})
    return len(ids)


def list_siblings(store: EntityStore, task: dict):
    rows = store.select("tasks", sibling_scope("tasks", task["project_id"], task["parent_id"]))
    return sort_siblings(rows)


def move_task(store: EntityStore, sequencer: OrderSequencer, task: dict, direction: str) -> bool:
    siblings = list_siblings(store, task)
    index = next(i for i, s in enumerate(siblings) if s["id"] == task["id"])
    if direction == "up":
        return sequencer.move_up("tasks", siblings, index)
    return sequencer.move_down("tasks", siblings, index)


def upcoming_tasks(store: EntityStore, project_id: str, limit: int = 5):
    return store.select(
        "tasks",
        {"project_id": project_id, "due_date": NOT_NULL, "status": neq(TaskStatus.DONE.value)},
        order=["due_date", "order_index"],
        limit=limit,
    )


# -- subtasks -----------------------------------------------------------------

def list_subtasks(store: EntityStore, task_id: str):
    return store.select("subtasks", {"task_id": task_id}, order=["created_at", "id"])


def get_subtask(store: EntityStore, task_id: str, subtask_id: str):
    return store.select_one("subtasks", {"id": subtask_id, "task_id": task_id})


def create_subtask(store: EntityStore, task_id: str, user_id: str, payload):
    return store.insert(
        "subtasks",
        {"task_id": task_id, "user_id": user_id, "title": payload.title.strip(), "completed": payload.completed},
    )


def update_subtask(store: EntityStore, subtask_id: str, values: dict):
    rows = store.update("subtasks", values, {"id": subtask_id})
    return rows[0] if rows else None


def delete_subtask(store: EntityStore, subtask_id: str) -> bool:
    return store.delete("subtasks", {"id": subtask_id}) > 0


# -- task notes ---------------------------------------------------------------

def list_task_notes(store: EntityStore, task_id: str):
    return store.select("task_notes", {"task_id": task_id}, order=["created_at", "id"])


def create_task_note(store: EntityStore, task_id: str, user_id: str, content: str):
    return store.insert("task_notes", {"task_id": task_id, "user_id": user_id, "content": content})


def delete_task_note(store: EntityStore, task_id: str, note_id: str) -> bool:
    return store.delete("task_notes", {"id": note_id, "task_id": task_id}) > 0
