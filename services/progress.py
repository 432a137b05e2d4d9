import logging
import threading
from dataclasses import dataclass
from typing import Iterable

from crud.store import ChangeEvent, EntityStore
from models.task import TaskStatus

logger = logging.getLogger(__name__)

DONE = TaskStatus.DONE.value


@dataclass
class Progress:
    total: int = 0
    completed: int = 0

    @property
    def percent(self) -> int:
        # Half-up rounding, so 1 of 8 shows as 13
        return int(self.completed * 100 / self.total + 0.5) if self.total else 0

    def as_dict(self) -> dict:
        return {"total": self.total, "completed": self.completed, "percent": self.percent}


def compute_progress(statuses: Iterable[str]) -> Progress:
    statuses = list(statuses)
    return Progress(total=len(statuses), completed=sum(1 for s in statuses if s == DONE))


def project_progress(store: EntityStore, project_id: str) -> Progress:
    rows = store.select("tasks", {"project_id": project_id})
    return compute_progress(r["status"] for r in rows)


class ProgressTracker:
    """
    Keeps one project's task progress current from the store's change feed.

    Counts are loaded once, then adjusted from INSERT/UPDATE/DELETE events on
    the project's tasks. Call ``close`` to drop the subscription.
    The HTTP app does not run one; it is for code that holds an ``EntityStore``
    and wants live progress, such as a worker or a push channel.
    """

    def __init__(self, store: EntityStore, project_id: str):
        self.project_id = project_id
        self._store = store
        self._lock = threading.Lock()
        self.progress = project_progress(store, project_id)
        self._handle = store.subscribe("tasks", {"project_id": project_id}, self._on_change)

    def _on_change(self, change: ChangeEvent) -> None:
        old_done = bool(change.old and change.old.get("status") == DONE)
        new_done = bool(change.new and change.new.get("status") == DONE)
        with self._lock:
            if change.event == "INSERT":
                self.progress.total += 1
            elif change.event == "DELETE":
                self.progress.total -= 1
            self.progress.completed += int(new_done) - int(old_done)
        logger.debug("Progress for %s now %s", self.project_id, self.progress.as_dict())

    def close(self) -> None:
        if self._handle is not None:
            self._store.unsubscribe(self._handle)
            self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
