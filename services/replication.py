"""
Project duplication.

A project is copied as an ordered list of steps, one per dependent section.
Each step reads the source rows oldest first and inserts them one at a time
with a short pause in between, so sections without an ``order_index`` keep
their creation order in the copy. A failing row or fetch is recorded and the
step moves on; the new project is kept whatever the steps manage to copy.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from core.config import settings
from crud.store import EntityStore, Row, StoreError
from models.project import BrandType

logger = logging.getLogger(__name__)


class ReplicationError(Exception):
    """The destination project itself could not be created."""


@dataclass(frozen=True)
class CopyStep:
    section: str
    table: str
    fields: tuple[str, ...]


TASK_FIELDS = ("title", "description", "status", "due_date", "order_index")
SUBTASK_FIELDS = ("title", "completed")
TASK_NOTE_FIELDS = ("content",)

SECTION_STEPS: tuple[CopyStep, ...] = (
    CopyStep("project notes", "project_notes", ("content",)),
    CopyStep("schedules", "schedules", ("content", "milestone", "order_index")),
    CopyStep("documents", "documents", ("name", "url", "memo")),
    CopyStep("meetings", "meetings", ("date", "participants", "summary", "decisions", "order_index")),
    CopyStep("returns", "returns", ("name", "price_range", "description", "status", "order_index")),
    CopyStep(
        "design requirements",
        "design_requirements",
        ("design_tone", "colors", "fonts", "ng_items", "reference_urls", "order_index"),
    ),
    CopyStep("text content requirements", "text_content_requirements", ("name", "url", "memo")),
    CopyStep(
        "video requirements",
        "video_requirements",
        ("video_type", "duration", "required_cuts", "has_narration", "reference_url"),
    ),
    CopyStep("image assets", "image_assets", ("name", "purpose", "url", "status", "order_index")),
)


@dataclass
class ReplicationResult:
    project: Row
    copied: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    failed_sections: list[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        return "partial" if self.errors else "ok"

    def record_error(self, section: str, message: str) -> None:
        self.errors.append(f"{section}: {message}")
        if section not in self.failed_sections:
            self.failed_sections.append(section)

    def summary(self) -> str:
        if not self.errors:
            return "Project duplicated"
        return (
            "Project duplicated, but some sections may be incomplete: "
            + ", ".join(self.failed_sections)
        )


def _pick(row: Row, fields: tuple[str, ...]) -> Row:
    return {f: row[f] for f in fields if f in row}


class ProjectReplicator:
    def __init__(self, store: EntityStore, pause_seconds: float | None = None):
        self.store = store
        self.pause_seconds = settings.DUPLICATE_INSERT_PAUSE_SECONDS if pause_seconds is None else pause_seconds

    def duplicate(self, source_project_id: str, owner_id: str) -> ReplicationResult:
        try:
            source = self.store.select_one("projects", {"id": source_project_id})
        except StoreError as e:
            raise ReplicationError(f"Could not load project {source_project_id}") from e
        if source is None:
            raise ReplicationError(f"Project {source_project_id} not found")

        try:
            project = self.store.insert(
                "projects",
                {
                    "name": f"{source['name']} copy",
                    "description": source.get("description") or "",
                    "status": source["status"],
                    "brand_type": source.get("brand_type") or BrandType.BRAND_A.value,
                    "user_id": owner_id,
                },
            )
        except StoreError as e:
            raise ReplicationError(f"Could not create copy of {source['name']}") from e

        result = ReplicationResult(project=project)
        self.copy_tasks(source_project_id, project["id"], owner_id, result)
        for step in SECTION_STEPS:
            self.copy_section(step, source_project_id, project["id"], owner_id, result)

        if result.errors:
            logger.warning("Duplicated project %s as %s with errors: %s", source_project_id, project["id"], result.errors)
        else:
            logger.info("Duplicated project %s as %s", source_project_id, project["id"])
        return result

    def _fetch(self, section: str, table: str, filters: dict[str, Any], result: ReplicationResult) -> list[Row] | None:
        try:
            return self.store.select(table, filters, order=["created_at", "id"])
        except StoreError as e:
            result.record_error(section, f"could not read {table} ({e})")
            return None

    def _insert(self, section: str, table: str, row: Row, result: ReplicationResult) -> Row | None:
        try:
            inserted = self.store.insert(table, row)
        except StoreError as e:
            result.record_error(section, f"could not copy a row of {table} ({e})")
            return None
        result.copied[section] = result.copied.get(section, 0) + 1
        if self.pause_seconds:
            time.sleep(self.pause_seconds)
        return inserted

    def copy_section(self, step: CopyStep, source_id: str, dest_id: str, owner_id: str, result: ReplicationResult) -> None:
        rows = self._fetch(step.section, step.table, {"project_id": source_id}, result)
        result.copied.setdefault(step.section, 0)
        for row in rows or []:
            payload = _pick(row, step.fields)
            payload.update(project_id=dest_id, user_id=owner_id)
            self._insert(step.section, step.table, payload, result)

    def copy_tasks(self, source_id: str, dest_id: str, owner_id: str, result: ReplicationResult) -> dict[str, str]:
        """Copy tasks, then their subtasks and notes, remapping task ids."""
        for section in ("tasks", "subtasks", "task notes"):
            result.copied.setdefault(section, 0)
        tasks = self._fetch("tasks", "tasks", {"project_id": source_id}, result)
        if not tasks:
            return {}

        id_map: dict[str, str] = {}
        pending_parents: list[tuple[str, str]] = []
        for task in tasks:
            payload = _pick(task, TASK_FIELDS)
            parent_id = task.get("parent_id")
            payload.update(project_id=dest_id, user_id=owner_id, parent_id=id_map.get(parent_id))
            new_task = self._insert("tasks", "tasks", payload, result)
            if new_task is None:
                continue
            id_map[task["id"]] = new_task["id"]
            if parent_id and parent_id not in id_map:
                pending_parents.append((new_task["id"], parent_id))

            self._copy_children("subtasks", "subtasks", SUBTASK_FIELDS, task["id"], new_task["id"], owner_id, result)
            self._copy_children("task notes", "task_notes", TASK_NOTE_FIELDS, task["id"], new_task["id"], owner_id, result)

        # Children created before their parent get linked once the parent exists
        for new_id, source_parent in pending_parents:
            if source_parent not in id_map:
                continue
            try:
                self.store.update("tasks", {"parent_id": id_map[source_parent]}, {"id": new_id})
            except StoreError as e:
                result.record_error("tasks", f"could not relink a subtask to its parent ({e})")
        return id_map

    def _copy_children(
        self,
        section: str,
        table: str,
        fields: tuple[str, ...],
        source_task_id: str,
        dest_task_id: str,
        owner_id: str,
        result: ReplicationResult,
    ) -> None:
        rows = self._fetch(section, table, {"task_id": source_task_id}, result)
        for row in rows or []:
            payload = _pick(row, fields)
            payload.update(task_id=dest_task_id, user_id=owner_id)
            self._insert(section, table, payload, result)
