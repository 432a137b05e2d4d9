"""
Manual ordering of project list items through an integer ``order_index``.

Tasks, schedules, returns, image assets, design requirements and meetings are
shown in ascending ``order_index`` and moved with up/down controls. Callers
always reload the list after a move; that reload is the only recovery path
when a swap is left half-written.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping, Sequence

from crud.store import EntityStore, StoreError

logger = logging.getLogger(__name__)

ORDERABLE_TABLES = (
    "tasks",
    "schedules",
    "returns",
    "image_assets",
    "design_requirements",
    "meetings",
)


class ReorderError(Exception):
    pass


def sort_siblings(rows: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Ascending order_index; equal indices fall back to creation time, then id."""
    return sorted(
        rows,
        key=lambda r: (
            r.get("order_index") or 0,
            r.get("created_at") or datetime.min,
            str(r.get("id")),
        ),
    )


def sibling_scope(table: str, project_id: str, parent_id: str | None = None) -> dict[str, Any]:
    scope = {"project_id": project_id}
    if table == "tasks":
        scope["parent_id"] = parent_id
    return scope


class OrderSequencer(ABC):
    """Append and swap positions within one sibling group."""

    @abstractmethod
    def next_order_index(self, table: str, scope: dict[str, Any]) -> int:
        ...

    @abstractmethod
    def move_up(self, table: str, items: Sequence[Mapping[str, Any]], index: int) -> bool:
        ...

    @abstractmethod
    def move_down(self, table: str, items: Sequence[Mapping[str, Any]], index: int) -> bool:
        ...


class OptimisticOrderSequencer(OrderSequencer):
    """
    Read-then-write sequencing with no locking.

    Two concurrent appends can hand out the same index, and a swap is two
    separate updates, so a failure between them leaves both rows on the same
    value until the next successful move.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def next_order_index(self, table: str, scope: dict[str, Any]) -> int:
        self._check_table(table)
        top = self.store.select(table, scope, order=["-order_index"], limit=1)
        return top[0]["order_index"] + 1 if top else 0

    def move_up(self, table: str, items: Sequence[Mapping[str, Any]], index: int) -> bool:
        self._check_index(items, index)
        if index == 0:
            return False
        self._swap(table, items[index], items[index - 1])
        return True

    def move_down(self, table: str, items: Sequence[Mapping[str, Any]], index: int) -> bool:
        self._check_index(items, index)
        if index == len(items) - 1:
            return False
        self._swap(table, items[index], items[index + 1])
        return True

    def _swap(self, table: str, item: Mapping[str, Any], neighbour: Mapping[str, Any]) -> None:
        self._check_table(table)
        item_index = item["order_index"]
        neighbour_index = neighbour["order_index"]
        try:
            self.store.update(table, {"order_index": item_index}, {"id": neighbour["id"]})
            self.store.update(table, {"order_index": neighbour_index}, {"id": item["id"]})
        except StoreError as e:
            logger.error("Swap of %s %s and %s aborted: %s", table, item["id"], neighbour["id"], e)
            raise ReorderError(f"Could not reorder {table}") from e

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in ORDERABLE_TABLES:
            raise ReorderError(f"{table} is not orderable")

    @staticmethod
    def _check_index(items: Sequence[Any], index: int) -> None:
        if index < 0 or index >= len(items):
            raise ReorderError(f"Position {index} is outside a list of {len(items)}")
