"""
Task tree assembly.

Tasks are stored flat with an optional ``parent_id``. ``build_hierarchy``
turns a project's task rows, already sorted by ``order_index``, into a forest.
A task whose parent is not in the input is promoted to a root. Parent cycles
are not reported: links are attached in input order and the link that would
close a loop is dropped, so that task becomes a root instead. Every input row
appears exactly once.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping


@dataclass
class TaskNode:
    task: Mapping[str, Any]
    children: list["TaskNode"] = field(default_factory=list)

    @property
    def id(self):
        return self.task["id"]

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.task)
        data["children"] = [child.to_dict() for child in self.children]
        return data


def build_hierarchy(rows: Iterable[Mapping[str, Any]]) -> list[TaskNode]:
    rows = list(rows)
    nodes: dict[Any, TaskNode] = {}
    for row in rows:
        nodes[row["id"]] = TaskNode(task=row)

    attached_to: dict[Any, Any] = {}
    roots: list[TaskNode] = []
    for row in rows:
        node = nodes[row["id"]]
        parent = nodes.get(row.get("parent_id")) if row.get("parent_id") else None
        if parent is not None and not _is_above(node.id, parent.id, attached_to):
            parent.children.append(node)
            attached_to[node.id] = parent.id
        else:
            roots.append(node)
    return roots


def _is_above(task_id, candidate_parent_id, attached_to) -> bool:
    current = candidate_parent_id
    while current is not None:
        if current == task_id:
            return True
        current = attached_to.get(current)
    return False


def walk(forest: Iterable[TaskNode]) -> Iterator[TaskNode]:
    """Depth-first, parents before children."""
    for node in forest:
        yield node
        yield from walk(node.children)


def flatten(forest: Iterable[TaskNode]) -> list[Mapping[str, Any]]:
    return [node.task for node in walk(forest)]


def count_nodes(forest: Iterable[TaskNode]) -> int:
    return sum(1 for _ in walk(forest))


def descendant_ids(rows: Iterable[Mapping[str, Any]], task_id: Any) -> list[Any]:
    """Ids of every task below ``task_id``, nearest first."""
    children: dict[Any, list[Any]] = {}
    for row in rows:
        if row.get("parent_id"):
            children.setdefault(row["parent_id"], []).append(row["id"])

    found: list[Any] = []
    seen = {task_id}
    frontier = [task_id]
    while frontier:
        nxt = []
        for pid in frontier:
            for cid in children.get(pid, []):
                if cid not in seen:
                    seen.add(cid)
                    found.append(cid)
                    nxt.append(cid)
        frontier = nxt
    return found
