"""
Table-addressed entity store.

Every project section is reached through the same small contract: select,
insert, update, delete and upsert rows by table name, plus a change feed that
notifies subscribers after each successful write. Rows go in and come out as
plain dicts so that the domain services never touch ORM objects.

Filters are a mapping of column name to either a plain value (equality,
``None`` meaning IS NULL) or an ``Op`` built with ``neq``, ``in_``,
``IS_NULL`` or ``NOT_NULL``. Order keys are column names, prefixed with ``-``
for descending.
"""
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.base import Base, utcnow
from models.project import Project
from models.task import Task
from models.subtask import Subtask
from models.task_note import TaskNote
from models.project_note import ProjectNote
from models.schedule import Schedule
from models.document import Document
from models.meeting import Meeting
from models.project_return import ProjectReturn
from models.design_requirement import DesignRequirement
from models.text_content_requirement import TextContentRequirement
from models.video_requirement import VideoRequirement
from models.image_asset import ImageAsset
from models.schedule_cell import ScheduleCell
from models.ui_preference import UIPreference
from models.brand import Brand
from models.brand_project import BrandProject
from models.creator import Creator, CreatorBrand

logger = logging.getLogger(__name__)

TABLES: dict[str, type[Base]] = {
    "projects": Project,
    "tasks": Task,
    "subtasks": Subtask,
    "task_notes": TaskNote,
    "project_notes": ProjectNote,
    "schedules": Schedule,
    "documents": Document,
    "meetings": Meeting,
    "returns": ProjectReturn,
    "design_requirements": DesignRequirement,
    "text_content_requirements": TextContentRequirement,
    "video_requirements": VideoRequirement,
    "image_assets": ImageAsset,
    "project_schedules": ScheduleCell,
    "ui_preferences": UIPreference,
    "brands": Brand,
    "brand_projects": BrandProject,
    "creators": Creator,
    "creator_brands": CreatorBrand,
}

Row = dict[str, Any]


class StoreError(Exception):
    """A store call failed (bad table/column, constraint violation, database error)."""


@dataclass(frozen=True)
class Op:
    name: str
    value: Any = None


def neq(value: Any) -> Op:
    return Op("neq", value)


def in_(values: Iterable[Any]) -> Op:
    return Op("in", tuple(values))


IS_NULL = Op("is_null")
NOT_NULL = Op("not_null")


@dataclass
class ChangeEvent:
    table: str
    event: str  # INSERT | UPDATE | DELETE
    new: Row | None = None
    old: Row | None = None


@dataclass
class Subscription:
    id: int
    table: str
    filters: dict[str, Any] = field(default_factory=dict)
    callback: Callable[[ChangeEvent], None] | None = None

    def matches(self, change: ChangeEvent) -> bool:
        if change.table != self.table:
            return False
        row = change.new if change.new is not None else change.old
        if row is None:
            return False
        return all(row.get(k) == v for k, v in self.filters.items())


class ChangeFeed:
    """In-process change notifications, one subscription per (table, equality filter)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._subs: dict[int, Subscription] = {}
        self._ids = itertools.count(1)

    def subscribe(self, table: str, filters: dict[str, Any] | None, callback: Callable[[ChangeEvent], None]) -> int:
        with self._lock:
            sub = Subscription(id=next(self._ids), table=table, filters=dict(filters or {}), callback=callback)
            self._subs[sub.id] = sub
        return sub.id

    def unsubscribe(self, handle: int) -> None:
        with self._lock:
            self._subs.pop(handle, None)

    def publish(self, change: ChangeEvent) -> None:
        with self._lock:
            targets = [s for s in self._subs.values() if s.matches(change)]
        for sub in targets:
            try:
                sub.callback(change)
            except Exception:
                logger.exception("Change subscriber %s failed on %s %s", sub.id, change.event, change.table)


change_feed = ChangeFeed()


def row_to_dict(obj: Base) -> Row:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


def clear_nulls(table: str, values: Row) -> tuple[Row, list[str]]:
    """
    Turn an explicit None on a NOT NULL column into that column's default.

    Returns the cleaned values and the names of NOT NULL columns that were set
    to None but have no scalar default to fall back on.
    """
    model = TABLES.get(table)
    if model is None:
        raise StoreError(f"Unknown table: {table}")
    cleaned: Row = {}
    rejected: list[str] = []
    for name, value in values.items():
        col = model.__table__.columns.get(name)
        if value is not None or col is None or col.nullable:
            cleaned[name] = value
        elif col.default is not None and col.default.is_scalar:
            cleaned[name] = col.default.arg
        else:
            rejected.append(name)
    return cleaned, rejected


class EntityStore:
    def __init__(self, db: Session, feed: ChangeFeed | None = None):
        self.db = db
        self.feed = feed if feed is not None else change_feed

    # -- helpers -----------------------------------------------------------

    def _model(self, table: str) -> type[Base]:
        model = TABLES.get(table)
        if model is None:
            raise StoreError(f"Unknown table: {table}")
        return model

    def _column(self, model: type[Base], name: str):
        col = model.__table__.columns.get(name)
        if col is None:
            raise StoreError(f"Unknown column {model.__tablename__}.{name}")
        return getattr(model, name)

    def _check_columns(self, model: type[Base], row: Row) -> None:
        for name in row:
            self._column(model, name)

    def _query(self, table: str, filters: dict[str, Any] | None):
        model = self._model(table)
        q = self.db.query(model)
        for name, value in (filters or {}).items():
            col = self._column(model, name)
            if isinstance(value, Op):
                if value.name == "neq":
                    q = q.filter(col != value.value)
                elif value.name == "in":
                    q = q.filter(col.in_(value.value))
                elif value.name == "is_null":
                    q = q.filter(col.is_(None))
                elif value.name == "not_null":
                    q = q.filter(col.isnot(None))
                else:
                    raise StoreError(f"Unsupported filter op: {value.name}")
            elif value is None:
                q = q.filter(col.is_(None))
            else:
                q = q.filter(col == value)
        return model, q

    def _fail(self, action: str, table: str, exc: Exception):
        self.db.rollback()
        logger.error("Store %s on %s failed: %s", action, table, exc)
        raise StoreError(f"{action} on {table} failed: {exc}") from exc

    # -- reads -------------------------------------------------------------

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order: list[str] | None = None,
        limit: int | None = None,
    ) -> list[Row]:
        model, q = self._query(table, filters)
        for key in order or []:
            descending = key.startswith("-")
            col = self._column(model, key.lstrip("-"))
            q = q.order_by(desc(col) if descending else asc(col))
        if limit is not None:
            q = q.limit(limit)
        try:
            return [row_to_dict(obj) for obj in q.all()]
        except SQLAlchemyError as e:
            self._fail("select", table, e)

    def select_one(self, table: str, filters: dict[str, Any] | None = None) -> Row | None:
        """Exactly one row or None; more than one match is an error."""
        rows = self.select(table, filters, limit=2)
        if len(rows) > 1:
            raise StoreError(f"Expected at most one row in {table} for {filters}")
        return rows[0] if rows else None

    # -- writes ------------------------------------------------------------

    def insert(self, table: str, rows: Row | list[Row]) -> Row | list[Row]:
        model = self._model(table)
        many = isinstance(rows, list)
        payloads = rows if many else [rows]
        for payload in payloads:
            self._check_columns(model, payload)
        objs = [model(**payload) for payload in payloads]
        try:
            self.db.add_all(objs)
            self.db.commit()
            for obj in objs:
                self.db.refresh(obj)
        except SQLAlchemyError as e:
            self._fail("insert", table, e)
        inserted = [row_to_dict(obj) for obj in objs]
        for row in inserted:
            self.feed.publish(ChangeEvent(table=table, event="INSERT", new=row))
        return inserted if many else inserted[0]

    def update(self, table: str, values: Row, filters: dict[str, Any]) -> list[Row]:
        model, q = self._query(table, filters)
        self._check_columns(model, values)
        try:
            objs = q.all()
            olds = [row_to_dict(obj) for obj in objs]
            for obj in objs:
                for k, v in values.items():
                    setattr(obj, k, v)
                if "updated_at" not in values and hasattr(obj, "updated_at"):
                    obj.updated_at = utcnow()
            self.db.commit()
            for obj in objs:
                self.db.refresh(obj)
        except SQLAlchemyError as e:
            self._fail("update", table, e)
        updated = [row_to_dict(obj) for obj in objs]
        for old, new in zip(olds, updated):
            self.feed.publish(ChangeEvent(table=table, event="UPDATE", new=new, old=old))
        return updated

    def delete(self, table: str, filters: dict[str, Any]) -> int:
        _, q = self._query(table, filters)
        try:
            objs = q.all()
            olds = [row_to_dict(obj) for obj in objs]
            for obj in objs:
                self.db.delete(obj)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("delete", table, e)
        for old in olds:
            self.feed.publish(ChangeEvent(table=table, event="DELETE", old=old))
        return len(olds)

    def upsert(self, table: str, row: Row, conflict_keys: list[str]) -> Row:
        missing = [k for k in conflict_keys if k not in row]
        if missing:
            raise StoreError(f"Upsert on {table} missing conflict keys: {missing}")
        key_filter = {k: row[k] for k in conflict_keys}
        if self.select_one(table, key_filter) is None:
            return self.insert(table, row)
        values = {k: v for k, v in row.items() if k not in conflict_keys}
        return self.update(table, values, key_filter)[0]

    # -- realtime ----------------------------------------------------------

    def subscribe(self, table: str, filters: dict[str, Any] | None, callback: Callable[[ChangeEvent], None]) -> int:
        self._model(table)
        return self.feed.subscribe(table, filters, callback)

    def unsubscribe(self, handle: int) -> None:
        self.feed.unsubscribe(handle)