from datetime import date

import pytest

from crud.store import IS_NULL, NOT_NULL, ChangeFeed, EntityStore, StoreError, in_, neq


def _task(store, project, title, **extra):
    row = {"project_id": project["id"], "user_id": project["user_id"], "title": title}
    row.update(extra)
    return store.insert("tasks", row)


def test_insert_assigns_id_and_timestamps(store, project):
    row = _task(store, project, "One")
    assert row["id"]
    assert row["created_at"] is not None
    assert row["updated_at"] is not None
    assert row["status"] == "not_started"


def test_insert_many_returns_list(store, project):
    rows = store.insert(
        "tasks",
        [
            {"project_id": project["id"], "user_id": project["user_id"], "title": "A"},
            {"project_id": project["id"], "user_id": project["user_id"], "title": "B"},
        ],
    )
    assert [r["title"] for r in rows] == ["A", "B"]


def test_filter_ops(store, project):
    a = _task(store, project, "A", status="done", due_date=date(2026, 1, 5))
    b = _task(store, project, "B", parent_id=a["id"])
    c = _task(store, project, "C", status="in_progress")

    def titles(filters):
        return sorted(r["title"] for r in store.select("tasks", filters))

    assert titles({"status": neq("done")}) == ["B", "C"]
    assert titles({"id": in_([a["id"], c["id"]])}) == ["A", "C"]
    assert titles({"parent_id": IS_NULL}) == ["A", "C"]
    assert titles({"parent_id": None}) == ["A", "C"]
    assert titles({"parent_id": NOT_NULL}) == ["B"]
    assert titles({"due_date": NOT_NULL, "status": "done"}) == ["A"]
    assert b["parent_id"] == a["id"]


def test_order_and_limit(store, project):
    for i, title in enumerate("ABC"):
        _task(store, project, title, order_index=i)
    rows = store.select("tasks", {"project_id": project["id"]}, order=["-order_index"], limit=2)
    assert [r["title"] for r in rows] == ["C", "B"]


def test_select_one(store, project):
    a = _task(store, project, "A")
    _task(store, project, "B")
    assert store.select_one("tasks", {"id": a["id"]})["title"] == "A"
    assert store.select_one("tasks", {"id": "missing"}) is None
    with pytest.raises(StoreError):
        store.select_one("tasks", {"project_id": project["id"]})


def test_update_returns_rows_and_bumps_updated_at(store, project):
    a = _task(store, project, "A")
    rows = store.update("tasks", {"title": "A2"}, {"id": a["id"]})
    assert len(rows) == 1
    assert rows[0]["title"] == "A2"
    assert rows[0]["updated_at"] >= a["updated_at"]
    assert store.update("tasks", {"title": "x"}, {"id": "missing"}) == []


def test_delete_returns_count(store, project):
    _task(store, project, "A")
    _task(store, project, "B")
    assert store.delete("tasks", {"project_id": project["id"]}) == 2
    assert store.delete("tasks", {"project_id": project["id"]}) == 0


def test_upsert_inserts_then_updates(store, project, test_user):
    row = {
        "project_id": project["id"],
        "user_id": test_user.id,
        "date": date(2026, 3, 1),
        "content": "Launch",
    }
    first = store.upsert("project_schedules", row, conflict_keys=["project_id", "date"])
    second = store.upsert("project_schedules", dict(row, content="Launch day"), conflict_keys=["project_id", "date"])
    assert first["id"] == second["id"]
    assert second["content"] == "Launch day"
    assert len(store.select("project_schedules", {"project_id": project["id"]})) == 1


def test_unknown_table_and_column_raise(store, project):
    with pytest.raises(StoreError):
        store.select("nope")
    with pytest.raises(StoreError):
        store.select("tasks", {"colour": "red"})
    with pytest.raises(StoreError):
        _task(store, project, "A", colour="red")


def test_constraint_violation_raises_store_error_and_session_stays_usable(store, project):
    with pytest.raises(StoreError):
        store.insert("tasks", {"project_id": "no-such-project", "user_id": project["user_id"], "title": "X"})
    assert store.select("tasks", {}) == []


def test_change_feed_delivers_matching_events(store, project):
    events = []
    handle = store.subscribe("tasks", {"project_id": project["id"]}, events.append)

    a = _task(store, project, "A")
    store.update("tasks", {"status": "done"}, {"id": a["id"]})
    store.delete("tasks", {"id": a["id"]})

    assert [e.event for e in events] == ["INSERT", "UPDATE", "DELETE"]
    assert events[1].old["status"] == "not_started"
    assert events[1].new["status"] == "done"
    assert events[2].new is None and events[2].old["id"] == a["id"]

    store.unsubscribe(handle)
    _task(store, project, "B")
    assert len(events) == 3


def test_change_feed_ignores_other_scopes(store, project, test_user):
    other = store.insert("projects", {"name": "Other", "user_id": test_user.id})
    events = []
    store.subscribe("tasks", {"project_id": project["id"]}, events.append)
    _task(store, other, "Elsewhere")
    store.insert("documents", {"project_id": project["id"], "user_id": test_user.id, "name": "Doc"})
    assert events == []


def test_failing_subscriber_does_not_break_writes(store, project):
    def boom(change):
        raise RuntimeError("subscriber bug")

    store.subscribe("tasks", None, boom)
    row = _task(store, project, "Still saved")
    assert store.select_one("tasks", {"id": row["id"]}) is not None


def test_feeds_are_independent(test_db, feed, project):
    other_feed = ChangeFeed()
    seen = []
    other_feed.subscribe("tasks", None, seen.append)
    EntityStore(test_db, feed=feed).insert(
        "tasks", {"project_id": project["id"], "user_id": project["user_id"], "title": "A"}
    )
    assert seen == []
