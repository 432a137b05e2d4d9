import pytest


@pytest.fixture
def project_id(client, auth_headers):
    resp = client.post("/projects/", json={"name": "Board"}, headers=auth_headers)
    return resp.json()["id"]


def _add(client, headers, project_id, title, **extra):
    resp = client.post(f"/projects/{project_id}/tasks/", json=dict(title=title, **extra), headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def _tree_titles(nodes):
    return [(n["title"], _tree_titles(n["children"])) for n in nodes]


def test_tasks_append_within_their_sibling_group(client, auth_headers, project_id):
    a = _add(client, auth_headers, project_id, "A")
    b = _add(client, auth_headers, project_id, "B")
    a1 = _add(client, auth_headers, project_id, "A1", parent_id=a["id"])
    a2 = _add(client, auth_headers, project_id, "A2", parent_id=a["id"])
    assert (a["order_index"], b["order_index"]) == (0, 1)
    assert (a1["order_index"], a2["order_index"]) == (0, 1)

    tree = client.get(f"/projects/{project_id}/tasks/", headers=auth_headers).json()
    assert _tree_titles(tree) == [("A", [("A1", []), ("A2", [])]), ("B", [])]


def test_parent_must_belong_to_the_project(client, auth_headers, project_id):
    other = client.post("/projects/", json={"name": "Other"}, headers=auth_headers).json()
    foreign = _add(client, auth_headers, other["id"], "Foreign")
    resp = client.post(
        f"/projects/{project_id}/tasks/", json={"title": "X", "parent_id": foreign["id"]}, headers=auth_headers
    )
    assert resp.status_code == 400


def test_edit_and_status_change(client, auth_headers, project_id):
    task = _add(client, auth_headers, project_id, "Draft", due_date="2026-04-01")
    resp = client.patch(
        f"/projects/{project_id}/tasks/{task['id']}",
        json={"title": "  Final  ", "description": "ready", "due_date": None},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Final"
    assert body["description"] == "ready"
    assert body["due_date"] is None

    resp = client.patch(f"/projects/{project_id}/tasks/{task['id']}/status", json={"status": "done"}, headers=auth_headers)
    assert resp.json()["status"] == "done"

    bad = client.patch(f"/projects/{project_id}/tasks/{task['id']}/status", json={"status": "later"}, headers=auth_headers)
    assert bad.status_code == 422


def test_move_up_and_down(client, auth_headers, project_id):
    for title in "ABC":
        _add(client, auth_headers, project_id, title)
    tree = client.get(f"/projects/{project_id}/tasks/", headers=auth_headers).json()
    b = tree[1]

    resp = client.post(f"/projects/{project_id}/tasks/{b['id']}/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.json() == {"moved": True}
    tree = client.get(f"/projects/{project_id}/tasks/", headers=auth_headers).json()
    assert [t["title"] for t in tree] == ["B", "A", "C"]
    assert [t["order_index"] for t in tree] == [0, 1, 2]

    resp = client.post(f"/projects/{project_id}/tasks/{b['id']}/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.json() == {"moved": False}


def test_move_stays_inside_the_sibling_group(client, auth_headers, project_id):
    parent = _add(client, auth_headers, project_id, "Parent")
    child = _add(client, auth_headers, project_id, "Child", parent_id=parent["id"])
    _add(client, auth_headers, project_id, "Sibling of parent")

    resp = client.post(f"/projects/{project_id}/tasks/{child['id']}/move", json={"direction": "down"}, headers=auth_headers)
    assert resp.json() == {"moved": False}


def test_delete_removes_the_whole_subtree(client, auth_headers, project_id):
    root = _add(client, auth_headers, project_id, "Root")
    child = _add(client, auth_headers, project_id, "Child", parent_id=root["id"])
    _add(client, auth_headers, project_id, "Grandchild", parent_id=child["id"])
    keep = _add(client, auth_headers, project_id, "Keep")
    client.post(f"/projects/{project_id}/tasks/{child['id']}/subtasks", json={"title": "s"}, headers=auth_headers)

    assert client.delete(f"/projects/{project_id}/tasks/{root['id']}", headers=auth_headers).status_code == 204
    tree = client.get(f"/projects/{project_id}/tasks/", headers=auth_headers).json()
    assert [t["id"] for t in tree] == [keep["id"]]
    assert client.get(f"/projects/{project_id}/tasks/{child['id']}/subtasks", headers=auth_headers).status_code == 404


def test_subtasks_crud(client, auth_headers, project_id):
    task = _add(client, auth_headers, project_id, "Task")
    base = f"/projects/{project_id}/tasks/{task['id']}/subtasks"
    sub = client.post(base, json={"title": "Step 1"}, headers=auth_headers).json()
    assert sub["completed"] is False

    resp = client.patch(f"{base}/{sub['id']}", json={"completed": True}, headers=auth_headers)
    assert resp.json()["completed"] is True
    assert [s["title"] for s in client.get(base, headers=auth_headers).json()] == ["Step 1"]

    assert client.delete(f"{base}/{sub['id']}", headers=auth_headers).status_code == 204
    assert client.delete(f"{base}/{sub['id']}", headers=auth_headers).status_code == 404


def test_task_notes(client, auth_headers, project_id):
    task = _add(client, auth_headers, project_id, "Task")
    base = f"/projects/{project_id}/tasks/{task['id']}/notes"
    note = client.post(base, json={"content": "call the printer"}, headers=auth_headers).json()
    assert [n["content"] for n in client.get(base, headers=auth_headers).json()] == ["call the printer"]
    assert client.delete(f"{base}/{note['id']}", headers=auth_headers).status_code == 204
    assert client.get(base, headers=auth_headers).json() == []


def test_unknown_task_is_404(client, auth_headers, project_id):
    assert client.get(f"/projects/{project_id}/tasks/missing", headers=auth_headers).status_code == 404
    resp = client.post(f"/projects/{project_id}/tasks/missing/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.status_code == 404
