def _create(client, headers, **body):
    payload = {"name": "Launch"}
    payload.update(body)
    resp = client.post("/projects/", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def _add_task(client, headers, project_id, title, **extra):
    resp = client.post(f"/projects/{project_id}/tasks/", json=dict(title=title, **extra), headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_requires_auth(client):
    assert client.get("/projects/").status_code == 401


def test_create_read_update_delete(client, auth_headers):
    project = _create(client, auth_headers, description="Crowdfunding run", brand_type="brand_b")
    assert project["status"] == "in_progress"
    assert project["brand_type"] == "brand_b"
    assert project["is_shared"] is False

    resp = client.patch(f"/projects/{project['id']}", json={"status": "on_hold", "name": "Relaunch"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "on_hold"
    assert resp.json()["name"] == "Relaunch"

    assert client.get(f"/projects/{project['id']}", headers=auth_headers).json()["name"] == "Relaunch"
    assert client.delete(f"/projects/{project['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/projects/{project['id']}", headers=auth_headers).status_code == 404


def test_list_filters_and_progress(client, auth_headers):
    a = _create(client, auth_headers, name="Alpha", brand_type="brand_a")
    _create(client, auth_headers, name="Beta", brand_type="brand_b", status="done")
    _add_task(client, auth_headers, a["id"], "one", status="done")
    _add_task(client, auth_headers, a["id"], "two")

    all_rows = client.get("/projects/", headers=auth_headers).json()
    assert {p["name"] for p in all_rows} == {"Alpha", "Beta"}
    alpha = next(p for p in all_rows if p["name"] == "Alpha")
    assert alpha["progress"] == {"total": 2, "completed": 1, "percent": 50}

    assert [p["name"] for p in client.get("/projects/?brand_type=brand_b", headers=auth_headers).json()] == ["Beta"]
    assert [p["name"] for p in client.get("/projects/?status=done", headers=auth_headers).json()] == ["Beta"]
    assert [p["name"] for p in client.get("/projects/?q=alp", headers=auth_headers).json()] == ["Alpha"]

    counts = client.get("/projects/counts", headers=auth_headers).json()
    assert counts == {"brand_a": 1, "brand_b": 1}


def test_other_users_projects_are_hidden(client, auth_headers, sign_up):
    project = _create(client, auth_headers)
    intruder = sign_up("intruder@example.com")
    assert client.get("/projects/", headers=intruder).json() == []
    assert client.get(f"/projects/{project['id']}", headers=intruder).status_code == 404
    assert client.delete(f"/projects/{project['id']}", headers=intruder).status_code == 404


def test_progress_endpoint(client, auth_headers):
    project = _create(client, auth_headers)
    for status in ("done", "not_started", "in_progress"):
        _add_task(client, auth_headers, project["id"], status, status=status)
    resp = client.get(f"/projects/{project['id']}/progress", headers=auth_headers)
    assert resp.json() == {"total": 3, "completed": 1, "percent": 33}


def test_upcoming_tasks(client, auth_headers):
    project = _create(client, auth_headers)
    _add_task(client, auth_headers, project["id"], "late", due_date="2026-02-01")
    _add_task(client, auth_headers, project["id"], "soon", due_date="2026-01-15")
    _add_task(client, auth_headers, project["id"], "finished", due_date="2026-01-01", status="done")
    _add_task(client, auth_headers, project["id"], "undated")
    rows = client.get(f"/projects/{project['id']}/upcoming-tasks", headers=auth_headers).json()
    assert [t["title"] for t in rows] == ["soon", "late"]


def test_duplicate_project(client, auth_headers):
    project = _create(client, auth_headers, name="Original")
    parent = _add_task(client, auth_headers, project["id"], "Parent")
    _add_task(client, auth_headers, project["id"], "Child", parent_id=parent["id"])
    client.post(f"/projects/{project['id']}/schedules", json={"content": "Kickoff"}, headers=auth_headers)

    resp = client.post(f"/projects/{project['id']}/duplicate", headers=auth_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "ok"
    assert body["project"]["name"] == "Original copy"
    assert body["copied"]["tasks"] == 2
    assert body["copied"]["schedules"] == 1

    tree = client.get(f"/projects/{body['project']['id']}/tasks/", headers=auth_headers).json()
    assert [t["title"] for t in tree] == ["Parent"]
    assert [t["title"] for t in tree[0]["children"]] == ["Child"]


def test_sharing_round_trip(client, auth_headers):
    project = _create(client, auth_headers, name="Shared one")
    task = _add_task(client, auth_headers, project["id"], "Visible", status="done")
    client.post(f"/projects/{project['id']}/tasks/", json={"title": "Nested", "parent_id": task["id"]}, headers=auth_headers)
    client.post(f"/projects/{project['id']}/notes", json={"content": "hello"}, headers=auth_headers)

    share = client.post(f"/projects/{project['id']}/share", headers=auth_headers).json()
    assert share["is_shared"] is True
    assert share["share_token"]
    assert share["share_url"].endswith(f"?share={share['share_token']}")

    view = client.get(f"/shared/{share['share_token']}")
    assert view.status_code == 200
    body = view.json()
    assert body["read_only"] is True
    assert body["project"]["name"] == "Shared one"
    assert body["tasks"][0]["children"][0]["title"] == "Nested"
    assert body["sections"]["notes"][0]["content"] == "hello"
    assert body["progress"] == {"total": 2, "completed": 1, "percent": 50}

    off = client.delete(f"/projects/{project['id']}/share", headers=auth_headers).json()
    assert off["is_shared"] is False
    assert off["share_url"] is None
    assert client.get(f"/shared/{share['share_token']}").status_code == 404

    again = client.post(f"/projects/{project['id']}/share", headers=auth_headers).json()
    assert again["share_token"] == share["share_token"]


def test_unknown_share_token(client):
    assert client.get("/shared/does-not-exist").status_code == 404


def test_explicit_null_resets_description(client, auth_headers):
    project = _create(client, auth_headers, description="Crowdfunding run")
    resp = client.patch(f"/projects/{project['id']}", json={"description": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["description"] == ""
    assert client.patch(f"/projects/{project['id']}", json={"name": None}, headers=auth_headers).status_code == 422
