import pytest

from models.project_note import ProjectNote


@pytest.fixture
def base(client, auth_headers):
    project = client.post("/projects/", json={"name": "Sections"}, headers=auth_headers).json()
    return f"/projects/{project['id']}"


@pytest.mark.parametrize(
    "path, payload, field, value",
    [
        ("notes", {"content": "Hello"}, "content", "Bye"),
        ("documents", {"name": "Brief", "url": "https://example.com/brief"}, "memo", "v2"),
        ("text-content-requirements", {"name": "Story"}, "url", "https://example.com/story"),
        ("video-requirements", {"video_type": "Teaser", "has_narration": True}, "duration", "30s"),
    ],
)
def test_unordered_section_crud(client, auth_headers, base, path, payload, field, value):
    created = client.post(f"{base}/{path}", json=payload, headers=auth_headers)
    assert created.status_code == 201, created.text
    row = created.json()

    updated = client.patch(f"{base}/{path}/{row['id']}", json={field: value}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()[field] == value

    assert len(client.get(f"{base}/{path}", headers=auth_headers).json()) == 1
    assert client.delete(f"{base}/{path}/{row['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"{base}/{path}", headers=auth_headers).json() == []
    assert client.delete(f"{base}/{path}/{row['id']}", headers=auth_headers).status_code == 404


@pytest.mark.parametrize(
    "path, make",
    [
        ("schedules", lambda i: {"content": f"row {i}"}),
        ("meetings", lambda i: {"summary": f"row {i}"}),
        ("returns", lambda i: {"name": f"row {i}"}),
        ("design-requirements", lambda i: {"design_tone": f"row {i}"}),
        ("image-assets", lambda i: {"name": f"row {i}"}),
    ],
)
def test_ordered_sections_append_and_move(client, auth_headers, base, path, make):
    rows = [client.post(f"{base}/{path}", json=make(i), headers=auth_headers).json() for i in range(3)]
    assert [r["order_index"] for r in rows] == [0, 1, 2]

    resp = client.post(f"{base}/{path}/{rows[2]['id']}/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.json() == {"moved": True}
    listed = client.get(f"{base}/{path}", headers=auth_headers).json()
    assert [r["id"] for r in listed] == [rows[0]["id"], rows[2]["id"], rows[1]["id"]]

    resp = client.post(f"{base}/{path}/{rows[0]['id']}/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.json() == {"moved": False}


def test_unordered_sections_have_no_move_route(client, auth_headers, base):
    doc = client.post(f"{base}/documents", json={"name": "Brief"}, headers=auth_headers).json()
    resp = client.post(f"{base}/documents/{doc['id']}/move", json={"direction": "up"}, headers=auth_headers)
    assert resp.status_code in (404, 405)


def test_move_of_unknown_row_is_404(client, auth_headers, base):
    resp = client.post(f"{base}/returns/missing/move", json={"direction": "down"}, headers=auth_headers)
    assert resp.status_code == 404


def test_return_status_is_validated(client, auth_headers, base):
    resp = client.post(f"{base}/returns", json={"name": "Tier", "status": "shipped"}, headers=auth_headers)
    assert resp.status_code == 422


def test_duplicate_return_appends_copy(client, auth_headers, base):
    original = client.post(
        f"{base}/returns", json={"name": "Early bird", "price_range": "$20-$40", "status": "confirmed"},
        headers=auth_headers,
    ).json()
    client.post(f"{base}/returns", json={"name": "Backer"}, headers=auth_headers)

    resp = client.post(f"{base}/returns/{original['id']}/duplicate", headers=auth_headers)
    assert resp.status_code == 201
    copy = resp.json()
    assert copy["name"] == "Early bird (copy)"
    assert copy["price_range"] == "$20-$40"
    assert copy["status"] == "confirmed"
    assert copy["order_index"] == 2

    assert client.post(f"{base}/returns/missing/duplicate", headers=auth_headers).status_code == 404


def test_sections_are_owner_scoped(client, auth_headers, base, sign_up):
    client.post(f"{base}/notes", json={"content": "private"}, headers=auth_headers)
    stranger = sign_up("stranger@example.com")
    assert client.get(f"{base}/notes", headers=stranger).status_code == 404


def test_deleting_project_removes_sections(client, auth_headers, base, test_db):
    client.post(f"{base}/notes", json={"content": "gone soon"}, headers=auth_headers)
    client.delete(base, headers=auth_headers)
    assert test_db.query(ProjectNote).count() == 0


def test_explicit_null_clears_optional_text(client, auth_headers, base):
    doc = client.post(f"{base}/documents", json={"name": "Brief", "memo": "draft"}, headers=auth_headers).json()
    resp = client.patch(f"{base}/documents/{doc['id']}", json={"memo": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["memo"] == ""
    assert resp.json()["name"] == "Brief"

    resp = client.patch(f"{base}/documents/{doc['id']}", json={"name": None}, headers=auth_headers)
    assert resp.status_code == 422
    assert client.get(f"{base}/documents", headers=auth_headers).json()[0]["name"] == "Brief"
