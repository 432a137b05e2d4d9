from datetime import datetime, timedelta, timezone

from models.session import AuthSession


def test_signup_returns_token_and_user(client):
    resp = client.post("/auth/signup", json={"email": "New@Example.com", "password": "secret123", "name": "New"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "new@example.com"


def test_duplicate_signup_conflicts(client, sign_up):
    sign_up("dup@example.com")
    resp = client.post("/auth/signup", json={"email": "dup@example.com", "password": "secret123"})
    assert resp.status_code == 409


def test_signin_and_me(client, sign_up):
    sign_up("me2@example.com")
    resp = client.post("/auth/signin", json={"email": "me2@example.com", "password": "secret123"})
    assert resp.status_code == 200
    headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
    me = client.get("/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "me2@example.com"
    assert me.json()["display_name"] == "Me"


def test_wrong_password_is_rejected(client, sign_up):
    sign_up("pw@example.com")
    resp = client.post("/auth/signin", json={"email": "pw@example.com", "password": "nope-nope"})
    assert resp.status_code == 401


def test_missing_or_bad_token(client):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer junk"}).status_code == 401


def test_signout_invalidates_token(client, auth_headers):
    assert client.post("/auth/signout", headers=auth_headers).status_code == 204
    assert client.get("/auth/me", headers=auth_headers).status_code == 401


def test_expired_token_is_rejected(client, test_db, auth_headers):
    token = auth_headers["Authorization"].split()[1]
    session = test_db.query(AuthSession).filter(AuthSession.token == token).one()
    session.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
    test_db.commit()
    resp = client.get("/auth/me", headers=auth_headers)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token expired"
