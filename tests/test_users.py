# tests/test_users.py

from daily_diet.models.user import User


def register(client, name="Ana", email="ana@x.com"):
    return client.post("/users", json={"name": name, "email": email})


def _set_cookie_headers(resp):
    return [h for h in resp.headers.getlist("Set-Cookie") if h.startswith("sessionId=")]


def test_register_sets_session_cookie(client):
    resp = register(client)
    assert resp.status_code == 201
    assert resp.data == b""

    cookies = _set_cookie_headers(resp)
    assert len(cookies) == 1
    assert "Path=/" in cookies[0]
    assert "Max-Age=604800" in cookies[0]


def test_register_stores_user_with_session(client):
    register(client)
    user = User.query.filter_by(email="ana@x.com").one()
    assert user.name == "Ana"
    assert len(user.id) == 36

    resp = client.get("/users")
    assert resp.status_code == 200
    users = resp.get_json()["users"]
    assert len(users) == 1
    assert users[0]["email"] == "ana@x.com"
    assert users[0]["session_id"] == user.session_id


def test_register_with_existing_cookie_reuses_it(client):
    register(client)
    first = User.query.filter_by(email="ana@x.com").one()

    resp = register(client, name="Ana 2", email="ana2@x.com")
    assert resp.status_code == 201
    # No se emite cookie nueva
    assert _set_cookie_headers(resp) == []

    second = User.query.filter_by(email="ana2@x.com").one()
    assert second.session_id == first.session_id


def test_duplicate_email_is_rejected(client, other_client):
    assert register(client).status_code == 201

    resp = register(other_client, name="Otra")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "User already exists!"}
    assert User.query.filter_by(email="ana@x.com").count() == 1


def test_register_validation_error(client):
    resp = client.post("/users", json={"name": "Ana"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "ValidationError"
    assert "email" in body["fields"]
    assert User.query.count() == 0

    resp = client.post("/users", json={"name": 1, "email": "a@x.com"})
    assert resp.status_code == 400
    assert "name" in resp.get_json()["fields"]


def test_list_users_without_cookie_is_empty(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.get_json() == {"users": []}


def test_list_users_only_returns_own_session(client, other_client):
    register(client)
    register(other_client, name="Luis", email="luis@x.com")

    users = client.get("/users").get_json()["users"]
    assert [u["email"] for u in users] == ["ana@x.com"]


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
