from taskboard_platform.taskboard_platform.taskboard_service.models import new_id

from .conftest import auth_header, register


def test_projects_require_auth(client):
    # Missing auth
    r = client.get("/projects")
    assert r.status_code == 401
    assert r.json()["detail"] == "No token, authorization denied"

    r = client.post("/projects", json={"name": "Sprint1"})
    assert r.status_code == 401


def test_projects_reject_invalid_token(client):
    r = client.get("/projects", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token is not valid"

    token = register(client, "a@x.com")
    r = client.get("/projects", headers={"Authorization": f"bearer {token}"})
    assert r.status_code == 401


def test_projects_token_for_unknown_user(client, app):
    token = app.state.token_issuer.issue(new_id())
    r = client.get("/projects", headers=auth_header(token))
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found"


def test_create_and_list_projects(client, app):
    token = register(client, "a@x.com")
    h = auth_header(token)

    create = client.post("/projects", headers=h, json={"name": "Sprint1"})
    assert create.status_code == 201
    data = create.json()
    assert data["name"] == "Sprint1"
    assert data["owner_id"] == app.state.token_issuer.verify(token)

    lst = client.get("/projects", headers=h)
    assert lst.status_code == 200
    items = lst.json()
    assert isinstance(items, list)
    assert len(items) == 1
    assert items[0]["id"] == data["id"]


def test_create_project_requires_name(client):
    h = auth_header(register(client, "a@x.com"))
    assert client.post("/projects", headers=h, json={}).status_code == 422
    assert client.post("/projects", headers=h, json={"name": ""}).status_code == 422
    assert client.post("/projects", headers=h, json={"name": "   "}).status_code == 422


def test_projects_are_isolated_between_users(client):
    h_a = auth_header(register(client, "a@x.com"))
    h_b = auth_header(register(client, "b@x.com"))

    client.post("/projects", headers=h_a, json={"name": "A-only"})
    client.post("/projects", headers=h_b, json={"name": "B-only"})

    assert [p["name"] for p in client.get("/projects", headers=h_a).json()] == ["A-only"]
    assert [p["name"] for p in client.get("/projects", headers=h_b).json()] == ["B-only"]
