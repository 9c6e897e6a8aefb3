def _create(client, path, payload):
    res = client.post(path, json=payload)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["success"] is True
    return body["data"]


def _board(client):
    ann = _create(client, "/users", {"name": "Ann Lee", "description": "Frontend", "imageURL": "/media/ann.png"})
    bug = _create(client, "/tags", {"name": "bug", "color": "red"})
    todo = _create(client, "/columns", {"name": "To do"})
    return ann, bug, todo


def _task_payload(title, **overrides):
    payload = {
        "title": title,
        "description": "desc",
        "link": "https://example.com",
        "tags": [],
        "assignee": "nobody",
    }
    payload.update(overrides)
    return payload


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_task_returns_resolved_snapshots(client):
    ann, bug, todo = _board(client)
    data = _create(client, "/tasks", _task_payload(
        "Fix login", tags=[bug["id"], "gone"], assignee=ann["id"], column=todo["id"],
        dueDate="2026-12-24", comments=["repro attached"],
    ))
    assert data["dueDate"] == "2026-12-24"
    assert data["tags"] == [{"id": bug["id"], "name": "bug", "color": "red"}]
    assert data["assignee"] == {"id": ann["id"], "name": "Ann Lee", "description": "Frontend", "imageURL": "/media/ann.png"}
    assert data["column"] == {"id": todo["id"], "name": "To do"}
    assert data["comments"] == ["repro attached"]


def test_create_task_missing_field_envelope(client):
    res = client.post("/tasks", json=_task_payload("x", link=None))
    assert res.status_code == 400
    assert res.json() == {"success": False, "data": {"message": "link is required", "field": "link"}}
    assert client.get("/tasks").json()["data"] == []


def test_invalid_types_use_failure_envelope(client):
    res = client.post("/tasks", json=_task_payload("x", dueDate="not a date"))
    assert res.status_code == 400
    assert res.json()["success"] is False

    res = client.get("/tasks", params={"page": "two"})
    assert res.status_code == 400
    assert res.json()["success"] is False


def test_list_tasks_pagination_and_filters(client):
    ann, bug, todo = _board(client)
    for n in range(1, 6):
        _create(client, "/tasks", _task_payload(f"T{n}", assignee=ann["id"] if n % 2 else "nobody"))

    page = client.get("/tasks", params={"page": 2, "perPage": 2}).json()
    assert page["success"] is True
    assert [t["title"] for t in page["data"]] == ["T3", "T4"]

    assigned = client.get("/tasks", params={"assignee": "ANN"}).json()["data"]
    assert [t["title"] for t in assigned] == ["T1", "T3", "T5"]
    assert assigned[0]["assignee"]["imageURL"] == "/media/ann.png"
    assert "createdAt" not in assigned[0]["assignee"]
    assert "created_at" in assigned[0]["assignee"]

    unfiltered = client.get("/tasks", params={"assignee": ""}).json()["data"]
    assert len(unfiltered) == 5


def test_get_task_keeps_snapshot_list_expands_live(client):
    ann, bug, todo = _board(client)
    task = _create(client, "/tasks", _task_payload("T1", tags=[bug["id"]], assignee=ann["id"]))

    res = client.put(f"/users/{ann['id']}", json={"name": "Ann Smith"})
    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Ann Smith"

    stored = client.get(f"/tasks/{task['id']}").json()["data"]
    assert stored["assignee"]["name"] == "Ann Lee"

    listed = client.get("/tasks").json()["data"][0]
    assert listed["assignee"]["name"] == "Ann Smith"

    rewritten = client.put(f"/tasks/{task['id']}", json={"assignee": ann["id"]}).json()["data"]
    assert rewritten["assignee"]["name"] == "Ann Smith"


def test_update_task_partial(client):
    ann, bug, todo = _board(client)
    task = _create(client, "/tasks", _task_payload("T1", tags=[bug["id"]], column=todo["id"]))

    res = client.put(f"/tasks/{task['id']}", json={"title": "T1 renamed", "tags": [], "column": None})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["title"] == "T1 renamed"
    assert data["tags"] == []
    assert data["column"] is None
    assert data["description"] == "desc"


def test_update_unknown_ids_are_not_found(client):
    for path in ("/tasks/nope", "/tags/nope", "/users/nope", "/columns/nope"):
        res = client.put(path, json={"name": "x", "title": "x"})
        assert res.status_code == 404, path
        assert res.json()["success"] is False
    assert client.get("/tasks").json()["data"] == []


def test_get_unknown_task(client):
    res = client.get("/tasks/nope")
    assert res.status_code == 404
    assert res.json() == {"success": False, "data": {"message": "Task not found"}}


def test_tag_crud(client):
    tag = _create(client, "/tags", {"name": "feature", "color": "green"})
    res = client.put(f"/tags/{tag['id']}", json={"color": "teal"})
    assert res.json()["data"]["color"] == "teal"
    assert res.json()["data"]["name"] == "feature"
    assert [t["name"] for t in client.get("/tags").json()["data"]] == ["feature"]
    assert client.get(f"/tags/{tag['id']}").json()["data"]["color"] == "teal"


def test_tag_update_rejects_null_name(client):
    tag = _create(client, "/tags", {"name": "feature", "color": "green"})
    res = client.put(f"/tags/{tag['id']}", json={"name": None})
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "name"


def test_column_crud(client):
    col = _create(client, "/columns", {"name": "Review"})
    res = client.put(f"/columns/{col['id']}", json={"name": "QA"})
    assert res.json()["data"]["name"] == "QA"
    assert [c["name"] for c in client.get("/columns").json()["data"]] == ["QA"]
    res = client.post("/columns", json={})
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "name"


def test_user_requires_image_url(client):
    res = client.post("/users", json={"name": "Ann", "description": "Dev"})
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "imageURL"
    assert client.get("/users").json()["data"] == []


def test_user_upload_stores_image(client, settings):
    res = client.post(
        "/users/upload",
        data={"name": "Cy", "description": "Design"},
        files={"image": ("avatar.png", b"\x89PNG fake", "image/png")},
    )
    assert res.status_code == 201, res.text
    user = res.json()["data"]
    assert user["imageURL"].startswith("/media/")
    assert user["imageURL"].endswith(".png")

    served = client.get(user["imageURL"])
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake"

    res = client.put(f"/users/{user['id']}/image", files={"image": ("new.jpg", b"jpeg", "image/jpeg")})
    assert res.status_code == 200
    assert res.json()["data"]["imageURL"].endswith(".jpg")
    assert res.json()["data"]["name"] == "Cy"


def test_user_upload_rejects_non_image(client, settings):
    res = client.post(
        "/users/upload",
        data={"name": "Cy", "description": "Design"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "image"
    assert client.get("/users").json()["data"] == []


def test_user_upload_checks_text_fields_first(client, settings):
    from pathlib import Path

    res = client.post(
        "/users/upload",
        data={"description": "Design"},
        files={"image": ("avatar.png", b"png", "image/png")},
    )
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "name"
    assert list(Path(settings.UPLOAD_DIR).iterdir()) == []


def test_user_upload_rejects_oversized_image(client, settings):
    from pathlib import Path

    settings.MAX_UPLOAD_BYTES = 8
    res = client.post(
        "/users/upload",
        data={"name": "Cy", "description": "Design"},
        files={"image": ("avatar.png", b"x" * 9, "image/png")},
    )
    assert res.status_code == 400
    assert res.json()["data"]["field"] == "image"
    assert list(Path(settings.UPLOAD_DIR).iterdir()) == []

    res = client.post(
        "/users/upload",
        data={"name": "Cy", "description": "Design"},
        files={"image": ("avatar.png", b"x" * 8, "image/png")},
    )
    assert res.status_code == 201
