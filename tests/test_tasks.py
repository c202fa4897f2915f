from datetime import date

from tick.services.task_service import today


def create_task(client, title="Write report", task_date="2024-03-15"):
    response = client.post("/api/tasks", json={"title": title, "date": task_date})
    assert response.status_code == 200
    return response.json()

# ========== TEST CREATE TASK ==========
def test_create_task_success(client):
    """Tester la création réussie d'une tâche"""
    response = client.post("/api/tasks", json={"title": "Buy milk", "date": "2024-03-15"})
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Buy milk"
    assert data["date"] == "2024-03-15"
    assert data["completed"] is False
    assert isinstance(data["id"], int)
    assert data["created_at"]

def test_create_task_without_date_uses_today(client):
    response = client.post("/api/tasks", json={"title": "No date"})
    assert response.status_code == 200
    assert response.json()["date"] == date.today().strftime("%Y-%m-%d")

def test_create_task_empty_date_uses_today(client):
    response = client.post("/api/tasks", json={"title": "Empty date", "date": ""})
    assert response.status_code == 200
    assert response.json()["date"] == today()

def test_create_task_empty_title(client):
    response = client.post("/api/tasks", json={"title": ""})
    assert response.status_code == 400
    assert "title is required" in response.text

def test_create_task_missing_title(client):
    response = client.post("/api/tasks", json={"date": "2024-03-15"})
    assert response.status_code == 400
    assert "title is required" in response.text

def test_create_task_malformed_json(client):
    response = client.post(
        "/api/tasks",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400

def test_create_task_wrong_type(client):
    response = client.post("/api/tasks", json={"title": 42})
    assert response.status_code == 400

# ========== TEST LIST TASKS ==========
def test_list_tasks_empty(client):
    """Liste vide = [] et pas null"""
    response = client.get("/api/tasks?date=2024-01-01")
    assert response.status_code == 200
    assert response.json() == []

def test_list_tasks_after_create(client):
    task = create_task(client, "Round trip", "2024-03-15")

    response = client.get("/api/tasks", params={"date": "2024-03-15"})
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == task["id"]
    assert data[0]["completed"] is False

def test_list_tasks_filtered_by_date(client):
    create_task(client, "Monday", "2024-03-11")
    create_task(client, "Tuesday", "2024-03-12")

    data = client.get("/api/tasks?date=2024-03-11").json()
    assert [t["title"] for t in data] == ["Monday"]

def test_list_tasks_default_date_is_today(client):
    client.post("/api/tasks", json={"title": "Today task"})
    create_task(client, "Old task", "2000-01-01")

    data = client.get("/api/tasks").json()
    assert [t["title"] for t in data] == ["Today task"]

def test_list_tasks_creation_order(client):
    for title in ["first", "second", "third"]:
        create_task(client, title)

    data = client.get("/api/tasks?date=2024-03-15").json()
    assert [t["title"] for t in data] == ["first", "second", "third"]

# ========== TEST TOGGLE ==========
def test_toggle_task_twice(client):
    task = create_task(client)

    response = client.patch(f"/api/tasks?id={task['id']}")
    assert response.status_code == 200
    assert response.json() == {"completed": True}

    response = client.patch(f"/api/tasks?id={task['id']}")
    assert response.status_code == 200
    assert response.json() == {"completed": False}

def test_toggle_is_persisted(client):
    task = create_task(client)
    client.patch(f"/api/tasks?id={task['id']}")

    data = client.get("/api/tasks?date=2024-03-15").json()
    assert data[0]["completed"] is True

def test_toggle_task_not_found(client):
    response = client.patch("/api/tasks?id=999999")
    assert response.status_code == 404
    assert "task not found" in response.text

def test_toggle_task_invalid_id(client):
    response = client.patch("/api/tasks?id=abc")
    assert response.status_code == 400
    assert "invalid id" in response.text

def test_toggle_task_missing_id(client):
    response = client.patch("/api/tasks")
    assert response.status_code == 400
    assert "invalid id" in response.text

# ========== TEST DELETE ==========
def test_delete_task(client):
    task = create_task(client)

    response = client.delete(f"/api/tasks?id={task['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/api/tasks?date=2024-03-15").json() == []

def test_delete_task_twice(client):
    """La 2e suppression doit renvoyer 404"""
    task = create_task(client)

    assert client.delete(f"/api/tasks?id={task['id']}").status_code == 204
    response = client.delete(f"/api/tasks?id={task['id']}")
    assert response.status_code == 404
    assert "task not found" in response.text

def test_delete_task_invalid_id(client):
    response = client.delete("/api/tasks?id=1.5")
    assert response.status_code == 400
    assert "invalid id" in response.text

# ========== TEST METHODES ==========
def test_unsupported_method(client):
    response = client.put("/api/tasks", json={"title": "x"})
    assert response.status_code == 405

# ========== TEST ERREURS STOCKAGE ==========
def _storage_error(*args, **kwargs):
    from sqlalchemy.exc import OperationalError
    raise OperationalError("SELECT", {}, Exception("disk I/O error"))

def test_list_tasks_storage_error(client, store, monkeypatch):
    monkeypatch.setattr(store, "list_tasks", _storage_error)
    response = client.get("/api/tasks?date=2024-03-15")
    assert response.status_code == 500
    assert "disk I/O error" in response.text

def test_create_task_storage_error(client, store, monkeypatch):
    monkeypatch.setattr(store, "create_task", _storage_error)
    response = client.post("/api/tasks", json={"title": "x"})
    assert response.status_code == 500

def test_toggle_storage_error_is_404(client, store, monkeypatch):
    """Toute erreur au toggle donne 404, pas 500"""
    monkeypatch.setattr(store, "toggle_task", _storage_error)
    response = client.patch("/api/tasks?id=1")
    assert response.status_code == 404
    assert "task not found" in response.text

def test_delete_storage_error_is_404(client, store, monkeypatch):
    monkeypatch.setattr(store, "delete_task", _storage_error)
    response = client.delete("/api/tasks?id=1")
    assert response.status_code == 404
    assert "task not found" in response.text

# ========== TEST ID HORS LIMITES ==========
def test_toggle_task_id_out_of_range(client):
    response = client.patch("/api/tasks?id=99999999999999999999")
    assert response.status_code == 400
    assert "invalid id" in response.text

def test_delete_task_id_out_of_range(client):
    response = client.delete("/api/tasks?id=99999999999999999999")
    assert response.status_code == 400
    assert "invalid id" in response.text

def test_toggle_task_id_max_int64_not_found(client):
    response = client.patch(f"/api/tasks?id={2**63 - 1}")
    assert response.status_code == 404
