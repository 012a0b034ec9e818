"""Integration tests for API endpoints.

These tests verify API endpoints work correctly end-to-end against a
fresh board per test.
"""

import json
import logging

from doworkspace import __version__


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}


class TestCategorizeEndpoints:
    """Classifier exposed over HTTP."""

    def test_categorize(self, test_client):
        """POST /categorize returns the classification."""
        response = test_client.post(
            "/categorize",
            json={"text": "remind me to call the dentist tomorrow at 5pm"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "priority": "medium",
            "type": "reminder",
            "label": "Reminder",
            "extracted_date": "Tomorrow",
            "extracted_time": "5PM",
        }

    def test_categorize_empty(self, test_client):
        """Empty text is a valid request and yields the default."""
        response = test_client.post("/categorize", json={"text": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "general"
        assert data["label"] == "Task"
        assert data["extracted_date"] is None

    def test_categorize_does_not_add_task(self, test_client, board):
        test_client.post("/categorize", json={"text": "buy milk"})
        assert len(board) == 0

    def test_categorize_missing_text(self, test_client):
        """Missing text field fails validation."""
        response = test_client.post("/categorize", json={})
        assert response.status_code == 422

    def test_priority(self, test_client):
        response = test_client.get("/priority", params={"text": "buy milk!!!"})

        assert response.status_code == 200
        assert response.json() == {"priority": "urgent"}

    def test_priority_default(self, test_client):
        response = test_client.get("/priority")
        assert response.json() == {"priority": "medium"}

    def test_display_colors(self, test_client):
        """Lookup tables are complete."""
        response = test_client.get("/display/colors")

        assert response.status_code == 200
        data = response.json()
        assert len(data["type_colors"]) == 15
        assert data["type_labels"]["general"] == "Task"
        assert data["priority_colors"] == {
            "urgent": "bg-red-500",
            "high": "bg-orange-500",
            "medium": "bg-yellow-500",
            "low": "bg-green-500",
        }
        assert len(data["card_colors"]) == 15
        assert data["card_colors"][0] == {"bg": "#e11d48", "border": "#fb7185", "name": "rose"}


class TestTaskEndpoints:
    """Test task board API endpoints."""

    def test_create_task(self, test_client):
        """POST /tasks adds a classified card."""
        response = test_client.post("/tasks", json={"text": "team standup meeting with client"})

        assert response.status_code == 200
        data = response.json()
        assert data["command"] is None
        assert data["task"]["type"] == "work"
        assert data["task"]["label"] == "Work"
        assert data["task"]["notes"] == ""

    def test_create_empty_task(self, test_client):
        response = test_client.post("/tasks", json={"text": "   "})
        assert response.status_code == 400

    def test_group_command(self, test_client):
        """/group toggles grouping and adds nothing."""
        response = test_client.post("/tasks", json={"text": "/group"})

        assert response.status_code == 200
        assert response.json()["command"] == "group"
        assert response.json()["task"] is None

        listing = test_client.get("/tasks").json()
        assert listing["grouping"] is True
        assert listing["tasks"] == []
        assert listing["groups"] == {}

    def test_list_tasks(self, test_client):
        test_client.post("/tasks", json={"text": "xyzzy"})
        test_client.post("/tasks", json={"text": "email the boss"})

        response = test_client.get("/tasks")

        assert response.status_code == 200
        data = response.json()
        assert [t["text"] for t in data["tasks"]] == ["email the boss", "xyzzy"]
        assert data["grouping"] is False
        assert data["groups"] is None

    def test_list_grouped(self, test_client):
        test_client.post("/tasks", json={"text": "xyzzy"})
        test_client.post("/tasks", json={"text": "email the boss"})
        test_client.post("/tasks", json={"text": "/g"})

        groups = test_client.get("/tasks").json()["groups"]

        assert list(groups) == ["Work", "Task"]

    def test_get_task(self, test_client):
        task_id = test_client.post("/tasks", json={"text": "buy milk"}).json()["task"]["id"]

        response = test_client.get(f"/tasks/{task_id}")

        assert response.status_code == 200
        assert response.json()["text"] == "buy milk"

    def test_get_task_not_found(self, test_client):
        response = test_client.get("/tasks/does-not-exist")
        assert response.status_code == 404

    def test_update_task(self, test_client):
        created = test_client.post("/tasks", json={"text": "buy milk"}).json()["task"]

        response = test_client.put(
            f"/tasks/{created['id']}",
            json={"text": "buy oat milk", "notes": "two cartons"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "buy oat milk"
        assert data["notes"] == "two cartons"
        assert data["type"] == created["type"]

    def test_update_task_not_found(self, test_client):
        response = test_client.put("/tasks/missing", json={"text": "x", "notes": ""})
        assert response.status_code == 404

    def test_delete_task(self, test_client):
        task_id = test_client.post("/tasks", json={"text": "buy milk"}).json()["task"]["id"]

        response = test_client.delete(f"/tasks/{task_id}")

        assert response.status_code == 204
        assert test_client.get(f"/tasks/{task_id}").status_code == 404

    def test_delete_task_not_found(self, test_client):
        response = test_client.delete("/tasks/missing")
        assert response.status_code == 404

    def test_clear_tasks(self, test_client):
        test_client.post("/tasks", json={"text": "one"})
        test_client.post("/tasks", json={"text": "two"})

        response = test_client.delete("/tasks")

        assert response.status_code == 200
        assert response.json() == {"deleted_count": 2}
        assert test_client.get("/tasks").json()["tasks"] == []

    def test_export(self, test_client):
        test_client.post("/tasks", json={"text": "remind me to call mom tomorrow"})

        response = test_client.get("/tasks/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert "do-workspace-backup.json" in response.headers["content-disposition"]
        data = json.loads(response.text)
        assert len(data) == 1
        assert data[0]["temporal"] == {"date": "Tomorrow", "time": None}


class TestSettingsEndpoints:
    def test_get_settings(self, test_client):
        response = test_client.get("/settings")

        assert response.status_code == 200
        assert response.json() == {"notifications": False, "dark_cards": True, "auto_label": True}

    def test_patch_settings(self, test_client):
        response = test_client.patch("/settings", json={"auto_label": False})

        assert response.status_code == 200
        assert response.json()["auto_label"] is False
        assert response.json()["dark_cards"] is True

        created = test_client.post("/tasks", json={"text": "buy milk!!!"}).json()["task"]
        assert created["type"] == "general"
        assert created["priority"] == "medium"


class TestUnexpectedErrors:
    """Failures other than ValueError are logged and returned as 500."""

    def test_submit_failure_logged(self, test_client, board, monkeypatch, caplog):
        def broken_submit(text):
            raise RuntimeError("board unavailable")

        monkeypatch.setattr(board, "submit", broken_submit)

        with caplog.at_level(logging.ERROR, logger="doworkspace.api.app"):
            response = test_client.post("/tasks", json={"text": "buy milk"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to add task: board unavailable"
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "board unavailable" in errors[0].getMessage()

    def test_export_failure_logged(self, test_client, board, monkeypatch, caplog):
        def broken_export():
            raise TypeError("not serializable")

        monkeypatch.setattr(board, "export_json", broken_export)

        with caplog.at_level(logging.ERROR, logger="doworkspace.api.app"):
            response = test_client.get("/tasks/export")

        assert response.status_code == 500
        assert any("Failed to export tasks" in r.getMessage() for r in caplog.records)

    def test_not_found_is_not_logged_as_error(self, test_client, caplog):
        """Unknown ids stay a 404 without an error record."""
        with caplog.at_level(logging.ERROR, logger="doworkspace.api.app"):
            response = test_client.delete("/tasks/missing")

        assert response.status_code == 404
        assert not [r for r in caplog.records if r.levelno == logging.ERROR]
