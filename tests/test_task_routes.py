# tests/test_task_routes.py

from __future__ import annotations

from datetime import datetime

import pytest

BASE_URL = "/api/tasks"


# ---- GET all ----


def test_list_tasks_initially_empty(client) -> None:
    resp = client.get(BASE_URL)
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_list_tasks_after_creating_two(client, create_task) -> None:
    create_task("Task One", "First task")
    create_task("Task Two", "Second task")

    resp = client.get(BASE_URL)
    assert resp.status_code == 200
    tasks = resp.get_json()
    assert len(tasks) == 2
    assert {t["title"] for t in tasks} == {"Task One", "Task Two"}


# ---- POST ----


def test_create_task_returns_201_with_body(client) -> None:
    resp = client.post(
        BASE_URL, json={"title": "Learn Flask", "description": "Complete the course"}
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["id"] == 1
    assert body["title"] == "Learn Flask"
    assert body["description"] == "Complete the course"
    assert body["completed"] is False
    assert datetime.fromisoformat(body["createdAt"])


def test_create_task_ids_increase(create_task) -> None:
    ids = [create_task(f"t{i}")["id"] for i in range(3)]
    assert ids == [1, 2, 3]


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "no title"},
        {"title": "   ", "description": "blank"},
        {"title": 7},
        ["not", "an", "object"],
    ],
)
def test_create_task_rejects_invalid_body(client, payload) -> None:
    resp = client.post(BASE_URL, json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert client.get(BASE_URL).get_json() == []


def test_create_task_rejects_non_json(client) -> None:
    resp = client.post(BASE_URL, data="title=x", content_type="text/plain")
    assert resp.status_code == 400


# ---- GET by id ----


def test_get_task_by_id(client, create_task) -> None:
    create_task("My Task", "Some description")

    resp = client.get(f"{BASE_URL}/1")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == 1
    assert body["title"] == "My Task"


def test_get_task_unknown_id_returns_404(client) -> None:
    resp = client.get(f"{BASE_URL}/9999")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "task 9999 not found"}


# ---- PUT ----


def test_update_task(client, create_task) -> None:
    created = create_task("Original Title", "Original description")

    resp = client.put(
        f"{BASE_URL}/1", json={"title": "Updated Title", "description": "Updated description"}
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == 1
    assert body["title"] == "Updated Title"
    assert body["description"] == "Updated description"
    assert body["completed"] is False
    assert body["createdAt"] == created["createdAt"]


def test_update_task_unknown_id_returns_404(client) -> None:
    resp = client.put(f"{BASE_URL}/9999", json={"title": "Ghost", "description": "does not exist"})
    assert resp.status_code == 404


def test_update_task_without_title_returns_400(client, create_task) -> None:
    create_task("keep me", "")
    resp = client.put(f"{BASE_URL}/1", json={"description": "no title"})
    assert resp.status_code == 400
    assert client.get(f"{BASE_URL}/1").get_json()["title"] == "keep me"


# ---- PATCH complete ----


def test_complete_task(client, create_task) -> None:
    create_task("Task to complete", "Do this")

    resp = client.patch(f"{BASE_URL}/1/complete")
    assert resp.status_code == 200
    assert resp.get_json()["completed"] is True

    again = client.patch(f"{BASE_URL}/1/complete")
    assert again.status_code == 200
    assert again.get_json() == resp.get_json()


def test_complete_task_unknown_id_returns_404(client) -> None:
    resp = client.patch(f"{BASE_URL}/9999/complete")
    assert resp.status_code == 404


# ---- DELETE ----


def test_delete_task_returns_204_without_body(client, create_task) -> None:
    create_task("Task to delete", "Will be gone")

    resp = client.delete(f"{BASE_URL}/1")
    assert resp.status_code == 204
    assert resp.data == b""


def test_deleted_task_is_no_longer_retrievable(client, create_task) -> None:
    create_task("Task to delete", "Will be gone")
    client.delete(f"{BASE_URL}/1")

    assert client.get(f"{BASE_URL}/1").status_code == 404
    assert client.delete(f"{BASE_URL}/1").status_code == 404


def test_delete_task_unknown_id_returns_404(client) -> None:
    resp = client.delete(f"{BASE_URL}/9999")
    assert resp.status_code == 404


# ---- filter by completed ----


@pytest.fixture()
def one_done_one_pending(client, create_task) -> None:
    create_task("Pending task", "Not done yet")
    create_task("Done task", "Already finished")
    client.patch(f"{BASE_URL}/2/complete")


@pytest.mark.usefixtures("one_done_one_pending")
def test_filter_completed_true(client) -> None:
    resp = client.get(f"{BASE_URL}?completed=true")
    assert resp.status_code == 200
    tasks = resp.get_json()
    assert len(tasks) == 1
    assert tasks[0]["title"] == "Done task"
    assert tasks[0]["completed"] is True


@pytest.mark.usefixtures("one_done_one_pending")
def test_filter_completed_false(client) -> None:
    resp = client.get(f"{BASE_URL}?completed=false")
    assert resp.status_code == 200
    tasks = resp.get_json()
    assert len(tasks) == 1
    assert tasks[0]["title"] == "Pending task"
    assert tasks[0]["completed"] is False


@pytest.mark.usefixtures("one_done_one_pending")
def test_no_filter_returns_all(client) -> None:
    resp = client.get(BASE_URL)
    assert resp.status_code == 200
    assert [t["title"] for t in resp.get_json()] == ["Pending task", "Done task"]


@pytest.mark.usefixtures("one_done_one_pending")
def test_filter_is_case_insensitive(client) -> None:
    assert len(client.get(f"{BASE_URL}?completed=TRUE").get_json()) == 1


def test_filter_rejects_unknown_value(client) -> None:
    resp = client.get(f"{BASE_URL}?completed=maybe")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_title_round_trips_unchanged(client) -> None:
    created = client.post(BASE_URL, json={"title": "  padded  "}).get_json()
    assert created["title"] == "  padded  "
    assert client.get(f"{BASE_URL}/{created['id']}").get_json()["title"] == "  padded  "

    resp = client.put(f"{BASE_URL}/{created['id']}", json={"title": " edited ", "description": ""})
    assert resp.status_code == 200
    assert resp.get_json()["title"] == " edited "
    assert client.get(f"{BASE_URL}/{created['id']}").get_json()["title"] == " edited "
