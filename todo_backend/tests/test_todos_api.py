import pytest
from fastapi.testclient import TestClient

from todo_api.errors import InternalError
from todo_api.main import app as default_app
from todo_api.main import create_app
from todo_api.routers.todos import get_store
from todo_api.store import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def client(store):
    # Each test gets its own app and collection
    return TestClient(create_app(store=store))


def create_todo_payload(
    title="Buy groceries",
    description="I should buy groceries",
    **extra,
):
    payload = {"title": title, "description": description}
    payload.update(extra)
    return payload


def create(client, **kwargs):
    res = client.post("/todos", json=create_todo_payload(**kwargs))
    assert res.status_code == 201
    return res.json()["id"]


def assert_failure(res, status_code):
    assert res.status_code == status_code
    body = res.json()
    assert body["success"] is False
    return body


class TestHealth:
    def test_health_check(self, client):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"success": True, "data": "Healthy"}


class TestTodosCRUD:
    def test_create_returns_201_with_id(self, client):
        res = client.post("/todos", json=create_todo_payload())
        assert res.status_code == 201
        body = res.json()
        assert body["success"] is True
        assert body["data"] == "Todo added successfully"
        assert isinstance(body["id"], int)

    def test_create_then_list_has_one_record_without_completed(self, client):
        tid = create(client)

        res = client.get("/todos")
        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        assert body["data"] == [
            {"id": tid, "title": "Buy groceries", "description": "I should buy groceries"}
        ]
        assert body["data"][0].get("completed", False) is False

    def test_list_empty(self, client):
        res = client.get("/todos")
        assert res.status_code == 200
        assert res.json() == {"success": True, "data": []}

    def test_list_keeps_creation_order(self, client):
        ids = [create(client, title=f"Task {i}") for i in range(5)]
        items = client.get("/todos").json()["data"]
        assert [t["id"] for t in items] == ids
        assert [t["title"] for t in items] == [f"Task {i}" for i in range(5)]

    def test_create_keeps_extra_fields(self, client):
        tid = create(client, completed=False, priority="high", tags=["home"])
        todo = client.get(f"/todos/{tid}").json()["data"]
        assert todo == {
            "id": tid,
            "title": "Buy groceries",
            "description": "I should buy groceries",
            "completed": False,
            "priority": "high",
            "tags": ["home"],
        }

    def test_create_ignores_caller_supplied_id(self, client):
        first = create(client)
        second = create(client, id=first)
        assert second != first
        assert client.get(f"/todos/{second}").json()["data"]["id"] == second

    def test_get_todo_and_not_found(self, client):
        tid = create(client, title="Read book")

        res_get = client.get(f"/todos/{tid}")
        assert res_get.status_code == 200
        fetched = res_get.json()
        assert fetched["success"] is True
        assert fetched["data"]["id"] == tid
        assert fetched["data"]["title"] == "Read book"

        body = assert_failure(client.get("/todos/999999"), 404)
        assert body["data"] == "No todo found with the given id"

    def test_put_merges_fields(self, client):
        tid = create(client)

        res_put = client.put(f"/todos/{tid}", json={"completed": True})
        assert res_put.status_code == 200
        assert res_put.json() == {"success": True, "data": "Updated Todo successfully"}

        todo = client.get(f"/todos/{tid}").json()["data"]
        assert todo["completed"] is True
        assert todo["title"] == "Buy groceries"
        assert todo["description"] == "I should buy groceries"

    def test_put_cannot_change_id(self, client):
        tid = create(client)
        res = client.put(f"/todos/{tid}", json={"id": tid + 100, "title": "Renamed"})
        assert res.status_code == 200

        todo = client.get(f"/todos/{tid}").json()["data"]
        assert todo["id"] == tid
        assert todo["title"] == "Renamed"
        assert_failure(client.get(f"/todos/{tid + 100}"), 404)

    def test_put_not_found(self, client):
        body = assert_failure(client.put("/todos/424242", json={"completed": True}), 404)
        assert body["data"] == "No todo found with the given id"

    def test_delete_twice(self, client):
        tid = create(client, title="ToDelete")

        res_del = client.delete(f"/todos/{tid}")
        assert res_del.status_code == 200
        assert res_del.json() == {"success": True, "data": "Deleted the todo successfully"}

        assert_failure(client.get(f"/todos/{tid}"), 404)
        assert_failure(client.delete(f"/todos/{tid}"), 404)

    def test_delete_removes_only_that_todo(self, client, store):
        keep = create(client, title="Keep")
        drop = create(client, title="Drop")

        assert client.delete(f"/todos/{drop}").status_code == 200
        assert len(store) == 1
        assert [t["id"] for t in client.get("/todos").json()["data"]] == [keep]


class TestValidationErrors:
    @pytest.mark.parametrize(
        "payload",
        [
            {"description": "no title"},
            {"title": "no description"},
            {"title": "", "description": "x"},
            {"title": "x", "description": "   "},
            {"title": 5, "description": "x"},
        ],
    )
    def test_create_requires_title_and_description(self, client, store, payload):
        body = assert_failure(client.post("/todos", json=payload), 400)
        assert body["data"] == "Title or description missing"
        assert len(store) == 0

    @pytest.mark.parametrize("payload", [["a", "list"], "text", 3])
    def test_create_rejects_non_object_body(self, client, store, payload):
        body = assert_failure(client.post("/todos", json=payload), 400)
        assert body["data"] == "Request validation failed"
        assert isinstance(body["detail"], list)
        assert len(store) == 0

    def test_create_rejects_missing_body(self, client):
        assert_failure(client.post("/todos"), 400)

    def test_create_rejects_invalid_json(self, client):
        res = client.post(
            "/todos", content="{not json", headers={"Content-Type": "application/json"}
        )
        assert_failure(res, 400)

    def test_put_rejects_non_object_body(self, client):
        tid = create(client)
        assert_failure(client.put(f"/todos/{tid}", json=["completed"]), 400)

    @pytest.mark.parametrize("bad_id", ["abc", "0", "-1", "1.5", "12abc", "٣", pytest.param("1" * 5000, id="too-many-digits")])
    def test_malformed_id_is_400_on_every_id_route(self, client, bad_id):
        create(client)
        expected = "Please provide a valid todo id"
        assert assert_failure(client.get(f"/todos/{bad_id}"), 400)["data"] == expected
        assert assert_failure(client.put(f"/todos/{bad_id}", json={"completed": True}), 400)["data"] == expected
        assert assert_failure(client.delete(f"/todos/{bad_id}"), 400)["data"] == expected


class TestRouting:
    def test_unknown_route_is_404(self, client):
        body = assert_failure(client.get("/unknown-route"), 404)
        assert body["data"] == "Route not found"

    def test_unknown_nested_route_is_404(self, client):
        tid = create(client)
        assert_failure(client.get(f"/todos/{tid}/comments"), 404)

    def test_wrong_method_is_405(self, client):
        assert_failure(client.patch("/todos/1", json={}), 405)

    def test_default_app_is_served(self):
        res = TestClient(default_app).get("/health")
        assert res.status_code == 200


class TestInternalErrors:
    def test_store_internal_error_maps_to_500(self, store):
        app = create_app(store=store)

        class FailingStore(TodoStore):
            def list_all(self):
                raise InternalError("Not able to get all todos")

        app.dependency_overrides[get_store] = lambda: FailingStore()
        res = TestClient(app).get("/todos")
        assert res.status_code == 500
        assert res.json() == {"success": False, "error": "Not able to get all todos"}

    def test_unexpected_exception_maps_to_500(self, store):
        app = create_app(store=store)

        class BrokenStore(TodoStore):
            def create(self, fields):
                raise RuntimeError("boom")

        app.dependency_overrides[get_store] = lambda: BrokenStore()
        res = TestClient(app, raise_server_exceptions=False).post("/todos", json=create_todo_payload())
        assert res.status_code == 500
        assert res.json() == {"success": False, "error": "Internal server error"}
