# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# Exercises the service through FastAPI's TestClient.
# Each test gets a freshly seeded app (see conftest.py).
# =============================================================================

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_user_store
from app.exceptions import register_exception_handlers
from app.main import create_app
from app.routers import users


class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, test_client):
        response = test_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Server is running"}

    def test_root_info(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "User Directory API"
        assert body["health"] == "/api/health"


class TestListUsers:
    """Tests for GET /api/users."""

    def test_seeded_users_after_startup(self, test_client, sample_user_dicts):
        response = test_client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == sample_user_dicts

    def test_runs_with_lifespan(self, api_app, sample_user_dicts):
        """Startup/shutdown hooks run cleanly around requests."""
        with TestClient(api_app) as client:
            assert client.get("/api/users").json() == sample_user_dicts


class TestCreateUser:
    """Tests for POST /api/users."""

    def test_create_returns_201(self, test_client):
        response = test_client.post(
            "/api/users",
            json={"name": "Alice Example", "email": "alice@example.com"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Alice Example"
        assert body["email"] == "alice@example.com"
        assert body["id"] not in {1, 2, 3}

    def test_created_user_listed(self, test_client, sample_user_dicts):
        created = test_client.post(
            "/api/users",
            json={"name": "Alice Example", "email": "alice@example.com"},
        ).json()

        listed = test_client.get("/api/users").json()

        assert listed == [*sample_user_dicts, created]

    def test_ids_unique_across_creates(self, test_client):
        ids = {
            test_client.post("/api/users", json={"name": f"User {c}", "email": f"{c}@example.com"}).json()["id"]
            for c in "abcde"
        }
        assert len(ids) == 5

    def test_no_server_side_validation(self, test_client):
        """Invalid names and emails are stored as sent."""
        response = test_client.post("/api/users", json={"name": "A", "email": "not-an-email"})

        assert response.status_code == 201
        assert response.json()["name"] == "A"
        assert response.json()["email"] == "not-an-email"

    def test_duplicate_email_accepted(self, test_client):
        response = test_client.post("/api/users", json={"name": "John Two", "email": "JOHN@example.com"})
        assert response.status_code == 201

    def test_missing_fields_become_null(self, test_client):
        response = test_client.post("/api/users", json={"name": "Only Name"})

        assert response.status_code == 201
        assert response.json()["name"] == "Only Name"
        assert response.json()["email"] is None

    def test_empty_object(self, test_client):
        response = test_client.post("/api/users", json={})

        assert response.status_code == 201
        assert response.json()["name"] is None
        assert response.json()["email"] is None

    def test_no_body(self, test_client, store):
        response = test_client.post("/api/users")

        assert response.status_code == 201
        assert response.json()["name"] is None
        assert len(store) == 4

    def test_non_string_fields_stored_as_sent(self, test_client):
        """Field types are not checked; the record echoes the values."""
        response = test_client.post("/api/users", json={"name": 123, "email": "a@b.co"})

        assert response.status_code == 201
        assert response.json()["name"] == 123
        assert response.json()["email"] == "a@b.co"

    def test_list_valued_email_stored_as_sent(self, test_client):
        response = test_client.post("/api/users", json={"name": "Alice", "email": ["x"]})

        assert response.status_code == 201
        assert response.json()["email"] == ["x"]

    @pytest.mark.parametrize("body", [["Alice", "a@b.co"], "just a string", 42, True])
    def test_non_object_body_gives_empty_record(self, test_client, store, body):
        """Arrays, strings, numbers and booleans still create a record."""
        response = test_client.post("/api/users", json=body)

        assert response.status_code == 201
        assert response.json()["name"] is None
        assert response.json()["email"] is None
        assert len(store) == 4

    def test_json_null_body(self, test_client):
        response = test_client.post(
            "/api/users",
            content="null",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 201
        assert response.json()["name"] is None

    def test_odd_records_listed(self, test_client, sample_user_dicts):
        created = test_client.post("/api/users", json={"name": 123}).json()

        listed = test_client.get("/api/users").json()

        assert listed == [*sample_user_dicts, created]

    def test_unparseable_body_rejected(self, test_client, store):
        response = test_client.post(
            "/api/users",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert len(store) == 3

    def test_no_delete_endpoint(self, test_client):
        response = test_client.delete("/api/users")
        assert response.status_code == 405


class TestAppIsolation:
    """Separate apps keep separate stores."""

    def test_fresh_app_has_only_seeds(self, test_client):
        test_client.post("/api/users", json={"name": "Alice", "email": "alice@example.com"})

        other = TestClient(create_app())
        assert len(other.get("/api/users").json()) == 3


class TestMiddlewareAndErrors:
    """CORS and error handler wiring."""

    def test_cors_allows_any_origin_in_development(self, test_client):
        response = test_client.get("/api/users", headers={"Origin": "http://example.org"})
        assert response.headers["access-control-allow-origin"] in ("*", "http://example.org")

    def test_cors_restricted_in_production(self):
        config = Settings(ENVIRONMENT="production", CORS_ORIGINS="https://directory.example.com")
        client = TestClient(create_app(config=config))

        allowed = client.get("/api/users", headers={"Origin": "https://directory.example.com"})
        blocked = client.get("/api/users", headers={"Origin": "https://evil.example.com"})

        assert allowed.headers["access-control-allow-origin"] == "https://directory.example.com"
        assert "access-control-allow-origin" not in blocked.headers

    def test_bare_app_without_store_returns_503(self):
        """The users router on an app that never got a store."""
        bare = FastAPI()
        register_exception_handlers(bare)
        bare.include_router(users.router, prefix="/api")
        client = TestClient(bare)

        listed = client.get("/api/users")
        created = client.post("/api/users", json={"name": "Alice"})

        assert listed.status_code == 503
        assert listed.json()["code"] == "STORE_UNAVAILABLE"
        assert "create_app" in listed.json()["suggestion"]
        assert created.status_code == 503

    def test_dependency_returns_attached_store(self, api_app, store):
        class _Request:
            app = api_app

        assert get_user_store(_Request()) is store

    def test_router_mountable_on_bare_app(self, store):
        """The users router only needs a store on app.state."""
        bare = FastAPI()
        bare.state.user_store = store
        bare.include_router(users.router, prefix="/api")

        response = TestClient(bare).get("/api/users")
        assert response.status_code == 200
        assert len(response.json()) == 3
