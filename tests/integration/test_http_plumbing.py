"""Cross-cutting HTTP behaviour: CORS, tracing, error mapping, health and login."""

import uuid

from src.useradmin.api.http.middleware.tracing import TRACE_HEADER


class TestCORS:
    def test_preflight_is_answered_without_routing(self, client):
        response = client.options(
            "/api/v1/users/anything",
            headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "PUT"},
        )

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert "PUT" in response.headers["Access-Control-Allow-Methods"]
        assert "X-Trace-ID" in response.headers["Access-Control-Allow-Headers"]
        assert response.headers["Access-Control-Max-Age"] == "86400"

    def test_headers_on_regular_responses(self, client):
        response = client.get("/api/v1/users")
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_headers_on_error_responses(self, client):
        response = client.get("/api/v1/users/missing")

        assert response.status_code == 404
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestTracing:
    def test_incoming_trace_id_is_echoed(self, client):
        response = client.get("/api/v1/users", headers={TRACE_HEADER: "trace-abc"})
        assert response.headers[TRACE_HEADER] == "trace-abc"

    def test_trace_id_generated_when_absent(self, client):
        response = client.get("/api/v1/users")
        uuid.UUID(response.headers[TRACE_HEADER])

    def test_trace_id_on_error_responses(self, client):
        response = client.get("/api/v1/users/missing", headers={TRACE_HEADER: "trace-404"})
        assert response.headers[TRACE_HEADER] == "trace-404"

    def test_trace_id_reaches_service_logs(self, client, captured_logs):
        client.post(
            "/api/v1/users",
            json={"name": "Ann", "email": "ann@example.com"},
            headers={TRACE_HEADER: "trace-create"},
        )

        records = [m.record for m in captured_logs if m.record["message"] == "creating user"]
        assert records
        assert records[0]["extra"]["trace_id"] == "trace-create"


class TestErrorMapping:
    def test_unknown_route_is_404_envelope(self, client):
        response = client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"code": 40400, "message": "resource not found"}

    def test_wrong_method_is_invalid_param(self, client):
        response = client.patch("/api/v1/users")

        assert response.status_code == 400
        assert response.json()["code"] == 40001


class TestHealth:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_with_database(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"
        assert "pool" in body["checks"]["database"]

    def test_readiness_without_database(self, client, monkeypatch):
        deps = client.app.state.app_dependencies
        monkeypatch.setattr(deps.database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestLogin:
    def test_login_returns_token_and_admin(self, client):
        response = client.post(
            "/api/v1/auth/login", json={"email": "ann@example.com", "password": "secret"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token"] == "dev-token-ann@example.com"
        assert data["user"] == {
            "id": "1",
            "name": "Administrator",
            "avatar": "",
            "permissions": ["*"],
        }

    def test_login_requires_credentials(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "ann@example.com"})

        assert response.status_code == 400
        assert response.json() == {"code": 40001, "message": "invalid parameters"}
