"""Tests for the application factory and health endpoint."""

from __future__ import annotations

from fastapi.testclient import TestClient

from reelswipe.api.app import create_app


class TestHealthEndpoint:
    """Test GET /api/health."""

    def test_returns_fixed_payload(self, config):
        client = TestClient(create_app(config))
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "app": "ReelSwipe v2"}

    def test_ignores_query_parameters(self, config):
        client = TestClient(create_app(config))
        response = client.get("/api/health", params={"verbose": "1"})
        assert response.json() == {"ok": True, "app": "ReelSwipe v2"}

    def test_lifespan_opens_http_client(self, config):
        app = create_app(config)
        with TestClient(app) as client:
            assert client.get("/api/health").status_code == 200
            assert app.state.http_client.timeout.read == config.http_timeout


class TestStaticClient:
    """Test optional static client mount."""

    def test_serves_index_when_directory_exists(self, config, tmp_path):
        static_dir = tmp_path / "public"
        static_dir.mkdir()
        (static_dir / "index.html").write_text("<h1>ReelSwipe</h1>")
        app = create_app(config.model_copy(update={"static_dir": static_dir}))
        client = TestClient(app)

        assert client.get("/").text == "<h1>ReelSwipe</h1>"
        assert client.get("/api/health").json()["ok"] is True

    def test_no_mount_without_directory(self, config):
        client = TestClient(create_app(config))
        assert client.get("/").status_code == 404


class TestCors:
    """Test CORS policy."""

    def test_allows_any_origin_by_default(self, config):
        client = TestClient(create_app(config))
        response = client.get("/api/health", headers={"Origin": "http://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_restricted_origins(self, config):
        restricted = config.model_copy(update={"cors_origins": ("http://localhost:3000",)})
        client = TestClient(create_app(restricted))

        allowed = client.get("/api/health", headers={"Origin": "http://localhost:3000"})
        denied = client.get("/api/health", headers={"Origin": "http://evil.example"})
        assert allowed.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert "access-control-allow-origin" not in denied.headers
