"""Tests for API endpoints."""

import pytest


@pytest.mark.asyncio
class TestAPIEndpoints:
    """Test API endpoints."""

    async def test_shorten_url(self, client, sample_urls):
        """Test POST /api/shorten."""
        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == "1"
        assert data["original_url"] == sample_urls[0]
        assert data["short_url"] == "http://localhost:8080/1"
        assert data["overwritten"] is False

    async def test_shorten_normalizes_scheme(self, client):
        response = await client.post("/api/shorten", json={"url": "example.com"})

        assert response.status_code == 200
        assert response.json()["original_url"] == "https://example.com"

    async def test_shorten_with_custom_code(self, client, sample_urls):
        response = await client.post(
            "/api/shorten",
            json={
                "url": sample_urls[1],
                "custom_code": "repo"
            }
        )

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == "repo"
        assert data["short_url"] == "http://localhost:8080/repo"

    async def test_shorten_blank_custom_code(self, client, sample_urls):
        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0], "custom_code": " "}
        )

        assert response.json()["short_code"] == "1"

    async def test_shorten_duplicate_custom_code_overwrites(self, client, sample_urls):
        """Last write wins on the API as well."""
        await client.post("/api/shorten", json={"url": sample_urls[0], "custom_code": "dup"})

        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[1], "custom_code": "dup"}
        )

        assert response.status_code == 200
        assert response.json()["overwritten"] is True

        info = await client.get("/api/urls/dup")
        assert info.json()["original_url"] == sample_urls[1]

    async def test_shorten_missing_url(self, client):
        response = await client.post("/api/shorten", json={})
        assert response.status_code == 422

    async def test_shorten_empty_url(self, client):
        response = await client.post("/api/shorten", json={"url": ""})
        assert response.status_code == 422

    async def test_get_url_info(self, client, sample_urls):
        """Test GET /api/urls/{short_code}."""
        create_response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )
        short_code = create_response.json()["short_code"]

        response = await client.get(f"/api/urls/{short_code}")

        assert response.status_code == 200
        assert response.json() == {
            "short_code": short_code,
            "original_url": sample_urls[0],
        }

    async def test_get_url_info_not_found(self, client):
        response = await client.get("/api/urls/nonexistent")

        assert response.status_code == 404
        assert response.json()["detail"] == "Short code 'nonexistent' not found"

    async def test_list_urls(self, client, service, sample_urls):
        service.create_short_url(sample_urls[0], custom_code="one")
        service.create_short_url(sample_urls[1], custom_code="two")

        response = await client.get("/api/urls")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [u["short_code"] for u in data["urls"]] == ["one", "two"]

    async def test_health_check(self, client):
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["registry"] == "healthy"
        assert "timestamp" in data

    async def test_statistics(self, client, sample_urls):
        await client.post("/api/shorten", json={"url": sample_urls[0]})

        response = await client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {"total_urls": 1}

    async def test_short_url_uses_configured_base(self, service, logger, sample_urls):
        """base_url and path_prefix from config shape the returned short URL."""
        from httpx import AsyncClient, ASGITransport
        from config import Config
        from web_app import create_app

        config = Config(_env_file=None, base_url="https://sho.rt", path_prefix="/s")
        app = create_app(service_instance=service, config=config, logger=logger)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            response = await ac.post("/api/shorten", json={"url": sample_urls[0], "custom_code": "x"})

        assert response.json()["short_url"] == "https://sho.rt/s/x"

    async def test_health_check_unhealthy(self, registry, config, logger):
        """GET /api/health reports a registry whose lock cannot be taken."""
        from httpx import AsyncClient, ASGITransport
        from redirector.service import RedirectorService
        from web_app import create_app

        service = RedirectorService(registry=registry, logger=logger, lock_timeout=0.01)
        app = create_app(service_instance=service, config=config, logger=logger)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            with registry._lock:
                response = await ac.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["registry"] == "unhealthy"
