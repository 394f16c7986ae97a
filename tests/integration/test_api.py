"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient

from product_search.main import app


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture
    def client(self):
        """Create a test client with the sample catalog loaded."""
        with TestClient(app) as client:
            yield client

    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Product Search"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"

    def test_search_exact_match(self, client):
        """Test searching with exact product words."""
        response = client.get("/api/v1/products/search", params={"q": "wireless mouse"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] >= 1
        assert data["results"][0]["product"]["name"] == "Wireless Mouse"
        assert data["results"][0]["matched_fields"] == 2
        assert data["suggestions"] is None

    def test_search_fuzzy_match(self, client):
        """Test searching with a transposed query."""
        response = client.get("/api/v1/products/search", params={"q": "keybaord"})
        assert response.status_code == 200

        data = response.json()
        assert data["results"][0]["product"]["id"] == 2

    def test_results_sorted_by_score(self, client):
        """Test that hits come back best first."""
        response = client.get("/api/v1/products/search", params={"q": "mouse"})
        scores = [hit["score"] for hit in response.json()["results"]]

        assert scores == sorted(scores, reverse=True)

    def test_max_results(self, client):
        """Test result limiting."""
        response = client.get(
            "/api/v1/products/search", params={"q": "with", "max_results": 2}
        )
        assert response.status_code == 200
        assert len(response.json()["results"]) <= 2

    def test_no_match_includes_suggestions(self, client):
        """Test that empty results carry a suggestion list."""
        response = client.get("/api/v1/products/search", params={"q": "zzzzqqq"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 0
        assert isinstance(data["suggestions"], list)

    def test_cache_hit_flag(self, client):
        """Test that repeated searches are served from the engine cache."""
        first = client.get("/api/v1/products/search", params={"q": "portable speaker"})
        second = client.get("/api/v1/products/search", params={"q": "portable speaker"})

        assert first.json()["cache_hit"] is False
        assert second.json()["cache_hit"] is True
        assert first.json()["results"] == second.json()["results"]

    def test_clear_cache(self, client):
        """Test the cache clearing endpoint."""
        client.get("/api/v1/products/search", params={"q": "webcam"})

        response = client.delete("/api/v1/search/cache")
        assert response.status_code == 200
        assert response.json()["cleared_entries"] >= 1

        again = client.get("/api/v1/products/search", params={"q": "webcam"})
        assert again.json()["cache_hit"] is False

    def test_query_too_long(self, client):
        """Test that over-long queries are rejected."""
        response = client.get("/api/v1/products/search", params={"q": "a" * 101})
        assert response.status_code == 400

    def test_missing_query(self, client):
        """Test that the query parameter is required."""
        response = client.get("/api/v1/products/search")
        assert response.status_code == 422

    def test_search_with_body(self, client):
        """Test the POST search endpoint."""
        response = client.post(
            "/api/v1/products/search",
            json={"query": "external ssd", "max_results": 3}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "external ssd"
        assert data["results"][0]["product"]["id"] == 10

    def test_search_with_blank_body_query(self, client):
        """Test that a whitespace-only body query fails validation."""
        response = client.post("/api/v1/products/search", json={"query": "   "})
        assert response.status_code == 422

    def test_suggestions(self, client):
        """Test the suggestions endpoint."""
        response = client.get("/api/v1/products/suggestions/keybord")
        assert response.status_code == 200
        assert "keyboard" in response.json()

    def test_health_check(self, client):
        """Test the health endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["catalog"] == "healthy"

    def test_liveness(self, client):
        """Test the liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_status(self, client):
        """Test the status endpoint."""
        client.get("/api/v1/products/search", params={"q": "mouse"})

        response = client.get("/api/v1/status")
        assert response.status_code == 200

        data = response.json()
        assert data["catalog"]["total_products"] == 10
        assert data["configuration"]["field_weights"]["name"] == 3.0
        assert data["statistics"]["total_queries"] >= 1
