"""
REST API 엔드포인트 테스트
app/main.py, app/api/v1/endpoints/*.py
"""

import json

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from app.main import app
from app.api.v1.endpoints.route import get_route_service
from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.db.cache import clear_cache, is_initialized
from app.services.route_service import RouteService


@pytest.fixture
def client():
    """FastAPI TestClient fixture (lifespan 포함)"""
    clear_cache()
    get_route_service.cache_clear()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_route_service.cache_clear()
    clear_cache()


class TestRouteEndpoint:
    """GET /api/route"""

    def test_cross_line_route(self, client):
        # When
        response = client.get(
            "/api/route", params={"from": "Danapur Cantonment", "to": "New ISBT"}
        )

        # Then
        assert response.status_code == 200
        data = response.json()
        assert data["from"] == "Danapur Cantonment"
        assert data["to"] == "New ISBT"
        assert data["route"][0] == "Danapur Cantonment"
        assert data["route"][-1] == "New ISBT"
        assert data["numberOfStations"] == 16
        assert data["numberOfInterchanges"] == 1
        assert data["changeAt"] == "Khemni Chak"
        assert data["estimatedTimeMinutes"] == 37
        assert data["estimatedPriceINR"] == 80

    def test_same_line_route(self, client):
        response = client.get("/api/route", params={"from": "Akashvani", "to": "PMCH"})

        assert response.status_code == 200
        data = response.json()
        assert data["route"] == ["Akashvani", "Gandhi Maidan", "PMCH"]
        assert data["numberOfInterchanges"] == 0
        assert data["changeAt"] is None

    def test_missing_parameter(self, client):
        response = client.get("/api/route", params={"from": "PMCH"})

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_PARAMETER"
        assert '"from" and "to"' in response.json()["error"]

    def test_empty_parameter(self, client):
        response = client.get("/api/route", params={"from": "", "to": "PMCH"})

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_PARAMETER"

    def test_unknown_station(self, client):
        response = client.get(
            "/api/route", params={"from": "Nonexistent Station", "to": "New ISBT"}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "STATION_NOT_FOUND"

    def test_station_names_not_normalized(self, client):
        response = client.get("/api/route", params={"from": "akashvani", "to": "PMCH"})
        assert response.status_code == 404

        response = client.get("/api/route", params={"from": "Akashvani", "to": " PMCH"})
        assert response.status_code == 404
        assert response.json()["code"] == "STATION_NOT_FOUND"

    def test_unreachable_pair(self, client, synthetic_network):
        # Given: 환승 2회가 필요한 노선망
        app.dependency_overrides[get_route_service] = lambda: RouteService(
            network=synthetic_network
        )

        # When
        response = client.get("/api/route", params={"from": "A", "to": "E"})

        # Then
        assert response.status_code == 404
        assert response.json()["code"] == "ROUTE_NOT_FOUND"

    def test_process_time_header(self, client):
        response = client.get("/api/route", params={"from": "PMCH", "to": "PMCH"})

        assert response.status_code == 200
        assert "x-process-time-ms" in response.headers


class TestStationEndpoints:
    """/api/stations"""

    def test_list_stations(self, client):
        response = client.get("/api/stations")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 24
        assert data["stations"][0]["name"] == "Danapur Cantonment"

    def test_search_stations(self, client):
        response = client.get("/api/stations/search", params={"q": "patna", "limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["keyword"] == "patna"
        assert data["count"] == 2
        assert [r["name"] for r in data["results"]] == ["Patna Zoo", "Patna Junction"]

    def test_search_requires_keyword(self, client):
        response = client.get("/api/stations/search")

        assert response.status_code == 422

    def test_validate_station(self, client):
        response = client.post(
            "/api/stations/validate", params={"station_name": "Patna Junction"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["line"] == 1
        assert data["interchange"] is True

    def test_validate_unknown_station(self, client):
        response = client.post("/api/stations/validate", params={"station_name": "pmch"})

        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_get_lines(self, client, line1_stations):
        response = client.get("/api/stations/lines")

        assert response.status_code == 200
        data = response.json()
        assert data["total_lines"] == 2
        assert data["lines"]["1"] == line1_stations


class TestServiceEndpoints:
    """/, /health, /api/info, /api/metrics"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["network"] == {"stations": 24, "lines": 2, "interchanges": 2}

    def test_api_info(self, client):
        response = client.get("/api/info")

        assert response.status_code == 200
        estimation = response.json()["estimation"]
        assert set(estimation) == {
            "time_per_station_mins",
            "interchange_time_mins",
            "cost_per_station_inr",
            "average_speed_kmph",
        }

    def test_metrics(self, client):
        client.get("/api/route", params={"from": "PMCH", "to": "Akashvani"})

        response = client.get("/api/metrics")

        assert response.status_code == 200
        assert response.json()["summary"]["total_requests"] >= 1

    def test_health_unhealthy_without_network(self, client):
        clear_cache()

        response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["network"] is None


class TestStartup:
    """lifespan: 노선 데이터 오류 시 서버 시작 중단"""

    def test_inconsistent_network_file_aborts_startup(self, tmp_path, synthetic_data):
        synthetic_data["lines"][1].append("Ghost")
        data_file = tmp_path / "network.json"
        data_file.write_text(json.dumps(synthetic_data), encoding="utf-8")
        clear_cache()

        with patch.object(settings, "NETWORK_DATA_FILE", str(data_file)):
            with pytest.raises(ConfigurationError):
                with TestClient(app):
                    pass

        assert is_initialized() is False
