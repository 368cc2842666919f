from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weather_export.api.main import create_app
from weather_export.domain.weather import Weather
from weather_export.infra.location_repository import InMemoryLocationRepository


@pytest.fixture()
def client(make_location, make_weather, metric_prefs):
    repository = InMemoryLocationRepository(
        [
            make_location("paris"),
            make_location("empty", weather=Weather()),
            make_location("forecast-only", weather=make_weather(current=None)),
        ]
    )
    return TestClient(create_app(repository=repository, preferences=metric_prefs))


def test_version_endpoint(client):
    response = client.get("/api/provider/version")
    assert response.status_code == 200
    assert response.json() == {"columns": ["major", "minor"], "rows": [[0, 1]]}


def test_location_endpoint(client):
    response = client.get("/api/provider/location")
    assert response.status_code == 200
    body = response.json()
    assert body["columns"][0] == "id"
    assert body["columns"][-1] == "weather"
    assert [row[0] for row in body["rows"]] == ["paris"]
    assert isinstance(body["rows"][0][-1], str)


def test_unknown_path(client):
    response = client.get("/api/provider/forecast")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unrecognized path 'forecast'"


def test_missing_provider():
    app = create_app(repository=InMemoryLocationRepository())
    app.state.provider = None
    response = TestClient(app).get("/api/provider/version")
    assert response.status_code == 500
