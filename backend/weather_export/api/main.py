from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from weather_export.api.routers import provider
from weather_export.config import load_preferences, locations_file
from weather_export.export.preferences import ExportPreferences
from weather_export.export.provider import WeatherContentProvider
from weather_export.infra.location_repository import JsonLocationRepository, LocationRepository


def create_app(
    repository: Optional[LocationRepository] = None,
    preferences: Optional[ExportPreferences] = None,
) -> FastAPI:
    app = FastAPI(title="Breezy Weather Export API", version="0.1.0")
    if repository is None:
        repository = JsonLocationRepository(locations_file())
    if preferences is None:
        preferences = load_preferences()
    app.state.provider = WeatherContentProvider(repository, preferences)

    app.include_router(provider.router, prefix="/api")
    return app


app = create_app()
