from __future__ import annotations

from fastapi import HTTPException, Request

from weather_export.export.provider import WeatherContentProvider


def get_provider(request: Request) -> WeatherContentProvider:
    provider = getattr(request.app.state, "provider", None)
    if provider is None:
        raise HTTPException(status_code=500, detail="Weather provider not configured")
    return provider
