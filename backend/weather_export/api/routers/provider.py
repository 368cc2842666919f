from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from weather_export.api.deps import get_provider
from weather_export.export.provider import MatrixCursor, WeatherContentProvider

router = APIRouter(prefix="/provider", tags=["provider"])


def _serialize_cursor(cursor: MatrixCursor) -> dict:
    return {"columns": list(cursor.columns), "rows": cursor.rows}


@router.get("/version")
def get_version(provider: WeatherContentProvider = Depends(get_provider)):
    return _serialize_cursor(provider.query_version())


@router.get("/location")
def get_locations(provider: WeatherContentProvider = Depends(get_provider)):
    return _serialize_cursor(provider.query_weather())


@router.get("/{path}")
def query_path(path: str, provider: WeatherContentProvider = Depends(get_provider)):
    cursor = provider.query(path)
    if cursor is None:
        raise HTTPException(status_code=404, detail=f"Unrecognized path '{path}'")
    return _serialize_cursor(cursor)
