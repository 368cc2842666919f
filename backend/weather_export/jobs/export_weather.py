from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

import typer

from weather_export.config import load_preferences, locations_file
from weather_export.export.preferences import ExportPreferences
from weather_export.export.provider import Version, WeatherContentProvider
from weather_export.infra.location_repository import JsonLocationRepository, LocationRepository

app = typer.Typer(help="Write the weather export of every location to a JSON file")


def export_weather(
    *,
    output: Path,
    repository: Optional[LocationRepository] = None,
    preferences: Optional[ExportPreferences] = None,
) -> Dict[str, int]:
    repository = repository or JsonLocationRepository(locations_file())
    preferences = preferences or load_preferences()
    provider = WeatherContentProvider(repository, preferences)
    locations = repository.get_all_locations(with_parameters=False)
    cursor = provider.weather_cursor(locations)
    payload = {
        "version": {"major": Version.MAJOR, "minor": Version.MINOR},
        "locations": [
            {**row, "weather": json.loads(row["weather"])} for row in cursor.as_dicts()
        ],
    }
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    stats = {"total": len(locations), "exported": len(cursor), "skipped": len(locations) - len(cursor)}
    _log_summary(output, preferences, stats)
    return stats


@app.command()
def run(
    output: Path = typer.Option(Path("weather_export.json"), help="Destination file"),
    file: Optional[Path] = typer.Option(None, help="JSON file with locations"),
):
    """CLI entrypoint for the weather export."""
    repository = JsonLocationRepository(file) if file else None
    export_weather(output=output, repository=repository)


def _log_summary(output: Path, preferences: ExportPreferences, stats: Dict[str, int]):
    print(
        f"[export_weather] output={output} version={Version.MAJOR}.{Version.MINOR} "
        f"units={preferences.temperature_unit}/{preferences.precipitation_unit}/"
        f"{preferences.distance_unit}/{preferences.pressure_unit} "
        f"exported={stats['exported']} skipped={stats['skipped']}"
    )


if __name__ == "__main__":
    app()
