import json
from pathlib import Path
from typing import Optional

import typer

from weather_export.config import load_preferences, locations_file
from weather_export.export.preferences import ExportPreferences
from weather_export.export.provider import LocationColumns, WeatherContentProvider
from weather_export.infra.location_repository import JsonLocationRepository

app = typer.Typer(help="CLI to inspect the Breezy weather export")


def _build_provider(
    file: Optional[Path],
    temperature_unit: Optional[str],
    precipitation_unit: Optional[str],
    distance_unit: Optional[str],
    pressure_unit: Optional[str],
    locale: Optional[str],
) -> WeatherContentProvider:
    defaults = load_preferences()
    preferences = ExportPreferences(
        temperature_unit=temperature_unit or defaults.temperature_unit,
        precipitation_unit=precipitation_unit or defaults.precipitation_unit,
        distance_unit=distance_unit or defaults.distance_unit,
        pressure_unit=pressure_unit or defaults.pressure_unit,
        # keep an explicit speed unit only when the distance unit is unchanged
        speed_unit=None if distance_unit else defaults.speed_unit,
        locale=locale or defaults.locale,
    )
    return WeatherContentProvider(JsonLocationRepository(file or locations_file()), preferences)


@app.command("version")
def cli_version():
    provider = WeatherContentProvider(JsonLocationRepository(locations_file()), load_preferences())
    row = provider.query_version().as_dicts()[0]
    typer.echo(f"{row['major']}.{row['minor']}")


@app.command("locations")
def cli_locations(
    file: Optional[Path] = typer.Option(None, help="JSON file with locations"),
    temperature_unit: Optional[str] = typer.Option(None, help="c, f or k"),
    precipitation_unit: Optional[str] = typer.Option(None, help="mm, cm, in or lpsqm"),
    distance_unit: Optional[str] = typer.Option(None, help="m, km, mi, nmi or ft"),
    pressure_unit: Optional[str] = typer.Option(None, help="mb, hpa, kpa, atm, mmhg, inhg or kgfpsqcm"),
    locale: Optional[str] = typer.Option(None, help="Locale for formatted values"),
):
    provider = _build_provider(file, temperature_unit, precipitation_unit, distance_unit, pressure_unit, locale)
    rows = provider.query_weather().as_dicts()
    if not rows:
        typer.echo("No locations with current weather")
        raise typer.Exit(code=0)
    typer.echo("id\tcity\ttemperature")
    for row in rows:
        current = json.loads(row[LocationColumns.WEATHER]).get("current", {})
        temperature = current.get("temperature", {}).get("temperature", {})
        typer.echo(f"{row['id']}\t{row['city'] or '-'}\t{temperature.get('preferredUnitFormatted', '-')}")


@app.command("weather")
def cli_weather(
    location_id: str = typer.Option(..., help="Location id"),
    file: Optional[Path] = typer.Option(None, help="JSON file with locations"),
    temperature_unit: Optional[str] = typer.Option(None, help="c, f or k"),
    precipitation_unit: Optional[str] = typer.Option(None, help="mm, cm, in or lpsqm"),
    distance_unit: Optional[str] = typer.Option(None, help="m, km, mi, nmi or ft"),
    pressure_unit: Optional[str] = typer.Option(None, help="mb, hpa, kpa, atm, mmhg, inhg or kgfpsqcm"),
    locale: Optional[str] = typer.Option(None, help="Locale for formatted values"),
):
    provider = _build_provider(file, temperature_unit, precipitation_unit, distance_unit, pressure_unit, locale)
    for row in provider.query_weather().as_dicts():
        if row["id"] == location_id:
            typer.echo(json.dumps(json.loads(row[LocationColumns.WEATHER]), indent=2, ensure_ascii=False))
            return
    typer.echo(f"No current weather for location {location_id}", err=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
