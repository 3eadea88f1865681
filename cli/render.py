from __future__ import annotations

from typing import Any, Iterable, Optional

import typer

from models.summary import ReadingSummary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _with_unit(value: Optional[int], unit: str) -> str:
    if value is None:
        return "unavailable"
    return f"{value}{unit}"


def render_summary(summary: ReadingSummary, output_format: str = "text") -> None:
    if output_format == "json":
        typer.echo(summary.model_dump_json())
        return

    typer.echo(summary.description)
    echo_key_values(
        [
            ("Temperature", _with_unit(summary.temperature, "°C")),
            ("Dew Point", _with_unit(summary.dew_point, "°C")),
            ("Wind Speed", _with_unit(summary.wind_speed, " mph")),
            ("Total Rain", _with_unit(summary.total_rain, " mm")),
            ("Relative Humidity", _with_unit(summary.relative_humidity, "%")),
            ("Heat Index", summary.heat_index),
            ("Wind Chill", summary.wind_chill),
        ]
    )


def render_error(message: str) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
