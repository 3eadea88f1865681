from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import typer

from cli.render import echo_heading, render_error, render_summary
from cli.samples import INVALID_SAMPLE, SAMPLE_READINGS
from logging_config import configure_logging
from models.errors import ReadingValidationError
from models.reading import Reading
from services.summary import summarize
from settings import OUTPUT_FORMATS, get_settings

logger = logging.getLogger(__name__)


@dataclass
class CLIState:
    output_format: str


app = typer.Typer(
    help="Print weather readings from a Stevenson screen and their derived values.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or WARNING).",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text or json (defaults to READING_OUTPUT_FORMAT env or text).",
    ),
) -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    chosen_format = (output_format or settings.output_format).lower()
    if chosen_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unsupported format {output_format!r}; choose one of {', '.join(OUTPUT_FORMATS)}.",
            param_hint="--format",
        )
    configure_logging(log_level or settings.log_level, force=True)
    ctx.obj = CLIState(output_format=chosen_format)


@app.command("demo")
def demo_command(ctx: typer.Context) -> None:
    """Print the sample readings, then show how an invalid reading is rejected."""
    state = _get_state(ctx)
    for index, sample in enumerate(SAMPLE_READINGS, start=1):
        reading = Reading(
            sample.air_temperature,
            sample.dew_point,
            sample.wind_speed,
            sample.total_rain,
        )
        if state.output_format == "text":
            echo_heading(f"Reading {index}:")
        render_summary(summarize(reading), state.output_format)
        if state.output_format == "text":
            typer.echo(f"expected Heat Index = {sample.expected_heat_index}")
            typer.echo()

    typer.echo("Attempting to create an invalid reading:")
    try:
        Reading(*INVALID_SAMPLE)
    except ReadingValidationError as exc:
        typer.echo(f"Error: {exc.message}")


@app.command("describe")
def describe_command(
    ctx: typer.Context,
    air_temperature: float = typer.Option(..., "--air-temperature", "-t", help="Air temperature in °C."),
    dew_point: float = typer.Option(..., "--dew-point", "-d", help="Dew point in °C."),
    wind_speed: float = typer.Option(..., "--wind-speed", "-w", help="Wind speed in mph."),
    total_rain: float = typer.Option(..., "--rain", "-r", help="Rain over the last 24 hours in mm."),
) -> None:
    """Describe a single reading built from the given measurements."""
    state = _get_state(ctx)
    try:
        reading = Reading(air_temperature, dew_point, wind_speed, total_rain)
    except ReadingValidationError as exc:
        logger.info(
            "Rejected reading",
            extra={
                "air_temperature": air_temperature,
                "dew_point": dew_point,
                "wind_speed": wind_speed,
                "total_rain": total_rain,
                "reason": exc.reason.value,
            },
        )
        render_error(exc.message)
        raise typer.Exit(code=1) from exc
    render_summary(summarize(reading), state.output_format)
