"""Main CLI interface."""

import logging
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core import compute_window, observation_url, window_bounds
from ..errors import WindowError
from ..models.config import ServiceConfig
from ..models.interval import IntervalLabel, hour_choices
from ..models.window import TimeWindow

console = Console()
app = typer.Typer(help="Observation windows for regional council time-series")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to OBSWINDOW_LOG_LEVEL or INFO)"
    )
):
    """Compute report windows and the SOS requests that use them."""
    config = _load_config(log_level)
    _setup_logging(config.log_level)
    ctx.obj = config


@app.command()
def intervals(ctx: typer.Context):
    """List the interval labels and how far each one reaches."""
    config: ServiceConfig = ctx.obj
    hours = hour_choices()

    table = Table(
        title="Intervals",
        caption=(
            f"Default: {config.default_interval.value}. "
            f"Start times {hours[0]} to {hours[-1]}, hourly."
        )
    )
    table.add_column("Label", style="cyan")
    table.add_column("Step", style="green")

    for label in IntervalLabel:
        table.add_row(label.value, label.rule.describe())

    console.print(table)


@app.command()
def window(
    ctx: typer.Context,
    start_date: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    interval: Optional[str] = typer.Option(
        None, "--interval", "-i", help="Interval label, e.g. '6 hours' (defaults to OBSWINDOW_DEFAULT_INTERVAL)"
    ),
    time_of_day: Optional[str] = typer.Option(
        None, "--time", "-t", help="Start time of day (HH or HH:MM:SS)"
    )
):
    """Compute the window for an interval starting at a date and hour."""
    config: ServiceConfig = ctx.obj
    result = _compute(config, interval, start_date, time_of_day)
    tz = _local_zone(config)
    start_local, end_local, start_utc, end_utc = window_bounds(result, tz)

    table = Table(title=f"Window for {result.interval.value}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Start date", result.start_date.isoformat())
    table.add_row("Start time", result.start_time)
    table.add_row("End date", result.end_date.isoformat())
    table.add_row("End time", result.end_time)
    table.add_row("End date (report)", result.format_end_date())
    table.add_row("Duration", str(result.duration))
    table.add_row("Start (UTC)", start_utc.isoformat())
    table.add_row("End (UTC)", end_utc.isoformat())

    console.print(table)


@app.command()
def request(
    ctx: typer.Context,
    site: str = typer.Argument(..., help="Site name"),
    measurement: str = typer.Argument(..., help="Measurement, e.g. Flow"),
    start_date: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    interval: Optional[str] = typer.Option(
        None, "--interval", "-i", help="Interval label, e.g. '1 day' (defaults to OBSWINDOW_DEFAULT_INTERVAL)"
    ),
    time_of_day: Optional[str] = typer.Option(
        None, "--time", "-t", help="Start time of day (HH or HH:MM:SS)"
    ),
    server_name: Optional[str] = typer.Option(
        None, "--server", "-s", help="Council server name (defaults to the first configured)"
    )
):
    """Print the SOS GetObservation URL for a window."""
    config: ServiceConfig = ctx.obj

    try:
        server = config.get_server(server_name)
    except LookupError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    result = _compute(config, interval, start_date, time_of_day)
    try:
        url = observation_url(server, site, measurement, result)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(url, soft_wrap=True, highlight=False, markup=False)


@app.command()
def servers(ctx: typer.Context):
    """Show configured council servers and measurements."""
    config: ServiceConfig = ctx.obj

    table = Table(title="Council Servers")
    table.add_column("Name", style="cyan")
    table.add_column("Endpoint", style="green")

    for server in config.servers:
        table.add_row(server.name, server.service_url)

    console.print(table)
    console.print(f"Measurements: {', '.join(config.measurements)}")


def _compute(
    config: ServiceConfig,
    interval: Optional[str],
    start_date: str,
    time_of_day: Optional[str]
) -> TimeWindow:
    """Compute a window from CLI input and config defaults, exiting on bad input."""
    try:
        return compute_window(
            interval or config.default_interval,
            start_date,
            time_of_day or config.default_time_of_day
        )
    except WindowError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _local_zone(config: ServiceConfig) -> ZoneInfo:
    try:
        return ZoneInfo(config.timezone)
    except ZoneInfoNotFoundError:
        console.print(f"[red]Unknown timezone: {escape(config.timezone)}[/red]")
        raise typer.Exit(1)


def _load_config(log_level: Optional[str] = None) -> ServiceConfig:
    """Load configuration."""
    try:
        config = ServiceConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # Override with CLI options
    if log_level:
        config.log_level = log_level

    return config


def _setup_logging(log_level: str) -> None:
    """Setup logging configuration."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
