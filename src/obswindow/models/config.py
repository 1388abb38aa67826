"""Configuration models for the observation window tools."""

import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .interval import IntervalLabel
from .window import parse_time_of_day


def _load_env_file():
    """Load environment variables from .env file in common locations."""
    env_paths = [
        Path.cwd() / ".env",  # Current directory
        Path(__file__).parent.parent.parent.parent / "config" / ".env",  # <repo>/config/.env
        Path(__file__).parent.parent / ".env",  # Package directory
    ]

    for env_path in env_paths:
        if env_path.exists():
            from dotenv import load_dotenv
            load_dotenv(env_path)
            break


class CouncilServer(BaseModel):
    """A regional council Hilltop server."""
    name: str
    base_url: str = Field(description="Server root, e.g. http://hilltop.nrc.govt.nz/")
    endpoint: str = Field(default="data.hts", description="Hilltop data file serving WFS and SOS")

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    @property
    def service_url(self) -> str:
        """Full URL of the data endpoint."""
        return f"{self.base_url}{self.endpoint}"


DEFAULT_SERVERS = [
    CouncilServer(name="Northland", base_url="http://hilltop.nrc.govt.nz/"),
    CouncilServer(name="Horizons", base_url="http://hilltopserver.horizons.govt.nz/"),
    CouncilServer(name="Marlborough", base_url="http://hydro.marlborough.govt.nz/"),
]

DEFAULT_MEASUREMENTS = ["Flow", "Rainfall", "Water Temperature"]


def parse_servers(value: str) -> List[CouncilServer]:
    """Parse ``name=url`` pairs separated by commas."""
    servers = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, url = item.partition("=")
        if not sep or not name.strip() or not url.strip():
            raise ValueError(f"Expected name=url, got {item!r}")
        servers.append(CouncilServer(name=name.strip(), base_url=url.strip()))
    return servers


class ServiceConfig(BaseModel):
    """Complete configuration."""
    servers: List[CouncilServer] = Field(default_factory=lambda: list(DEFAULT_SERVERS))
    measurements: List[str] = Field(default_factory=lambda: list(DEFAULT_MEASUREMENTS))
    default_interval: IntervalLabel = IntervalLabel.ONE_DAY
    default_time_of_day: str = "00:00:00"
    timezone: str = Field(default="Pacific/Auckland", description="Zone of dashboard start times")

    # Logging
    log_level: str = "INFO"

    @field_validator("default_time_of_day")
    @classmethod
    def _check_time_of_day(cls, value: str) -> str:
        parse_time_of_day(value)
        return value

    def get_server(self, name: Optional[str] = None) -> CouncilServer:
        """Find a server by name (case-insensitive), or the first one."""
        if not self.servers:
            raise LookupError("No council servers configured")
        if name is None:
            return self.servers[0]
        for server in self.servers:
            if server.name.lower() == name.lower():
                return server
        known = ", ".join(s.name for s in self.servers)
        raise LookupError(f"Unknown server {name!r} (configured: {known})")

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Create from environment variables."""
        _load_env_file()

        config = cls()
        interval = os.getenv("OBSWINDOW_DEFAULT_INTERVAL")
        if interval:
            config.default_interval = IntervalLabel.parse(interval)
        time_of_day = os.getenv("OBSWINDOW_DEFAULT_TIME")
        if time_of_day:
            parse_time_of_day(time_of_day)
            config.default_time_of_day = time_of_day
        config.timezone = os.getenv("OBSWINDOW_TIMEZONE", config.timezone)
        config.log_level = os.getenv("OBSWINDOW_LOG_LEVEL", config.log_level)

        servers = os.getenv("OBSWINDOW_SERVERS")
        if servers:
            config.servers = parse_servers(servers)
        measurements = os.getenv("OBSWINDOW_MEASUREMENTS")
        if measurements:
            config.measurements = [m.strip() for m in measurements.split(",") if m.strip()]
        return config
