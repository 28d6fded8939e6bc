"""
Shared utilities and constants for CLI commands.
"""

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import aiohttp
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
import typer

from nexus_cli.api import ConfigurationError, NexusAPIClient
from nexus_cli.core import Settings

T = TypeVar("T")

# Shared console instance
console = Console()

# Configuration paths
CONFIG_PATH = Path.home() / ".config" / "Nexus-CLI"
LOG_DIR = CONFIG_PATH / "logs"

API_KEYS_URL = "https://next.nexusmods.com/settings/api-keys"


def load_settings() -> Settings:
    """Read settings or exit when the environment holds invalid values"""
    try:
        return Settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration in environment:[/red]\n{escape(str(e))}")
        raise typer.Exit(1) from e


def get_client() -> NexusAPIClient:
    """Return the configured client or exit with a readable message"""
    try:
        return NexusAPIClient()
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("[yellow]Set NEXUS_API_BASE_URL (e.g. https://api.nexusmods.com/v1)[/yellow]")
        raise typer.Exit(1) from e


def call_api(call: Callable[[NexusAPIClient], Awaitable[Any]]) -> Any:
    """Run a single API call, turning transport errors into a CLI exit"""
    client = get_client()

    try:
        return asyncio.run(call(client))
    except aiohttp.ClientResponseError as e:
        console.print(f"[red]API request failed:[/red] HTTP {e.status} {e.message}")
        raise typer.Exit(1) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        console.print(f"[red]Could not reach the Nexus API:[/red] {escape(str(e) or type(e).__name__)}")
        raise typer.Exit(1) from e
    except ValueError as e:
        console.print(f"[red]Nexus API returned invalid JSON:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def parse_response(validate: Callable[[Any], T], data: Any) -> T:
    """Validate a payload for display, exiting if its shape is unexpected"""
    try:
        return validate(data)
    except ValidationError as e:
        console.print(f"[red]Unexpected response from the Nexus API:[/red]\n{escape(str(e))}")
        raise typer.Exit(1) from e
