"""
Utility commands - Doctor
"""

import sys

import typer

from nexus_cli.cli.shared import API_KEYS_URL, call_api, console, load_settings, parse_response
from nexus_cli.core import ValidatedUser


def doctor() -> None:
    """Check configuration and API key"""
    console.print("[bold cyan]Running diagnostics...[/bold cyan]\n")

    issues = []

    # Check Python version
    py_version = f"{sys.version_info.major}.{sys.version_info.minor}"
    console.print(f"[green]✓[/green] Python {py_version}")

    settings = load_settings()

    if settings.base_url:
        console.print(f"[green]✓[/green] Base URL: {settings.base_url}")
    else:
        console.print("[red]✗[/red] NEXUS_API_BASE_URL not set")
        issues.append("Set NEXUS_API_BASE_URL")

    if settings.api_key:
        console.print("[green]✓[/green] API key configured")
    else:
        console.print("[yellow]![/yellow] NEXUS_API_KEY not set")
        issues.append(f"Create an API key at {API_KEYS_URL}")

    timeout = f"{settings.timeout_seconds:g}s" if settings.timeout_seconds else "none"
    console.print(f"[green]✓[/green] Request timeout: {timeout}")

    # Only hit the API once the configuration is complete
    if not issues:
        data = call_api(lambda client: client.validate_user())
        user = parse_response(ValidatedUser.model_validate, data)
        tier = "Premium" if user.is_premium else "Supporter" if user.is_supporter else "Member"
        console.print(f"[green]✓[/green] Authenticated as [bold]{user.name}[/bold] ({tier})")

    # Summary
    console.print()
    if issues:
        console.print("[yellow]Issues found:[/yellow]")
        for issue in issues:
            console.print(f"  - {issue}")
        raise typer.Exit(1)

    console.print("[green bold]✓ All checks passed![/green bold]")
