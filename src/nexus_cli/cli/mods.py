"""
Mod commands - Show metadata for a single mod
"""

import json

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
import typer

from nexus_cli.cli.shared import call_api, console, parse_response
from nexus_cli.core import Mod


def mod(
    game: str = typer.Argument(..., help="Game domain, e.g. skyrimspecialedition"),
    mod_id: str = typer.Argument(..., help="Numeric mod id"),
    raw: bool = typer.Option(False, "--json", help="Print the raw API response"),
) -> None:
    """Show metadata for a mod"""
    data = call_api(lambda client: client.get_mod_data(game, mod_id))

    if raw:
        console.print_json(json.dumps(data))
        return

    info = parse_response(Mod.model_validate, data)

    details = Table.grid(padding=(0, 2))
    details.add_column(style="bold")
    details.add_column()
    details.add_row("Version", info.version or "-")
    details.add_row("Author", info.author or (info.user.name if info.user else None) or "-")
    details.add_row("Endorsements", f"{info.endorsement_count:,}")
    details.add_row("Downloads", f"{info.mod_downloads:,} ({info.mod_unique_downloads:,} unique)")
    details.add_row("Updated", info.updated_time or "-")
    details.add_row("Status", info.status or "-")
    details.add_row("URL", info.url)

    if info.contains_adult_content:
        details.add_row("Note", "[yellow]Contains adult content[/yellow]")
    if not info.available:
        details.add_row("Note", "[red]Not available for download[/red]")

    body = Table.grid()
    if info.summary:
        body.add_row(f"[italic]{escape(info.summary)}[/italic]")
        body.add_row("")
    body.add_row(details)

    console.print(
        Panel(
            body,
            title=f"[bold cyan]{escape(info.name or f'Mod {info.mod_id}')}[/bold cyan]",
            subtitle=f"[dim]{info.domain_name} #{info.mod_id}[/dim]",
            border_style="blue",
            expand=False,
        )
    )
