"""
Catalogue commands - List supported and unapproved games
"""

from rich.table import Table
import typer

from nexus_cli.cli.shared import call_api, console, parse_response
from nexus_cli.core import GameList


def games(
    include_unapproved: bool = typer.Option(
        False, "--all", "-a", help="Include games not yet approved by Nexus"
    ),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Show at most N games"),
) -> None:
    """List games hosted on Nexus Mods"""
    if include_unapproved:
        data = call_api(lambda client: client.get_unsupported_games())
    else:
        data = call_api(lambda client: client.get_supported_games())

    catalogue = parse_response(GameList.validate_python, data)
    if not catalogue:
        console.print("[yellow]No games returned[/yellow]")
        return

    catalogue.sort(key=lambda g: g.downloads, reverse=True)
    shown = catalogue[:limit] if limit else catalogue

    title = "Nexus Mods Games (all)" if include_unapproved else "Nexus Mods Games"
    table = Table(title=title, header_style="bold magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Domain")
    table.add_column("Mods", justify="right")
    table.add_column("Downloads", justify="right")
    if include_unapproved:
        table.add_column("Approved")

    for game in shown:
        row = [str(game.id), game.name, game.domain_name, f"{game.mods:,}", f"{game.downloads:,}"]
        if include_unapproved:
            row.append("[green]✓[/green]" if game.is_approved else "[red]✗[/red]")
        table.add_row(*row)

    console.print(table)
    if len(shown) < len(catalogue):
        console.print(f"[dim]Showing {len(shown)} of {len(catalogue)} games[/dim]")
