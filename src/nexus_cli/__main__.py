"""
Main CLI entry point - Registers all commands
"""

from pyfiglet import figlet_format
from rich.panel import Panel
from rich.text import Text
import typer

from nexus_cli.__version__ import __author__, __version__
from nexus_cli.cli import games, mods, utils
from nexus_cli.cli.shared import LOG_DIR, console
from nexus_cli.core import setup_crash_logging, setup_verbose_logging

# Create main app
app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
)


def render_banner() -> None:
    """Renders a stylized banner"""
    width = console.width
    font = "slant" if width > 60 else "small"

    ascii_art = figlet_format("Nexus-CLI", font=font)
    banner_text = Text(ascii_art, style="bold cyan")

    info_line = Text.assemble(
        (" ⚙  ", "yellow"),
        (f"v{__version__}", "bold white"),
        (" | ", "dim"),
        ("Created by ", "italic white"),
        (f"{__author__}", "bold magenta"),
    )

    console.print(
        Panel(
            Text.assemble(banner_text, "\n", info_line),
            border_style="blue",
            padding=(1, 2),
            expand=False,
        ),
        justify="left",
    )


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(None, "--version", "-v", help="Show version and exit"),
    verbose: bool | None = typer.Option(None, "--verbose", help="Enable verbose logging"),
) -> None:
    """Nexus-CLI: browse the Nexus Mods catalogue from your terminal."""

    if verbose:
        setup_verbose_logging(LOG_DIR)

    if version:
        console.print(f"Nexus-CLI Version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        render_banner()
        console.print("\n[bold yellow]Usage:[/bold yellow] nexus-cli [COMMAND] [ARGS]...")
        console.print("\n[bold cyan]Commands:[/bold cyan]")
        console.print("  [green]games[/green]    List supported games (--all for unapproved)")
        console.print("  [green]mod[/green]      Show metadata for a mod")
        console.print("  [green]doctor[/green]   Check configuration and API key")
        console.print("\nRun [white]nexus-cli --help[/white] for details.\n")


# Register all command groups
app.command()(games.games)
app.command()(mods.mod)
app.command()(utils.doctor)


def main() -> None:
    """Main entry point"""
    setup_crash_logging(LOG_DIR)
    app()


if __name__ == "__main__":
    main()
