from datetime import datetime
import logging
from pathlib import Path
import sys
import traceback

from rich.console import Console

from nexus_cli.__version__ import __version__


def setup_crash_logging(log_dir: Path) -> Path:
    """Configure crash logging for bug reports"""
    log_dir.mkdir(parents=True, exist_ok=True)

    def excepthook(exc_type, exc_value, exc_traceback) -> None:
        """Log crashes for bug reports"""

        log_file = log_dir / f"crash-{datetime.now():%Y%m%d-%H%M%S}.log"

        with open(log_file, "w") as f:
            f.write(f"Nexus-CLI v{__version__}\n")
            f.write(f"Python {sys.version}\n")
            f.write(f"Platform: {sys.platform}\n\n")
            traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)

        console = Console(stderr=True)
        console.print("\n[red bold]Nexus-CLI crashed![/red bold]")
        console.print(f"[yellow]Crash log saved to:[/yellow] {log_file}")
        console.print("[dim]Please include this file when reporting the issue.\n")

    sys.excepthook = excepthook
    return log_dir


def setup_verbose_logging(log_dir: Path) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_dir / f"nexus-cli-{__version__}.log"),
            logging.StreamHandler(),
        ],
    )
