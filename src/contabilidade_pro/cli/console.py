"""Rich console and logging configuration for CLI output."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "highlight": "magenta",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "currency": "green",
    }
)

# Global console instance
console = Console(theme=THEME)


def configure_logging(level: str = "WARNING") -> None:
    """Route the package loggers through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Aviso:[/warning] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")
