"""Console output handling with consistent styling"""

from contextlib import contextmanager
from rich.console import Console
from ..ui.style import StyleType, SymbolType

# Listings go to stdout, diagnostics to stderr so JSON output stays clean
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str):
    """Display error message"""
    err_console.print(
        f"{SymbolType.ERROR} {message}",
        style=StyleType.ERROR(),
        markup=False,
        soft_wrap=True,
    )


def print_warning(message: str):
    """Display warning message"""
    err_console.print(
        f"{SymbolType.WARNING} {message}",
        style=StyleType.WARNING(),
        markup=False,
        soft_wrap=True,
    )


@contextmanager
def progress_status(message: str):
    """Show a spinner on stderr while a slow step runs"""
    with err_console.status(f"[dim]{message}[/dim]", spinner="dots") as status:
        yield status
