# UI components for workspace listings
from .console import console, err_console
from .style import StyleType, SymbolType

__all__ = [
    # Console
    "console",
    "err_console",
    # Style
    "StyleType",
    "SymbolType",
]
