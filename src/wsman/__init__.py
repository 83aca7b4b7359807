"""
wsman - Cargo workspace package listing
"""

__version__ = "0.1.0"

from .core import Package, WorkspaceMetadata, load_metadata
from .core.list import ListDisplay, ListOptions, resolve_packages

__all__ = [
    "Package",
    "WorkspaceMetadata",
    "load_metadata",
    "ListDisplay",
    "ListOptions",
    "resolve_packages",
    "__version__",
]
