# Package listing functionality
from .collector import PackageCollector, resolve_packages
from .formatter import ColumnWidths, PackageFormatter
from .display import ListDisplay, ListOptions

__all__ = [
    "PackageCollector",
    "resolve_packages",
    "ColumnWidths",
    "PackageFormatter",
    "ListDisplay",
    "ListOptions",
]
