# Package display functionality
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console

from ..exceptions import OutputError
from ..package import Package
from ...ui.console import console as default_console
from .formatter import PackageFormatter


@dataclass(frozen=True)
class ListOptions:
    """Output options of the list command."""

    json: bool = False
    long: bool = False
    all: bool = False


class ListDisplay:
    """Displays package information as JSON or aligned text."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize list display.

        Args:
            console: Console to write to, defaults to the shared stdout console
        """
        self.console = console or default_console

    def show_json(self, packages: List[Package]) -> None:
        """Write every package field as pretty JSON."""
        self.console.print_json(data=[pkg.to_dict() for pkg in packages])

    def show_packages(
        self,
        packages: List[Package],
        long: bool = False,
        all: bool = False,
    ) -> None:
        """
        Show package list as text.

        Args:
            packages: Packages in display order
            long: Whether to show version and path columns
            all: Whether to mark private packages
        """
        formatter = PackageFormatter(long=long, all=all)
        for line in formatter.format_package_list(packages):
            self.console.print(line, soft_wrap=True)

    def render(self, packages: List[Package], options: ListOptions) -> None:
        """
        Render packages according to list options.

        Raises:
            OutputError: If writing to the console fails
        """
        try:
            if options.json:
                self.show_json(packages)
            else:
                self.show_packages(packages, long=options.long, all=options.all)
        except OSError as e:
            raise OutputError(f"Failed to write output: {e}") from e
