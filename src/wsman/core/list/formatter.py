# Package formatting functionality
from dataclasses import dataclass
from typing import List

from ..package import Package
from ...ui.formatting import Text
from ...ui.style import StyleType


@dataclass(frozen=True)
class ColumnWidths:
    """Column widths shared by every row of a listing."""

    name: int = 0
    version: int = 0
    path: int = 0

    @classmethod
    def measure(cls, packages: List[Package]) -> "ColumnWidths":
        """
        Measure columns over the whole package list.

        The version column includes its "v" prefix and the path column is
        at least one character wide so the workspace root fits as ".".
        """
        if not packages:
            return cls()
        return cls(
            name=max(len(pkg.name) for pkg in packages),
            version=max(len(str(pkg.version)) + 1 for pkg in packages),
            path=max(max(1, len(pkg.path)) for pkg in packages),
        )


class PackageFormatter:
    """Formats package information for display."""

    def __init__(self, long: bool = False, all: bool = False):
        """
        Initialize package formatter.

        Args:
            long: Whether to add version and path columns
            all: Whether to mark private packages
        """
        self.long = long
        self.all = all

    def format_line(self, package: Package, widths: ColumnWidths) -> Text:
        """
        Format one listing line.

        Args:
            package: Package to format
            widths: Column widths of the whole listing

        Returns:
            Styled line without trailing newline
        """
        line = Text(package.name, style=StyleType.PACKAGE_NAME())
        pad = widths.name - len(package.name)

        if self.long:
            line.append_spaces(pad)
            line.append_column(
                f"v{package.version}",
                style=StyleType.PACKAGE_VERSION(),
                width=widths.version,
            )
            line.append_column(
                package.display_path, style=StyleType.PACKAGE_PATH()
            )
            # Measured from the displayed path so a root package's "." counts;
            # padding from the raw empty path would add one extra space
            pad = widths.path - len(package.display_path)

        if self.all and package.private:
            line.append_spaces(pad)
            line.append(" (")
            line.append("PRIVATE", style=StyleType.PACKAGE_PRIVATE())
            line.append(")")

        return line

    def format_package_list(self, packages: List[Package]) -> List[Text]:
        """Format every package with columns aligned across the list."""
        widths = ColumnWidths.measure(packages)
        return [self.format_line(pkg, widths) for pkg in packages]
