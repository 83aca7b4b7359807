"""Style definitions for consistent UI appearance"""

from rich.style import Style
from enum import Enum
from dataclasses import dataclass


@dataclass
class PanelConfig:
    """Standard panel configuration"""

    title_align: str = "left"
    border_style: str = "blue"
    padding: tuple = (1, 2)


class StyleType(Enum):
    """Style definitions that can be used directly without .value"""

    # Status styles
    ERROR = Style(color="red", bold=True)
    WARNING = Style(color="yellow")

    # Package listing styles
    PACKAGE_NAME = Style()
    PACKAGE_VERSION = Style(color="green")
    PACKAGE_PATH = Style(color="bright_black")
    PACKAGE_PRIVATE = Style(color="red")

    def __call__(self):
        return self.value


class SymbolType(str, Enum):
    ERROR = "✗"
    WARNING = "⚠"

    def __format__(self, format_spec):
        return str(self.value)


# Default configurations
DEFAULT_PANEL = PanelConfig()
