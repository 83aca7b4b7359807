"""Text formatting patterns for UI components"""

from rich.style import Style
from rich.text import Text as RichText
from typing import Optional, Union


class Text(RichText):
    """Enhanced Text class with column formatting methods"""

    def append_spaces(self, count: int) -> "Text":
        """Append `count` spaces, nothing for zero or negative counts

        Returns:
            self for method chaining
        """
        if count > 0:
            self.append(" " * count)
        return self

    def append_column(
        self,
        value: str,
        *,  # Force keyword arguments
        style: Optional[Union[str, Style]] = None,
        width: int = 0,
        separator: str = " ",
    ) -> "Text":
        """Append a column value, padded on the right to `width`

        Args:
            value: The column content
            style: Style for the content only, padding stays unstyled
            width: Minimum width of the column (default: 0)
            separator: Text written before the column (default: one space)

        Returns:
            self for method chaining
        """
        self.append(separator)
        self.append(value, style=style)
        return self.append_spaces(width - len(value))
