"""
Utility functions for formatting text-based reports and tables.

Used by the reporting context to lay out ranked word counts and job lists.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        # Long values are kept whole rather than truncated
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = None):
        """
        Args:
            columns: List of Column definitions
            total_width: Width of separator lines (defaults to the sum of column widths)
        """
        self.columns = columns
        if total_width is None:
            total_width = sum(col.width for col in columns) + max(len(columns) - 1, 0)
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add a title framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_summary(self, text: str) -> "TableFormatter":
        self.lines.append(f"\n{text}")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total.

    Returns:
        Formatted percentage string (e.g., "75.0%")
    """
    if total == 0:
        return f"{0:.{decimal_places}f}%"
    percent = (count / total) * 100
    return f"{percent:.{decimal_places}f}%"
