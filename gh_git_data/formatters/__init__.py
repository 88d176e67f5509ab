"""Console output formatters."""

from .color_scheme import ColorScheme
from .table_formatter import TableFormatter

__all__ = ["ColorScheme", "TableFormatter"]
