"""Output formatting module."""

from .formatters import OutputFormatter, JSONFormatter, TableFormatter

__all__ = ["OutputFormatter", "JSONFormatter", "TableFormatter"]
