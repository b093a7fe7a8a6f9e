"""Ignore list and schema filtering for the tools lists."""

from src.filters.ignore_filter import IgnoreFilter, should_ignore_tool
from src.filters.schema_filter import ToolSchemaValidator

__all__ = ["IgnoreFilter", "ToolSchemaValidator", "should_ignore_tool"]
