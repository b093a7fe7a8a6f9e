"""Pydantic models for the tools catalog combiner."""

from src.models.model_catalog import (
    Category,
    CategoryTools,
    ToolsList,
)
from src.models.model_ignore import (
    IgnoredToolRecord,
    IgnoredToolsAudit,
    IgnoreFile,
    IgnoreRule,
)
from src.models.model_tags import (
    CanonicalTag,
    TagsFile,
)
from src.models.model_tool import (
    EnrichedFilters,
    EnrichedTool,
    ManualTool,
    ManualToolFilters,
    ManualToolLinks,
    Tool,
    ToolFilters,
    ToolLinks,
    ToolSource,
)

__all__ = [
    # Tool models
    "EnrichedFilters",
    "EnrichedTool",
    "ManualTool",
    "ManualToolFilters",
    "ManualToolLinks",
    "Tool",
    "ToolFilters",
    "ToolLinks",
    "ToolSource",
    # Tag models
    "CanonicalTag",
    "TagsFile",
    # Ignore list models
    "IgnoreFile",
    "IgnoreRule",
    "IgnoredToolRecord",
    "IgnoredToolsAudit",
    # Catalog models
    "Category",
    "CategoryTools",
    "ToolsList",
]
