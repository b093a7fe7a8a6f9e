"""Tool models for the automated and manual tools lists.

Both lists share the lenient ``Tool`` shape. Manual entries must also pass
``ManualTool`` (the schema gate) before they are enriched. JSON keys keep the
camelCase names used by the website, python attributes are snake_case.
"""

import re
from enum import Enum
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationInfo,
    field_validator,
)

from src.models.model_tags import CanonicalTag

# RFC 3986 absolute URI: scheme ":" hier-part, no whitespace
_ABSOLUTE_URI = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:\S+$")


class ToolSource(str, Enum):
    """Which tools list an entry came from."""

    AUTOMATED = "automated"
    MANUAL = "manual"


def _check_uri(value: str) -> str:
    """Reject values that are not absolute URIs, keep the original text.

    Only the URI syntax is checked. Whether the value is a usable URL is
    decided later, when the repository URL is normalized.
    """
    if not _ABSOLUTE_URI.match(value):
        raise ValueError(f"must be an absolute URI: {value!r}")
    return value


UriStr = Annotated[StrictStr, AfterValidator(_check_uri)]


class ToolLinks(BaseModel):
    """Links shown on a tool card."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    website_url: str | None = Field(default=None, alias="websiteUrl")
    docs_url: str | None = Field(default=None, alias="docsUrl")
    repo_url: str | None = Field(default=None, alias="repoUrl")


class ToolFilters(BaseModel):
    """Free-text filters as written in the tools lists."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    language: str | list[str] | None = None
    technology: list[str] | None = None
    categories: list[str] | None = None
    has_commercial: bool | None = Field(default=None, alias="hasCommercial")


class Tool(BaseModel):
    """A tool entry from either tools list.

    Automated entries come from a trusted crawler and are not validated
    beyond this shape. Unknown keys are kept so they reach the output.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    links: ToolLinks | None = None
    filters: ToolFilters = Field(default_factory=ToolFilters)

    @property
    def repo_url(self) -> str | None:
        """Repository URL, if the tool has one."""
        return self.links.repo_url if self.links else None


class ManualToolLinks(ToolLinks):
    """Links of a manual entry, each one an absolute URI."""

    website_url: UriStr | None = Field(default=None, alias="websiteUrl")
    docs_url: UriStr | None = Field(default=None, alias="docsUrl")
    repo_url: UriStr | None = Field(default=None, alias="repoUrl")


class ManualToolFilters(ToolFilters):
    """Filters of a manual entry; categories must come from the category list.

    Values are not coerced: ``"hasCommercial": "yes"`` is an error, not True.
    """

    language: StrictStr | list[StrictStr] | None = None
    technology: list[StrictStr] | None = None
    categories: list[StrictStr] = Field(min_length=1)
    has_commercial: StrictBool | None = Field(default=None, alias="hasCommercial")

    @field_validator("categories")
    @classmethod
    def _known_categories(cls, value: list[str], info: ValidationInfo) -> list[str]:
        known = (info.context or {}).get("categories")
        if known is None:
            return value
        unknown = [name for name in value if name not in known]
        if unknown:
            raise ValueError(f"unknown categories: {', '.join(unknown)}")
        return value


class ManualTool(Tool):
    """A manually curated tool entry that passed the schema gate."""

    title: StrictStr = Field(min_length=1)
    description: StrictStr | None = None
    links: ManualToolLinks | None = None
    filters: ManualToolFilters


class EnrichedFilters(BaseModel):
    """Filters after tag resolution: only canonical tag objects."""

    model_config = ConfigDict(populate_by_name=True)

    language: list[CanonicalTag] = Field(default_factory=list)
    technology: list[CanonicalTag] = Field(default_factory=list)
    categories: list[str] | None = None
    has_commercial: bool | None = Field(default=None, alias="hasCommercial")
    is_org_owner: bool | None = Field(
        default=None,
        alias="isAsyncAPIOwner",
        description="Repository lives under the organization namespace (manual tools only)",
    )


class EnrichedTool(BaseModel):
    """Tool record as written to the combined catalog."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    links: ToolLinks | None = None
    filters: EnrichedFilters = Field(default_factory=EnrichedFilters)
