"""Tool enrichment for the combined catalog.

Replaces the free-text language and technology filters of a tool with
canonical tag objects from the run's tag registries. Manual tools are also
completed with defaults and flagged when their repository belongs to the
organization.
"""

import logging

from pydantic import ValidationError

from src.categorization.tag_registry import TagRegistries
from src.consts import ORG_REPO_PREFIX
from src.models.common import _parse_url
from src.models.model_tool import EnrichedFilters, EnrichedTool, ManualTool, Tool

logger = logging.getLogger(__name__)


class InvalidURLError(ValueError):
    """A repository URL could not be parsed."""


def normalize_url(url: str) -> str:
    """Normalize an absolute URL (lowercase scheme and host, default path).

    Raises:
        InvalidURLError: If the URL cannot be parsed.
    """
    try:
        return _parse_url(url)
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else "unparseable"
        raise InvalidURLError(f"Invalid URL: {url!r} ({reason})") from None


class ToolEnricher:
    """Build catalog records from validated tools.

    Tag resolution mutates the registries, so tools must be enriched one
    after another for new tags to be shared between them.
    """

    def __init__(self, registries: TagRegistries, org_repo_prefix: str = ORG_REPO_PREFIX):
        """Initialize the enricher.

        Args:
            registries: Language and technology registries of the run.
            org_repo_prefix: URL prefix of repositories owned by the organization.
        """
        self.registries = registries
        self.org_repo_prefix = org_repo_prefix

    def is_org_repo(self, repo_url: str | None) -> bool:
        """Check whether a repository URL lives under the organization namespace.

        Raises:
            InvalidURLError: If the URL is set but cannot be parsed.
        """
        if not repo_url:
            return False
        return normalize_url(repo_url).startswith(self.org_repo_prefix)

    def enrich(self, tool: Tool, is_org_owner: bool | None = None) -> EnrichedTool:
        """Resolve the tags of a tool.

        Args:
            tool: Tool to enrich. It is not modified.
            is_org_owner: Ownership flag to attach, None to leave it out.

        Returns:
            Copy of the tool with canonical language and technology tags.
            Only keys present in the input are set, explicit nulls included.
        """
        filters_data = {
            "language": self.registries.languages.resolve_all(tool.filters.language),
            "technology": self.registries.technologies.resolve_all(tool.filters.technology),
            **tool.filters.model_dump(include={"categories", "has_commercial"}, exclude_unset=True),
        }
        if is_org_owner is not None:
            filters_data["is_org_owner"] = is_org_owner

        data = tool.model_dump(by_alias=True, exclude={"filters"}, exclude_unset=True)
        return EnrichedTool.model_validate({**data, "filters": EnrichedFilters(**filters_data)})

    def enrich_manual(self, tool: ManualTool) -> EnrichedTool:
        """Complete and enrich a validated manual tool.

        Missing descriptions become empty and a missing hasCommercial flag
        becomes false, matching what the crawler emits for automated tools.

        Raises:
            InvalidURLError: If the repository URL cannot be parsed.
        """
        is_org_owner = self.is_org_repo(tool.repo_url)
        completed = tool.model_copy(
            update={
                "description": tool.description or "",
                "filters": tool.filters.model_copy(
                    update={"has_commercial": bool(tool.filters.has_commercial)}
                ),
            }
        )
        return self.enrich(completed, is_org_owner=is_org_owner)
