"""Abstract base class for catalog storage backends.

Catalog storage reads the tools lists and the ignore list, and writes the
generated artifacts. Every write replaces the previous artifact as a whole.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from src.models.model_catalog import CategoryTools
from src.models.model_ignore import IgnoredToolsAudit, IgnoreRule
from src.models.model_tags import TagsFile


class CatalogStorage(ABC):
    """Abstract base class for catalog storage implementations."""

    @abstractmethod
    def load_tools_list(self, path: Path | str) -> Any:
        """Load a category-keyed tools list.

        Args:
            path: Location of the tools list.

        Returns:
            Decoded tools list, not validated.
        """
        ...

    @abstractmethod
    def load_ignore_rules(self, path: Path | str | None) -> list[IgnoreRule]:
        """Load the ignore rules.

        Args:
            path: Location of the ignore list. None or a missing file means no rules.

        Returns:
            Ignore rules in file order.
        """
        ...

    @abstractmethod
    def save_catalog(self, path: Path | str, catalog: dict[str, CategoryTools]) -> Path:
        """Save the combined tools catalog."""
        ...

    @abstractmethod
    def save_tags(self, path: Path | str, tags: TagsFile) -> Path:
        """Save the canonical language and technology tags."""
        ...

    @abstractmethod
    def save_audit(self, path: Path | str, audit: IgnoredToolsAudit) -> Path:
        """Save the ignored tools audit log."""
        ...
