"""File-based storage for the tools catalog.

Provides operations for:
- Input tools lists (automated and manual, category-keyed JSON)
- Ignore list
- Generated catalog, tags file and ignored tools audit log
"""

import json
import logging
from pathlib import Path
from typing import Any

from src.consts import (
    AUTOMATED_TOOLS_FILE,
    DEFAULT_DATA_DIR,
    IGNORED_OUTPUT_FILE,
    MANUAL_TOOLS_FILE,
    TAGS_OUTPUT_FILE,
    TOOLS_IGNORE_FILE,
    TOOLS_OUTPUT_FILE,
)
from src.models.model_catalog import CategoryTools
from src.models.model_ignore import IgnoredToolsAudit, IgnoreFile, IgnoreRule
from src.models.model_tags import TagsFile
from src.storage.permanent_storage.base import CatalogStorage

logger = logging.getLogger(__name__)


class FileManager(CatalogStorage):
    """File-based storage manager for catalog data.

    Default directory structure:
        data/
        ├── tools-automated.json   # Crawled tools list
        ├── tools-manual.json      # Manually curated tools list
        ├── tools-ignore.json      # Ignore rules
        ├── tools.json             # Combined catalog (generated)
        ├── all-tags.json          # Canonical tags (generated)
        └── tools-ignored.json     # Ignored tools audit log (generated)

    Writes go to the exact paths given; parent directories are not created.
    """

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Directory used to resolve the default file locations.
        """
        self.data_dir = Path(data_dir)

    @property
    def automated_tools_path(self) -> Path:
        return self.data_dir / AUTOMATED_TOOLS_FILE

    @property
    def manual_tools_path(self) -> Path:
        return self.data_dir / MANUAL_TOOLS_FILE

    @property
    def ignore_path(self) -> Path:
        return self.data_dir / TOOLS_IGNORE_FILE

    @property
    def tools_output_path(self) -> Path:
        return self.data_dir / TOOLS_OUTPUT_FILE

    @property
    def tags_output_path(self) -> Path:
        return self.data_dir / TAGS_OUTPUT_FILE

    @property
    def ignored_output_path(self) -> Path:
        return self.data_dir / IGNORED_OUTPUT_FILE

    def _read_json(self, path: Path | str) -> Any:
        return json.loads(Path(path).read_text(encoding="utf-8"))

    def _write_json(self, path: Path | str, data: Any) -> Path:
        path = Path(path)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    # === INPUTS ===

    def load_tools_list(self, path: Path | str) -> Any:
        """Load a category-keyed tools list.

        Args:
            path: Location of the tools list.

        Returns:
            Decoded JSON content.
        """
        data = self._read_json(path)
        logger.debug(f"Loaded tools list: {path}")
        return data

    def load_ignore_rules(self, path: Path | str | None) -> list[IgnoreRule]:
        """Load ignore rules.

        Args:
            path: Location of the ignore list. None or a missing file means no rules.

        Returns:
            Ignore rules in file order.
        """
        if path is None:
            return []

        path = Path(path)
        if not path.exists():
            logger.info(f"Ignore list not found, nothing will be ignored: {path}")
            return []

        ignore_file = IgnoreFile.model_validate(self._read_json(path))
        logger.info(f"Loaded {len(ignore_file.tools)} ignore rules from {path}")
        return ignore_file.tools

    def load_audit(self, path: Path | str) -> IgnoredToolsAudit | None:
        """Load an ignored tools audit log.

        Args:
            path: Location of the audit log.

        Returns:
            The audit log if found, None otherwise.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Ignored tools audit not found: {path}")
            return None
        return IgnoredToolsAudit.model_validate(self._read_json(path))

    # === OUTPUTS ===

    def save_catalog(self, path: Path | str, catalog: dict[str, CategoryTools]) -> Path:
        """Save the combined tools catalog.

        Args:
            path: Destination file.
            catalog: Category name to category tools, in output order.

        Returns:
            Path to the saved file.
        """
        # Tool records keep exactly the keys they were built with, nulls included
        data = {
            name: {
                "description": category.description,
                "toolsList": [
                    tool.model_dump(mode="json", by_alias=True, exclude_unset=True)
                    for tool in category.tools_list
                ],
            }
            for name, category in catalog.items()
        }
        path = self._write_json(path, data)
        total = sum(len(category.tools_list) for category in catalog.values())
        logger.info(f"Saved tools catalog: {path} ({total} tools in {len(catalog)} categories)")
        return path

    def save_tags(self, path: Path | str, tags: TagsFile) -> Path:
        """Save the canonical language and technology tags.

        Args:
            path: Destination file.
            tags: Tags of the run's registries.

        Returns:
            Path to the saved file.
        """
        path = self._write_json(path, tags.model_dump(mode="json", by_alias=True))
        logger.info(
            f"Saved tags: {path} ({len(tags.languages)} languages, "
            f"{len(tags.technologies)} technologies)"
        )
        return path

    def save_audit(self, path: Path | str, audit: IgnoredToolsAudit) -> Path:
        """Save the ignored tools audit log.

        Args:
            path: Destination file.
            audit: Audit of the run, possibly with zero entries.

        Returns:
            Path to the saved file.
        """
        path = self._write_json(path, audit.model_dump(mode="json", by_alias=True))
        logger.info(f"Saved ignored tools audit: {path} ({audit.total_ignored} ignored)")
        return path
