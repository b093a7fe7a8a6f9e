"""Pipeline orchestration for combining the tools lists.

This module coordinates all steps of building the tools catalog:
1. Load the ignore list
2. Per category: drop ignored automated and manual tools
3. Enrich automated tools (canonical tags)
4. Validate manual tools, then enrich them (canonical tags, ownership flag)
5. Merge both lists and sort them by title
6. Store the catalog, the tags and the ignored tools audit log
"""

import json
import logging
import unicodedata
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from functools import cmp_to_key
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.categorization.human_maintained import CATEGORY_LIST
from src.categorization.tag_registry import TagRegistries
from src.categorization.taxonomy import get_all_categories, is_valid_category
from src.consts import ORG_REPO_PREFIX
from src.enrichment.tool_enricher import ToolEnricher
from src.filters.ignore_filter import IgnoreFilter
from src.filters.schema_filter import ToolSchemaValidator
from src.models.model_catalog import Category, CategoryTools, ToolsList
from src.models.model_ignore import IgnoredToolRecord, IgnoredToolsAudit, IgnoreRule
from src.models.model_tags import CanonicalTag
from src.models.model_tool import EnrichedTool, Tool, ToolSource
from src.storage.permanent_storage.base import CatalogStorage
from src.storage.permanent_storage.file_manager import FileManager

logger = logging.getLogger(__name__)

TITLE_MISSING_MESSAGE = "Tool title is missing during sort"

_TOOLS_LIST_OBJECT: TypeAdapter[dict[str, ToolsList]] = TypeAdapter(dict[str, ToolsList])


class CombineToolsError(Exception):
    """Combining the tools lists failed; no artifact of the run can be trusted."""


def _collation_key(title: str) -> tuple[str, str]:
    """Sort key comparing titles like a dictionary does.

    Accents and case are ignored first; on a tie lowercase sorts first.
    """
    base = "".join(
        char for char in unicodedata.normalize("NFKD", title) if not unicodedata.combining(char)
    )
    return base.casefold(), title.swapcase()


def _compare_tools(tool: EnrichedTool, another_tool: EnrichedTool) -> int:
    """Compare two catalog records by title.

    A record without a title is logged and treated as equal to the other.
    """
    if not tool.title or not another_tool.title:
        logger.error(
            json.dumps(
                {
                    "message": TITLE_MISSING_MESSAGE,
                    "detail": {
                        "tool": tool.model_dump(mode="json", by_alias=True, exclude_none=True),
                        "anotherTool": another_tool.model_dump(
                            mode="json", by_alias=True, exclude_none=True
                        ),
                    },
                    "source": __name__,
                },
                default=str,
            )
        )
        return 0

    key, another_key = _collation_key(tool.title), _collation_key(another_tool.title)
    return (key > another_key) - (key < another_key)


def sort_tools(tools: list[EnrichedTool]) -> list[EnrichedTool]:
    """Sort catalog records by title, ascending."""
    return sorted(tools, key=cmp_to_key(_compare_tools))


class ToolsCombiner:
    """Merge the automated and manual tools lists of one run.

    Holds the run state: the tag registries, which grow as new tags are
    found, and the audit records of ignored tools. Tools are processed one
    after another so tag creation has a single, fixed order.
    """

    def __init__(
        self,
        categories: Iterable[Category] | None = None,
        registries: TagRegistries | None = None,
        validator: ToolSchemaValidator | None = None,
        org_repo_prefix: str = ORG_REPO_PREFIX,
    ):
        """Initialize the combiner.

        Args:
            categories: Category list, in output order. Defaults to the curated list.
            registries: Tag registries. Defaults to fresh curated registries.
            validator: Schema gate for manual tools. Defaults to one accepting
                the given categories.
            org_repo_prefix: URL prefix of repositories owned by the organization.
        """
        self.categories: tuple[Category, ...] = (
            CATEGORY_LIST if categories is None else tuple(categories)
        )
        self.registries = registries if registries is not None else TagRegistries.from_seeds()
        self.validator = (
            validator
            if validator is not None
            else ToolSchemaValidator(get_all_categories(self.categories))
        )
        self.enricher = ToolEnricher(self.registries, org_repo_prefix=org_repo_prefix)
        self.ignore_filter = IgnoreFilter()

    @property
    def ignored(self) -> list[IgnoredToolRecord]:
        """Audit records of the tools ignored so far."""
        return self.ignore_filter.ignored

    def _process_automated(self, raw_tools: list[dict], category: str) -> list[EnrichedTool]:
        tools = [Tool.model_validate(raw) for raw in raw_tools]
        tools = self.ignore_filter.apply(tools, category, ToolSource.AUTOMATED)
        return [self.enricher.enrich(tool) for tool in tools]

    def _process_manual(self, raw_tools: list[dict], category: str) -> list[EnrichedTool]:
        entries: list[tuple[dict, Tool]] = []
        for raw in raw_tools:
            try:
                entries.append((raw, Tool.model_validate(raw)))
            except ValidationError:
                # Not even the common shape: report it through the schema gate
                self.validator.validate(raw)

        kept = self.ignore_filter.apply([tool for _, tool in entries], category, ToolSource.MANUAL)
        kept_ids = {id(tool) for tool in kept}

        results = []
        for raw, tool in entries:
            if id(tool) not in kept_ids:
                continue
            # The schema gate sees the entry as written, before any coercion
            manual_tool = self.validator.validate(raw)
            if manual_tool is None:
                continue
            results.append(self.enricher.enrich_manual(manual_tool))
        return results

    def combine(
        self,
        automated_tools: Mapping[str, Any],
        manual_tools: Mapping[str, Any],
        ignore_rules: list[IgnoreRule] | None = None,
    ) -> dict[str, CategoryTools]:
        """Build the catalog from both tools lists.

        Only categories present in the automated list are processed; each
        must be a known category.

        Args:
            automated_tools: Category name to ``{"toolsList": [...]}`` from the crawler.
            manual_tools: Category name to ``{"toolsList": [...]}`` curated by hand.
            ignore_rules: Rules removing tools from the catalog.

        Returns:
            Category name to category tools, in category list order.

        Raises:
            pydantic.ValidationError: If a tools list is not category-keyed.
            KeyError: If the automated list has an unknown category.
            InvalidURLError: If a manual tool has an unparseable repository URL.
        """
        self.ignore_filter = IgnoreFilter(ignore_rules)
        automated = _TOOLS_LIST_OBJECT.validate_python(automated_tools)
        manual = _TOOLS_LIST_OBJECT.validate_python(manual_tools)

        catalog = {
            category.name: CategoryTools(description=category.description)
            for category in self.categories
        }

        for category, tools_list in automated.items():
            if not is_valid_category(category, self.categories):
                raise KeyError(f"Unknown category: {category!r}")

            automated_results = self._process_automated(tools_list.tools_list, category)
            manual_list = manual.get(category)
            manual_results = (
                self._process_manual(manual_list.tools_list, category) if manual_list else []
            )

            catalog[category] = CategoryTools(
                description=catalog[category].description,
                tools_list=sort_tools(automated_results + manual_results),
            )
            logger.debug(
                f"{category}: {len(automated_results)} automated + "
                f"{len(manual_results)} manual tools"
            )

        skipped = [name for name in manual if name not in automated]
        if skipped:
            logger.warning(
                f"Manual tools in categories missing from the automated list were skipped: "
                f"{', '.join(skipped)}"
            )

        return catalog


def combine_tools(
    automated_tools: Mapping[str, Any],
    manual_tools: Mapping[str, Any],
    tools_path: Path | str,
    tags_path: Path | str,
    ignore_path: Path | str | None = None,
    ignored_output_path: Path | str | None = None,
    *,
    categories: Iterable[Category] | None = None,
    language_seed: Iterable[CanonicalTag] | None = None,
    technology_seed: Iterable[CanonicalTag] | None = None,
    validator: ToolSchemaValidator | None = None,
    storage: CatalogStorage | None = None,
) -> dict[str, CategoryTools]:
    """Combine the automated and manual tools lists into the catalog files.

    Writes the combined catalog to ``tools_path`` and all language and
    technology tags to ``tags_path``. When ``ignored_output_path`` is given
    the audit log is always written, also when nothing was ignored.

    Args:
        automated_tools: Category-keyed crawled tools list.
        manual_tools: Category-keyed manual tools list.
        tools_path: Destination of the combined catalog.
        tags_path: Destination of the tags file.
        ignore_path: Optional ignore list; a missing file means no rules.
        ignored_output_path: Optional destination of the audit log.
        categories: Category list. Defaults to the curated list.
        language_seed: Initial language tags. Defaults to the curated list.
        technology_seed: Initial technology tags. Defaults to the curated list.
        validator: Schema gate for manual tools.
        storage: Storage backend. Defaults to FileManager.

    Returns:
        The combined catalog.

    Raises:
        CombineToolsError: If any step fails.
    """
    try:
        storage = storage if storage is not None else FileManager()
        ignore_rules = storage.load_ignore_rules(ignore_path)

        registries = TagRegistries.from_seeds(language_seed, technology_seed)
        combiner = ToolsCombiner(categories=categories, registries=registries, validator=validator)
        catalog = combiner.combine(automated_tools, manual_tools, ignore_rules)

        storage.save_catalog(tools_path, catalog)
        storage.save_tags(tags_path, registries.to_tags_file())

        if ignored_output_path:
            storage.save_audit(ignored_output_path, IgnoredToolsAudit.from_records(combiner.ignored))

        return catalog
    except Exception as e:
        raise CombineToolsError(f"Error combining tools: {e}") from e


def run_combine_pipeline(
    data_dir: Path | str | None = None,
    automated_path: Path | str | None = None,
    manual_path: Path | str | None = None,
    tools_path: Path | str | None = None,
    tags_path: Path | str | None = None,
    ignore_path: Path | str | None = None,
    ignored_output_path: Path | str | None = None,
) -> dict[str, CategoryTools]:
    """Run full pipeline: load lists → ignore → validate → enrich → sort → store.

    Paths default to the standard file names inside ``data_dir``.

    Args:
        data_dir: Data directory path. Uses default if None.
        automated_path: Crawled tools list.
        manual_path: Manual tools list.
        tools_path: Destination of the combined catalog.
        tags_path: Destination of the tags file.
        ignore_path: Ignore list.
        ignored_output_path: Destination of the audit log.

    Returns:
        The combined catalog.
    """
    file_manager = FileManager(data_dir) if data_dir else FileManager()
    start_time = datetime.now(UTC)

    logger.info("Step 1/2: Loading tools lists...")
    automated_tools = file_manager.load_tools_list(automated_path or file_manager.automated_tools_path)
    manual_tools = file_manager.load_tools_list(manual_path or file_manager.manual_tools_path)

    logger.info("Step 2/2: Combining tools...")
    catalog = combine_tools(
        automated_tools,
        manual_tools,
        tools_path or file_manager.tools_output_path,
        tags_path or file_manager.tags_output_path,
        ignore_path=ignore_path or file_manager.ignore_path,
        ignored_output_path=ignored_output_path or file_manager.ignored_output_path,
        storage=file_manager,
    )

    duration = (datetime.now(UTC) - start_time).total_seconds()
    total = sum(len(category.tools_list) for category in catalog.values())
    logger.info(f"Pipeline complete in {duration:.1f}s: {total} tools in {len(catalog)} categories")

    return catalog
