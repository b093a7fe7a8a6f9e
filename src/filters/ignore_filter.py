"""Ignore list filtering for the tools catalog.

Removes tools listed in the ignore file before they are validated or
enriched, and keeps an audit record of every removal.
"""

import logging
from collections.abc import Sequence

from src.models.model_ignore import IgnoredToolRecord, IgnoreRule
from src.models.model_tool import Tool, ToolSource

logger = logging.getLogger(__name__)


def should_ignore_tool(
    tool: Tool,
    category: str,
    ignore_list: Sequence[IgnoreRule],
) -> IgnoreRule | None:
    """Find the first ignore rule matching a tool.

    Matching rules:
    - A rule with ``categories`` only applies within those categories.
    - A rule with ``repo_url`` needs both the title and the repoUrl to match.
    - A rule with only a title matches every tool with that title.

    Args:
        tool: Tool to check.
        category: Category the tool is listed under.
        ignore_list: Rules in file order.

    Returns:
        The matching rule, or None.
    """
    for rule in ignore_list:
        if rule.categories and category not in rule.categories:
            continue

        title_matches = tool.title == rule.title

        if rule.repo_url:
            if title_matches and tool.repo_url == rule.repo_url:
                return rule
        elif title_matches:
            return rule

    return None


class IgnoreFilter:
    """Drop ignored tools and record why.

    One instance is used for a whole run; ``ignored`` accumulates the audit
    records of every category and source in processing order.
    """

    def __init__(self, rules: Sequence[IgnoreRule] | None = None) -> None:
        """Initialize the filter.

        Args:
            rules: Ignore rules, usually loaded from the ignore file.
        """
        self.rules: list[IgnoreRule] = list(rules or [])
        self.ignored: list[IgnoredToolRecord] = []

    def apply(self, tools: list[Tool], category: str, source: ToolSource) -> list[Tool]:
        """Filter out the tools matched by an ignore rule.

        Args:
            tools: Tools of one category from one tools list.
            category: Category name the tools are listed under.
            source: Tools list the tools come from.

        Returns:
            Tools that are not ignored, in their original order.
        """
        if not self.rules:
            return list(tools)

        kept = []
        for tool in tools:
            rule = should_ignore_tool(tool, category, self.rules)
            if rule is None:
                kept.append(tool)
                continue

            self.ignored.append(
                IgnoredToolRecord(
                    title=tool.title,
                    repo_url=tool.repo_url,
                    reason=rule.reason,
                    category=category,
                    source=source,
                )
            )
            logger.debug(f"Ignored {source.value} tool {tool.title!r} in {category}: {rule.reason}")

        if len(kept) != len(tools):
            logger.info(
                f"Ignore list: {len(tools) - len(kept)}/{len(tools)} {source.value} tools "
                f"removed from {category}"
            )
        return kept
