"""Tests for ignore list filtering."""

from datetime import UTC, datetime

import pytest

from src.filters.ignore_filter import IgnoreFilter, should_ignore_tool
from src.models.model_ignore import IgnoreRule
from src.models.model_tool import Tool, ToolSource
from tests.conftest import make_tool


def _tool(title: str, repo_url: str | None = None) -> Tool:
    return Tool.model_validate(make_tool(title, repo_url, language=["JavaScript"]))


class TestShouldIgnoreTool:
    """Tests for the should_ignore_tool predicate."""

    def test_match_by_title_only(self, ignore_by_title_only: list[IgnoreRule]) -> None:
        """Test that a title-only rule matches any repository."""
        tool = _tool("Tool Beta", "https://github.com/example/tool-beta")

        result = should_ignore_tool(tool, "category1", ignore_by_title_only)

        assert result is not None
        assert result.reason == "Deprecated tool"

    def test_title_only_rule_matches_tool_without_links(
        self, ignore_by_title_only: list[IgnoreRule]
    ) -> None:
        """Test that a title-only rule also matches tools without a repository."""
        assert should_ignore_tool(_tool("Tool Beta"), "category1", ignore_by_title_only) is not None

    def test_no_match_when_title_differs(self, ignore_by_title_only: list[IgnoreRule]) -> None:
        """Test that other titles are not ignored."""
        tool = _tool("Tool Alpha", "https://github.com/example/tool-alpha")
        assert should_ignore_tool(tool, "category1", ignore_by_title_only) is None

    def test_title_match_is_exact(self, ignore_by_title_only: list[IgnoreRule]) -> None:
        """Test that matching is case sensitive."""
        assert should_ignore_tool(_tool("tool beta"), "category1", ignore_by_title_only) is None

    def test_match_specific_repo(self, ignore_by_title_and_repo: list[IgnoreRule]) -> None:
        """Test that a rule with repoUrl only matches that repository."""
        fork = _tool("Shared Name Tool", "https://github.com/fork/shared-name")
        original = _tool("Shared Name Tool", "https://github.com/original/shared-name")

        assert should_ignore_tool(fork, "category1", ignore_by_title_and_repo) is not None
        assert should_ignore_tool(original, "category1", ignore_by_title_and_repo) is None

    def test_repo_rule_requires_title(self, ignore_by_title_and_repo: list[IgnoreRule]) -> None:
        """Test that the repoUrl alone is not enough."""
        renamed = _tool("Renamed Tool", "https://github.com/fork/shared-name")
        assert should_ignore_tool(renamed, "category1", ignore_by_title_and_repo) is None

    def test_repo_rule_does_not_match_tool_without_repo(
        self, ignore_by_title_and_repo: list[IgnoreRule]
    ) -> None:
        """Test that a repo-scoped rule skips tools without links."""
        assert should_ignore_tool(_tool("Shared Name Tool"), "category1", ignore_by_title_and_repo) is None

    def test_category_scope(self, ignore_with_category_scope: list[IgnoreRule]) -> None:
        """Test that a scoped rule only applies within its categories."""
        tool = _tool("Tool Alpha", "https://github.com/example/tool-alpha")

        assert should_ignore_tool(tool, "category1", ignore_with_category_scope) is not None
        assert should_ignore_tool(tool, "category2", ignore_with_category_scope) is None

    def test_empty_category_scope_applies_everywhere(self) -> None:
        """Test that an empty categories list is the same as no scope."""
        rules = [IgnoreRule(title="Tool Alpha", categories=[])]
        assert should_ignore_tool(_tool("Tool Alpha"), "category2", rules) is not None

    def test_first_matching_rule_wins(self) -> None:
        """Test that rules are checked in order."""
        rules = [
            IgnoreRule(title="Tool Alpha", reason="scoped", categories=["category2"]),
            IgnoreRule(title="Tool Alpha", reason="first"),
            IgnoreRule(title="Tool Alpha", reason="second"),
        ]
        result = should_ignore_tool(_tool("Tool Alpha"), "category1", rules)
        assert result is not None
        assert result.reason == "first"

    def test_empty_ignore_list(self) -> None:
        """Test that nothing is ignored without rules."""
        assert should_ignore_tool(_tool("Any Tool"), "category1", []) is None

    def test_is_pure(
        self,
        ignore_by_title_and_repo: list[IgnoreRule],
        ignore_by_title_only: list[IgnoreRule],
    ) -> None:
        """Test that repeated calls agree and leave the arguments untouched."""
        rules = ignore_by_title_and_repo + ignore_by_title_only
        tool = _tool("Shared Name Tool", "https://github.com/fork/shared-name")
        tool_before = tool.model_dump()
        rules_before = [rule.model_dump() for rule in rules]

        first = should_ignore_tool(tool, "category1", rules)
        second = should_ignore_tool(tool, "category1", rules)

        assert first is second
        assert tool.model_dump() == tool_before
        assert [rule.model_dump() for rule in rules] == rules_before


class TestIgnoreFilter:
    """Tests for IgnoreFilter.apply."""

    def test_no_rules_keeps_everything(self) -> None:
        """Test that the filter is a no-op without rules."""
        tools = [_tool("Tool Alpha"), _tool("Tool Beta")]
        ignore_filter = IgnoreFilter()

        assert ignore_filter.apply(tools, "category1", ToolSource.AUTOMATED) == tools
        assert ignore_filter.ignored == []

    def test_removes_and_records(self, ignore_by_title_only: list[IgnoreRule]) -> None:
        """Test that ignored tools are dropped and audited."""
        tools = [
            _tool("Tool Alpha", "https://github.com/example/tool-alpha"),
            _tool("Tool Beta", "https://github.com/example/tool-beta"),
        ]
        ignore_filter = IgnoreFilter(ignore_by_title_only)
        before = datetime.now(UTC)

        kept = ignore_filter.apply(tools, "category1", ToolSource.MANUAL)

        assert [t.title for t in kept] == ["Tool Alpha"]
        assert len(ignore_filter.ignored) == 1
        record = ignore_filter.ignored[0]
        assert record.title == "Tool Beta"
        assert record.repo_url == "https://github.com/example/tool-beta"
        assert record.reason == "Deprecated tool"
        assert record.category == "category1"
        assert record.source == ToolSource.MANUAL
        assert record.ignored_at >= before

    def test_records_accumulate_across_calls(
        self, ignore_with_category_scope: list[IgnoreRule]
    ) -> None:
        """Test that one filter collects records for a whole run."""
        ignore_filter = IgnoreFilter(ignore_with_category_scope)

        ignore_filter.apply([_tool("Tool Alpha")], "category1", ToolSource.AUTOMATED)
        ignore_filter.apply([_tool("Tool Alpha")], "category2", ToolSource.AUTOMATED)
        ignore_filter.apply([_tool("Tool Alpha")], "category1", ToolSource.MANUAL)

        assert [(r.category, r.source) for r in ignore_filter.ignored] == [
            ("category1", ToolSource.AUTOMATED),
            ("category1", ToolSource.MANUAL),
        ]

    @pytest.mark.parametrize("source", list(ToolSource))
    def test_audit_record_serialization(
        self, ignore_by_title_only: list[IgnoreRule], source: ToolSource
    ) -> None:
        """Test the audit record wire format."""
        ignore_filter = IgnoreFilter(ignore_by_title_only)
        ignore_filter.apply([_tool("Tool Beta")], "category1", source)

        data = ignore_filter.ignored[0].model_dump(mode="json", by_alias=True)

        assert data["source"] == source.value
        assert data["repoUrl"] is None
        assert "ignoredAt" in data
