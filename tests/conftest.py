"""Pytest configuration and fixtures."""

import copy
import tempfile
from pathlib import Path
from typing import Any

import pytest

from src.categorization.tag_registry import TagRegistries
from src.models.model_catalog import Category
from src.models.model_ignore import IgnoreRule
from src.models.model_tags import CanonicalTag

TEST_CATEGORIES = (
    Category(name="category1", description="Sample Category 1"),
    Category(name="category2", description="Sample Category 2"),
)

TEST_LANGUAGES = (
    CanonicalTag(name="JavaScript", color="bg-[#57f281]", border_color="border-[#37f069]"),
    CanonicalTag(name="Python", color="bg-[#3572A5]", border_color="border-[#3572A5]"),
)

TEST_TECHNOLOGIES = (
    CanonicalTag(name="Node.js", color="bg-[#61d0f2]", border_color="border-[#40ccf7]"),
    CanonicalTag(name="Flask", color="bg-[#000000]", border_color="border-[#FFFFFF]"),
)


def make_tool(
    title: str | None,
    repo_url: str | None = None,
    language: str | list[str] | None = None,
    technology: list[str] | None = None,
    categories: list[str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw tools list entry."""
    tool: dict[str, Any] = {
        "description": f"Description of {title}",
        "filters": {
            "language": language if language is not None else [],
            "technology": technology if technology is not None else [],
            "categories": categories if categories is not None else ["category1"],
            "hasCommercial": False,
        },
        **extra,
    }
    if title is not None:
        tool["title"] = title
    if repo_url is not None:
        tool["links"] = {"repoUrl": repo_url}
    return tool


def tools_list(**categories: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a category-keyed tools list."""
    return {name: {"toolsList": tools} for name, tools in categories.items()}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registries() -> TagRegistries:
    """Fresh registries seeded with the small test tag lists."""
    return TagRegistries.from_seeds(TEST_LANGUAGES, TEST_TECHNOLOGIES)


@pytest.fixture
def combine_options() -> dict[str, Any]:
    """Keyword arguments restricting combine_tools to the test data."""
    return {
        "categories": TEST_CATEGORIES,
        "language_seed": TEST_LANGUAGES,
        "technology_seed": TEST_TECHNOLOGIES,
    }


@pytest.fixture
def automated_tools() -> dict[str, Any]:
    """Crawled tools list with one category of four tools."""
    return tools_list(
        category1=[
            make_tool(
                "Tool Alpha",
                "https://github.com/example/tool-alpha",
                language="JavaScript",
                technology=["Node.js"],
            ),
            make_tool("Tool Beta", "https://github.com/example/tool-beta", language=["Python"]),
            make_tool(
                "Shared Name Tool",
                "https://github.com/fork/shared-name",
                language=["JavaScript"],
            ),
            make_tool(
                "Shared Name Tool",
                "https://github.com/original/shared-name",
                language=["JavaScript"],
            ),
        ],
        category2=[
            make_tool(
                "Tool Alpha",
                "https://github.com/example/tool-alpha",
                language="JavaScript",
                categories=["category2"],
            ),
        ],
    )


@pytest.fixture
def manual_tools() -> dict[str, Any]:
    """Manual tools list with one valid tool owned by the organization."""
    return tools_list(
        category1=[
            make_tool(
                "Manual Tool",
                "https://github.com/asyncapi/manual-tool",
                language=["Python"],
                technology=["Flask"],
            ),
        ],
    )


@pytest.fixture
def ignore_by_title_only() -> list[IgnoreRule]:
    return [IgnoreRule(title="Tool Beta", reason="Deprecated tool")]


@pytest.fixture
def ignore_by_title_and_repo() -> list[IgnoreRule]:
    return [
        IgnoreRule(
            title="Shared Name Tool",
            repo_url="https://github.com/fork/shared-name",
            reason="Fork of the original tool",
        )
    ]


@pytest.fixture
def ignore_with_category_scope() -> list[IgnoreRule]:
    return [
        IgnoreRule(
            title="Tool Alpha",
            reason="Only relevant outside category1",
            categories=["category1"],
        )
    ]


@pytest.fixture
def copy_tools():
    """Deep copy helper for checking that inputs are left untouched."""
    return copy.deepcopy
