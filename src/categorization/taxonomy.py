"""Category list lookups for the tools catalog."""

from collections.abc import Iterable

from src.categorization.human_maintained import CATEGORY_LIST
from src.models.model_catalog import Category


def get_category(name: str, categories: Iterable[Category] = CATEGORY_LIST) -> Category | None:
    """Get category by name."""
    for cat in categories:
        if cat.name == name:
            return cat
    return None


def get_all_categories(categories: Iterable[Category] = CATEGORY_LIST) -> list[str]:
    """Get list of all category names, in declaration order."""
    return [cat.name for cat in categories]


def is_valid_category(name: str, categories: Iterable[Category] = CATEGORY_LIST) -> bool:
    """Check if category name is valid."""
    return get_category(name, categories) is not None
