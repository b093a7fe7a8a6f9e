"""Categorization module: category list and canonical tags."""

from src.categorization.human_maintained import (
    CATEGORY_LIST,
    LANGUAGES_COLOR,
    TECHNOLOGIES_COLOR,
)
from src.categorization.tag_registry import TagRegistries, TagRegistry
from src.categorization.taxonomy import get_all_categories, get_category, is_valid_category

__all__ = [
    # Curated data
    "CATEGORY_LIST",
    "LANGUAGES_COLOR",
    "TECHNOLOGIES_COLOR",
    # Category lookups
    "get_all_categories",
    "get_category",
    "is_valid_category",
    # Tag matching
    "TagRegistries",
    "TagRegistry",
]
