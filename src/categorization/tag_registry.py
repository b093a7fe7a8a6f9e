"""Canonical tag registry for language and technology filters.

Resolves free-text tags from the tools lists against the curated tag lists:
1. Exact match (case-insensitive) on the tag name
2. Fuzzy match on the tag name above the similarity cutoff
3. Fallback: create a new canonical tag with the preset colors

New tags are indexed immediately, so a later tool citing the same value gets
the same object. A registry is created per run from its seed and never
shares state with another registry.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher

from src.categorization.human_maintained import LANGUAGES_COLOR, TECHNOLOGIES_COLOR
from src.consts import (
    FUZZY_MATCH_THRESHOLD,
    NEW_LANGUAGE_BORDER_COLOR,
    NEW_LANGUAGE_COLOR,
    NEW_TECHNOLOGY_BORDER_COLOR,
    NEW_TECHNOLOGY_COLOR,
)
from src.models.model_tags import CanonicalTag, TagsFile

logger = logging.getLogger(__name__)


def similarity_ratio(a: str, b: str) -> float:
    """Calculate similarity between two tag names (0-1)."""
    return SequenceMatcher(None, a.casefold(), b.casefold()).ratio()


class TagRegistry:
    """One canonical tag set (languages or technologies) for a single run."""

    def __init__(
        self,
        seed: Iterable[CanonicalTag],
        new_tag_color: str,
        new_tag_border_color: str,
        threshold: float = FUZZY_MATCH_THRESHOLD,
        kind: str = "tag",
    ):
        """Initialize the registry.

        Args:
            seed: Curated tags the set starts with. They are copied.
            new_tag_color: Background color for tags created on a miss.
            new_tag_border_color: Border color for tags created on a miss.
            threshold: Fuzzy distance accepted as a match, 0.0 is exact only.
            kind: Label used in log messages.
        """
        self.new_tag_color = new_tag_color
        self.new_tag_border_color = new_tag_border_color
        self.min_similarity = 1.0 - threshold
        self.kind = kind

        self._tags: list[CanonicalTag] = []
        self._by_name: dict[str, CanonicalTag] = {}
        for tag in seed:
            self._add(tag.model_copy())

    @property
    def tags(self) -> list[CanonicalTag]:
        """Canonical tags in insertion order (seed first, then created ones)."""
        return list(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._by_name

    def _add(self, tag: CanonicalTag) -> None:
        key = tag.name.casefold()
        if key in self._by_name:
            return
        self._tags.append(tag)
        self._by_name[key] = tag

    def search(self, value: str) -> CanonicalTag | None:
        """Find the canonical tag for a free-text value.

        Args:
            value: Tag as written in a tools list.

        Returns:
            Best matching canonical tag, or None if nothing is close enough.
        """
        exact = self._by_name.get(value.casefold())
        if exact is not None:
            return exact

        best_match: CanonicalTag | None = None
        best_score = 0.0
        for tag in self._tags:
            score = similarity_ratio(value, tag.name)
            if score > best_score:
                best_score = score
                best_match = tag

        if best_match is not None and best_score >= self.min_similarity:
            logger.debug(f"Fuzzy {self.kind} match: {value!r} -> {best_match.name!r} ({best_score:.2f})")
            return best_match
        return None

    def resolve(self, value: str) -> CanonicalTag:
        """Return the canonical tag for a value, creating it on a miss."""
        tag = self.search(value)
        if tag is not None:
            return tag

        tag = CanonicalTag(
            name=value,
            color=self.new_tag_color,
            border_color=self.new_tag_border_color,
        )
        self._add(tag)
        logger.info(f"Added new {self.kind} tag: {value}")
        return tag

    def resolve_all(self, values: str | Sequence[str] | None) -> list[CanonicalTag]:
        """Resolve a single value or an ordered list of values.

        Values are resolved one after another so tags created for earlier
        values are visible to later ones.
        """
        if not values:
            return []
        if isinstance(values, str):
            values = [values]
        return [self.resolve(value) for value in values]


@dataclass
class TagRegistries:
    """The language and technology registries of one run."""

    languages: TagRegistry
    technologies: TagRegistry

    @classmethod
    def from_seeds(
        cls,
        languages: Iterable[CanonicalTag] | None = None,
        technologies: Iterable[CanonicalTag] | None = None,
        threshold: float = FUZZY_MATCH_THRESHOLD,
    ) -> "TagRegistries":
        """Create fresh registries, defaulting to the curated tag lists."""
        return cls(
            languages=TagRegistry(
                LANGUAGES_COLOR if languages is None else languages,
                NEW_LANGUAGE_COLOR,
                NEW_LANGUAGE_BORDER_COLOR,
                threshold=threshold,
                kind="language",
            ),
            technologies=TagRegistry(
                TECHNOLOGIES_COLOR if technologies is None else technologies,
                NEW_TECHNOLOGY_COLOR,
                NEW_TECHNOLOGY_BORDER_COLOR,
                threshold=threshold,
                kind="technology",
            ),
        )

    def to_tags_file(self) -> TagsFile:
        """Snapshot both sets for the tags output file."""
        return TagsFile(languages=self.languages.tags, technologies=self.technologies.tags)
