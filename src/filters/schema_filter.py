"""Schema gate for manually curated tools.

Manual entries are written by hand, so each one is validated against the
``ManualTool`` schema before it is enriched. An invalid entry is logged and
skipped; the run continues with the remaining tools.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from src.categorization.taxonomy import get_all_categories
from src.consts import MANUAL_TOOLS_SOURCE
from src.models.model_tool import ManualTool

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Tool validation failed"
VALIDATION_FAILED_NOTE = "Script continues execution, error logged for investigation"


class ToolSchemaValidator:
    """Validate manual tool entries against the manual tool schema."""

    def __init__(
        self,
        category_names: Iterable[str] | None = None,
        source: str = MANUAL_TOOLS_SOURCE,
    ) -> None:
        """Initialize the validator.

        Args:
            category_names: Allowed values of ``filters.categories``.
                Defaults to the curated category list.
            source: Label of the manual tools file used in diagnostics.
        """
        names = get_all_categories() if category_names is None else category_names
        self.category_names = frozenset(names)
        self.source = source

    def validate(self, raw: Any) -> ManualTool | None:
        """Validate one manual entry.

        Args:
            raw: Entry as read from the manual tools file.

        Returns:
            The validated tool, or None if the entry does not match the schema.
        """
        try:
            return ManualTool.model_validate(raw, context={"categories": self.category_names})
        except ValidationError as e:
            title = raw.get("title") if isinstance(raw, dict) else None
            logger.error(
                json.dumps(
                    {
                        "message": VALIDATION_FAILED_MESSAGE,
                        "tool": title,
                        "source": self.source,
                        "errors": e.errors(include_url=False),
                        "note": VALIDATION_FAILED_NOTE,
                    },
                    indent=2,
                    default=str,
                )
            )
            return None
