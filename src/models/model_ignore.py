"""Ignore list and audit log models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.consts import IGNORED_AUDIT_DESCRIPTION
from src.models.common import _utc_now
from src.models.model_tool import ToolSource


class IgnoreRule(BaseModel):
    """An entry of the ignore list.

    With ``repo_url`` set only that repository is ignored, otherwise every
    tool with the title is. ``categories`` limits the rule to those categories.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    repo_url: str | None = Field(default=None, alias="repoUrl")
    reason: str | None = None
    categories: list[str] | None = None


class IgnoreFile(BaseModel):
    """Content of the ignore list file."""

    description: str = ""
    tools: list[IgnoreRule] = Field(default_factory=list)


class IgnoredToolRecord(BaseModel):
    """Audit entry for a tool removed by an ignore rule."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    repo_url: str | None = Field(default=None, alias="repoUrl")
    reason: str | None = None
    category: str
    source: ToolSource
    ignored_at: datetime = Field(default_factory=_utc_now, alias="ignoredAt")


class IgnoredToolsAudit(BaseModel):
    """Content of the ignored tools audit file."""

    model_config = ConfigDict(populate_by_name=True)

    description: str = IGNORED_AUDIT_DESCRIPTION
    generated_at: datetime = Field(default_factory=_utc_now, alias="generatedAt")
    total_ignored: int = Field(default=0, ge=0, alias="totalIgnored")
    ignored_tools: list[IgnoredToolRecord] = Field(default_factory=list, alias="ignoredTools")

    @classmethod
    def from_records(cls, records: list[IgnoredToolRecord]) -> "IgnoredToolsAudit":
        """Build the audit for a run, including the empty case."""
        return cls(total_ignored=len(records), ignored_tools=list(records))
