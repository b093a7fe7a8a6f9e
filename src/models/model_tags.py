"""Canonical tag models."""

from pydantic import BaseModel, ConfigDict, Field


class CanonicalTag(BaseModel):
    """A language or technology tag with the colors used to render it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    color: str = Field(description="Background color class")
    border_color: str = Field(alias="borderColor", description="Border color class")


class TagsFile(BaseModel):
    """Content of the generated tags file."""

    languages: list[CanonicalTag] = Field(default_factory=list)
    technologies: list[CanonicalTag] = Field(default_factory=list)
