"""Category and catalog models."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.model_tool import EnrichedTool


class Category(BaseModel):
    """A top-level group of the tools catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class ToolsList(BaseModel):
    """One category of an input tools list: ``{"toolsList": [...]}``.

    Entries stay raw so automated and manual tools can be parsed differently.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    tools_list: list[dict] = Field(alias="toolsList")


class CategoryTools(BaseModel):
    """One category of the combined catalog."""

    model_config = ConfigDict(populate_by_name=True)

    description: str = ""
    tools_list: list[EnrichedTool] = Field(default_factory=list, alias="toolsList")
