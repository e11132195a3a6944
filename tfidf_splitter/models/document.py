"""Document passed through the splitter: id, text content, and free-form metadata."""

from typing import Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    id: str = Field(default="", description="Document id; split chunks derive their ids from it")
    content: str = Field(default="", description="Raw text")
    metadata: dict[str, Any] = Field(default_factory=dict)
