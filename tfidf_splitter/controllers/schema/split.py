"""Request/response schemas for POST /split."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from tfidf_splitter.models.document import Document


class SplitRequest(BaseModel):
    """POST /split request body. Config comes from a named profile with optional inline overrides."""

    documents: list[Document] = Field(..., description="Documents to split, in order")
    profile: str | None = Field(default=None, description="Chunking profile; settings default when omitted")
    config: dict[str, Any] | None = Field(default=None, description="Inline ChunkingConfig overrides")
    id_scheme: Literal["keep", "indexed", "hashed"] = Field(
        default="keep", description="How chunk ids derive from the document id"
    )


class SplitResponse(BaseModel):
    """POST /split response body. Chunk documents in document order."""

    documents: list[Document] = Field(default_factory=list)
    total_chunks: int = Field(..., ge=0)
