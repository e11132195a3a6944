"""Chunking configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

TokenizerName = Literal["generic", "jieba", "tiktoken"]

DEFAULT_SIMILARITY_THRESHOLD = 0.2
DEFAULT_MAX_CHUNK_SIZE = 10


class ChunkingConfig(BaseModel):
    """
    Parameters of one TF-IDF split call. Obviously invalid numbers are replaced
    by their defaults instead of being rejected.
    """

    similarity_threshold: float = Field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        description="Adjacent-sentence cosine similarity below which a new chunk is started",
    )
    max_chunk_size: int = Field(
        default=DEFAULT_MAX_CHUNK_SIZE, description="Maximum number of sentences per chunk"
    )
    min_chunk_size: int = Field(
        default=0, description="Minimum chunk length in characters before a split is allowed"
    )
    remove_whitespace: bool = Field(default=False, description="Strip all whitespace from chunks")
    tokenizer: TokenizerName = Field(default="generic", description="generic|jieba|tiktoken")
    filter_garbage_chunks: bool = Field(
        default=False, description="Drop chunks that look like corrupted text"
    )

    @field_validator("similarity_threshold")
    @classmethod
    def _default_threshold(cls, v: float) -> float:
        return v if v > 0 else DEFAULT_SIMILARITY_THRESHOLD

    @field_validator("max_chunk_size")
    @classmethod
    def _default_max_size(cls, v: int) -> int:
        return v if v > 0 else DEFAULT_MAX_CHUNK_SIZE

    @field_validator("min_chunk_size")
    @classmethod
    def _non_negative_min_size(cls, v: int) -> int:
        return max(v, 0)

    @property
    def join_separator(self) -> str:
        """Separator placed between sentences of one chunk."""
        return "" if self.remove_whitespace else " "
