"""Greedy single-pass grouping of sentences into chunks."""

from typing import Sequence

import numpy as np

from tfidf_splitter.config.chunking.models import ChunkingConfig
from tfidf_splitter.services.chunking.cleaners import flatten_line_breaks, remove_all_whitespace
from tfidf_splitter.services.chunking.segmenter import is_heading
from tfidf_splitter.services.chunking.similarity import cosine_similarity


class ChunkAssemblyError(ValueError):
    """Raised when the assembler receives a different number of sentences and vectors."""


def render_chunk(sentences: list[str], config: ChunkingConfig) -> str:
    """Join sentences with the configured separator and keep the result on one line."""
    chunk = config.join_separator.join(sentences)
    if config.remove_whitespace:
        return remove_all_whitespace(chunk)
    return flatten_line_breaks(chunk)


def assemble_chunks(
    sentences: list[str],
    vectors: Sequence[Sequence[float]] | np.ndarray,
    config: ChunkingConfig,
) -> list[str]:
    """
    Walk sentences once and start a new chunk when a split is wanted and allowed.

    A split is wanted on a heading, on similarity to the previous sentence below
    similarity_threshold, or when the chunk holds max_chunk_size sentences. It is
    allowed once the chunk reaches min_chunk_size characters. A chunk holding
    2 * max_chunk_size sentences is always split.
    """
    if len(sentences) != len(vectors):
        raise ChunkAssemblyError(
            f"Got {len(sentences)} sentences but {len(vectors)} vectors"
        )
    if not sentences:
        return []
    if len(sentences) == 1:
        return list(sentences)

    sep_len = len(config.join_separator)
    chunks: list[str] = []
    current = [sentences[0]]
    current_len = len(sentences[0])

    for i in range(1, len(sentences)):
        sim = cosine_similarity(vectors[i - 1], vectors[i])
        should_split = (
            is_heading(sentences[i])
            or sim < config.similarity_threshold
            or len(current) >= config.max_chunk_size
        )
        can_split = current_len >= config.min_chunk_size
        force_split = len(current) >= 2 * config.max_chunk_size

        if (should_split and can_split) or force_split:
            chunks.append(render_chunk(current, config))
            current = [sentences[i]]
            current_len = len(sentences[i])
        else:
            current.append(sentences[i])
            current_len += len(sentences[i]) + sep_len

    chunks.append(render_chunk(current, config))
    return chunks
