"""Id generation for split chunks. Every generator is a pure function of (original_id, chunk_index)."""

import hashlib
from typing import Callable

IdGenerator = Callable[[str, int], str]


def keep_original_id(original_id: str, _chunk_index: int) -> str:
    """Default: every chunk reuses the source document id."""
    return original_id


def indexed_id(original_id: str, chunk_index: int) -> str:
    """Suffix the chunk index, e.g. doc1_chunk_0."""
    return f"{original_id}_chunk_{chunk_index}"


def hashed_chunk_id(original_id: str, chunk_index: int) -> str:
    """Deterministic opaque id from document id and chunk index."""
    payload = f"{original_id}:{chunk_index}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"


ID_GENERATORS: dict[str, IdGenerator] = {
    "keep": keep_original_id,
    "indexed": indexed_id,
    "hashed": hashed_chunk_id,
}


def get_id_generator(scheme: str) -> IdGenerator | None:
    """Return the id generator registered under scheme, or None."""
    return ID_GENERATORS.get(scheme)
