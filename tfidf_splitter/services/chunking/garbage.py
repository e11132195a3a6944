"""Detection of corrupted-text chunks, such as debris from PDF extraction."""

from tfidf_splitter.config.logging import get_logger
from tfidf_splitter.services.chunking.tokenizers import TokenizationError, Tokenizer

logger = get_logger(__name__)

MIN_VALID_RATIO = 0.2
LOW_VALID_RATIO = 0.3
MAX_SINGLE_CHAR_RATIO = 0.5


def is_garbage_chunk(chunk: str, tokenizer: Tokenizer) -> bool:
    """
    A chunk is garbage when under 20% of its tokens are valid words, or under 30%
    while more than half are single characters. A valid word has at least two
    characters, one of them a letter or digit. A chunk that yields no tokens is garbage.
    Empty chunks and tokenizer failures are never treated as garbage.
    """
    if not chunk:
        return False
    try:
        _, tokens = tokenizer.tokenize([chunk])
    except TokenizationError:
        return False
    words = [t for t in tokens[0] if t.strip()] if tokens else []
    if not words:
        return True

    valid = 0
    single = 0
    for word in words:
        if len(word) == 1:
            single += 1
        elif any(ch.isalnum() for ch in word):
            valid += 1

    valid_ratio = valid / len(words)
    single_ratio = single / len(words)
    if valid_ratio < MIN_VALID_RATIO:
        return True
    return valid_ratio < LOW_VALID_RATIO and single_ratio > MAX_SINGLE_CHAR_RATIO


def filter_garbage_chunks(chunks: list[str], tokenizer: Tokenizer) -> list[str]:
    """Drop garbage chunks, keeping the order of the rest."""
    kept = [c for c in chunks if not is_garbage_chunk(c, tokenizer)]
    if len(kept) < len(chunks):
        logger.info(
            "Filtered garbage chunks",
            extra={"filtered": len(chunks) - len(kept), "kept": len(kept)},
        )
    return kept
