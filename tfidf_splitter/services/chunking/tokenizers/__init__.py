"""Tokenizer implementations selectable by ChunkingConfig.tokenizer."""

import jieba

from tfidf_splitter.services.chunking.tokenizers.base import TokenizationError, Tokenizer
from tfidf_splitter.services.chunking.tokenizers.bpe import BpeTokenizer
from tfidf_splitter.services.chunking.tokenizers.dictionary import DictionaryTokenizer
from tfidf_splitter.services.chunking.tokenizers.generic import GenericTokenizer

TOKENIZER_NAMES = ("generic", "jieba", "tiktoken")


def get_tokenizer(
    name: str,
    dictionary: jieba.Tokenizer | None = None,
    encoding_name: str = "cl100k_base",
) -> Tokenizer:
    """Build the tokenizer for the given name. Raises ValueError for unknown names."""
    if name == "generic":
        return GenericTokenizer()
    if name == "jieba":
        return DictionaryTokenizer(dictionary)
    if name == "tiktoken":
        return BpeTokenizer(encoding_name)
    raise ValueError(f"Unknown tokenizer: {name!r}")


__all__ = [
    "TOKENIZER_NAMES",
    "BpeTokenizer",
    "DictionaryTokenizer",
    "GenericTokenizer",
    "TokenizationError",
    "Tokenizer",
    "get_tokenizer",
]
