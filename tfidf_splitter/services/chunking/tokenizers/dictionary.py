"""Dictionary-based word segmentation with jieba, for text without spaces between words."""

import jieba

from tfidf_splitter.config.logging import get_logger
from tfidf_splitter.services.chunking.tokenizers.base import (
    SentenceTokens,
    TokenizationError,
    Vocabulary,
    build_vocabulary,
)

logger = get_logger(__name__)


class DictionaryTokenizer:
    """
    Segments sentences with a jieba dictionary owned by the caller (see
    resources/segmentation). Without a dictionary every call raises
    TokenizationError, so splitting falls back to one sentence per chunk.
    """

    name = "jieba"

    def __init__(self, dictionary: jieba.Tokenizer | None = None) -> None:
        self._dictionary = dictionary

    def tokenize(self, sentences: list[str]) -> tuple[Vocabulary, SentenceTokens]:
        if self._dictionary is None:
            logger.warning("jieba dictionary not loaded")
            raise TokenizationError("jieba dictionary not loaded")
        try:
            tokens = [
                [word.strip() for word, _, _ in self._dictionary.tokenize(s) if word.strip()]
                for s in sentences
            ]
        except Exception as e:
            logger.warning("jieba segmentation failed", extra={"error": type(e).__name__})
            raise TokenizationError("Dictionary segmentation failed", cause=e) from e
        return build_vocabulary(tokens), tokens
