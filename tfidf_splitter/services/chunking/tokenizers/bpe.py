"""Byte-pair-encoding tokenizer backed by tiktoken."""

import tiktoken

from tfidf_splitter.config.logging import get_logger
from tfidf_splitter.services.chunking.tokenizers.base import (
    SentenceTokens,
    TokenizationError,
    Vocabulary,
    build_vocabulary,
)

logger = get_logger(__name__)


class BpeTokenizer:
    """
    Sub-word tokens from a tiktoken encoding (cl100k_base by default, as used by OpenAI).
    Tokens that split a UTF-8 character (common for CJK text) are merged with the
    following tokens until the bytes decode, so a sentence's tokens still spell it out.
    """

    name = "tiktoken"

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        self._encoding_name = encoding_name
        self._encoding: tiktoken.Encoding | None = None

    def _get_encoding(self) -> tiktoken.Encoding:
        """Lazy-load the encoding; may need to download its BPE ranks."""
        if self._encoding is None:
            try:
                self._encoding = tiktoken.get_encoding(self._encoding_name)
            except Exception as e:
                logger.warning(
                    "tiktoken encoding not available",
                    extra={"encoding": self._encoding_name, "error": str(e)},
                )
                raise TokenizationError(
                    f"tiktoken encoding {self._encoding_name!r} not available", cause=e
                ) from e
        return self._encoding

    def _sentence_tokens(self, sentence: str) -> list[str]:
        enc = self._get_encoding()
        words: list[str] = []
        pending = b""
        for token_id in enc.encode(sentence, disallowed_special=()):
            pending += enc.decode_single_token_bytes(token_id)
            try:
                word = pending.decode("utf-8")
            except UnicodeDecodeError:
                continue
            pending = b""
            if word.strip():
                words.append(word.strip())
        if pending:
            words.append(pending.decode("utf-8", errors="replace"))
        return words

    def tokenize(self, sentences: list[str]) -> tuple[Vocabulary, SentenceTokens]:
        tokens: SentenceTokens = [self._sentence_tokens(s) for s in sentences]
        return build_vocabulary(tokens), tokens
