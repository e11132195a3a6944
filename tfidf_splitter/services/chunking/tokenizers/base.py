"""Tokenizer capability used by the TF-IDF vectorizer."""

from typing import Iterable, Protocol, runtime_checkable

Vocabulary = list[str]
SentenceTokens = list[list[str]]


class TokenizationError(Exception):
    """Raised when a tokenizer cannot tokenize, e.g. its dictionary or encoding is unavailable."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


@runtime_checkable
class Tokenizer(Protocol):
    """
    Tokenizes an ordered list of sentences. Returns the document vocabulary in
    order of first appearance and, per sentence, its ordered non-empty tokens.
    """

    name: str

    def tokenize(self, sentences: list[str]) -> tuple[Vocabulary, SentenceTokens]:
        ...


def build_vocabulary(tokens: Iterable[list[str]]) -> Vocabulary:
    """Distinct tokens in order of first appearance."""
    # dict preserves insertion order
    seen: dict[str, None] = {}
    for sentence_tokens in tokens:
        for token in sentence_tokens:
            seen.setdefault(token, None)
    return list(seen)
