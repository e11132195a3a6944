"""
TF-IDF sentence vectors. Each sentence is a pseudo-document of the one input text;
idf is smoothed as ln((1 + n) / (1 + df)) + 1 and term frequencies are raw counts.
"""

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from tfidf_splitter.services.chunking.tokenizers import TokenizationError, Tokenizer


class VectorizationError(Exception):
    """Raised when sentence vectors cannot be computed; no partial result is returned."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def _pretokenized(tokens: list[str]) -> list[str]:
    return tokens


def tfidf_matrix(vocabulary: list[str], tokens: list[list[str]]) -> np.ndarray:
    """Dense (sentences x vocabulary) TF-IDF matrix with columns in vocabulary order."""
    vectorizer = TfidfVectorizer(
        analyzer=_pretokenized,
        vocabulary={term: i for i, term in enumerate(vocabulary)},
        norm=None,
        smooth_idf=True,
        sublinear_tf=False,
    )
    return vectorizer.fit_transform(tokens).toarray()


def vectorize(sentences: list[str], tokenizer: Tokenizer) -> tuple[list[str], np.ndarray]:
    """
    Tokenize sentences and return (vocabulary, matrix) where row i is the vector
    of sentence i. Raises VectorizationError on any tokenizer or weighting failure.
    """
    try:
        vocabulary, tokens = tokenizer.tokenize(sentences)
    except TokenizationError as e:
        raise VectorizationError(f"Tokenizer {tokenizer.name!r} failed", cause=e) from e
    if len(tokens) != len(sentences):
        raise VectorizationError(
            f"Tokenizer {tokenizer.name!r} returned {len(tokens)} token lists for {len(sentences)} sentences"
        )
    if not vocabulary:
        raise VectorizationError("Empty vocabulary")
    try:
        matrix = tfidf_matrix(vocabulary, tokens)
    except ValueError as e:
        raise VectorizationError("TF-IDF weighting failed", cause=e) from e
    return vocabulary, matrix
