"""Shared fixtures for splitter tests."""

from __future__ import annotations

import pytest

from tfidf_splitter.config.chunking.models import ChunkingConfig
from tfidf_splitter.resources.segmentation.dictionary import load_jieba_dictionary
from tfidf_splitter.services.chunking.tokenizers import TokenizationError


class FailingTokenizer:
    """Tokenizer whose resource is unavailable."""

    name = "failing"

    def tokenize(self, sentences: list[str]):
        raise TokenizationError("dictionary missing", cause=FileNotFoundError("dict.txt"))


class EmptyTokenizer:
    """Tokenizer that finds no terms at all."""

    name = "empty"

    def tokenize(self, sentences: list[str]):
        return [], [[] for _ in sentences]


def same_vectors(n: int) -> list[list[float]]:
    """n identical vectors: every adjacent similarity is 1."""
    return [[1.0, 0.0] for _ in range(n)]


def orthogonal_vectors(n: int) -> list[list[float]]:
    """n one-hot vectors: every adjacent similarity is 0."""
    return [[1.0 if j == i else 0.0 for j in range(n)] for i in range(n)]


@pytest.fixture
def default_config() -> ChunkingConfig:
    return ChunkingConfig()


@pytest.fixture
def failing_tokenizer() -> FailingTokenizer:
    return FailingTokenizer()


@pytest.fixture
def empty_tokenizer() -> EmptyTokenizer:
    return EmptyTokenizer()


@pytest.fixture(scope="session")
def jieba_dictionary():
    """jieba's bundled dictionary, loaded once per test run."""
    return load_jieba_dictionary()
