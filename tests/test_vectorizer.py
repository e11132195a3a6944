"""Tests for TF-IDF sentence vectors."""

import math

import pytest

from tfidf_splitter.services.chunking.tokenizers import GenericTokenizer
from tfidf_splitter.services.chunking.vectorizer import VectorizationError, tfidf_matrix, vectorize


class TestTfidfMatrix:

    def test_smoothed_idf_and_raw_counts(self):
        matrix = tfidf_matrix(["a", "b", "c"], [["a", "b", "b"], ["a", "c"]])
        idf_shared = math.log(3 / 3) + 1
        idf_single = math.log(3 / 2) + 1
        assert matrix.shape == (2, 3)
        assert matrix[0].tolist() == pytest.approx([idf_shared, 2 * idf_single, 0.0])
        assert matrix[1].tolist() == pytest.approx([idf_shared, 0.0, idf_single])

    def test_columns_follow_vocabulary_order(self):
        matrix = tfidf_matrix(["z", "a"], [["z"], ["a"]])
        assert matrix[0, 0] > 0 and matrix[0, 1] == 0
        assert matrix[1, 1] > 0 and matrix[1, 0] == 0


class TestVectorize:

    def test_one_vector_per_sentence(self):
        sentences = ["Hello world.", "Hello again!", "Bye."]
        vocab, matrix = vectorize(sentences, GenericTokenizer())
        assert vocab == ["Hello", "world", ".", "again", "!", "Bye"]
        assert matrix.shape == (3, len(vocab))
        assert (matrix > 0).sum(axis=1).tolist() == [3, 3, 2]

    def test_tokenizer_failure(self, failing_tokenizer):
        with pytest.raises(VectorizationError) as exc_info:
            vectorize(["One.", "Two."], failing_tokenizer)
        assert exc_info.value.cause is not None

    def test_empty_vocabulary(self, empty_tokenizer):
        with pytest.raises(VectorizationError):
            vectorize(["One.", "Two."], empty_tokenizer)
