"""
Tests for chunk assembly. Vectors are built by hand so that every split
decision is fixed by the test rather than by a tokenizer.
"""

import pytest

from conftest import orthogonal_vectors, same_vectors
from tfidf_splitter.config.chunking.models import ChunkingConfig
from tfidf_splitter.services.chunking.assembler import (
    ChunkAssemblyError,
    assemble_chunks,
    render_chunk,
)


class TestRenderChunk:

    def test_joins_with_space(self, default_config):
        assert render_chunk(["Hello world.", "Bye."], default_config) == "Hello world. Bye."

    def test_remove_whitespace(self):
        config = ChunkingConfig(remove_whitespace=True)
        rendered = render_chunk(["Hello world.", "Bye."], config)
        assert rendered == "Helloworld.Bye."
        assert " " not in rendered

    def test_always_single_line(self, default_config):
        assert render_chunk(["a\nb", "c\rd"], default_config) == "a b c d"


class TestAssembleChunks:

    def test_empty(self, default_config):
        assert assemble_chunks([], [], default_config) == []

    def test_single_sentence(self, default_config):
        assert assemble_chunks(["Only one."], [[0.0]], default_config) == ["Only one."]

    def test_single_sentence_is_returned_unchanged(self):
        config = ChunkingConfig(remove_whitespace=True)
        assert assemble_chunks(["Only one."], [[0.0]], config) == ["Only one."]

    def test_similar_sentences_stay_together(self, default_config):
        sentences = ["Hello world.", "This is great!", "Bye."]
        chunks = assemble_chunks(sentences, same_vectors(3), default_config)
        assert chunks == ["Hello world. This is great! Bye."]

    def test_low_similarity_splits(self, default_config):
        sentences = ["Hello world.", "This is great!", "Bye."]
        chunks = assemble_chunks(sentences, orthogonal_vectors(3), default_config)
        assert chunks == sentences

    def test_threshold_is_strict_lower_bound(self):
        config = ChunkingConfig(similarity_threshold=1.0)
        # similarity of exactly 1.0 is not below the threshold
        assert assemble_chunks(["A.", "B."], same_vectors(2), config) == ["A. B."]

    def test_heading_starts_new_chunk(self, default_config):
        sentences = ["Body one.", "Body two.", "# Title", "Under title."]
        chunks = assemble_chunks(sentences, same_vectors(4), default_config)
        assert chunks == ["Body one. Body two.", "# Title Under title."]

    def test_max_chunk_size_caps_sentences(self):
        config = ChunkingConfig(max_chunk_size=3)
        sentences = [f"s{i}." for i in range(7)]
        chunks = assemble_chunks(sentences, same_vectors(7), config)
        assert chunks == ["s0. s1. s2.", "s3. s4. s5.", "s6."]

    def test_min_chunk_size_vetoes_split_signals(self):
        config = ChunkingConfig(min_chunk_size=1000)
        sentences = ["A.", "# B", "C."]
        chunks = assemble_chunks(sentences, orthogonal_vectors(3), config)
        assert chunks == ["A. # B C."]

    def test_min_chunk_size_counts_code_points(self):
        sentences = ["你好。", "世界。"]
        # three code points reach the minimum even though they are nine UTF-8 bytes
        assert assemble_chunks(sentences, orthogonal_vectors(2), ChunkingConfig(min_chunk_size=3)) == sentences
        assert assemble_chunks(sentences, orthogonal_vectors(2), ChunkingConfig(min_chunk_size=4)) == ["你好。 世界。"]

    def test_running_length_includes_separator(self):
        # "ab" + " " + "cd" = 5 characters, enough for min_chunk_size=5 only with the separator
        config = ChunkingConfig(min_chunk_size=5)
        chunks = assemble_chunks(["ab", "cd", "ef"], orthogonal_vectors(3), config)
        assert chunks == ["ab cd", "ef"]

    def test_remove_whitespace_separator_not_counted(self):
        config = ChunkingConfig(min_chunk_size=5, remove_whitespace=True)
        chunks = assemble_chunks(["ab", "cd", "ef"], orthogonal_vectors(3), config)
        assert chunks == ["abcdef"]

    def test_force_split_bounds_chunk_growth(self):
        config = ChunkingConfig(max_chunk_size=3, min_chunk_size=10**6)
        sentences = [f"s{i}" for i in range(25)]
        chunks = assemble_chunks(sentences, same_vectors(25), config)
        sizes = [len(c.split(" ")) for c in chunks]
        assert sizes == [6, 6, 6, 6, 1]

    def test_partition_preserves_order(self, default_config):
        sentences = [f"Sentence {i}." for i in range(12)]
        vectors = [[1.0, 0.0] if i % 4 else [0.0, 1.0] for i in range(12)]
        chunks = assemble_chunks(sentences, vectors, default_config)
        assert all(chunks)
        assert " ".join(chunks) == " ".join(sentences)

    def test_length_mismatch_is_an_error(self, default_config):
        with pytest.raises(ChunkAssemblyError):
            assemble_chunks(["One.", "Two."], same_vectors(3), default_config)

    def test_length_mismatch_is_value_error(self, default_config):
        with pytest.raises(ValueError):
            assemble_chunks(["One."], [], default_config)
