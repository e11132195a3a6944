"""Pattern-based tokenizer: word runs and single symbols, whitespace dropped."""

import re

from tfidf_splitter.services.chunking.tokenizers.base import (
    SentenceTokens,
    Vocabulary,
    build_vocabulary,
)

_TOKEN_PATTERN = re.compile(r"\w+|[^\w\s]")


class GenericTokenizer:
    """Default tokenizer. Splits on whitespace and keeps each punctuation mark as its own token."""

    name = "generic"

    def tokenize(self, sentences: list[str]) -> tuple[Vocabulary, SentenceTokens]:
        tokens = [_TOKEN_PATTERN.findall(s) for s in sentences]
        return build_vocabulary(tokens), tokens
