"""
TF-IDF splitter: segment text into sentences, vectorize them, and group adjacent
sentences into chunks by lexical similarity. Pure and synchronous per call.
"""

import copy

from tfidf_splitter.config.chunking.models import ChunkingConfig
from tfidf_splitter.config.logging import get_logger
from tfidf_splitter.models.document import Document
from tfidf_splitter.services.chunking.assembler import assemble_chunks, render_chunk
from tfidf_splitter.services.chunking.garbage import filter_garbage_chunks
from tfidf_splitter.services.chunking.segmenter import split_into_sentences
from tfidf_splitter.services.chunking.tokenizers import Tokenizer, get_tokenizer
from tfidf_splitter.services.chunking.vectorizer import VectorizationError, vectorize
from tfidf_splitter.utils.ids import IdGenerator, keep_original_id

logger = get_logger(__name__)


class TFIDFSplitter:
    """
    Splits documents into topically coherent chunks. The tokenizer defaults to the
    one named by config.tokenizer; pass one in to reuse a dictionary owned by the caller.
    """

    type_name = "TFIDFSplitter"

    def __init__(
        self,
        config: ChunkingConfig | None = None,
        tokenizer: Tokenizer | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.config = config if config is not None else ChunkingConfig()
        self.tokenizer = tokenizer if tokenizer is not None else get_tokenizer(self.config.tokenizer)
        self.id_generator = id_generator if id_generator is not None else keep_original_id

    def split_text(self, text: str) -> list[str]:
        """
        Split one text into ordered chunks. If vectorization fails, every
        sentence becomes its own chunk instead of failing the call.
        """
        sentences = split_into_sentences(text)
        if not sentences:
            return []
        if len(sentences) == 1:
            chunks = list(sentences)
        else:
            try:
                _, vectors = vectorize(sentences, self.tokenizer)
            except VectorizationError as e:
                logger.warning(
                    "Vectorization failed, falling back to one sentence per chunk",
                    extra={
                        "tokenizer": self.tokenizer.name,
                        "error": type(e.cause or e).__name__,
                        "sentences": len(sentences),
                    },
                )
                chunks = [render_chunk([s], self.config) for s in sentences]
            else:
                chunks = assemble_chunks(sentences, vectors, self.config)

        if self.config.filter_garbage_chunks:
            chunks = filter_garbage_chunks(chunks, self.tokenizer)
        return chunks

    def transform(self, documents: list[Document | None]) -> list[Document]:
        """
        Split each document into chunk documents. Chunk i of a document gets
        id_generator(document.id, i) and its own copy of the document metadata.
        None entries are skipped; empty documents produce no chunks.
        """
        out: list[Document] = []
        for doc in documents:
            if doc is None:
                continue
            chunks = self.split_text(doc.content)
            logger.debug(
                "Document split",
                extra={"document_id": doc.id, "characters": len(doc.content), "chunks": len(chunks)},
            )
            for i, chunk in enumerate(chunks):
                out.append(
                    Document(
                        id=self.id_generator(doc.id, i),
                        content=chunk,
                        metadata=copy.deepcopy(doc.metadata),
                    )
                )
        return out


def split_text(text: str, config: ChunkingConfig | None = None, tokenizer: Tokenizer | None = None) -> list[str]:
    """Split one text with a throwaway splitter."""
    return TFIDFSplitter(config, tokenizer=tokenizer).split_text(text)
