"""POST /split: split documents into TF-IDF chunks."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from tfidf_splitter.config.chunking.static import resolve_chunking_config
from tfidf_splitter.config.settings import get_settings
from tfidf_splitter.controllers.schema.split import SplitRequest, SplitResponse
from tfidf_splitter.resources.segmentation.dictionary import get_jieba_dictionary
from tfidf_splitter.services.chunking.chunker import TFIDFSplitter
from tfidf_splitter.services.chunking.tokenizers import get_tokenizer
from tfidf_splitter.utils.ids import get_id_generator

router = APIRouter(prefix="/split", tags=["splitting"])


@router.post("", response_model=SplitResponse)
def split_documents(body: SplitRequest) -> SplitResponse:
    """
    Split every document with the resolved chunking config. Runs in the threadpool;
    each call builds its own vocabulary and vectors.
    """
    settings = get_settings()
    try:
        config = resolve_chunking_config(body.profile or settings.chunking_profile, body.config)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    tokenizer = get_tokenizer(
        config.tokenizer,
        dictionary=get_jieba_dictionary(),
        encoding_name=settings.tiktoken_encoding,
    )
    splitter = TFIDFSplitter(config, tokenizer=tokenizer, id_generator=get_id_generator(body.id_scheme))
    chunks = splitter.transform(body.documents)
    return SplitResponse(documents=chunks, total_chunks=len(chunks))
