"""jieba segmentation dictionary owned by the application lifespan."""

import jieba

from tfidf_splitter.config.logging import get_logger
from tfidf_splitter.config.settings import get_settings

logger = get_logger(__name__)

_dictionary: jieba.Tokenizer | None = None


def load_jieba_dictionary(dict_path: str | None = None) -> jieba.Tokenizer:
    """Create and load a jieba dictionary. Uses jieba's bundled dictionary when no path is given."""
    dictionary = jieba.Tokenizer(dictionary=dict_path) if dict_path else jieba.Tokenizer()
    dictionary.initialize()
    return dictionary


def open_jieba_dictionary() -> jieba.Tokenizer | None:
    """
    Load the shared dictionary from settings. Call on app startup. Returns None
    if it cannot be loaded; jieba chunking then falls back to one sentence per chunk.
    """
    global _dictionary
    if _dictionary is None:
        path = get_settings().jieba_dict_path
        try:
            _dictionary = load_jieba_dictionary(path)
            logger.info("jieba dictionary loaded", extra={"dict_path": path or "bundled"})
        except Exception as e:
            logger.error("Failed to load jieba dictionary", extra={"dict_path": path, "error": str(e)})
    return _dictionary


def get_jieba_dictionary() -> jieba.Tokenizer | None:
    """Return the dictionary loaded by open_jieba_dictionary(), or None."""
    return _dictionary


def close_jieba_dictionary() -> None:
    """Release the shared dictionary. Call on app shutdown."""
    global _dictionary
    _dictionary = None
