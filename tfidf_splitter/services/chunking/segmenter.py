"""
Sentence segmentation for mixed Latin/CJK prose with Markdown headings.

Headings (one to six '#') are emitted as standalone sentences; other sentences
end at a run of terminators (. ! ? 。 ！ ？ or line breaks).
"""

import re

from tfidf_splitter.services.chunking.cleaners import clean_content_text

# Heading alternative comes first so it wins when both could match
_DELIMITER_PATTERN = re.compile(
    r"#{1,6}[ \t]*[^#.!?。！？\n\r]*"
    r"|[.!?。！？\n\r][.!?。！？\n\r\s]*"
)
_HEADING_PREFIX = re.compile(r"#{1,6}")


def is_heading(sentence: str) -> bool:
    """True when the sentence, trimmed, starts with a Markdown heading marker."""
    return _HEADING_PREFIX.match(sentence.strip()) is not None


def split_into_sentences(text: str) -> list[str]:
    """
    Split text into ordered, non-empty sentences. Text without any terminator
    yields a single cleaned sentence; empty text yields an empty list.
    """
    if not text:
        return []
    sentences: list[str] = []
    last_pos = 0
    for match in _DELIMITER_PATTERN.finditer(text):
        content = clean_content_text(text[last_pos : match.start()])
        delims = match.group()
        last_pos = match.end()

        if delims.lstrip().startswith("#"):
            if content:
                sentences.append(content)
            header = delims.rstrip()
            if header:
                sentences.append(header)
            continue

        glyphs = "".join(ch for ch in delims if not ch.isspace())
        if not content and sentences:
            # Trailing punctuation after a heading or another delimiter
            sentences[-1] += glyphs
        elif content + glyphs:
            sentences.append(content + glyphs)

    remaining = clean_content_text(text[last_pos:])
    if remaining:
        sentences.append(remaining)
    return sentences
