"""Text cleaners for sentence content and rendered chunks."""

import re

# Layout and invisible separator characters dropped from sentence bodies
_INVISIBLE_CHARS = "\n\r\t\f\v\u0000\u0085\u2028\u2029"
_INVISIBLE_TABLE = str.maketrans("", "", _INVISIBLE_CHARS)
_WHITESPACE_RUN = re.compile(r"\s+")


def clean_content_text(content: str) -> str:
    """
    Clean a sentence body: drop line breaks, tabs and invisible separators,
    collapse remaining whitespace runs to one space and trim.
    """
    if not content:
        return ""
    content = content.translate(_INVISIBLE_TABLE)
    return _WHITESPACE_RUN.sub(" ", content).strip()


def remove_all_whitespace(text: str) -> str:
    """Remove every Unicode whitespace character."""
    return "".join(ch for ch in text if not ch.isspace())


def flatten_line_breaks(text: str) -> str:
    """Replace newline and carriage return with a space so the text stays on one line."""
    return text.replace("\n", " ").replace("\r", " ")
