"""Text helpers used when preparing articles for storage."""

import math
import re

WORDS_PER_MINUTE = 200

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_MARKDOWN_RULES = [
    (re.compile(r"^#+\s*", re.MULTILINE), ""),   # headers
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),  # images
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),  # links
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"`(.*?)`"), r"\1"),
    (re.compile(r"^\s*[-*+]\s+", re.MULTILINE), ""),  # list bullets
    (re.compile(r"^>\s*", re.MULTILINE), ""),
]


def slugify(text: str) -> str:
    """
    Turn a headline into a URL slug.

    Lower-cases, collapses every run of characters outside [a-z0-9] into a
    single hyphen and strips hyphens from both ends:

        >>> slugify("Hello World!!")
        'hello-world'
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def estimate_read_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes needed to read content, never less than one."""
    words = content.split()
    return max(1, math.ceil(len(words) / words_per_minute))


def strip_markdown(content: str) -> str:
    """Plain text from markdown, with whitespace collapsed."""
    for pattern, replacement in _MARKDOWN_RULES:
        content = pattern.sub(replacement, content)
    return " ".join(content.split())


def truncate_text(text: str, max_length: int) -> str:
    """Cut text at a word boundary and append an ellipsis when it is too long."""
    if len(text) <= max_length:
        return text
    return re.sub(r"\s+\S*$", "", text[:max_length]) + "..."


def extract_excerpt(content: str, max_length: int = 160) -> str:
    """Short plain-text summary of a markdown body."""
    return truncate_text(strip_markdown(content), max_length)
