"""Article content helpers."""

from .text import estimate_read_time, extract_excerpt, slugify, strip_markdown, truncate_text

__all__ = ["estimate_read_time", "extract_excerpt", "slugify", "strip_markdown", "truncate_text"]
