"""Utility subpackage for the CSS URL rewriter."""

from .url import is_absolute_url, translate_url, URLTranslator
from .files import relocate_css, content_hash

__all__ = [
    "is_absolute_url",
    "translate_url",
    "URLTranslator",
    "relocate_css",
    "content_hash",
]
