"""
css_url_rewrite.rewrite
========================
Sub-package holding the URL-rewriting engine and its streaming front-end.

Public API
----------
    from css_url_rewrite.rewrite import URLRewriter, URLRewriteStream
"""

from .engine import URLRewriter, rewrite_css
from .stream import StreamState, URLRewriteStream, iter_rewrite, rewrite_file
from .tokens import Token, iter_url_tokens

__all__ = [
    "URLRewriter",
    "rewrite_css",
    "URLRewriteStream",
    "StreamState",
    "iter_rewrite",
    "rewrite_file",
    "Token",
    "iter_url_tokens",
]
