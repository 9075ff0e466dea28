"""
css_url_rewrite
===============
Rewrites ``url(...)`` references inside CSS text through a caller-supplied
function while keeping every other byte – comments, whitespace, line
endings – exactly as it was.

Package structure
-----------------
css_url_rewrite/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – exception hierarchy
├── logging_setup.py  – package logger and colorlog handler
├── cli.py            – argparse CLI (``python -m css_url_rewrite``)
├── rewrite/          – sub-package: the rewriting engine
│   ├── tokens.py     – tinycss2 adapter locating url() tokens
│   ├── engine.py     – URLRewriter (in-place line patching)
│   └── stream.py     – URLRewriteStream (chunked input)
└── utils/
    ├── url.py        – relative URL translation for moved stylesheets
    └── files.py      – relocate_css and content hashing

Quick start
-----------
    from css_url_rewrite import URLRewriter, URLTranslator

    rewriter = URLRewriter(URLTranslator("css/sprite/foo.css", "css/sprite.css"))
    rewriter.rewrite("a { background: url(../../img/foo.png) }")
    # 'a { background: url(../img/foo.png) }'
"""

from .errors import (
    CSSURLRewriteError, ConfigurationError, RewriteError,
    ReplacerError, TokenizeError, StreamClosedError,
)
from .rewrite import (
    URLRewriter, rewrite_css, URLRewriteStream, StreamState,
    iter_rewrite, rewrite_file,
)
from .utils import translate_url, URLTranslator, relocate_css

__version__ = "1.0.0"

__all__ = [
    "URLRewriter",
    "rewrite_css",
    "URLRewriteStream",
    "StreamState",
    "iter_rewrite",
    "rewrite_file",
    "translate_url",
    "URLTranslator",
    "relocate_css",
    "CSSURLRewriteError",
    "ConfigurationError",
    "RewriteError",
    "ReplacerError",
    "TokenizeError",
    "StreamClosedError",
]
