"""Configuration constants for the CSS URL rewriter."""

import os
import re

# Encoding used for bytes input/output; override with CSS_URL_REWRITE_ENCODING
DEFAULT_ENCODING = os.environ.get("CSS_URL_REWRITE_ENCODING", "utf-8")
CHUNK_SIZE       = int(os.environ.get("CSS_URL_REWRITE_CHUNK_SIZE", 64 * 1024))

# Quote characters a replacement may be wrapped in
QUOTE_STYLES = ("'", '"')

# --quotes CLI choices -> quote_style argument
QUOTE_CHOICES = {
    "none":   None,
    "single": "'",
    "double": '"',
}

# URLs that never need translating: data URIs, http(s) and root-relative
SKIP_URL_RE = re.compile(r"^(?:data:|https?://|/)")

# Line terminators, in the same order the tokenizer recognises them
LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")

# url( wrapper plus optional quotes and padding around the bare URL
URL_WRAPPER_RE = re.compile(r"""^url\(\s*["']?\s*|\s*["']?\s*\)$""", re.IGNORECASE)

# Full url(...) literal, anchored at a token's start column
URL_LITERAL_RE = re.compile(
    r"""url\(\s*(?:"(?:[^"\\\r\n]|\\.)*"|'(?:[^'\\\r\n]|\\.)*'|(?:[^)"'(\\\s]|\\.)*)\s*\)""",
    re.IGNORECASE,
)

# Comments and strings, in scan order; an unterminated comment runs to the end
COMMENT_OR_STRING_RE = re.compile(
    r"""/\*.*?(?:\*/|\Z)|"(?:[^"\\\n]|\\.)*"?|'(?:[^'\\\n]|\\.)*'?""",
    re.DOTALL,
)
