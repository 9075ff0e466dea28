"""Stylesheet relocation and content hashing utilities."""

import hashlib
from pathlib import Path

from ..logging_setup import log
from ..rewrite.stream import rewrite_file
from .url import URLTranslator


def relocate_css(src: Path, dest: Path, quote_style: "str | None" = None) -> int:
    """
    Write the stylesheet *src* to *dest*, rewriting every relative URL so it
    still resolves from the new location.  Creates all parent directories.

    Returns the number of bytes written.
    """
    src, dest = Path(src), Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    written = rewrite_file(src, dest, URLTranslator(src, dest), quote_style=quote_style)
    log.debug("Saved → %s (%d bytes)", dest, written)
    return written


def content_hash(data: bytes) -> str:
    """Return a short SHA-256 hex digest for change detection."""
    return hashlib.sha256(data).hexdigest()[:16]
