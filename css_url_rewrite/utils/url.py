"""URL translation for stylesheets that move to a new location."""

import os

from ..config import SKIP_URL_RE


def is_absolute_url(url: str) -> bool:
    """True for ``data:``, ``http(s)://`` and root-relative URLs."""
    return SKIP_URL_RE.match(url) is not None


def translate_url(url: str, from_file: str, to_file: str) -> str:
    """
    Rewrite *url*, relative to *from_file*, so it points at the same resource
    when the stylesheet is moved to *to_file*.

    ../../img/foo.png  css/sprite/foo.css → css/sprite.css   → ../img/foo.png
    ../img/foo.png     css/foo.css        → css/sprite/foo.css → ../../img/foo.png

    Absolute URLs are returned unchanged.
    """
    if is_absolute_url(url):
        return url

    from_dir = os.path.dirname(from_file)
    to_dir = os.path.dirname(to_file)
    target = os.path.abspath(os.path.join(from_dir, url))
    rel = os.path.relpath(target, os.path.abspath(to_dir))
    if rel == ".":
        return ""
    # Normalise to posix separators for CSS
    return rel.replace(os.sep, "/")


class URLTranslator:
    """Replacer that translates URLs from *from_file* to *to_file*."""

    def __init__(self, from_file: str, to_file: str) -> None:
        self.from_file = str(from_file)
        self.to_file = str(to_file)

    def __call__(self, url: str) -> str:
        return translate_url(url, self.from_file, self.to_file)

    def __repr__(self) -> str:
        return f"URLTranslator({self.from_file!r} → {self.to_file!r})"
