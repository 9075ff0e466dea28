"""
css_url_rewrite.errors
=======================
Exception hierarchy shared by the engine, the streaming adapter and the CLI.
"""


class CSSURLRewriteError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(CSSURLRewriteError, TypeError):
    """A component was built with a missing or invalid argument."""


class RewriteError(CSSURLRewriteError):
    """A rewrite pass failed; no output is produced for it."""


class ReplacerError(RewriteError):
    """The replacer callback raised or returned something other than a string."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Replacer failed for {url!r}: {message}")
        self.url = url


class TokenizeError(RewriteError):
    """The CSS could not be tokenized around a URL reference."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class StreamClosedError(CSSURLRewriteError):
    """Data was written to a stream after it was flushed."""
