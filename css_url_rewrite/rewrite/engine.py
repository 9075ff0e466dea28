"""
css_url_rewrite.rewrite.engine
===============================
In-place rewriting of ``url(...)`` references in CSS text.

Each URL found by the tokenizer is passed to a caller-supplied *replacer*
and the result is spliced back into the line it came from.  Everything that
is not a URL – comments, whitespace, line endings – is left untouched.

Public API
----------
    URLRewriter(replacer).rewrite(code, quote_style=None) -> str
    rewrite_css(code, replacer, quote_style=None) -> str
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..config import DEFAULT_ENCODING, LINE_SPLIT_RE, QUOTE_STYLES, URL_WRAPPER_RE
from ..errors import ConfigurationError, ReplacerError
from ..logging_setup import log
from .tokens import URL_TOKEN, Token, iter_url_tokens

Replacer = Callable[[str], str]


def check_replacer(replacer) -> None:
    if not callable(replacer):
        raise ConfigurationError("Constructor expects a function as an argument.")


def check_quote_style(quote_style: str | None) -> None:
    if quote_style is not None and quote_style not in QUOTE_STYLES:
        raise ConfigurationError(
            f"quote_style must be None, \"'\" or '\"', got {quote_style!r}"
        )


def bare_url(raw_value: str) -> str:
    """Strip the ``url(`` wrapper, optional quotes and padding from *raw_value*."""
    return URL_WRAPPER_RE.sub("", raw_value)


@dataclass
class _ColumnState:
    """Running column drift for the line currently being patched."""
    current_line: int = 0
    adjustment: int = 0

    def enter(self, line: int) -> None:
        if line != self.current_line:
            self.current_line = line
            self.adjustment = 0


class URLRewriter:
    """
    Rewrites every URL in a stylesheet through *replacer*.

    *replacer* receives the bare URL (no ``url(``, quotes or padding) and
    must return the URL to put in its place.
    """

    def __init__(self, replacer: Replacer, encoding: str = DEFAULT_ENCODING) -> None:
        check_replacer(replacer)
        self.replacer = replacer
        self.encoding = encoding

    def rewrite(self, code: "str | bytes", quote_style: str | None = None) -> "str | bytes":
        """
        Return *code* with every URL replaced.

        *quote_style* (``'`` or ``"``) wraps each replacement in that quote
        character; by default replacements are left unquoted.  ``bytes`` in
        gives ``bytes`` out, in :attr:`encoding`.
        """
        check_quote_style(quote_style)
        if isinstance(code, bytes):
            return self._rewrite_text(code.decode(self.encoding), quote_style).encode(self.encoding)
        return self._rewrite_text(code, quote_style)

    def _rewrite_text(self, code: str, quote_style: str | None) -> str:
        newline = "\r\n" if "\r" in code else "\n"
        lines = LINE_SPLIT_RE.split(code)
        state = _ColumnState()

        for token in iter_url_tokens(code):
            if token.kind != URL_TOKEN:
                continue
            state.enter(token.start_line)
            replacement = self._replacement_for(token, quote_style)

            idx = token.start_line - 1
            line = lines[idx]
            start = token.start_col - state.adjustment - 1
            end = token.end_col - state.adjustment - 1
            lines[idx] = line[:start] + replacement + line[end:]

            state.adjustment += len(line) - len(lines[idx])

        return newline.join(lines)

    def _replacement_for(self, token: Token, quote_style: str | None) -> str:
        url = bare_url(token.raw_value)
        try:
            new_url = self.replacer(url)
        except Exception as exc:
            raise ReplacerError(url, str(exc) or type(exc).__name__) from exc
        if not isinstance(new_url, str):
            raise ReplacerError(url, f"expected str, got {type(new_url).__name__}")

        if quote_style:
            new_url = f"{quote_style}{new_url}{quote_style}"
        log.debug("url(%s) → url(%s) at %d:%d", url, new_url, token.start_line, token.start_col)
        return f"url({new_url})"


def rewrite_css(code: "str | bytes", replacer: Replacer, quote_style: str | None = None) -> "str | bytes":
    """Shorthand for ``URLRewriter(replacer).rewrite(code, quote_style)``."""
    return URLRewriter(replacer).rewrite(code, quote_style)
