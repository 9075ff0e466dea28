"""
css_url_rewrite.rewrite.stream
===============================
Chunked front-end for :class:`~css_url_rewrite.rewrite.engine.URLRewriter`.

The tokenizer needs whole lines to report correct positions, so the stream
holds back whatever follows the last newline of each chunk and prepends it
to the next one.  A ``/* ... */`` comment still open at that newline is held
back from its start as well, so every piece handed to the engine begins
outside a comment.  The held-back text is rewritten on
:meth:`URLRewriteStream.flush`.

Each piece picks its own line-ending style, so the output only matches a
single :meth:`URLRewriter.rewrite` call on the whole text when the input
uses one terminator style throughout.

Failures never escape :meth:`~URLRewriteStream.write` or
:meth:`~URLRewriteStream.flush`; they are published on
:attr:`URLRewriteStream.error` (and passed to ``on_error``) and the stream
stops producing output.

Usage::

    stream = URLRewriteStream(replacer)
    for chunk in chunks:
        out.write(stream.write(chunk))
    out.write(stream.flush())
    if stream.error:
        raise stream.error
"""

from __future__ import annotations

import codecs
import enum
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from ..config import CHUNK_SIZE, COMMENT_OR_STRING_RE, DEFAULT_ENCODING
from ..errors import ConfigurationError, RewriteError, StreamClosedError
from .engine import Replacer, URLRewriter, check_quote_style, check_replacer


def _unclosed_comment_start(text: str) -> int:
    """Index of a `/*` in *text* that is never closed, or -1."""
    for m in COMMENT_OR_STRING_RE.finditer(text):
        found = m.group()
        if found.startswith("/*") and (len(found) < 4 or not found.endswith("*/")):
            return m.start()
    return -1


class StreamState(enum.Enum):
    IDLE      = "idle"
    RECEIVING = "receiving"
    FLUSHING  = "flushing"
    DONE      = "done"
    FAILED    = "failed"


class URLRewriteStream:
    """Push-style URL rewriter for CSS delivered in arbitrary chunks."""

    def __init__(
        self,
        replacer: Replacer,
        quote_style: str | None = None,
        encoding: str = DEFAULT_ENCODING,
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        check_replacer(replacer)
        check_quote_style(quote_style)
        if on_error is not None and not callable(on_error):
            raise ConfigurationError("on_error must be callable")

        self.replacer = replacer
        self.quote_style = quote_style
        self.encoding = encoding
        self.on_error = on_error

        self._rewriter = URLRewriter(replacer, encoding=encoding)
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._leftover = ""
        self._binary = False
        self._state = StreamState.IDLE
        self._error: Exception | None = None

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def error(self) -> Exception | None:
        """The failure that stopped the stream, if any."""
        return self._error

    def write(self, chunk: "str | bytes") -> "str | bytes":
        """Feed one chunk; return the output that is ready (possibly empty)."""
        if self._state in (StreamState.FLUSHING, StreamState.DONE):
            raise StreamClosedError("write() called after flush()")
        if self._state is StreamState.IDLE:
            self._binary = isinstance(chunk, bytes)
            self._state = StreamState.RECEIVING
        if self._state is StreamState.FAILED:
            return self._empty()

        try:
            text = self._decode(chunk)
        except UnicodeDecodeError as exc:
            return self._fail(exc)

        if self._leftover:
            text = self._leftover + text
            self._leftover = ""

        last_newline = text.rfind("\n")
        # Never cut inside a comment; it is tokenized whole once closed.
        open_comment = _unclosed_comment_start(text)
        if -1 < open_comment < last_newline:
            last_newline = text.rfind("\n", 0, open_comment)
        if last_newline == -1:
            self._leftover = text
            return self._empty()

        self._leftover = text[last_newline + 1:]
        return self._rewrite(text[:last_newline + 1])

    def flush(self) -> "str | bytes":
        """Signal end of input; return the final output (possibly empty)."""
        if self._state in (StreamState.DONE, StreamState.FAILED):
            return self._empty()
        self._state = StreamState.FLUSHING

        try:
            text = self._leftover + (self._decoder.decode(b"", final=True) if self._binary else "")
        except UnicodeDecodeError as exc:
            return self._fail(exc)
        self._leftover = ""

        out = self._rewrite(text) if text else self._empty()
        if self._state is StreamState.FLUSHING:
            self._state = StreamState.DONE
        return out

    # ------------------------------------------------------------------

    def _decode(self, chunk: "str | bytes") -> str:
        if isinstance(chunk, bytes):
            return self._decoder.decode(chunk)
        return chunk

    def _empty(self) -> "str | bytes":
        return b"" if self._binary else ""

    def _rewrite(self, text: str) -> "str | bytes":
        try:
            out = self._rewriter.rewrite(text, self.quote_style)
        except RewriteError as exc:
            return self._fail(exc)
        return out.encode(self.encoding) if self._binary else out

    def _fail(self, exc: Exception) -> "str | bytes":
        self._state = StreamState.FAILED
        self._error = exc
        self._leftover = ""
        if self.on_error is not None:
            self.on_error(exc)
        return self._empty()


def iter_rewrite(
    chunks: Iterable["str | bytes"],
    stream: URLRewriteStream,
) -> Iterator["str | bytes"]:
    """
    Drive *stream* over *chunks*, yielding each non-empty output.

    Stops at the first failure; the failure stays on ``stream.error``.
    """
    for chunk in chunks:
        out = stream.write(chunk)
        if out:
            yield out
        if stream.error is not None:
            return
    out = stream.flush()
    if out:
        yield out


def _read_chunks(path: Path, chunk_size: int) -> Iterator[bytes]:
    with path.open("rb") as fh:
        while True:
            data = fh.read(chunk_size)
            if not data:
                return
            yield data


def rewrite_file(
    src: "str | Path",
    dest: "str | Path",
    replacer: Replacer,
    quote_style: str | None = None,
    encoding: str = DEFAULT_ENCODING,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Stream *src* through a :class:`URLRewriteStream` into *dest*.

    Output goes to ``<dest>.part`` and replaces *dest* only once the whole
    file was rewritten, so *src* and *dest* may be the same path.  Returns
    the number of bytes written; on failure the stream's error is raised and
    *dest* is left untouched.
    """
    src, dest = Path(src), Path(dest)
    tmp = dest.with_name(dest.name + ".part")
    stream = URLRewriteStream(replacer, quote_style=quote_style, encoding=encoding)
    written = 0
    try:
        with tmp.open("wb") as out:
            for data in iter_rewrite(_read_chunks(src, chunk_size), stream):
                written += out.write(data)
        if stream.error is not None:
            raise stream.error
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    tmp.replace(dest)
    return written
