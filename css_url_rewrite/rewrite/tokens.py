"""
css_url_rewrite.rewrite.tokens
===============================
Thin adapter over the ``tinycss2`` tokenizer that reports every ``url(...)``
reference in a stylesheet together with its exact source span.

Both spellings of a URL reference are recognised:

* ``url(foo.png)``   – tinycss2 ``URLToken``
* ``url("foo.png")`` – tinycss2 ``FunctionBlock`` named ``url`` whose only
  argument is a string

Lines and columns are 1-based; ``end_col`` is the column just past the
closing parenthesis.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import tinycss2

from ..config import LINE_SPLIT_RE, URL_LITERAL_RE
from ..errors import TokenizeError

URL_TOKEN = "url"

_BLOCK_TYPES = ("() block", "[] block", "{} block")


@dataclass(frozen=True)
class Token:
    kind: str
    raw_value: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int


def _is_url_function(node) -> bool:
    if node.lower_name != "url":
        return False
    args = [a for a in node.arguments if a.type != "whitespace"]
    return len(args) == 1 and args[0].type == "string"


def _walk(nodes: Iterable) -> Iterator:
    """Depth-first walk yielding URL nodes in source order."""
    for node in nodes:
        if node.type == "url":
            yield node
        elif node.type == "function":
            if _is_url_function(node):
                yield node
            else:
                yield from _walk(node.arguments)
        elif node.type in _BLOCK_TYPES:
            yield from _walk(node.content)
        elif node.type == "error" and node.kind == "bad-url":
            raise TokenizeError(node.message, node.source_line, node.source_column)


def iter_url_tokens(code: str) -> Iterator[Token]:
    """
    Yield a :class:`Token` for every URL reference in *code*, in position order.

    Raises :class:`TokenizeError` for malformed ``url(...)`` references.
    """
    lines = LINE_SPLIT_RE.split(code)
    # tinycss2 treats form feeds as newlines; the line buffer does not.
    nodes = tinycss2.parse_component_value_list(code.replace("\f", " "))

    for node in _walk(nodes):
        line_no, col = node.source_line, node.source_column
        m = URL_LITERAL_RE.match(lines[line_no - 1], col - 1)
        if m is None:
            raise TokenizeError("Cannot locate url() literal", line_no, col)
        raw = m.group(0)
        yield Token(
            kind=URL_TOKEN,
            raw_value=raw,
            start_line=line_no,
            start_col=col,
            end_line=line_no,
            end_col=col + len(raw),
        )
