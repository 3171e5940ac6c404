"""Top-level entry points: parse markdown, restore it and render it."""

from __future__ import annotations

from collections.abc import Iterable

from memomark.ast import Node
from memomark.parser.document import parse as _parse_tokens
from memomark.renderer.html_renderer import HTMLRenderer
from memomark.renderer.text_renderer import StringRenderer
from memomark.restore import restore as _restore
from memomark.tokenizer import tokenize


def parse(markdown: str) -> list[Node]:
    """Parse a markdown string into a list of nodes."""
    return _parse_tokens(tokenize(markdown))


def restore(nodes: Iterable[Node] | None) -> str:
    """Turn nodes back into a markdown string."""
    return _restore(nodes)


def to_html(nodes: Iterable[Node]) -> str:
    """Render nodes as HTML."""
    return HTMLRenderer().render(nodes)


def to_plain_text(nodes: Iterable[Node]) -> str:
    """Render nodes as plain text."""
    return StringRenderer().render(nodes)