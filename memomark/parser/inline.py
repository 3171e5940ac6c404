"""Parsing of inline content with the full set of inline parsers."""

from __future__ import annotations

from collections.abc import Sequence

from memomark.ast import Node
from memomark.parser.base import (
    EscapingCharacterParser,
    LineBreakParser,
    Parser,
    TextParser,
    parse_inline_with_parsers,
)
from memomark.parser.emphasis import (
    BoldItalicParser,
    BoldParser,
    HighlightParser,
    ItalicParser,
    SpoilerParser,
    StrikethroughParser,
    SubscriptParser,
    SuperscriptParser,
)
from memomark.parser.links import (
    AutoLinkParser,
    HTMLElementParser,
    ImageParser,
    LinkParser,
    ReferencedContentParser,
)
from memomark.parser.spans import CodeParser, MathParser, TagParser
from memomark.tokenizer import Token

DEFAULT_INLINE_PARSERS: tuple[Parser, ...] = (
    EscapingCharacterParser(),
    HTMLElementParser(),
    BoldItalicParser(),
    ImageParser(),
    LinkParser(),
    AutoLinkParser(),
    BoldParser(),
    ItalicParser(),
    SpoilerParser(),
    HighlightParser(),
    CodeParser(),
    SubscriptParser(),
    SuperscriptParser(),
    MathParser(),
    ReferencedContentParser(),
    TagParser(),
    StrikethroughParser(),
    LineBreakParser(),
    TextParser(),
)


def parse_inline(tokens: Sequence[Token]) -> list[Node]:
    """Parse tokens into inline nodes using the default inline parsers."""
    return parse_inline_with_parsers(tokens, DEFAULT_INLINE_PARSERS)