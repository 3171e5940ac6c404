"""Parsing of a whole document with the full set of block parsers."""

from __future__ import annotations

from collections.abc import Sequence

from memomark.ast import Node
from memomark.parser.base import LineBreakParser, Parser, parse_block_with_parsers
from memomark.parser.blocks import (
    BlockquoteParser,
    CodeBlockParser,
    EmbeddedContentParser,
    HeadingParser,
    HorizontalRuleParser,
    MathBlockParser,
    OrderedListItemParser,
    ParagraphParser,
    TaskListItemParser,
    UnorderedListItemParser,
)
from memomark.parser.table import TableParser
from memomark.tokenizer import Token

DEFAULT_BLOCK_PARSERS: tuple[Parser, ...] = (
    CodeBlockParser(),
    TableParser(),
    HorizontalRuleParser(),
    HeadingParser(),
    BlockquoteParser(),
    OrderedListItemParser(),
    TaskListItemParser(),
    UnorderedListItemParser(),
    MathBlockParser(),
    EmbeddedContentParser(),
    ParagraphParser(),
    LineBreakParser(),
)


def parse_block(tokens: Sequence[Token]) -> list[Node]:
    """Parse tokens into block nodes using the default block parsers."""
    return parse_block_with_parsers(tokens, DEFAULT_BLOCK_PARSERS)


def parse(tokens: Sequence[Token]) -> list[Node]:
    """Parse the tokens of a whole document into a list of nodes."""
    return parse_block(tokens)