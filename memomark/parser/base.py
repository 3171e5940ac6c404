"""Parser protocol, the driving loops and the simplest parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from memomark.ast import (
    EscapingCharacter,
    LineBreak,
    List,
    Node,
    NodeType,
    Text,
    is_list_item_node,
    list_item_kind_and_indent,
)
from memomark.tokenizer import Token, TokenType, stringify

Match = tuple[Node, int]


class ParseError(ValueError):
    """Raised when none of the given parsers accepts the remaining tokens."""


class Parser(ABC):
    """Recognises one construct at the start of a token list."""

    @abstractmethod
    def match(self, tokens: Sequence[Token]) -> Match | None:
        """Return the node found at the start of tokens and how many tokens it used, or None."""


class TextParser(Parser):
    """Takes any single token as plain text."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        if not tokens:
            return None
        return Text(content=tokens[0].value), 1


class LineBreakParser(Parser):
    """Takes a newline token."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        if not tokens or tokens[0].type is not TokenType.NEWLINE:
            return None
        return LineBreak(), 1


_NOT_ESCAPABLE = frozenset(
    {TokenType.NEWLINE, TokenType.SPACE, TokenType.TEXT, TokenType.NUMBER}
)


class EscapingCharacterParser(Parser):
    """Takes a backslash followed by a symbol."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        if len(tokens) < 2 or tokens[0].type is not TokenType.BACKSLASH:
            return None
        if tokens[1].type in _NOT_ESCAPABLE:
            return None
        return EscapingCharacter(symbol=tokens[1].value), 2


def _consume(tokens: Sequence[Token], parsers: Sequence[Parser]) -> Iterator[Node]:
    remaining = list(tokens)
    while remaining:
        for parser in parsers:
            found = parser.match(remaining)
            if found is not None and found[1] > 0:
                node, size = found
                yield node
                remaining = remaining[size:]
                break
        else:
            raise ParseError(
                f"no parser matches the input at {stringify(remaining[:1])!r}"
            )


def parse_inline_with_parsers(
    tokens: Sequence[Token], parsers: Sequence[Parser]
) -> list[Node]:
    """Parse tokens with the first matching parser at each step and merge adjacent text."""
    return merge_text_nodes(list(_consume(tokens, parsers)))


def parse_block_with_parsers(
    tokens: Sequence[Token], parsers: Sequence[Parser]
) -> list[Node]:
    """Parse tokens with the first matching parser at each step and group list items."""
    return merge_list_item_nodes(list(_consume(tokens, parsers)))


def merge_list_item_nodes(nodes: Sequence[Node]) -> list[Node]:
    """Gather list items, and the line breaks between them, into nested list nodes."""
    result: list[Node] = []
    stack: list[List] = []

    for node in nodes:
        if node.type is NodeType.LINE_BREAK:
            if stack and result and result[-1].type is NodeType.LIST:
                stack[-1].children.append(node)
            else:
                result.append(node)
            continue

        if not is_list_item_node(node):
            result.append(node)
            stack = []
            continue

        kind, indent = list_item_kind_and_indent(node)
        if not stack or kind != stack[-1].kind or indent > stack[-1].indent:
            new_list = List(kind=kind, indent=indent, children=[node])
            if stack and indent > stack[-1].indent:
                stack[-1].children.append(new_list)
            else:
                result.append(new_list)
            stack.append(new_list)
        else:
            while stack and (kind != stack[-1].kind or indent < stack[-1].indent):
                stack.pop()
            if stack:
                stack[-1].children.append(node)
            else:
                result.append(node)

    return result


def merge_text_nodes(nodes: Sequence[Node]) -> list[Node]:
    """Join runs of adjacent text nodes into one."""
    result: list[Node] = []
    for node in nodes:
        if (
            result
            and isinstance(node, Text)
            and isinstance(result[-1], Text)
        ):
            result[-1] = Text(content=result[-1].content + node.content)
        else:
            result.append(node)
    return result