"""Parsers for block-level constructs: headings, lists, quotes, fenced blocks and paragraphs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

from memomark.ast import (
    Blockquote,
    CodeBlock,
    EmbeddedContent,
    Heading,
    HorizontalRule,
    MathBlock,
    OrderedListItem,
    Paragraph,
    TaskListItem,
    Text,
    UnorderedListItem,
)
from memomark.parser.base import Match, Parser, ParseError, parse_block_with_parsers
from memomark.parser.inline import parse_inline
from memomark.tokenizer import (
    Token,
    TokenType,
    find_unescaped,
    first_line,
    split,
    stringify,
)

_LIST_SYMBOLS = frozenset({TokenType.HYPHEN, TokenType.ASTERISK, TokenType.PLUS_SIGN})
_LANGUAGE_TOKEN_TYPES = frozenset(
    {TokenType.TEXT, TokenType.NUMBER, TokenType.UNDERSCORE}
)
_NEWLINE_TOKEN = Token(TokenType.NEWLINE, "\n")


def _leading_spaces(line: Sequence[Token]) -> int:
    return sum(1 for _ in takewhile(lambda t: t.type is TokenType.SPACE, line))


def _is_fence(row: Sequence[Token], kind: TokenType, width: int) -> bool:
    return len(row) == width and all(token.type is kind for token in row)


def _starts_with(row: Sequence[Token], kind: TokenType, count: int) -> bool:
    return len(row) >= count and all(token.type is kind for token in row[:count])


def _join_rows(rows: Sequence[Sequence[Token]]) -> list[Token]:
    joined: list[Token] = []
    for index, row in enumerate(rows):
        if index:
            joined.append(_NEWLINE_TOKEN)
        joined.extend(row)
    return joined


def _fenced_body(
    rows: Sequence[Sequence[Token]], kind: TokenType, width: int
) -> list[Token] | None:
    """Join the rows up to a closing fence; None when no fence closes them."""
    body: list[Sequence[Token]] = []
    for row in rows:
        if _is_fence(row, kind, width):
            return _join_rows(body)
        body.append(row)
    return None


def _resource_and_params(tokens: Sequence[Token]) -> tuple[str, str]:
    question = find_unescaped(tokens, TokenType.QUESTION_MARK)
    if question > 0:
        return stringify(tokens[:question]), stringify(tokens[question + 1 :])
    return stringify(tokens), ""


class BlockquoteParser(Parser):
    """Takes consecutive lines starting with ``> ``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        rows = list(
            takewhile(
                lambda row: len(row) >= 2
                and row[0].type is TokenType.GREATER_THAN
                and row[1].type is TokenType.SPACE,
                split(tokens, TokenType.NEWLINE),
            )
        )
        if not rows:
            return None

        children = []
        for row in rows:
            content = row[2:]
            if not content:
                children.append(Paragraph(children=[Text(content=" ")]))
                continue
            try:
                nodes = parse_block_with_parsers(
                    content, [BlockquoteParser(), ParagraphParser()]
                )
            except ParseError:
                return None
            if len(nodes) != 1:
                return None
            children.append(nodes[0])

        size = sum(len(row) for row in rows) + len(rows) - 1
        return Blockquote(children=children), size


class CodeBlockParser(Parser):
    """Takes a fenced code block with an optional language name."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        rows = split(tokens, TokenType.NEWLINE)
        if len(rows) < 3:
            return None
        first = rows[0]
        if not _starts_with(first, TokenType.BACKTICK, 3):
            return None
        language = first[3:]
        if any(token.type not in _LANGUAGE_TOKEN_TYPES for token in language):
            return None

        content = _fenced_body(rows[1:], TokenType.BACKTICK, 3)
        if content is None:
            return None
        return (
            CodeBlock(language=stringify(language), content=stringify(content)),
            4 + len(language) + len(content) + 4,
        )


class EmbeddedContentParser(Parser):
    """Takes a line that is exactly ``![[resource]]`` or ``![[resource?params]]``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 6:
            return None
        if (
            line[0].type is not TokenType.EXCLAMATION_MARK
            or line[1].type is not TokenType.LEFT_SQUARE_BRACKET
            or line[2].type is not TokenType.LEFT_SQUARE_BRACKET
        ):
            return None
        if (
            line[-2].type is not TokenType.RIGHT_SQUARE_BRACKET
            or line[-1].type is not TokenType.RIGHT_SQUARE_BRACKET
        ):
            return None

        resource_name, params = _resource_and_params(line[3:-2])
        return (
            EmbeddedContent(resource_name=resource_name, params=params),
            len(line),
        )


class HeadingParser(Parser):
    """Takes one to six pound signs, a space and inline content."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        level = find_unescaped(line, TokenType.SPACE)
        if level < 0:
            return None
        if any(token.type is not TokenType.POUND_SIGN for token in line[:level]):
            return None
        if not 1 <= level <= 6:
            return None
        content = line[level + 1 :]
        if not content:
            return None
        return (
            Heading(level=level, children=parse_inline(content)),
            len(content) + level + 1,
        )


class HorizontalRuleParser(Parser):
    """Takes a line that is exactly ``---`` or ``***``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) != 3:
            return None
        kind = line[0].type
        if kind not in (TokenType.HYPHEN, TokenType.ASTERISK):
            return None
        if any(token.type is not kind for token in line):
            return None
        return HorizontalRule(symbol=kind.value), 3


class MathBlockParser(Parser):
    """Takes a block fenced by lines holding only ``$$``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        rows = split(tokens, TokenType.NEWLINE)
        if len(rows) < 3:
            return None
        if not _is_fence(rows[0], TokenType.DOLLAR_SIGN, 2):
            return None
        content = _fenced_body(rows[1:], TokenType.DOLLAR_SIGN, 2)
        if content is None:
            return None
        return MathBlock(content=stringify(content)), 3 + len(content) + 3


class OrderedListItemParser(Parser):
    """Takes an indented ``N. content`` line."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        indent = _leading_spaces(line)
        if len(line) < indent + 3:
            return None
        number, dot, space = line[indent : indent + 3]
        if (
            number.type is not TokenType.NUMBER
            or dot.type is not TokenType.DOT
            or space.type is not TokenType.SPACE
        ):
            return None
        content = line[indent + 3 :]
        if not content:
            return None
        return (
            OrderedListItem(
                number=number.value, indent=indent, children=parse_inline(content)
            ),
            indent + 3 + len(content),
        )


class ParagraphParser(Parser):
    """Takes the rest of the line as inline content."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if not line:
            return None
        return Paragraph(children=parse_inline(line)), len(line)


class TaskListItemParser(Parser):
    """Takes an indented ``- [ ] content`` or ``- [x] content`` line."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        indent = _leading_spaces(line)
        if len(line) < indent + 6:
            return None
        symbol, gap, opening, mark, closing, after = line[indent : indent + 6]
        if symbol.type not in _LIST_SYMBOLS or gap.type is not TokenType.SPACE:
            return None
        if (
            opening.type is not TokenType.LEFT_SQUARE_BRACKET
            or (mark.type is not TokenType.SPACE and mark.value != "x")
            or closing.type is not TokenType.RIGHT_SQUARE_BRACKET
        ):
            return None
        if after.type is not TokenType.SPACE:
            return None
        content = line[indent + 6 :]
        if not content:
            return None
        return (
            TaskListItem(
                symbol=symbol.type.value,
                indent=indent,
                complete=mark.value == "x",
                children=parse_inline(content),
            ),
            indent + len(content) + 6,
        )


class UnorderedListItemParser(Parser):
    """Takes an indented ``- content``, ``* content`` or ``+ content`` line."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        indent = _leading_spaces(line)
        if len(line) < indent + 2:
            return None
        symbol, gap = line[indent : indent + 2]
        if symbol.type not in _LIST_SYMBOLS or gap.type is not TokenType.SPACE:
            return None
        content = line[indent + 2 :]
        if not content:
            return None
        return (
            UnorderedListItem(
                symbol=symbol.type.value, indent=indent, children=parse_inline(content)
            ),
            indent + len(content) + 2,
        )