"""Parsers for emphasis-like spans delimited by repeated symbols."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from memomark.ast import (
    Bold,
    BoldItalic,
    Highlight,
    Italic,
    Spoiler,
    Strikethrough,
    Subscript,
    Superscript,
)
from memomark.parser.base import (
    Match,
    Parser,
    ParseError,
    TextParser,
    parse_inline_with_parsers,
)
from memomark.parser.links import LinkParser
from memomark.tokenizer import Token, TokenType, first_line, stringify

_EMPHASIS_SYMBOLS = frozenset({TokenType.ASTERISK, TokenType.UNDERSCORE})


def _closing_pair(line: Sequence[Token], start: int, kind: TokenType) -> int | None:
    """Return the index of the first two adjacent tokens of kind at or after start."""
    for offset, (token, following) in enumerate(pairwise(line[start:])):
        if token.type is kind and following.type is kind:
            return start + offset
    return None


def _until_single(line: Sequence[Token], kind: TokenType) -> list[Token] | None:
    """Collect the tokens after the opener up to the next token of kind.

    Returns None when there is no closing token or nothing between them.
    """
    content: list[Token] = []
    for token in line[1:]:
        if token.type is kind:
            return content or None
        content.append(token)
    return None


def _emphasis_children(tokens: Sequence[Token]):
    try:
        return parse_inline_with_parsers(tokens, [LinkParser(), TextParser()])
    except ParseError:
        return []


class BoldParser(Parser):
    """Takes ``**text**`` or ``__text__``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        kind = line[0].type
        if line[1].type is not kind or kind not in _EMPHASIS_SYMBOLS:
            return None
        close = _closing_pair(line, 2, kind)
        if close is None:
            return None
        matched = line[: close + 2]
        children = _emphasis_children(matched[2:-2])
        if not children:
            return None
        return Bold(symbol=kind.value, children=children), len(matched)


class BoldItalicParser(Parser):
    """Takes ``***text***``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 7:
            return None
        kind = line[0].type
        if kind is not TokenType.ASTERISK or any(t.type is not kind for t in line[1:3]):
            return None
        close = next(
            (
                3 + offset
                for offset, triple in enumerate(zip(line[3:], line[4:], line[5:]))
                if all(t.type is kind for t in triple)
            ),
            None,
        )
        if close is None:
            return None
        matched = line[: close + 3]
        content = matched[3:-3]
        if not content:
            return None
        return BoldItalic(symbol=kind.value, content=stringify(content)), len(matched)


class ItalicParser(Parser):
    """Takes ``*text*`` or ``_text_``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 3:
            return None
        kind = line[0].type
        if kind not in _EMPHASIS_SYMBOLS:
            return None
        content = _until_single(line, kind)
        if content is None:
            return None
        children = _emphasis_children(content)
        if not children:
            return None
        return Italic(symbol=kind.value, children=children), len(content) + 2


class HighlightParser(Parser):
    """Takes ``==text==``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        if line[0].type is not TokenType.EQUAL_SIGN or line[1].type is not TokenType.EQUAL_SIGN:
            return None
        close = _closing_pair(line, 2, TokenType.EQUAL_SIGN)
        if close is None:
            return None
        return Highlight(content=stringify(line[2:close])), close + 2


class SpoilerParser(Parser):
    """Takes ``||text||``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        if line[0].type is not TokenType.PIPE or line[1].type is not TokenType.PIPE:
            return None
        close = _closing_pair(line, 2, TokenType.PIPE)
        if close is None:
            return None
        return Spoiler(content=stringify(line[2:close])), close + 2


class StrikethroughParser(Parser):
    """Takes ``~~text~~``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        if line[0].type is not TokenType.TILDE or line[1].type is not TokenType.TILDE:
            return None
        close = _closing_pair(line, 2, TokenType.TILDE)
        if close is None or close == 2:
            return None
        content = line[2:close]
        return Strikethrough(content=stringify(content)), len(content) + 4


class SubscriptParser(Parser):
    """Takes ``~text~``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 3 or line[0].type is not TokenType.TILDE:
            return None
        content = _until_single(line, TokenType.TILDE)
        if content is None:
            return None
        return Subscript(content=stringify(content)), len(content) + 2


class SuperscriptParser(Parser):
    """Takes ``^text^``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 3 or line[0].type is not TokenType.CARET:
            return None
        content = _until_single(line, TokenType.CARET)
        if content is None:
            return None
        return Superscript(content=stringify(content)), len(content) + 2