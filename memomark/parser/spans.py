"""Parsers for inline code, inline math and tags."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

from memomark.ast import Code, Math, Tag
from memomark.parser.base import Match, Parser
from memomark.tokenizer import Token, TokenType, find_unescaped, first_line, stringify


class CodeParser(Parser):
    """Takes ``` `code` ``` on a single line."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 3 or line[0].type is not TokenType.BACKTICK:
            return None
        close = find_unescaped(line[1:], TokenType.BACKTICK)
        if close < 0:
            return None
        matched = line[: close + 2]
        content = matched[1:-1]
        if not content:
            return None
        return Code(content=stringify(content)), len(matched)


class MathParser(Parser):
    """Takes ``$formula$`` on a single line."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 3 or line[0].type is not TokenType.DOLLAR_SIGN:
            return None
        rest = line[1:]
        content = list(takewhile(lambda t: t.type is not TokenType.DOLLAR_SIGN, rest))
        if len(content) == len(rest) or not content:
            return None
        return Math(content=stringify(content)), len(content) + 2


_TAG_STOPPERS = frozenset({TokenType.SPACE, TokenType.POUND_SIGN, TokenType.BACKSLASH})


class TagParser(Parser):
    """Takes ``#tag``, ending at a space, another pound sign or a backslash."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 2 or line[0].type is not TokenType.POUND_SIGN:
            return None
        content = list(takewhile(lambda t: t.type not in _TAG_STOPPERS, line[1:]))
        if not content:
            return None
        return Tag(content=stringify(content)), len(content) + 1