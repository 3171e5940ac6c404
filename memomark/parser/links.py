"""Parsers for links, images, references and inline HTML elements."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import pairwise, takewhile
from urllib.parse import urlsplit

from memomark.ast import AutoLink, HTMLElement, Image, Link, ReferencedContent
from memomark.parser.base import (
    EscapingCharacterParser,
    Match,
    Parser,
    ParseError,
    TextParser,
    parse_inline_with_parsers,
)
from memomark.tokenizer import (
    Token,
    TokenType,
    find_unescaped,
    first_line,
    stringify,
)

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _has_scheme_and_host(text: str) -> bool:
    if _BAD_ESCAPE.search(text):
        return False
    if any(ord(char) < 0x20 or char == "\x7f" for char in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return bool(parts.scheme) and bool(host)


def _url_until_close(tokens: Sequence[Token]) -> list[Token] | None:
    """Collect tokens up to a closing parenthesis; None on a space or no close."""
    url: list[Token] = []
    for token in tokens:
        if token.type is TokenType.SPACE:
            return None
        if token.type is TokenType.RIGHT_PARENTHESIS:
            return url or None
        url.append(token)
    return None


def _resource_and_params(tokens: Sequence[Token]) -> tuple[str, str]:
    question = find_unescaped(tokens, TokenType.QUESTION_MARK)
    if question > 0:
        return stringify(tokens[:question]), stringify(tokens[question + 1 :])
    return stringify(tokens), ""


class AutoLinkParser(Parser):
    """Takes ``<url>`` or a bare URL with a scheme and a host."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        if len(tokens) < 3:
            return None
        line = first_line(tokens)
        if not line:
            return None

        if line[0].type is TokenType.LESS_THAN:
            close = find_unescaped(line, TokenType.GREATER_THAN)
            if close < 0:
                return None
            matched = line[: close + 1]
            return AutoLink(url=stringify(matched[1:-1]), is_raw_text=False), len(
                matched
            )

        matched = list(takewhile(lambda t: t.type is not TokenType.SPACE, line))
        if not matched:
            return None
        url = stringify(matched)
        if not _has_scheme_and_host(url):
            return None
        return AutoLink(url=url, is_raw_text=True), len(matched)


class ImageParser(Parser):
    """Takes ``![alt](url)``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        if (
            line[0].type is not TokenType.EXCLAMATION_MARK
            or line[1].type is not TokenType.LEFT_SQUARE_BRACKET
        ):
            return None

        alt = list(
            takewhile(
                lambda t: t.type is not TokenType.RIGHT_SQUARE_BRACKET, line[2:-2]
            )
        )
        cursor = 2 + len(alt)
        if line[cursor + 1].type is not TokenType.LEFT_PARENTHESIS:
            return None

        url = _url_until_close(line[cursor + 2 :])
        if url is None:
            return None
        return (
            Image(alt_text=stringify(alt), url=stringify(url)),
            5 + len(alt) + len(url),
        )


class LinkParser(Parser):
    """Takes ``[text](url)``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5 or line[0].type is not TokenType.LEFT_SQUARE_BRACKET:
            return None

        close = find_unescaped(line[1:], TokenType.RIGHT_SQUARE_BRACKET)
        if close == -1:
            return None
        content = line[1 : close + 1]
        if find_unescaped(content, TokenType.LEFT_SQUARE_BRACKET) != -1:
            return None
        if len(content) + 4 >= len(line):
            return None
        if line[2 + len(content)].type is not TokenType.LEFT_PARENTHESIS:
            return None

        url = _url_until_close(line[3 + len(content) :])
        if url is None:
            return None

        try:
            children = parse_inline_with_parsers(
                content, [EscapingCharacterParser(), TextParser()]
            )
        except ParseError:
            return None
        return (
            Link(content=children, url=stringify(url)),
            4 + len(content) + len(url),
        )


class ReferencedContentParser(Parser):
    """Takes ``[[resource]]`` or ``[[resource?params]]``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        line = first_line(tokens)
        if len(line) < 5:
            return None
        if (
            line[0].type is not TokenType.LEFT_SQUARE_BRACKET
            or line[1].type is not TokenType.LEFT_SQUARE_BRACKET
        ):
            return None

        content: list[Token] = []
        for token, following in pairwise(line[2:]):
            if (
                token.type is TokenType.RIGHT_SQUARE_BRACKET
                and following.type is TokenType.RIGHT_SQUARE_BRACKET
            ):
                break
            content.append(token)
        else:
            return None

        resource_name, params = _resource_and_params(content)
        return (
            ReferencedContent(resource_name=resource_name, params=params),
            len(content) + 4,
        )


_AVAILABLE_HTML_ELEMENTS = frozenset({"br"})


class HTMLElementParser(Parser):
    """Takes a self-closing element without attributes, such as ``<br />``."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        if len(tokens) < 5 or tokens[0].type is not TokenType.LESS_THAN:
            return None
        tag_name = tokens[1].value
        if tag_name not in _AVAILABLE_HTML_ELEMENTS:
            return None

        close = find_unescaped(tokens, TokenType.GREATER_THAN)
        if (
            close + 1 < 5
            or tokens[close - 1].type is not TokenType.SLASH
            or tokens[close - 2].type is not TokenType.SPACE
        ):
            return None

        if tokens[2 : close - 2]:
            return None
        return HTMLElement(tag_name=tag_name, attributes={}), close + 1