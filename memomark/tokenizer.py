"""Splitting markdown text into tokens and helpers for working on token lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum


class TokenType(StrEnum):
    """Kind of a token; symbol kinds carry the character they stand for."""

    UNDERSCORE = "_"
    ASTERISK = "*"
    POUND_SIGN = "#"
    BACKTICK = "`"
    LEFT_SQUARE_BRACKET = "["
    RIGHT_SQUARE_BRACKET = "]"
    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"
    EXCLAMATION_MARK = "!"
    QUESTION_MARK = "?"
    TILDE = "~"
    HYPHEN = "-"
    PLUS_SIGN = "+"
    DOT = "."
    LESS_THAN = "<"
    GREATER_THAN = ">"
    DOLLAR_SIGN = "$"
    EQUAL_SIGN = "="
    PIPE = "|"
    COLON = ":"
    CARET = "^"
    APOSTROPHE = "'"
    BACKSLASH = "\\"
    SLASH = "/"
    NEWLINE = "\n"
    SPACE = " "
    # Text based tokens.
    NUMBER = "number"
    TEXT = ""


_SYMBOLS: dict[str, TokenType] = {
    member.value: member for member in TokenType if len(member.value) == 1
}


@dataclass(frozen=True)
class Token:
    """One token: its kind and the text it was made from."""

    type: TokenType
    value: str

    def __str__(self) -> str:
        return self.value


def tokenize(text: str) -> list[Token]:
    """Split text into symbol, number and text tokens.

    Runs of digits become one number token; runs of other characters that are
    not symbols become one text token.
    """
    tokens: list[Token] = []
    for char in text:
        symbol = _SYMBOLS.get(char)
        if symbol is not None:
            tokens.append(Token(symbol, char))
            continue

        is_number = "0" <= char <= "9"
        if tokens:
            last = tokens[-1]
            if (last.type is TokenType.TEXT and not is_number) or (
                last.type is TokenType.NUMBER and is_number
            ):
                tokens[-1] = Token(last.type, last.value + char)
                continue
        tokens.append(Token(TokenType.NUMBER if is_number else TokenType.TEXT, char))
    return tokens


def stringify(tokens: Iterable[Token]) -> str:
    """Join the text of the tokens."""
    return "".join(token.value for token in tokens)


def split(tokens: Sequence[Token], delimiter: TokenType) -> list[list[Token]]:
    """Split tokens on every token of the delimiter kind.

    An empty input gives an empty list; otherwise there is always one more
    part than there are delimiters.
    """
    if not tokens:
        return []
    parts: list[list[Token]] = [[]]
    for token in tokens:
        if token.type == delimiter:
            parts.append([])
        else:
            parts[-1].append(token)
    return parts


def find(tokens: Sequence[Token], target: TokenType) -> int:
    """Return the index of the first token of the given kind, or -1."""
    return next(
        (index for index, token in enumerate(tokens) if token.type == target), -1
    )


def find_unescaped(tokens: Sequence[Token], target: TokenType) -> int:
    """Return the index of the first token of the given kind not preceded by a backslash, or -1."""
    previous: Token | None = None
    for index, token in enumerate(tokens):
        if token.type == target and (
            previous is None or previous.type is not TokenType.BACKSLASH
        ):
            return index
        previous = token
    return -1


def first_line(tokens: Sequence[Token]) -> list[Token]:
    """Return the tokens before the first newline token."""
    end = find(tokens, TokenType.NEWLINE)
    return list(tokens) if end < 0 else list(tokens[:end])