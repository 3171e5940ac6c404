import pytest

from memomark.tokenizer import (
    Token,
    TokenType,
    find,
    find_unescaped,
    first_line,
    split,
    stringify,
    tokenize,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (
            "*Hello world!",
            [
                Token(TokenType.ASTERISK, "*"),
                Token(TokenType.TEXT, "Hello"),
                Token(TokenType.SPACE, " "),
                Token(TokenType.TEXT, "world"),
                Token(TokenType.EXCLAMATION_MARK, "!"),
            ],
        ),
        (
            "# hello \n world",
            [
                Token(TokenType.POUND_SIGN, "#"),
                Token(TokenType.SPACE, " "),
                Token(TokenType.TEXT, "hello"),
                Token(TokenType.SPACE, " "),
                Token(TokenType.NEWLINE, "\n"),
                Token(TokenType.SPACE, " "),
                Token(TokenType.TEXT, "world"),
            ],
        ),
    ],
)
def test_tokenize(text, expected):
    assert tokenize(text) == expected


def test_tokenize_numbers_and_text_alternate():
    assert tokenize("12ab3") == [
        Token(TokenType.NUMBER, "12"),
        Token(TokenType.TEXT, "ab"),
        Token(TokenType.NUMBER, "3"),
    ]


def test_tokenize_text_then_digits():
    assert tokenize("ab12") == [
        Token(TokenType.TEXT, "ab"),
        Token(TokenType.NUMBER, "12"),
    ]


def test_tokenize_unicode_text():
    assert tokenize("你好") == [Token(TokenType.TEXT, "你好")]


def test_tokenize_empty():
    assert tokenize("") == []


def test_tokenize_round_trips_through_stringify():
    text = "Hello **world**!\n- [x] `code` $a=3$ <br /> \\# 'q'"
    assert stringify(tokenize(text)) == text


def test_token_str_is_value():
    assert str(Token(TokenType.TEXT, "abc")) == "abc"


def test_split():
    tokens = [
        Token(TokenType.ASTERISK, "*"),
        Token(TokenType.TEXT, "Hello"),
        Token(TokenType.SPACE, " "),
        Token(TokenType.TEXT, "world"),
        Token(TokenType.EXCLAMATION_MARK, "!"),
    ]
    result = split(tokens, TokenType.ASTERISK)
    assert [stringify(part) for part in result] == ["", "Hello world!"]
    assert result[1] == tokens[1:]


def test_split_empty_gives_no_parts():
    assert split([], TokenType.PIPE) == []


def test_split_trailing_delimiter_gives_empty_part():
    parts = split(tokenize("| a |"), TokenType.PIPE)
    assert [stringify(part) for part in parts] == ["", " a ", ""]


def test_first_line():
    tokens = [
        Token(TokenType.ASTERISK, "hello world"),
        Token(TokenType.NEWLINE, "\n"),
    ]
    assert first_line(tokens) == [Token(TokenType.ASTERISK, "hello world")]


def test_first_line_without_newline_is_everything():
    tokens = tokenize("a b")
    assert first_line(tokens) == tokens


def test_find_and_find_unescaped():
    tokens = tokenize("\\#a#")
    assert find(tokens, TokenType.POUND_SIGN) == 1
    assert find_unescaped(tokens, TokenType.POUND_SIGN) == 3


def test_find_unescaped_at_start():
    assert find_unescaped(tokenize("#a"), TokenType.POUND_SIGN) == 0


def test_find_missing_returns_minus_one():
    tokens = tokenize("abc")
    assert find(tokens, TokenType.PIPE) == -1
    assert find_unescaped(tokenize("\\|"), TokenType.PIPE) == -1