import pytest

from memomark.ast import (
    Bold,
    CodeBlock,
    EmbeddedContent,
    EscapingCharacter,
    Heading,
    HTMLElement,
    LineBreak,
    List,
    ListKind,
    MathBlock,
    OrderedListItem,
    Paragraph,
    Table,
    TaskListItem,
    Text,
    UnorderedListItem,
)
from memomark.parser.document import parse, parse_block
from memomark.tokenizer import TokenType, tokenize


def _t(content):
    return Text(content=content)


def _p(*children):
    return Paragraph(children=list(children))


PARSER_CASES = [
    ("Hello world!", [_p(_t("Hello world!"))]),
    ("# Hello world!", [Heading(level=1, children=[_t("Hello world!")])]),
    (
        "\\# Hello world!",
        [_p(EscapingCharacter(symbol="#"), _t(" Hello world!"))],
    ),
    (
        "**Hello** world!",
        [_p(Bold(symbol="*", children=[_t("Hello")]), _t(" world!"))],
    ),
    (
        "Hello **world**!\nHere is a new line.",
        [
            _p(_t("Hello "), Bold(symbol="*", children=[_t("world")]), _t("!")),
            LineBreak(),
            _p(_t("Here is a new line.")),
        ],
    ),
    (
        'Hello **world**!\n```javascript\nconsole.log("Hello world!");\n```',
        [
            _p(_t("Hello "), Bold(symbol="*", children=[_t("world")]), _t("!")),
            LineBreak(),
            CodeBlock(language="javascript", content='console.log("Hello world!");'),
        ],
    ),
    (
        "Hello world!\n\nNew paragraph.",
        [
            _p(_t("Hello world!")),
            LineBreak(),
            LineBreak(),
            _p(_t("New paragraph.")),
        ],
    ),
    (
        "1. hello\n- [ ] world",
        [
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("hello")]),
                    LineBreak(),
                ],
            ),
            List(
                kind=ListKind.DESCRIPTION,
                children=[
                    TaskListItem(
                        symbol=TokenType.HYPHEN, complete=False, children=[_t("world")]
                    )
                ],
            ),
        ],
    ),
    (
        "- [ ] hello\n- [x] world",
        [
            List(
                kind=ListKind.DESCRIPTION,
                children=[
                    TaskListItem(
                        symbol=TokenType.HYPHEN, complete=False, children=[_t("hello")]
                    ),
                    LineBreak(),
                    TaskListItem(
                        symbol=TokenType.HYPHEN, complete=True, children=[_t("world")]
                    ),
                ],
            )
        ],
    ),
    ("\n\n", [LineBreak(), LineBreak()]),
    ("\n$$\na=3\n$$", [LineBreak(), MathBlock(content="a=3")]),
    (
        "Hello\n![[memos/101]]",
        [_p(_t("Hello")), LineBreak(), EmbeddedContent(resource_name="memos/101")],
    ),
    (
        "Hello\nworld<br />",
        [
            _p(_t("Hello")),
            LineBreak(),
            _p(_t("world"), HTMLElement(tag_name="br", attributes={})),
        ],
    ),
    (
        "Hello <br /> world",
        [
            _p(
                _t("Hello "),
                HTMLElement(tag_name="br", attributes={}),
                _t(" world"),
            )
        ],
    ),
    (
        "* unordered list item 1\n* unordered list item 2",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(
                        symbol=TokenType.ASTERISK,
                        children=[_t("unordered list item 1")],
                    ),
                    LineBreak(),
                    UnorderedListItem(
                        symbol=TokenType.ASTERISK,
                        children=[_t("unordered list item 2")],
                    ),
                ],
            )
        ],
    ),
    (
        "* unordered list item\n\n1. ordered list item",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(
                        symbol=TokenType.ASTERISK,
                        children=[_t("unordered list item")],
                    ),
                    LineBreak(),
                    LineBreak(),
                ],
            ),
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("ordered list item")])
                ],
            ),
        ],
    ),
    (
        "* unordered list item\nparagraph\n\n1. ordered list item",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(
                        symbol=TokenType.ASTERISK,
                        children=[_t("unordered list item")],
                    ),
                    LineBreak(),
                ],
            ),
            _p(_t("paragraph")),
            LineBreak(),
            LineBreak(),
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("ordered list item")])
                ],
            ),
        ],
    ),
]


@pytest.mark.parametrize(("text", "expected"), PARSER_CASES)
def test_parse(text, expected):
    assert parse(tokenize(text)) == expected


LIST_CASES = [
    (
        "1. hello\n\n",
        [
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("hello")]),
                    LineBreak(),
                    LineBreak(),
                ],
            )
        ],
    ),
    (
        "1. hello\n2. world",
        [
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("hello")]),
                    LineBreak(),
                    OrderedListItem(number="2", children=[_t("world")]),
                ],
            )
        ],
    ),
    (
        "1. hello\n  2. world",
        [
            List(
                kind=ListKind.ORDERED,
                children=[
                    OrderedListItem(number="1", children=[_t("hello")]),
                    LineBreak(),
                    List(
                        kind=ListKind.ORDERED,
                        indent=2,
                        children=[
                            OrderedListItem(
                                number="2", indent=2, children=[_t("world")]
                            )
                        ],
                    ),
                ],
            )
        ],
    ),
    (
        "* hello\n  * world\n  * gomark",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(symbol="*", children=[_t("hello")]),
                    LineBreak(),
                    List(
                        kind=ListKind.UNORDERED,
                        indent=2,
                        children=[
                            UnorderedListItem(
                                symbol="*", indent=2, children=[_t("world")]
                            ),
                            LineBreak(),
                            UnorderedListItem(
                                symbol="*", indent=2, children=[_t("gomark")]
                            ),
                        ],
                    ),
                ],
            )
        ],
    ),
    (
        "* hello\n  * world\n* gomark",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(symbol="*", children=[_t("hello")]),
                    LineBreak(),
                    List(
                        kind=ListKind.UNORDERED,
                        indent=2,
                        children=[
                            UnorderedListItem(
                                symbol="*", indent=2, children=[_t("world")]
                            ),
                            LineBreak(),
                        ],
                    ),
                    UnorderedListItem(symbol="*", children=[_t("gomark")]),
                ],
            )
        ],
    ),
    (
        "* hello\nparagraph\n* world",
        [
            List(
                kind=ListKind.UNORDERED,
                children=[
                    UnorderedListItem(symbol="*", children=[_t("hello")]),
                    LineBreak(),
                ],
            ),
            _p(_t("paragraph")),
            LineBreak(),
            List(
                kind=ListKind.UNORDERED,
                children=[UnorderedListItem(symbol="*", children=[_t("world")])],
            ),
        ],
    ),
]


@pytest.mark.parametrize(("text", "expected"), LIST_CASES)
def test_parse_lists(text, expected):
    assert parse(tokenize(text)) == expected


def test_parse_empty_document():
    assert parse(tokenize("")) == []


def test_parse_block_matches_parse():
    text = "# Title\n> quote\n---"
    assert parse_block(tokenize(text)) == parse(tokenize(text))


def test_parse_table_document():
    nodes = parse(tokenize("| a |\n| --- |\n| b |"))
    assert nodes == [
        Table(
            header=[_p(_t("a"))],
            delimiter=["---"],
            rows=[[_p(_t("b"))]],
        )
    ]