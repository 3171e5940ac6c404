import pytest

from memomark.ast import (
    AutoLink,
    EscapingCharacter,
    HTMLElement,
    Image,
    Link,
    ReferencedContent,
    Text,
)
from memomark.parser.links import (
    AutoLinkParser,
    HTMLElementParser,
    ImageParser,
    LinkParser,
    ReferencedContentParser,
)
from memomark.tokenizer import tokenize


def _node(parser, text):
    found = parser.match(tokenize(text))
    return None if found is None else found[0]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("<https://example.com)", None),
        ("<https://example.com>", AutoLink(url="https://example.com")),
        ("https://example.com", AutoLink(url="https://example.com", is_raw_text=True)),
        ("hello world", None),
        ("a:b", None),
        ("https://example.com/%zz", None),
    ],
)
def test_auto_link_parser(text, expected):
    assert _node(AutoLinkParser(), text) == expected


def test_auto_link_sizes():
    text = "<https://example.com>"
    assert AutoLinkParser().match(tokenize(text))[1] == len(tokenize(text))
    found = AutoLinkParser().match(tokenize("https://example.com/a more"))
    assert found == (
        AutoLink(url="https://example.com/a", is_raw_text=True),
        len(tokenize("https://example.com/a")),
    )


def test_auto_link_too_short():
    assert AutoLinkParser().match(tokenize("<a")) is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("![](https://example.com)", Image(alt_text="", url="https://example.com")),
        ("! [](https://example.com)", None),
        ("![alte]( htt ps :/ /example.com)", None),
        (
            "![al te](https://example.com)",
            Image(alt_text="al te", url="https://example.com"),
        ),
        ("![alt]()", None),
    ],
)
def test_image_parser(text, expected):
    assert _node(ImageParser(), text) == expected


def test_image_size_covers_whole_markup():
    text = "![al te](https://example.com)"
    assert ImageParser().match(tokenize(text + " tail"))[1] == len(tokenize(text))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[](https://example.com)", Link(content=[], url="https://example.com")),
        ("! [](https://example.com)", None),
        ("[alte]( htt ps :/ /example.com)", None),
        (
            "[your/slash](https://example.com)",
            Link(content=[Text(content="your/slash")], url="https://example.com"),
        ),
        (
            "[hello world](https://example.com)",
            Link(content=[Text(content="hello world")], url="https://example.com"),
        ),
        (
            "[\\[link\\]](https://example.com)",
            Link(
                content=[
                    EscapingCharacter(symbol="["),
                    Text(content="link"),
                    EscapingCharacter(symbol="]"),
                ],
                url="https://example.com",
            ),
        ),
        ("[a [b]](https://example.com)", None),
    ],
)
def test_link_parser(text, expected):
    assert _node(LinkParser(), text) == expected


def test_link_size_covers_whole_markup():
    text = "[hello world](https://example.com)"
    assert LinkParser().match(tokenize(text + "!"))[1] == len(tokenize(text))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[[Hello world]", None),
        ("[[Hello world]]", ReferencedContent(resource_name="Hello world")),
        ("[[memos/1]]", ReferencedContent(resource_name="memos/1")),
        ("[[resources/101]]111\n123", ReferencedContent(resource_name="resources/101")),
        (
            "[[resources/101?align=center]]",
            ReferencedContent(resource_name="resources/101", params="align=center"),
        ),
        (
            "[[resources/6uxnhT98q8vN8anBbUbRGu?align=center]]",
            ReferencedContent(
                resource_name="resources/6uxnhT98q8vN8anBbUbRGu",
                params="align=center",
            ),
        ),
    ],
)
def test_referenced_content_parser(text, expected):
    assert _node(ReferencedContentParser(), text) == expected


def test_referenced_content_size():
    assert ReferencedContentParser().match(tokenize("[[resources/101]]111\n123"))[1] == 7


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("<br />", HTMLElement(tag_name="br", attributes={})),
        ("<br/>", None),
        ("<p />", None),
        ("<br >", None),
    ],
)
def test_html_element_parser(text, expected):
    assert _node(HTMLElementParser(), text) == expected


def test_html_element_size():
    assert HTMLElementParser().match(tokenize("<br /> world"))[1] == 5
    assert HTMLElementParser().match(tokenize("<br a />")) is None