"""Syntax tree nodes produced by the parser and turned back into markdown."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class NodeType(StrEnum):
    """Kind of a syntax tree node."""

    # Block nodes.
    LINE_BREAK = "LINE_BREAK"
    PARAGRAPH = "PARAGRAPH"
    CODE_BLOCK = "CODE_BLOCK"
    HEADING = "HEADING"
    HORIZONTAL_RULE = "HORIZONTAL_RULE"
    BLOCKQUOTE = "BLOCKQUOTE"
    LIST = "LIST"
    ORDERED_LIST_ITEM = "ORDERED_LIST_ITEM"
    UNORDERED_LIST_ITEM = "UNORDERED_LIST_ITEM"
    TASK_LIST_ITEM = "TASK_LIST_ITEM"
    MATH_BLOCK = "MATH_BLOCK"
    TABLE = "TABLE"
    EMBEDDED_CONTENT = "EMBEDDED_CONTENT"
    # Inline nodes.
    TEXT = "TEXT"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    BOLD_ITALIC = "BOLD_ITALIC"
    CODE = "CODE"
    IMAGE = "IMAGE"
    LINK = "LINK"
    AUTO_LINK = "AUTO_LINK"
    TAG = "TAG"
    STRIKETHROUGH = "STRIKETHROUGH"
    ESCAPING_CHARACTER = "ESCAPING_CHARACTER"
    MATH = "MATH"
    HIGHLIGHT = "HIGHLIGHT"
    SUBSCRIPT = "SUBSCRIPT"
    SUPERSCRIPT = "SUPERSCRIPT"
    REFERENCED_CONTENT = "REFERENCED_CONTENT"
    SPOILER = "SPOILER"
    HTML_ELEMENT = "HTML_ELEMENT"


class ListKind(StrEnum):
    """Kind of a list container."""

    UNORDERED = "ul"
    ORDERED = "ol"
    DESCRIPTION = "dl"


class Node(ABC):
    """Base of every syntax tree node."""

    type: ClassVar[NodeType]

    @abstractmethod
    def restore(self) -> str:
        """Return the markdown text this node stands for."""


def _restore_all(nodes: Iterable[Node]) -> str:
    return "".join(node.restore() for node in nodes)


# Block nodes.


@dataclass
class LineBreak(Node):
    type: ClassVar[NodeType] = NodeType.LINE_BREAK

    def restore(self) -> str:
        return "\n"


@dataclass
class Paragraph(Node):
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.PARAGRAPH

    def restore(self) -> str:
        return _restore_all(self.children)


@dataclass
class CodeBlock(Node):
    language: str = ""
    content: str = ""

    type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    def restore(self) -> str:
        return f"```{self.language}\n{self.content}\n```"


@dataclass
class Heading(Node):
    level: int = 0
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.HEADING

    def restore(self) -> str:
        return f"{'#' * self.level} {_restore_all(self.children)}"


@dataclass
class HorizontalRule(Node):
    # "*", "-" or "_".
    symbol: str = ""

    type: ClassVar[NodeType] = NodeType.HORIZONTAL_RULE

    def restore(self) -> str:
        return self.symbol * 3


@dataclass
class Blockquote(Node):
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.BLOCKQUOTE

    def restore(self) -> str:
        return "\n".join(f"> {child.restore()}" for child in self.children)


@dataclass
class List(Node):
    kind: ListKind | None = None
    indent: int = 0
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.LIST

    def restore(self) -> str:
        return _restore_all(self.children)


@dataclass
class OrderedListItem(Node):
    number: str = ""
    indent: int = 0
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.ORDERED_LIST_ITEM

    def restore(self) -> str:
        return f"{' ' * self.indent}{self.number}. {_restore_all(self.children)}"


@dataclass
class UnorderedListItem(Node):
    # "*", "-" or "+".
    symbol: str = ""
    indent: int = 0
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.UNORDERED_LIST_ITEM

    def restore(self) -> str:
        return f"{' ' * self.indent}{self.symbol} {_restore_all(self.children)}"


@dataclass
class TaskListItem(Node):
    # "*", "-" or "+".
    symbol: str = ""
    indent: int = 0
    complete: bool = False
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.TASK_LIST_ITEM

    def restore(self) -> str:
        mark = "x" if self.complete else " "
        return (
            f"{' ' * self.indent}{self.symbol} [{mark}] "
            f"{_restore_all(self.children)}"
        )


@dataclass
class MathBlock(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.MATH_BLOCK

    def restore(self) -> str:
        return f"$$\n{self.content}\n$$"


@dataclass
class Table(Node):
    header: list[Node] = field(default_factory=list)
    delimiter: list[str] = field(default_factory=list)
    rows: list[list[Node]] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.TABLE

    def restore(self) -> str:
        header = "".join(f"| {cell.restore()} " for cell in self.header) + "|\n"
        delimiter = "".join(f"| {d} " for d in self.delimiter) + "|\n"
        rows = "\n".join(
            "".join(f"| {cell.restore()} " for cell in row) + "|" for row in self.rows
        )
        return header + delimiter + rows


@dataclass
class EmbeddedContent(Node):
    resource_name: str = ""
    params: str = ""

    type: ClassVar[NodeType] = NodeType.EMBEDDED_CONTENT

    def restore(self) -> str:
        params = f"?{self.params}" if self.params else ""
        return f"![[{self.resource_name}{params}]]"


# Inline nodes.


@dataclass
class Text(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.TEXT

    def restore(self) -> str:
        return self.content


@dataclass
class Bold(Node):
    # "*" or "_".
    symbol: str = ""
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.BOLD

    def restore(self) -> str:
        marker = self.symbol * 2
        return f"{marker}{_restore_all(self.children)}{marker}"


@dataclass
class Italic(Node):
    # "*" or "_".
    symbol: str = ""
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.ITALIC

    def restore(self) -> str:
        return f"{self.symbol}{_restore_all(self.children)}{self.symbol}"


@dataclass
class BoldItalic(Node):
    # "*" or "_".
    symbol: str = ""
    content: str = ""

    type: ClassVar[NodeType] = NodeType.BOLD_ITALIC

    def restore(self) -> str:
        marker = self.symbol * 3
        return f"{marker}{self.content}{marker}"


@dataclass
class Code(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.CODE

    def restore(self) -> str:
        return f"`{self.content}`"


@dataclass
class Image(Node):
    alt_text: str = ""
    url: str = ""

    type: ClassVar[NodeType] = NodeType.IMAGE

    def restore(self) -> str:
        return f"![{self.alt_text}]({self.url})"


@dataclass
class Link(Node):
    content: list[Node] = field(default_factory=list)
    url: str = ""

    type: ClassVar[NodeType] = NodeType.LINK

    def restore(self) -> str:
        return f"[{_restore_all(self.content)}]({self.url})"


@dataclass
class AutoLink(Node):
    url: str = ""
    is_raw_text: bool = False

    type: ClassVar[NodeType] = NodeType.AUTO_LINK

    def restore(self) -> str:
        return self.url if self.is_raw_text else f"<{self.url}>"


@dataclass
class Tag(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.TAG

    def restore(self) -> str:
        return f"#{self.content}"


@dataclass
class Strikethrough(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.STRIKETHROUGH

    def restore(self) -> str:
        return f"~~{self.content}~~"


@dataclass
class EscapingCharacter(Node):
    symbol: str = ""

    type: ClassVar[NodeType] = NodeType.ESCAPING_CHARACTER

    def restore(self) -> str:
        return f"\\{self.symbol}"


@dataclass
class Math(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.MATH

    def restore(self) -> str:
        return f"${self.content}$"


@dataclass
class Highlight(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.HIGHLIGHT

    def restore(self) -> str:
        return f"=={self.content}=="


@dataclass
class Subscript(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.SUBSCRIPT

    def restore(self) -> str:
        return f"~{self.content}~"


@dataclass
class Superscript(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.SUPERSCRIPT

    def restore(self) -> str:
        return f"^{self.content}^"


@dataclass
class ReferencedContent(Node):
    resource_name: str = ""
    params: str = ""

    type: ClassVar[NodeType] = NodeType.REFERENCED_CONTENT

    def restore(self) -> str:
        params = f"?{self.params}" if self.params else ""
        return f"[[{self.resource_name}{params}]]"


@dataclass
class Spoiler(Node):
    content: str = ""

    type: ClassVar[NodeType] = NodeType.SPOILER

    def restore(self) -> str:
        return f"||{self.content}||"


@dataclass
class HTMLElement(Node):
    tag_name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    type: ClassVar[NodeType] = NodeType.HTML_ELEMENT

    def restore(self) -> str:
        attrs = " ".join(f'{key}="{value}"' for key, value in self.attributes.items())
        attr_str = f" {attrs}" if attrs else ""
        return f"<{self.tag_name}{attr_str} />"


_BLOCK_TYPES = frozenset(
    {
        NodeType.PARAGRAPH,
        NodeType.CODE_BLOCK,
        NodeType.HEADING,
        NodeType.HORIZONTAL_RULE,
        NodeType.BLOCKQUOTE,
        NodeType.LIST,
        NodeType.ORDERED_LIST_ITEM,
        NodeType.UNORDERED_LIST_ITEM,
        NodeType.TASK_LIST_ITEM,
        NodeType.TABLE,
        NodeType.EMBEDDED_CONTENT,
    }
)

_LIST_ITEM_KINDS: dict[type[Node], ListKind] = {
    OrderedListItem: ListKind.ORDERED,
    UnorderedListItem: ListKind.UNORDERED,
    TaskListItem: ListKind.DESCRIPTION,
}


def is_block_node(node: Node) -> bool:
    """Tell whether a node counts as a block for line-break handling."""
    return node.type in _BLOCK_TYPES


def is_list_item_node(node: Node) -> bool:
    """Tell whether a node is an ordered, unordered or task list item."""
    return type(node) in _LIST_ITEM_KINDS


def list_item_kind_and_indent(node: Node) -> tuple[ListKind | None, int]:
    """Return the list kind a list item belongs to and its indent.

    Nodes that are not list items give ``(None, 0)``.
    """
    kind = _LIST_ITEM_KINDS.get(type(node))
    if kind is None:
        return None, 0
    return kind, node.indent  # type: ignore[attr-defined]