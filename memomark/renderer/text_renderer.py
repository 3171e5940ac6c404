"""Rendering of syntax tree nodes as plain text."""

from __future__ import annotations

from collections.abc import Iterable

from memomark.ast import (
    AutoLink,
    Blockquote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    EmbeddedContent,
    EscapingCharacter,
    Heading,
    Highlight,
    HorizontalRule,
    HTMLElement,
    Image,
    Italic,
    LineBreak,
    Link,
    List,
    Math,
    MathBlock,
    Node,
    NodeType,
    OrderedListItem,
    Paragraph,
    ReferencedContent,
    Spoiler,
    Strikethrough,
    Subscript,
    Superscript,
    Table,
    Tag,
    TaskListItem,
    Text,
    UnorderedListItem,
    is_block_node,
)


class StringRenderer:
    """Renders nodes to plain text, collecting everything rendered so far."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def _write(self, text: str) -> None:
        self._parts.append(text)

    def render_node(self, node: Node) -> None:
        """Render one node into the output."""
        match node:
            case LineBreak():
                self._write("\n")
            case Paragraph() | Heading() | Blockquote():
                self.render_nodes(node.children)
                self._write("\n")
            case CodeBlock():
                self._write(node.content)
            case HorizontalRule():
                self._write("\n")
            case List():
                for item in node.children:
                    self.render_nodes([item])
            case UnorderedListItem() | TaskListItem():
                self._write(node.symbol)
                self.render_nodes(node.children)
            case OrderedListItem():
                self._write(f"{node.number}. ")
                self.render_nodes(node.children)
            case MathBlock():
                self._write(node.content)
                self._write("\n")
            case Table():
                self._render_table(node)
            case EmbeddedContent() | Image() | ReferencedContent():
                pass
            case Bold() | Italic():
                self.render_nodes(node.children)
            case (
                Text()
                | BoldItalic()
                | Code()
                | Strikethrough()
                | Math()
                | Highlight()
                | Subscript()
                | Superscript()
                | Spoiler()
            ):
                self._write(node.content)
            case Link() | AutoLink():
                self._write(node.url)
            case Tag():
                self._write(f"#{node.content}")
            case EscapingCharacter():
                self._write(f"\\{node.symbol}")
            case HTMLElement():
                self._write("\n")

    def _render_table(self, table: Table) -> None:
        for cell in table.header:
            self.render_nodes([cell])
            self._write("\t")
        self._write("\n")
        for row in table.rows:
            for cell in row:
                self.render_nodes([cell])
                self._write("\t")
            self._write("\n")

    def render_nodes(self, nodes: Iterable[Node]) -> None:
        """Render nodes in order, dropping the first line break after a block."""
        previous: Node | None = None
        skip_line_break = False
        for node in nodes:
            if node.type is NodeType.LINE_BREAK and skip_line_break:
                if previous is not None and is_block_node(previous):
                    skip_line_break = False
                    continue
            self.render_node(node)
            previous = node
            skip_line_break = True

    def render(self, nodes: Iterable[Node]) -> str:
        """Render nodes and return all output produced by this renderer."""
        self.render_nodes(nodes)
        return "".join(self._parts)