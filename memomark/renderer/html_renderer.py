"""Rendering of syntax tree nodes as HTML."""

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
    ListKind,
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

_LIST_TAGS: dict[ListKind, str] = {
    ListKind.ORDERED: "ol",
    ListKind.UNORDERED: "ul",
    ListKind.DESCRIPTION: "dl",
}


class HTMLRenderer:
    """Renders nodes to HTML, collecting everything rendered so far."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def _write(self, *texts: str) -> None:
        self._parts.extend(texts)

    def _wrap(self, tag: str, children: Iterable[Node]) -> None:
        self._write(f"<{tag}>")
        self.render_nodes(children)
        self._write(f"</{tag}>")

    def render_node(self, node: Node) -> None:
        """Render one node into the output."""
        match node:
            case LineBreak():
                self._write("<br>")
            case Paragraph():
                self._wrap("p", node.children)
            case CodeBlock() | MathBlock():
                self._write("<pre><code>", node.content, "</code></pre>")
            case Heading():
                self._wrap(f"h{node.level}", node.children)
            case HorizontalRule():
                self._write("<hr>")
            case Blockquote():
                self._wrap("blockquote", node.children)
            case List():
                self._render_list(node)
            case UnorderedListItem() | OrderedListItem():
                self._wrap("li", node.children)
            case TaskListItem():
                self._write("<li>", '<input type="checkbox"')
                if node.complete:
                    self._write(" checked")
                self._write(" disabled />")
                self.render_nodes(node.children)
                self._write("</li>")
            case Table():
                self._render_table(node)
            case EmbeddedContent() | ReferencedContent():
                self._write("<div>", node.resource_name)
                if node.params:
                    self._write("?", node.params)
                self._write("</div>")
            case Text():
                self._write(node.content)
            case Bold():
                self._wrap("strong", node.children)
            case Italic():
                self._wrap("em", node.children)
            case BoldItalic():
                self._write("<strong><em>", node.content, "</em></strong>")
            case Code() | Math():
                self._write("<code>", node.content, "</code>")
            case Image():
                self._write(f'<img src="{node.url}" alt="{node.alt_text}" />')
            case Link():
                self._write(f'<a href="{node.url}">')
                self.render_nodes(node.content)
                self._write("</a>")
            case AutoLink():
                self._write(f'<a href="{node.url}">', node.url, "</a>")
            case Tag():
                self._write("<span>", "#", node.content, "</span>")
            case Strikethrough():
                self._write("<del>", node.content, "</del>")
            case EscapingCharacter():
                self._write("\\", node.symbol)
            case Highlight():
                self._write("<mark>", node.content, "</mark>")
            case Subscript():
                self._write("<sub>", node.content, "</sub>")
            case Superscript():
                self._write("<sup>", node.content, "</sup>")
            case Spoiler():
                self._write("<details><summary>", node.content, "</summary></details>")
            case HTMLElement():
                self._write(f"<{node.tag_name} >")

    def _render_list(self, node: List) -> None:
        tag = _LIST_TAGS.get(node.kind) if node.kind is not None else None
        if tag:
            self._write(f"<{tag}>")
        for item in node.children:
            self.render_nodes([item])
        if tag:
            self._write(f"</{tag}>")

    def _render_table(self, table: Table) -> None:
        self._write("<table>", "<thead>", "<tr>")
        for cell in table.header:
            self._wrap("th", [cell])
        self._write("</tr>", "</thead>", "<tbody>")
        for row in table.rows:
            self._write("<tr>")
            for cell in row:
                self._wrap("td", [cell])
            self._write("</tr>")
        self._write("</tbody>", "</table>")

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