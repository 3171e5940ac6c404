"""Parser for pipe tables with a header row, a delimiter row and body rows."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

from memomark.ast import Node, Table, Text
from memomark.parser.base import Match, Parser, ParseError, parse_block_with_parsers
from memomark.parser.blocks import HeadingParser, ParagraphParser
from memomark.tokenizer import Token, TokenType, split, stringify

_DELIMITER_EDGES = frozenset({TokenType.COLON, TokenType.HYPHEN})


def _cell_count(tokens: Sequence[Token]) -> int | None:
    """Count the pipes of a well-formed table row, or None if the row is malformed.

    A well-formed row starts and ends with a pipe, and every cell between
    two pipes is non-empty and padded by a space on each side.
    """
    if not tokens:
        return None
    cells = split(tokens, TokenType.PIPE)
    if cells[0] or cells[-1]:
        return None
    for cell in cells[1:-1]:
        if (
            not cell
            or cell[0].type is not TokenType.SPACE
            or cell[-1].type is not TokenType.SPACE
        ):
            return None
    return len(cells) - 1


def _is_delimiter_row(row: Sequence[Token], pipes: int) -> bool:
    for index, cell in enumerate(split(row, TokenType.PIPE)):
        if index in (0, pipes):
            if cell:
                return False
            continue
        # Each delimiter cell looks like ` --- `, ` :-- `, ` --: ` or ` :-: `.
        if len(cell) < 5:
            return False
        inner = cell[1:-1]
        if (
            inner[0].type not in _DELIMITER_EDGES
            or inner[-1].type not in _DELIMITER_EDGES
        ):
            return False
        if any(token.type is not TokenType.HYPHEN for token in inner[1:-1]):
            return False
    return True


def _cell_node(cell: Sequence[Token]) -> Node | None:
    if len(cell) < 3:
        return Text()
    try:
        nodes = parse_block_with_parsers(
            cell[1:-1], [HeadingParser(), ParagraphParser()]
        )
    except ParseError:
        return None
    if len(nodes) != 1:
        return None
    return nodes[0]


def _row_nodes(row: Sequence[Token], cols: int) -> list[Node] | None:
    nodes: list[Node] = []
    for cell in split(row, TokenType.PIPE)[1 : cols + 1]:
        node = _cell_node(cell)
        if node is None:
            return None
        nodes.append(node)
    return nodes


class TableParser(Parser):
    """Takes a header row, a delimiter row and at least one body row."""

    def match(self, tokens: Sequence[Token]) -> Match | None:
        raw_rows = split(tokens, TokenType.NEWLINE)
        if len(raw_rows) < 3:
            return None

        header_row, delimiter_row = raw_rows[0], raw_rows[1]
        if len(header_row) < 5 or len(delimiter_row) < 5:
            return None

        header_cells = _cell_count(header_row)
        if not header_cells:
            return None
        if _cell_count(delimiter_row) != header_cells:
            return None
        if not _is_delimiter_row(delimiter_row, header_cells):
            return None

        rows = list(
            takewhile(lambda row: _cell_count(row) == header_cells, raw_rows[2:])
        )
        if not rows:
            return None

        cols = len(split(header_row, TokenType.PIPE)) - 2
        header = _row_nodes(header_row, cols)
        if header is None:
            return None

        delimiter = [
            "" if len(cell) < 3 else stringify(cell[1:-1])
            for cell in split(delimiter_row, TokenType.PIPE)[1 : cols + 1]
        ]

        body: list[list[Node]] = []
        for row in rows:
            nodes = _row_nodes(row, cols)
            if nodes is None:
                return None
            body.append(nodes)

        size = (
            len(header_row)
            + len(delimiter_row)
            + 2
            + sum(len(row) for row in rows)
            + len(rows)
            - 1
        )
        return Table(header=header, delimiter=delimiter, rows=body), size