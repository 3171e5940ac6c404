"""Turning a list of syntax tree nodes back into markdown."""

from __future__ import annotations

from collections.abc import Iterable

from memomark.ast import Node


def restore(nodes: Iterable[Node] | None) -> str:
    """Return the markdown text for the given nodes, in order."""
    if nodes is None:
        return ""
    return "".join(node.restore() for node in nodes)