"""Reading and writing books in the binary .ebk format."""

from __future__ import annotations

import os
from typing import BinaryIO

from .book import Book, Node, NodeKind
from .datastream import read_int32, read_qstring, write_int32, write_qstring


def _kind_name(kind: str) -> str:
    return kind.value if isinstance(kind, NodeKind) else kind


def _parse_kind(name: str) -> str:
    try:
        return NodeKind(name)
    except ValueError:
        return name


def _dump_node(node: Node, fp: BinaryIO) -> None:
    write_qstring(fp, node.title)
    write_qstring(fp, _kind_name(node.kind))
    if node.is_page:
        write_qstring(fp, node.content)
    write_int32(fp, len(node.children))
    for child in node.children:
        _dump_node(child, fp)


def _load_node(fp: BinaryIO, parent: Node | None) -> Node:
    title = read_qstring(fp) or ""
    node = Node(title, _parse_kind(read_qstring(fp) or ""), parent=parent)
    if node.is_page:
        node.content = read_qstring(fp) or ""
    for _ in range(read_int32(fp)):
        node.children.append(_load_node(fp, node))
    return node


def dump(book: Book, fp: BinaryIO) -> None:
    """Write ``book`` to a binary stream."""
    write_int32(fp, len(book.roots))
    for root in book.roots:
        _dump_node(root, fp)


def load(fp: BinaryIO) -> Book:
    """Read a book from a binary stream."""
    return Book([_load_node(fp, None) for _ in range(read_int32(fp))])


def save_file(book: Book, path: str | os.PathLike[str]) -> None:
    """Write ``book`` to the file at ``path``."""
    with open(path, "wb") as fp:
        dump(book, fp)


def load_file(path: str | os.PathLike[str]) -> Book:
    """Read a book from the file at ``path``."""
    with open(path, "rb") as fp:
        return load(fp)