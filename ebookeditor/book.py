"""The tree of a book: the book itself, chapters and pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class NodeKind(str, Enum):
    """Kinds of nodes in a book tree."""

    BOOK = "book"
    CHAPTER = "chapter"
    PAGE = "page"


BOOK_TITLE = "Моя книга"
NEW_CHAPTER_TITLE = "Новая глава"
NEW_PAGE_TITLE = "Новая страница"


@dataclass(eq=False)
class Node:
    """One entry of the book tree. Only pages carry content."""

    title: str
    kind: str
    content: str = ""
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    @property
    def is_page(self) -> bool:
        return self.kind == NodeKind.PAGE

    def add_child(self, node: Node) -> Node:
        """Append ``node`` as the last child and return it."""
        node.parent = self
        self.children.append(node)
        return node

    def walk(self) -> Iterator[Node]:
        """Yield this node and all its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class Book:
    """A forest of top-level nodes; the first one is the protected book root."""

    roots: list[Node] = field(default_factory=list)

    def _attach(self, parent: Node | None, node: Node) -> Node:
        if parent is None:
            node.parent = None
            self.roots.append(node)
            return node
        return parent.add_child(node)

    @staticmethod
    def _parent_for(current: Node | None) -> Node | None:
        # A new item goes beside a selected page, otherwise under the selection.
        if current is not None and current.is_page:
            return current.parent
        return current

    def add_chapter(self, current: Node | None = None) -> Node:
        """Add a new chapter relative to the selected node and return it."""
        chapter = Node(NEW_CHAPTER_TITLE, NodeKind.CHAPTER)
        return self._attach(self._parent_for(current), chapter)

    def add_page(self, current: Node | None = None) -> Node:
        """Add a new empty page relative to the selected node and return it."""
        page = Node(NEW_PAGE_TITLE, NodeKind.PAGE)
        return self._attach(self._parent_for(current), page)

    def remove(self, node: Node | None) -> bool:
        """Remove ``node`` with its subtree; the first root cannot be removed."""
        if node is None or (self.roots and node is self.roots[0]):
            return False
        siblings = node.parent.children if node.parent is not None else self.roots
        if not any(sibling is node for sibling in siblings):
            raise ValueError(f"node {node.title!r} is not part of this book")
        siblings.remove(node)
        node.parent = None
        return True

    def pages(self) -> Iterator[Node]:
        """Yield every page of the book in tree order."""
        for root in self.roots:
            yield from (node for node in root.walk() if node.is_page)


def empty_book() -> Book:
    """A book holding only its root."""
    return Book([Node(BOOK_TITLE, NodeKind.BOOK)])


def default_book() -> Book:
    """The starting book: one chapter with two empty pages."""
    book = empty_book()
    chapter = book.roots[0].add_child(Node("Глава 1", NodeKind.CHAPTER))
    chapter.add_child(Node("Страница 1.1", NodeKind.PAGE))
    chapter.add_child(Node("Страница 1.2", NodeKind.PAGE))
    return book