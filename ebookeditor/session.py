"""Editing state of one open book: selection, editor text and the backing file."""

from __future__ import annotations

import os

from .book import Book, Node, default_book, empty_book
from .ebkformat import load_file, save_file

APP_TITLE = "Редактор электронных книг"
UNTITLED_TITLE = f"Безымянный - {APP_TITLE}"


class EditorSession:
    """Holds the book, the selected node and the editor's current HTML."""

    def __init__(self, book: Book | None = None) -> None:
        self.book = book if book is not None else default_book()
        self.current: Node | None = None
        self.html = ""
        self.current_file = ""
        self._title = APP_TITLE

    def select(self, node: Node | None) -> None:
        """Make ``node`` current, storing the editor text into the previous page."""
        self.commit()
        self.current = node
        self.html = node.content if node is not None and node.is_page else ""

    def commit(self) -> None:
        """Store the editor text into the current page, if a page is selected."""
        if self.current is not None and self.current.is_page:
            self.current.content = self.html

    def new_document(self) -> None:
        """Start an untitled book holding only its root."""
        self.commit()
        self.book = empty_book()
        self.current = None
        self.html = ""
        self.current_file = ""
        self._title = UNTITLED_TITLE

    def open(self, path: str | os.PathLike[str]) -> None:
        """Replace the book with the one stored at ``path``."""
        book = load_file(path)
        self.book = book
        self.current = None
        self.html = ""
        self.current_file = os.fspath(path)
        self._title = f"{self.current_file} - {APP_TITLE}"

    def save(self) -> None:
        """Write the book to the current file."""
        if not self.current_file:
            raise ValueError("no file name set; use save_as")
        self.commit()
        save_file(self.book, self.current_file)

    def save_as(self, path: str | os.PathLike[str]) -> None:
        """Set the file name and save; an empty name leaves everything as it was."""
        name = os.fspath(path)
        if not name:
            return
        self.current_file = name
        self.save()

    def add_chapter(self) -> Node:
        """Add a chapter relative to the current node."""
        return self.book.add_chapter(self.current)

    def add_page(self) -> Node:
        """Add a page relative to the current node."""
        return self.book.add_page(self.current)

    def remove_current(self) -> bool:
        """Remove the current node unless it is the book root."""
        if not self.book.remove(self.current):
            return False
        self.current = None
        self.html = ""
        return True

    def title(self) -> str:
        """The window title for this session."""
        return self._title