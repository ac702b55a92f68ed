# ebookeditor

The model behind a small e-book editor. A book is a tree: the book item at the
root holds chapters, and chapters hold pages. Each page keeps its content as an
HTML string. Books are stored in binary `.ebk` files.

## Installing

```
pip install .
```

## Modules

- `ebookeditor.book`: `NodeKind` (`book`, `chapter`, `page`), `Node` and `Book`.
  `Book.add_chapter(current)` and `Book.add_page(current)` add a new item. When
  `current` is a page, the new item goes next to it under the same parent.
  Otherwise it goes under `current`, or at the top level when `current` is
  `None`. `Book.remove(node)` removes a node with its subtree. It refuses the
  first top-level item and returns `False` for it. `Book.pages()` yields every
  page in tree order. `default_book()` gives a book with one chapter and two
  empty pages. `empty_book()` gives a book holding only its root.
- `ebookeditor.ebkformat`: `dump(book, fp)` and `load(fp)` work on binary
  streams. `save_file(book, path)` and `load_file(path)` work on files. The
  format is big-endian. It starts with a 32-bit count of top-level items. Each
  item follows with its title and kind, then the content for pages, then a
  child count and the children. Strings are stored as a byte length followed
  by UTF-16BE data.
- `ebookeditor.datastream`: the binary primitives `write_int32`, `read_int32`,
  `write_qstring` and `read_qstring`. Truncated or malformed data raises
  `DataStreamError`.
- `ebookeditor.search`: `find(text, needle, position, backward)` is a
  case-insensitive search that returns a `Match(start, end)` or `None`.
  `find_wrapping(...)` searches the same way but restarts from the far end when
  nothing is found. It returns the match and whether the search wrapped.
- `ebookeditor.session`: `EditorSession` holds the open book, the selected
  node, the HTML being edited and the current file name. It has `select`,
  `commit`, `new_document`, `open`, `save`, `save_as`, `add_chapter`,
  `add_page`, `remove_current` and `title`. `save()` without a file name raises
  `ValueError`.

## Example

```python
from ebookeditor.book import default_book
from ebookeditor.ebkformat import save_file, load_file
from ebookeditor.search import find_wrapping
from ebookeditor.session import EditorSession

book = default_book()
save_file(book, "my.ebk")
again = load_file("my.ebk")

match, wrapped = find_wrapping("one two one", "one", position=4, backward=False)

session = EditorSession()
page = session.add_page()
session.select(page)
session.html = "<p>Hello</p>"
session.save_as("book.ebk")
```

## What it does not do

The package has no window and no command to start one. It does not convert or
render rich text, so bold, italic and underline formatting is not handled. Page
content is stored and returned as an HTML string, exactly as it was given.

## Running the tests

```
pip install .[test]
pytest
```