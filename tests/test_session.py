import pytest

from ebookeditor.book import NodeKind
from ebookeditor.session import EditorSession


def _pages(session):
    return list(session.book.pages())


def test_initial_state():
    session = EditorSession()
    assert session.title() == "Редактор электронных книг"
    assert session.current is None
    assert len(_pages(session)) == 2


def test_select_page_loads_content():
    session = EditorSession()
    page = _pages(session)[0]
    page.content = "<p>hi</p>"
    session.select(page)
    assert session.html == "<p>hi</p>"


def test_switching_commits_previous_page():
    session = EditorSession()
    first, second = _pages(session)
    session.select(first)
    session.html = "edited"
    session.select(second)
    assert first.content == "edited"
    assert session.html == second.content


def test_select_chapter_clears_editor():
    session = EditorSession()
    session.select(_pages(session)[0])
    session.html = "text"
    chapter = session.book.roots[0].children[0]
    session.select(chapter)
    assert session.html == ""
    assert chapter.content == ""


def test_new_document():
    session = EditorSession()
    session.new_document()
    assert session.title() == "Безымянный - Редактор электронных книг"
    assert [r.title for r in session.book.roots] == ["Моя книга"]
    assert session.current_file == ""
    assert _pages(session) == []


def test_save_without_file_raises():
    session = EditorSession()
    with pytest.raises(ValueError):
        session.save()


def test_save_as_empty_name_does_nothing():
    session = EditorSession()
    session.save_as("")
    assert session.current_file == ""


def test_save_and_open_round_trip(tmp_path):
    path = tmp_path / "b.ebk"
    session = EditorSession()
    session.select(_pages(session)[1])
    session.html = "<i>body</i>"
    session.save_as(path)
    assert session.current_file == str(path)

    other = EditorSession()
    other.open(path)
    assert [p.content for p in _pages(other)] == ["", "<i>body</i>"]
    assert other.title() == f"{path} - Редактор электронных книг"
    assert other.current is None


def test_save_as_keeps_title(tmp_path):
    session = EditorSession()
    session.save_as(tmp_path / "x.ebk")
    assert session.title() == "Редактор электронных книг"


def test_open_missing_keeps_state(tmp_path):
    session = EditorSession()
    book = session.book
    with pytest.raises(FileNotFoundError):
        session.open(tmp_path / "missing.ebk")
    assert session.book is book
    assert session.current_file == ""


def test_add_chapter_and_page_follow_selection():
    session = EditorSession()
    chapter = session.book.roots[0].children[0]
    session.select(chapter)
    page = session.add_page()
    assert page.parent is chapter
    session.select(page)
    new_chapter = session.add_chapter()
    assert new_chapter.parent is chapter
    assert new_chapter.kind is NodeKind.CHAPTER


def test_remove_root_refused():
    session = EditorSession()
    session.select(session.book.roots[0])
    assert session.remove_current() is False
    assert session.current is session.book.roots[0]


def test_remove_page():
    session = EditorSession()
    page = _pages(session)[0]
    session.select(page)
    assert session.remove_current() is True
    assert session.current is None
    assert page not in _pages(session)
    assert len(_pages(session)) == 1