"""Case-insensitive text search with wrap-around, as in the editor's find bar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """A found occurrence: ``text[start:end]``."""

    start: int
    end: int


def _fold(text: str) -> str:
    # Lower-case one character at a time so that offsets stay aligned.
    return "".join(ch.lower()[:1] for ch in text)


def find(text: str, needle: str, position: int = 0, backward: bool = False) -> Match | None:
    """Find ``needle`` ignoring case.

    Forward search returns the first occurrence starting at or after
    ``position``; backward search the last one starting before it.
    """
    if not needle:
        return None
    haystack, folded = _fold(text), _fold(needle)
    if backward:
        if position <= 0:
            return None
        start = haystack.rfind(folded, 0, position - 1 + len(folded))
    else:
        start = haystack.find(folded, max(position, 0))
    if start < 0:
        return None
    return Match(start, start + len(needle))


def find_wrapping(
    text: str, needle: str, position: int = 0, backward: bool = False
) -> tuple[Match | None, bool]:
    """Search like :func:`find`, restarting from the far end when nothing is found.

    Returns the match and whether the search wrapped around.
    """
    if not needle:
        return None, False
    match = find(text, needle, position, backward)
    if match is not None:
        return match, False
    restart = len(text) if backward else 0
    return find(text, needle, restart, backward), True