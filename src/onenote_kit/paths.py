"""Parse slash-delimited OneNote paths and match names against listings.

A path names a section ("Group/Subgroup/Section") or a page
("Group/Section/Page") relative to a notebook. Callers that need names
containing '/' can pass a list of segments instead of a string.
"""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from .errors import InvalidArgumentError

SEPARATOR = "/"

T = TypeVar("T")


def split_path(path: str) -> list[str]:
    """Split a delimited path into name segments.

    Surrounding whitespace and leading/trailing separators are ignored.
    An empty segment in the middle ("a//b") is rejected.
    """
    if path is None or not path.strip():
        raise InvalidArgumentError("path must not be blank")

    trimmed = path.strip().strip(SEPARATOR)
    if not trimmed:
        raise InvalidArgumentError(f"path '{path}' has no names in it")

    segments = trimmed.split(SEPARATOR)
    if any(not seg.strip() for seg in segments):
        raise InvalidArgumentError(f"path '{path}' contains an empty segment")
    return segments


def as_segments(path: str | Sequence[str]) -> list[str]:
    """Normalize a path string or a pre-split sequence to a list of names."""
    if isinstance(path, str) or path is None:
        return split_path(path)

    segments = list(path)
    if not segments:
        raise InvalidArgumentError("path must contain at least one name")
    for seg in segments:
        if not isinstance(seg, str) or not seg.strip():
            raise InvalidArgumentError(f"path segment {seg!r} is not a usable name")
    return segments


def require_segments(segments: Sequence[str], minimum: int, kind: str) -> None:
    """Raise if there are too few segments to name a `kind`."""
    if len(segments) < minimum:
        raise InvalidArgumentError(
            f"a {kind} path needs at least {minimum} name(s), got {len(segments)}: "
            f"'{join_path(segments)}'"
        )


def join_path(segments: Iterable[str]) -> str:
    return SEPARATOR.join(segments)


def names_match(left: str | None, right: str | None) -> bool:
    """Case-insensitive, whole-name comparison, one character at a time.

    Characters are compared one to one, so 'Straße' and 'STRASSE' differ.
    """
    if left is None or right is None:
        return False
    if len(left) != len(right):
        return False
    return all(a == b or a.lower() == b.lower() for a, b in zip(left, right))


def first_match(items: Iterable[T], name: str, attr: str) -> T | None:
    """Return the first item whose `attr` matches `name`.

    Listing order decides between siblings that share a name.
    """
    for item in items:
        if names_match(getattr(item, attr, None), name):
            return item
    return None
