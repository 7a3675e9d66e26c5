"""Exceptions raised while resolving OneNote paths."""

from __future__ import annotations


class NoteError(Exception):
    """Base class for errors raised by onenote_kit itself."""


class InvalidArgumentError(NoteError, ValueError):
    """A notebook name, path or link option is unusable as given."""


class NotFoundError(NoteError, LookupError):
    """A name in the path has no case-insensitive match at its level.

    Attributes:
        kind: What was being looked up ('notebook', 'section group', 'section', 'page').
        name: The name that failed to resolve.
        path: The full path being resolved.
    """

    def __init__(self, kind: str, name: str, path: str = "") -> None:
        self.kind = kind
        self.name = name
        self.path = path
        if path:
            message = f"Unable to find {kind} '{name}' in path '{path}'"
        else:
            message = f"Unable to find {kind} '{name}'"
        super().__init__(message)
