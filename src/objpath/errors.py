from __future__ import annotations

import enum


class ObjPathError(Exception):
    """Base exception for objpath errors."""


class ObjPathConfigError(ObjPathError, ValueError):
    """Raised when an ``OBJPATH_*`` environment variable cannot be parsed."""


class PathErrorKind(str, enum.Enum):
    MEMBER_NOT_FOUND = "member_not_found"
    INVALID_INDEX = "invalid_index"
    COERCION_FAILURE = "coercion_failure"
    INVALID_LITERAL_SYNTAX = "invalid_literal_syntax"


class InvalidObjectPathError(ObjPathError):
    """Raised when a path expression cannot be resolved or converted.

    ``path`` is always the full path expression the caller passed in, never
    the unresolved remainder.
    """

    def __init__(self, message: str, *, kind: PathErrorKind, path: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = path


__all__ = [
    "InvalidObjectPathError",
    "ObjPathConfigError",
    "ObjPathError",
    "PathErrorKind",
]
