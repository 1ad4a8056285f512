"""Path expression tokenizer.

Splits ``"Items[0].Name"`` or ``'["my.key"].value'`` into raw segment strings.
Segments carry no kind: whether ``"0"`` is an index or a key is decided when
the path is resolved against a concrete value.
"""

from __future__ import annotations

from .errors import InvalidObjectPathError, PathErrorKind

_QUOTES = ("'", '"')


def tokenize(path: str | None, *, strict: bool = False) -> tuple[str, ...]:
    """Split ``path`` into segments.

    Empty segments are never emitted, so leading, trailing and repeated dots
    as well as ``[]`` are folded away. An unterminated quoted literal runs to
    the end of the string unless ``strict`` is set, in which case an
    ``InvalidObjectPathError`` is raised.

    >>> tokenize("Items[0].Name")
    ('Items', '0', 'Name')
    >>> tokenize('["my.key"].value')
    ('my.key', 'value')
    """
    if not path:
        return ()

    segments: list[str] = []
    current: list[str] = []
    length = len(path)
    i = 0

    def flush() -> None:
        if current:
            segments.append("".join(current))
            current.clear()

    while i < length:
        char = path[i]

        if char == ".":
            flush()
            i += 1
            continue

        if char == "]":
            i += 1
            continue

        if char != "[":
            current.append(char)
            i += 1
            continue

        flush()
        i += 1

        if i < length and path[i] in _QUOTES:
            quote = path[i]
            start = i
            i += 1
            while i < length and path[i] != quote:
                if path[i] == "\\" and i + 1 < length:
                    i += 1
                current.append(path[i])
                i += 1
            if i >= length and strict:
                raise InvalidObjectPathError(
                    f"Unterminated quoted literal starting at position {start} "
                    f"in path '{path}'.",
                    kind=PathErrorKind.INVALID_LITERAL_SYNTAX,
                    path=path,
                )
            if i < length:
                i += 1
            if i < length and path[i] == "]":
                i += 1
        else:
            while i < length and path[i] != "]":
                current.append(path[i])
                i += 1
            if i < length:
                i += 1

        flush()

    flush()
    return tuple(segments)


__all__ = ["tokenize"]
