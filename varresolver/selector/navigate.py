"""Navigation of Value trees by parsed path segments."""

import re
from typing import Iterable

from ..errors import BadPathError, NotFoundError
from ..values import Value, VMapping, VSequence
from .coercion import coerce, equal_coerced
from .paths import is_filter_token, parse_filter_token, parse_path

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def navigate(root: Value, segments: Iterable[str]) -> Value:
    """Walk *root* one segment at a time and return the value reached.

    Supported segment forms:
    - Map key: ``server`` looks up ``current["server"]``
    - Sequence index: ``0`` takes the first element
    - Sequence filter: ``[field=value]`` takes the first mapping element
      whose ``field`` equals ``value`` after coercion

    Args:
        root: Tree to walk
        segments: Raw segment tokens, typically from ``parse_path``

    Returns:
        The value at the end of the path, unchanged

    Raises:
        NotFoundError: Missing key, index out of range, no filter match,
            or a scalar reached before the path ended
        BadPathError: Malformed filter, or a token that is neither an
            index nor a filter on a sequence
    """
    current = root
    for segment in segments:
        if isinstance(current, VMapping):
            if segment not in current.items:
                raise NotFoundError(f"key {segment!r} not found")
            current = current.items[segment]

        elif isinstance(current, VSequence):
            if is_filter_token(segment):
                current = _apply_filter(current, segment)
                continue

            if not _INDEX_PATTERN.fullmatch(segment):
                raise BadPathError(f"{segment!r} is not a valid array index or filter")
            idx = int(segment)
            if idx < 0 or idx >= len(current.items):
                raise NotFoundError(f"array index {idx} out of bounds")
            current = current.items[idx]

        else:
            raise NotFoundError(f"path segment {segment!r} not found on non-container")

    return current


def _apply_filter(sequence: VSequence, token: str) -> Value:
    """Return the first mapping element of *sequence* matching *token*."""
    field, raw = parse_filter_token(token)
    want = coerce(raw)

    for element in sequence.items:
        if not isinstance(element, VMapping):
            continue
        got = element.items.get(field)
        if got is None:
            continue
        if equal_coerced(got, want):
            return element

    raise NotFoundError(f"no array element where {field}={want}")


def select(root: Value, path: str) -> Value:
    """Parse *path* and navigate *root* with it."""
    return navigate(root, parse_path(path))
