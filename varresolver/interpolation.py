"""Expansion of ``${...}`` tokens embedded in strings.

Each token's content (the text between ``${`` and ``}``) is handed to a
resolve callable, conventionally as ``scheme:rest``. Replacement text may
itself contain tokens, which are expanded on the next pass.

Syntax:
- ``${scheme:rest}``: replaced by ``resolve("scheme:rest")``
- ``\\${``: emits a literal ``${`` (the backslash is dropped)
- ``$`` not followed by ``{``: literal
"""

from typing import Callable, List, Tuple

from .errors import BadPathError, ResolverError

DEFAULT_MAX_PASSES = 8

ResolveFunc = Callable[[str], str]


def resolve_string(
    text: str,
    resolve: ResolveFunc,
    max_passes: int = DEFAULT_MAX_PASSES,
) -> str:
    """Replace ``${...}`` tokens in *text* using *resolve*.

    Passes are repeated while the previous pass expanded at least one
    token, up to *max_passes*. Escapes alone do not trigger another pass.

    Args:
        text: String containing ``${...}`` tokens
        resolve: Callable mapping token content to replacement text
        max_passes: Upper bound on expansion passes

    Returns:
        The fully expanded string

    Raises:
        BadPathError: Missing ``}``, an empty token, or tokens still present
            after *max_passes* passes (a cycle or too-deep nesting)
        ResolverError: A resolver failure, wrapped with the token content
    """
    out = text

    for _ in range(max_passes):
        out, expanded = _expand_once(out, resolve)
        if not expanded:
            return out

    if "${" in out:
        raise BadPathError("interpolation depth exceeded")
    return out


def _expand_once(text: str, resolve: ResolveFunc) -> Tuple[str, bool]:
    """Run a single left-to-right pass over *text*.

    Returns:
        Tuple of (output, expanded) where expanded is True if any token
        was replaced by its resolved value
    """
    parts: List[str] = []
    expanded = False
    pos = 0
    length = len(text)

    while pos < length:
        dollar = text.find("$", pos)
        if dollar < 0:
            parts.append(text[pos:])
            break

        if _is_escaped_dollar_brace(text, pos, dollar):
            parts.append(text[pos : dollar - 1])
            parts.append("${")
            pos = dollar + 2
            continue

        parts.append(text[pos:dollar])

        if not _is_token_start(text, dollar):
            parts.append("$")
            pos = dollar + 1
            continue

        start, end = _token_bounds(text, dollar)
        token = text[start:end]

        try:
            value = resolve(token)
        except ResolverError as e:
            raise e.wrap(f"resolve ${{{token}}}") from e
        except Exception as e:
            raise ResolverError(f"resolve ${{{token}}}", cause=e) from e

        parts.append(value)
        pos = end + 1
        expanded = True

    return "".join(parts), expanded


def _is_escaped_dollar_brace(text: str, pos: int, dollar: int) -> bool:
    """Report whether the ``$`` at *dollar* is part of an unconsumed ``\\${``."""
    return (
        dollar > pos
        and text[dollar - 1] == "\\"
        and dollar + 1 < len(text)
        and text[dollar + 1] == "{"
    )


def _is_token_start(text: str, dollar: int) -> bool:
    return dollar + 1 < len(text) and text[dollar + 1] == "{"


def _token_bounds(text: str, dollar: int) -> Tuple[int, int]:
    """Return ``[start, end)`` of the token content after ``${`` at *dollar*.

    Raises:
        BadPathError: If there is no closing brace or the content is blank
    """
    start = dollar + 2
    end = text.find("}", start)
    if end < 0:
        raise BadPathError(f"missing closing '}}' at offset {dollar}")
    if not text[start:end].strip():
        raise BadPathError(f"empty ${{}} at offset {dollar}")
    return start, end
