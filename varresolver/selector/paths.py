"""Path expression parsing.

A path expression is a dotted string such as ``servers.0.host`` or
``servers.[name=example.org].port``. Dots inside ``[...]`` do not split.
"""

from typing import List, Tuple

from ..errors import BadPathError


def parse_path(path: str) -> List[str]:
    """Split a dotted path expression into raw segment tokens.

    Dots are separators unless they occur inside a bracketed filter.
    The result always has at least one element, so ``parse_path("")``
    returns ``[""]`` and a trailing dot yields a trailing empty token.
    Brackets are not balance-checked: an unclosed ``[`` keeps every
    following dot literal.

    Examples:
        "server.host"                     -> ["server", "host"]
        "servers.0.host"                  -> ["servers", "0", "host"]
        "servers.[name=example.org].ip"   -> ["servers", "[name=example.org]", "ip"]

    Args:
        path: Path expression to split

    Returns:
        List of raw segment tokens
    """
    tokens: List[str] = []
    buf: List[str] = []
    depth = 0

    for char in path:
        if char == "[":
            depth += 1
        elif char == "]":
            if depth > 0:
                depth -= 1
        elif char == "." and depth == 0:
            tokens.append("".join(buf))
            buf = []
            continue
        buf.append(char)

    tokens.append("".join(buf))
    return tokens


def is_filter_token(token: str) -> bool:
    """Report whether *token* looks like ``[field=value]``."""
    return token.startswith("[") and token.endswith("]") and "=" in token


def parse_filter_token(token: str) -> Tuple[str, str]:
    """Parse ``[field=value]`` into its field name and raw value.

    The value may be wrapped in one layer of matching single or double
    quotes, which are removed. No escape processing is done.

    Raises:
        BadPathError: If the token has no ``=`` or the field is empty
    """
    inner = token[1:] if token.startswith("[") else token
    inner = inner[:-1] if inner.endswith("]") else inner

    key, sep, value = inner.partition("=")
    if not sep:
        raise BadPathError(f"invalid filter token {token!r}")

    key = key.strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]

    if not key:
        raise BadPathError(f"empty key in filter {token!r}")
    return key, value
