"""Plain ``KEY=VALUE`` file resolver."""

from typing import Optional, Tuple

from ..errors import BadPathError, NotFoundError
from .base import BaseResolver, expand_env, read_file, split_file_and_key

_BOM = "\ufeff"

_DOUBLE_QUOTE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


class KeyValueFileResolver(BaseResolver):
    """Resolve a key from a dotenv-style ``KEY=VALUE`` text file.

    Format: ``file:/path/file.txt//KEY``, or ``file:/path/file.txt`` for the
    whole file content.
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "file:"

    def resolve(self, value: str) -> str:
        """Return the value of the requested key, or the whole file."""
        file_path, key = split_file_and_key(value)
        file_path = expand_env(file_path)

        if not file_path.strip():
            raise BadPathError("empty file path")
        if not key and value.endswith("//"):
            raise BadPathError(f"empty key after // in {value!r}")

        text = read_file(file_path, "key/value")

        if not key:
            return _strip_bom(text).strip()

        for line in _strip_bom(text).splitlines():
            parsed = parse_kv(line)
            if parsed is not None and parsed[0] == key:
                return parsed[1]

        raise NotFoundError(f"key {key!r} in {file_path!r}")


def parse_kv(line: str) -> Optional[Tuple[str, str]]:
    """Parse one ``[export ]KEY = VALUE [# comment]`` line.

    Returns:
        Tuple of (key, value), or None for blank, comment or invalid lines
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export ") :].strip()

    key, sep, val = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None

    val = _cut_inline_comment(val.strip())
    return key, _unquote(val).strip()


def _cut_inline_comment(text: str) -> str:
    """Drop a trailing ``# comment`` that is unquoted and preceded by whitespace."""
    in_single = in_double = False
    seen_space = True
    for i, char in enumerate(text):
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        elif char == "#" and not in_single and not in_double and seen_space:
            return text[:i].strip()
        seen_space = char.isspace()
    return text.strip()


def _unquote(text: str) -> str:
    """Remove matching surrounding quotes, unescaping double-quoted text."""
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return _unescape_double_quoted(text[1:-1])
    if len(text) >= 2 and text[0] == text[-1] == "'":
        return text[1:-1].replace("\\'", "'")
    return text


def _unescape_double_quoted(text: str) -> str:
    out = []
    escape = False
    for char in text:
        if escape:
            # Unknown escapes keep the character as-is
            out.append(_DOUBLE_QUOTE_ESCAPES.get(char, char))
            escape = False
        elif char == "\\":
            escape = True
        else:
            out.append(char)
    if escape:
        out.append("\\")
    return "".join(out)


def _strip_bom(text: str) -> str:
    return text[len(_BOM) :] if text.startswith(_BOM) else text
