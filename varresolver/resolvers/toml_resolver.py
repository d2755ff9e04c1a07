"""TOML file resolver."""

import tomllib

import tomli_w

from ..errors import ResolverError
from ..selector import select
from ..values import Value, VMapping, VString, from_native, to_native
from .base import BaseResolver, expand_env, read_file, split_file_and_key

# Wrapper key used to encode values that are not tables
_VALUE_KEY = "value"


class TomlResolver(BaseResolver):
    """Resolve a value by loading a TOML file and selecting a key path.

    Format: ``toml:/path/file.toml//key1.key2.keyN``. Without a key path
    the whole file is returned, trimmed (after checking it parses).
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "toml:"

    def resolve(self, value: str) -> str:
        """Load the file and return the selected value."""
        file_path, key_path = split_file_and_key(value)
        file_path = expand_env(file_path)

        text = read_file(file_path, "TOML")

        try:
            content = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ResolverError(f"failed to parse TOML in {file_path!r}", cause=e) from e

        if not key_path:
            return text.strip()

        try:
            result = select(from_native(content), key_path)
        except ResolverError as e:
            raise e.wrap(f"key path {key_path!r} in TOML {file_path!r}") from e

        if isinstance(result, VString):
            return result.value
        return _encode(result)


def _encode(value: Value) -> str:
    """Encode a non-string value as trimmed TOML text."""
    if isinstance(value, VMapping):
        return tomli_w.dumps(to_native(value)).strip()

    text = tomli_w.dumps({_VALUE_KEY: to_native(value)}).strip()
    prefix = f"{_VALUE_KEY} = "
    if text.startswith(prefix):
        return text[len(prefix) :]
    return text
