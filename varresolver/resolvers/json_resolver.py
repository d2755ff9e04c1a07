"""JSON file resolver."""

import json

from ..errors import ResolverError
from ..selector import select
from ..values import VString, from_native, to_native
from .base import BaseResolver, expand_env, read_file, split_file_and_key


class JsonResolver(BaseResolver):
    """Resolve a value by loading a JSON file and selecting a key path.

    Format: ``json:/path/file.json//key1.key2.keyN``. Without a key path
    the whole file is returned, trimmed.
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "json:"

    def resolve(self, value: str) -> str:
        """Load the file and return the selected value."""
        file_path, key_path = split_file_and_key(value)
        file_path = expand_env(file_path)

        text = read_file(file_path, "JSON")
        if not key_path:
            return text.strip()

        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResolverError(f"failed to parse JSON in {file_path!r}", cause=e) from e

        try:
            result = select(from_native(content), key_path)
        except ResolverError as e:
            raise e.wrap(f"key path {key_path!r} in JSON {file_path!r}") from e

        if isinstance(result, VString):
            return result.value
        return json.dumps(to_native(result), separators=(",", ":"))
