"""YAML file resolver."""

import yaml

from ..errors import BadPathError, NotFoundError, ResolverError
from ..selector import select
from ..values import Value, VMapping, VString, from_native, to_native
from .base import BaseResolver, expand_env, read_file, split_file_and_key

_DOCUMENT_END = "\n...\n"


class YamlResolver(BaseResolver):
    """Resolve a value by loading a YAML file and selecting a key path.

    Format: ``yaml:/path/file.yaml//key1.key2.keyN``. Without a key path
    the whole file is returned, trimmed. Non-string results are
    re-encoded as YAML.
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "yaml:"

    def resolve(self, value: str) -> str:
        """Load the file and return the selected value."""
        file_path, key_path = split_file_and_key(value)
        file_path = expand_env(file_path)

        if not file_path.strip():
            raise BadPathError("empty file path")

        text = read_file(file_path, "YAML")

        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ResolverError(f"failed to parse YAML in {file_path!r}", cause=e) from e

        if not key_path:
            return text.strip()

        root = from_native(content)
        # Navigation always starts from a mapping so other roots fail cleanly
        if not isinstance(root, VMapping):
            root = VMapping()

        try:
            result = select(root, key_path)
        except ResolverError as e:
            # Every navigation failure is reported as a missing key
            raise NotFoundError(f"key path {key_path!r} in YAML {file_path!r}", cause=e) from e

        if isinstance(result, VString):
            return result.value
        return _encode(result)


def _encode(value: Value) -> str:
    """Encode a non-string value as trimmed YAML text."""
    text = yaml.safe_dump(to_native(value), default_flow_style=False, sort_keys=False)
    # Scalars are emitted as a document followed by an explicit end marker
    if text.endswith(_DOCUMENT_END):
        text = text[: -len(_DOCUMENT_END)]
    return text.strip()
