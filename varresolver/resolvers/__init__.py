"""Built-in scheme resolvers."""

from typing import List

from .base import BaseResolver, expand_env, read_file, split_file_and_key
from .env_resolver import EnvResolver
from .file_resolver import KeyValueFileResolver
from .ini_resolver import IniResolver
from .json_resolver import JsonResolver
from .toml_resolver import TomlResolver
from .yaml_resolver import YamlResolver


def builtin_resolvers() -> List[BaseResolver]:
    """Return fresh instances of the built-in resolvers in registration order."""
    return [
        EnvResolver(),
        JsonResolver(),
        YamlResolver(),
        TomlResolver(),
        IniResolver(),
        KeyValueFileResolver(),
    ]


__all__ = [
    "BaseResolver",
    "EnvResolver",
    "IniResolver",
    "JsonResolver",
    "KeyValueFileResolver",
    "TomlResolver",
    "YamlResolver",
    "builtin_resolvers",
    "expand_env",
    "read_file",
    "split_file_and_key",
]
