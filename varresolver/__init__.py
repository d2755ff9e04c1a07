"""Resolve path expressions against value trees and expand ${...} tokens."""

from .config import ResolverConfig, build_registry, load_config, validate_config_file
from .errors import (
    BadPathError,
    ConfigError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    ResolverError,
    is_kind,
    root_cause,
)
from .interpolation import DEFAULT_MAX_PASSES, resolve_string
from .registry import (
    Registry,
    default_registry,
    new_default_registry,
    new_registry,
    register_resolver,
    resolve_slice,
    resolve_slice_best_effort,
    resolve_variable,
)
from .resolvers import (
    BaseResolver,
    EnvResolver,
    IniResolver,
    JsonResolver,
    KeyValueFileResolver,
    TomlResolver,
    YamlResolver,
)
from .selector import coerce, equal_coerced, navigate, parse_path, select
from .values import (
    Null,
    Value,
    VBool,
    VFloat,
    VInt,
    VMapping,
    VNull,
    VSequence,
    VString,
    from_native,
    to_native,
)

__all__ = [
    # Config
    "ResolverConfig",
    "build_registry",
    "load_config",
    "validate_config_file",
    # Errors
    "BadPathError",
    "ConfigError",
    "ErrorKind",
    "ForbiddenError",
    "NotFoundError",
    "ResolverError",
    "is_kind",
    "root_cause",
    # Interpolation
    "DEFAULT_MAX_PASSES",
    "resolve_string",
    # Registry
    "Registry",
    "default_registry",
    "new_default_registry",
    "new_registry",
    "register_resolver",
    "resolve_slice",
    "resolve_slice_best_effort",
    "resolve_variable",
    # Resolvers
    "BaseResolver",
    "EnvResolver",
    "IniResolver",
    "JsonResolver",
    "KeyValueFileResolver",
    "TomlResolver",
    "YamlResolver",
    # Selector
    "coerce",
    "equal_coerced",
    "navigate",
    "parse_path",
    "select",
    # Values
    "Null",
    "Value",
    "VBool",
    "VFloat",
    "VInt",
    "VMapping",
    "VNull",
    "VSequence",
    "VString",
    "from_native",
    "to_native",
]
