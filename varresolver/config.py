"""Resolver configuration dataclass and YAML loading."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .interpolation import DEFAULT_MAX_PASSES
from .registry import Registry
from .resolvers import builtin_resolvers

CONFIG_FILENAMES = (".varresolver.yml", ".varresolver.yaml")


@dataclass
class ResolverConfig:
    """Settings for building a registry and running batch resolution."""

    max_passes: int = DEFAULT_MAX_PASSES
    schemes: Optional[List[str]] = None  # Built-in schemes to enable; None = all
    strict: bool = True  # Batch resolution stops at the first error


def _parse_config(data: Dict[str, Any]) -> ResolverConfig:
    """Validate raw YAML data and build a ResolverConfig."""
    max_passes = data.get("max_passes", DEFAULT_MAX_PASSES)
    if isinstance(max_passes, bool) or not isinstance(max_passes, int) or max_passes < 1:
        raise ConfigError("'max_passes' must be a positive integer")

    schemes = data.get("schemes")
    if isinstance(schemes, str):
        schemes = [schemes]
    if schemes is not None:
        if not isinstance(schemes, list) or not all(isinstance(s, str) for s in schemes):
            raise ConfigError("'schemes' must be a list of scheme names")
        known = {r.scheme for r in builtin_resolvers()}
        # Accept both 'env' and 'env:'
        schemes = [s if s.endswith(":") else f"{s}:" for s in schemes]
        unknown = [s for s in schemes if s not in known]
        if unknown:
            raise ConfigError(
                f"Unknown scheme(s): {', '.join(unknown)}. "
                f"Available: {', '.join(sorted(known))}"
            )

    strict = data.get("strict", True)
    if not isinstance(strict, bool):
        raise ConfigError("'strict' must be true or false")

    return ResolverConfig(max_passes=max_passes, schemes=schemes, strict=strict)


def find_config_file(directory: Path) -> Optional[Path]:
    """Return the first config file found in *directory*, if any."""
    for name in CONFIG_FILENAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_file: Optional[Path] = None, directory: Optional[Path] = None) -> ResolverConfig:
    """Load resolver configuration.

    Args:
        config_file: Explicit config file to load. Must exist.
        directory: Directory searched for a default config file when
                   config_file is None (defaults to the working directory)

    Returns:
        The parsed configuration, or defaults when no file is found

    Raises:
        FileNotFoundError: If config_file is given but does not exist
        ConfigError: If the file is not valid configuration
    """
    if config_file is None:
        config_file = find_config_file(directory or Path.cwd())
        if config_file is None:
            return ResolverConfig()
    elif not config_file.exists():
        raise FileNotFoundError(f"Config file not found at:\n  {config_file}")

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return ResolverConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML dictionary")

    return _parse_config(data)


def validate_config_file(file_path: Path) -> tuple[bool, Optional[str]]:
    """Validate a configuration file.

    Returns:
        Tuple of (is_valid, error_message). If valid, error_message is None.
    """
    if not file_path.exists():
        return False, f"File not found: {file_path}"

    if not file_path.is_file():
        return False, f"Not a file: {file_path}"

    try:
        load_config(file_path)
    except ConfigError as e:
        return False, str(e)

    return True, None


def build_registry(config: ResolverConfig) -> Registry:
    """Create a registry holding the built-in resolvers enabled by *config*."""
    registry = Registry(max_passes=config.max_passes)
    for resolver in builtin_resolvers():
        if config.schemes is None or resolver.scheme in config.schemes:
            registry.register(resolver.scheme, resolver)
    return registry
