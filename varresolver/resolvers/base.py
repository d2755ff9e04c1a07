"""Base resolver abstraction and helpers shared by file-backed resolvers."""

import os
import re
from abc import ABC, abstractmethod
from typing import Tuple

from ..errors import ForbiddenError, NotFoundError, ResolverError

KEY_DELIMITER = "//"

# Matches $VAR or ${VAR}
_ENV_PATTERN = re.compile(r"\$(?:\{([^}]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


class BaseResolver(ABC):
    """Abstract base class for scheme resolvers.

    To add a new resolver:
    1. Create a new class inheriting from BaseResolver
    2. Implement the scheme property and the resolve method
    3. Register it in resolvers/__init__.py or on a Registry
    """

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Scheme prefix including the trailing colon (e.g., 'env:')."""
        pass

    @abstractmethod
    def resolve(self, value: str) -> str:
        """Resolve a value with the scheme prefix already removed.

        Args:
            value: Text after the scheme prefix

        Returns:
            The resolved string

        Raises:
            ResolverError: If the value cannot be resolved
        """
        pass


def split_file_and_key(value: str) -> Tuple[str, str]:
    """Split ``path//key.path`` on the last ``//``.

    Returns:
        Tuple of (file_path, key_path); key_path is empty when absent
    """
    idx = value.rfind(KEY_DELIMITER)
    if idx < 0:
        return value, ""
    return value[:idx], value[idx + len(KEY_DELIMITER) :]


def expand_env(path: str) -> str:
    """Expand ``$VAR`` and ``${VAR}`` from the environment.

    Unset variables expand to the empty string.
    """

    def replace_match(match: re.Match) -> str:
        name = match.group(1) if match.group(1) is not None else match.group(2)
        return os.environ.get(name, "")

    return _ENV_PATTERN.sub(replace_match, path)


def read_file(path: str, label: str) -> str:
    """Read a text file, mapping OS failures onto resolver errors.

    Args:
        path: File to read
        label: Format name used in error messages (e.g., 'YAML')

    Raises:
        NotFoundError: If the file does not exist
        ForbiddenError: If the file cannot be read due to permissions
        ResolverError: For any other read failure
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise NotFoundError(f"{label} file {path!r}", cause=e) from e
    except PermissionError as e:
        raise ForbiddenError(f"{label} file {path!r}", cause=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResolverError(f"failed to read {label} file {path!r}", cause=e) from e
