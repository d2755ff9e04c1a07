"""Environment variable resolver."""

import os

from ..errors import BadPathError, NotFoundError
from .base import BaseResolver


class EnvResolver(BaseResolver):
    """Resolve values from environment variables.

    Format: ``env:MY_ENV_VAR``
    """

    @property
    def scheme(self) -> str:
        """Return scheme prefix."""
        return "env:"

    def resolve(self, value: str) -> str:
        """Return the variable's value."""
        name = value.strip()
        if not name:
            raise BadPathError("empty environment variable name")
        if name not in os.environ:
            raise NotFoundError(f"env {name!r}")
        return os.environ[name]
