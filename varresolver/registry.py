"""Scheme registry dispatching ``scheme:rest`` values to resolvers."""

import threading
from typing import Iterable, List, Optional, Protocol, Tuple

from .interpolation import DEFAULT_MAX_PASSES, resolve_string as _resolve_string
from .resolvers import builtin_resolvers


class Resolver(Protocol):
    """Anything with a ``resolve(value) -> str`` method."""

    def resolve(self, value: str) -> str: ...


class Registry:
    """Ordered, thread-safe mapping of scheme prefixes to resolvers.

    Lookups use the first registered scheme that prefixes the value.
    Values without a known scheme pass through unchanged.

    Example:
        registry = new_default_registry()
        registry.resolve_variable("env:HOME")
        registry.resolve_variable("yaml:${CONFIG}//servers.[name=app].addr")
        registry.resolve_string("host=${json:/etc/app.json//server.host}")
    """

    def __init__(self, max_passes: int = DEFAULT_MAX_PASSES) -> None:
        self.max_passes = max_passes
        self._entries: List[Tuple[str, Resolver]] = []
        self._lock = threading.RLock()

    def register(self, scheme: str, resolver: Resolver) -> None:
        """Add a resolver, or replace the one already registered for *scheme*.

        Args:
            scheme: Prefix including the trailing colon (e.g., 'json:')
            resolver: Object providing ``resolve(value)``

        Raises:
            ValueError: If scheme is empty or lacks the trailing colon
        """
        if not scheme or not scheme.endswith(":"):
            raise ValueError(f"Invalid scheme {scheme!r}: must end with ':'")

        with self._lock:
            for i, (existing, _) in enumerate(self._entries):
                if existing == scheme:
                    self._entries[i] = (scheme, resolver)
                    return
            self._entries.append((scheme, resolver))

    def unregister(self, scheme: str) -> bool:
        """Remove *scheme*. Returns True if it was registered."""
        with self._lock:
            for i, (existing, _) in enumerate(self._entries):
                if existing == scheme:
                    del self._entries[i]
                    return True
        return False

    def get(self, scheme: str) -> Optional[Resolver]:
        """Return the resolver registered for *scheme*, if any."""
        with self._lock:
            for existing, resolver in self._entries:
                if existing == scheme:
                    return resolver
        return None

    def schemes(self) -> List[str]:
        """List registered schemes in lookup order."""
        with self._lock:
            return [scheme for scheme, _ in self._entries]

    def resolve_variable(self, value: str) -> str:
        """Resolve *value* with the resolver whose scheme prefixes it.

        The resolver receives the value with the prefix removed. If no
        scheme matches, *value* is returned unchanged.
        """
        with self._lock:
            entries = list(self._entries)

        for scheme, resolver in entries:
            if value.startswith(scheme):
                return resolver.resolve(value[len(scheme) :])
        return value

    def resolve_string(self, text: str, max_passes: Optional[int] = None) -> str:
        """Expand ``${...}`` tokens in *text* through this registry."""
        passes = self.max_passes if max_passes is None else max_passes
        return _resolve_string(text, self.resolve_variable, passes)

    def resolve_slice(self, values: Iterable[str]) -> List[str]:
        """Resolve every value, stopping at the first error.

        Raises:
            Exception: The first resolver failure; no partial list is returned
        """
        return [self.resolve_variable(value) for value in values]

    def resolve_slice_best_effort(
        self, values: Iterable[str]
    ) -> Tuple[List[str], List[Exception]]:
        """Resolve every value, collecting errors instead of stopping.

        Returns:
            Tuple of (outputs, errors). outputs has one entry per input;
            entries that failed keep their original text.
        """
        outputs: List[str] = []
        errors: List[Exception] = []
        for value in values:
            try:
                outputs.append(self.resolve_variable(value))
            except Exception as e:
                errors.append(e)
                outputs.append(value)
        return outputs, errors


def new_registry(max_passes: int = DEFAULT_MAX_PASSES) -> Registry:
    """Create an empty registry."""
    return Registry(max_passes=max_passes)


def new_default_registry(max_passes: int = DEFAULT_MAX_PASSES) -> Registry:
    """Create a registry with the built-in resolvers."""
    registry = Registry(max_passes=max_passes)
    for resolver in builtin_resolvers():
        registry.register(resolver.scheme, resolver)
    return registry


_default_registry = new_default_registry()


def default_registry() -> Registry:
    """Return the process-wide default registry."""
    return _default_registry


def register_resolver(scheme: str, resolver: Resolver) -> None:
    """Add or replace a resolver in the default registry."""
    _default_registry.register(scheme, resolver)


def resolve_variable(value: str) -> str:
    """Resolve *value* with the default registry.

    Examples:
        resolve_variable("env:HOME")
        resolve_variable("json:/cfg/app.json//server.host")
        resolve_variable("yaml:${CONFIG}//servers.0.addr")
        resolve_variable("file:/etc/app.conf//USERNAME")
    """
    return _default_registry.resolve_variable(value)


def resolve_string(text: str, max_passes: Optional[int] = None) -> str:
    """Expand ``${...}`` tokens in *text* with the default registry."""
    return _default_registry.resolve_string(text, max_passes)


def resolve_slice(values: Iterable[str]) -> List[str]:
    """Resolve every value with the default registry, stopping at the first error."""
    return _default_registry.resolve_slice(values)


def resolve_slice_best_effort(values: Iterable[str]) -> Tuple[List[str], List[Exception]]:
    """Resolve every value with the default registry, collecting errors."""
    return _default_registry.resolve_slice_best_effort(values)
