"""Service registry: lazy, memoized key-to-service bindings."""

from typing import AbstractSet, Any, Callable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

Factory = Callable[["ServiceRegistry"], Any]


class RegistryError(RuntimeError):
    """Base class for registry failures."""


class UnknownServiceError(RegistryError, KeyError):
    """Raised when resolving a key that was never registered."""

    def __init__(self, key: str):
        super().__init__(f"Service '{key}' is not registered")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class CircularDependencyError(RegistryError):
    """Raised when a factory ends up resolving its own key."""

    def __init__(self, chain: list[str]):
        super().__init__("Circular dependency: " + " -> ".join(chain))
        self.chain = chain


class ServiceRegistry:
    """Shared registry of services keyed by string.

    Entries are either ready values or factories taking the registry.
    Factories run on first resolution and their result is cached; every
    later resolution returns the identical instance.

    Usage:
        registry = ServiceRegistry()
        registry.register("logger", lambda r: logging.getLogger("app"))
        registry.register("mailer", lambda r: Mailer(logger=r["logger"]))

        mailer = registry["mailer"]  # builds logger, then mailer
        assert registry["mailer"] is mailer

    Re-registering a key replaces its binding and drops its own cached
    instance. Services already built from the old binding keep it.
    """

    def __init__(self, values: Optional[dict[str, Any]] = None):
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}
        self._resolving: list[str] = []
        for key, value in (values or {}).items():
            self.set(key, value)

    def register(self, key: str, factory: Factory) -> None:
        """Bind ``key`` to a factory called with this registry on first use."""
        self._forget(key)
        self._factories[key] = factory
        logger.debug(f"Registered factory for '{key}'")

    def set(self, key: str, value: Any) -> None:
        """Bind ``key`` to a ready value.

        ``None`` is a valid value and marks the service as intentionally
        unconfigured.
        """
        self._forget(key)
        self._instances[key] = value
        logger.debug(f"Registered value for '{key}'")

    def unregister(self, key: str) -> None:
        """Remove any binding for ``key``."""
        self._factories.pop(key, None)
        self._instances.pop(key, None)

    def resolve(self, key: str) -> Any:
        """Return the service bound to ``key``, building it if needed.

        Raises:
            UnknownServiceError: ``key`` has no binding.
            CircularDependencyError: the factory for ``key`` depends on
                ``key`` itself, directly or transitively.
        """
        if key in self._instances:
            return self._instances[key]

        factory = self._factories.get(key)
        if factory is None:
            raise UnknownServiceError(key)

        if key in self._resolving:
            chain = self._resolving[self._resolving.index(key):] + [key]
            raise CircularDependencyError(chain)

        self._resolving.append(key)
        try:
            instance = factory(self)
        finally:
            self._resolving.pop()

        self._instances[key] = instance
        logger.debug(f"Resolved '{key}' -> {type(instance).__name__}")
        return instance

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve ``key`` if it is registered, otherwise return ``default``."""
        if key not in self:
            return default
        return self.resolve(key)

    def is_resolved(self, key: str) -> bool:
        """Whether ``key`` holds a built (or ready) instance."""
        return key in self._instances

    def keys(self) -> AbstractSet[str]:
        """All registered keys."""
        return set(self._factories) | set(self._instances)

    def _forget(self, key: str) -> None:
        if key in self._factories and key in self._instances:
            logger.warning(
                f"Overwriting '{key}' after it was resolved; "
                f"services built from it keep the previous instance"
            )
        self._factories.pop(key, None)
        self._instances.pop(key, None)

    def __getitem__(self, key: str) -> Any:
        return self.resolve(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.unregister(key)

    def __contains__(self, key: object) -> bool:
        return key in self._factories or key in self._instances

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.keys()))

    def __len__(self) -> int:
        return len(self.keys())
