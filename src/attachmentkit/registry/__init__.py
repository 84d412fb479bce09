"""Service Registry.

Lazy, memoized service bindings shared by application and test wiring.
"""

from .registry import (
    CircularDependencyError,
    Factory,
    RegistryError,
    ServiceRegistry,
    UnknownServiceError,
)

__all__ = [
    "ServiceRegistry",
    "Factory",
    "RegistryError",
    "UnknownServiceError",
    "CircularDependencyError",
]
