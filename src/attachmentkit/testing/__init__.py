"""Testing utilities for attachmentkit."""

from .provider import ContainerProvider, build_registry
from .services import (
    Acl,
    Authenticator,
    Authorizer,
    GenericFactory,
    LocalesManager,
    MemoryCachePool,
    MetadataLoader,
    Translator,
    make_null_logger,
)
from .sources import InMemoryAttachmentSource

__all__ = [
    "ContainerProvider",
    "build_registry",
    "InMemoryAttachmentSource",
    "Acl",
    "Authenticator",
    "Authorizer",
    "GenericFactory",
    "LocalesManager",
    "MemoryCachePool",
    "MetadataLoader",
    "Translator",
    "make_null_logger",
]
