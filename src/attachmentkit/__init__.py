"""attachmentkit: nested attachments and registry-based service wiring.

Usage:
    from attachmentkit import AttachmentContainer, ServiceRegistry
    from attachmentkit.testing import ContainerProvider, InMemoryAttachmentSource

    registry = ServiceRegistry()
    ContainerProvider().register_base_services(registry)

    gallery = AttachmentContainer.from_registry(attachment, source, registry)
    for child in gallery.attachments(group="photos"):
        print(child.obj_type, child.attachment_type.get("label"))
"""

__version__ = "0.1.0"

from .config import AdminConfig, AppConfig, AttachmentsConfig, Deferred, resolve_first_present
from .interfaces import Attachment, AttachmentFetcher, Descriptor
from .objects import AttachmentContainer
from .registry import (
    CircularDependencyError,
    RegistryError,
    ServiceRegistry,
    UnknownServiceError,
)

__all__ = [
    "Attachment",
    "AttachmentFetcher",
    "AttachmentContainer",
    "Descriptor",
    "AppConfig",
    "AdminConfig",
    "AttachmentsConfig",
    "Deferred",
    "resolve_first_present",
    "ServiceRegistry",
    "RegistryError",
    "UnknownServiceError",
    "CircularDependencyError",
]
