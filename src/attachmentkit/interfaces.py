"""Core interfaces for attachmentkit.

These define the attachment record and the persistence contract that
containers delegate to.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional
import uuid

# Display/configuration metadata for an attachable object type
Descriptor = dict[str, Any]


@dataclass
class Attachment:
    """A content record attachable to a parent entity.

    Attributes:
        id: Unique identifier (UUID by default)
        obj_type: Object-type identifier (e.g. "image", "gallery")
        title: Display title
        position: Sort position within its parent
        active: Whether the attachment is published
        metadata: Arbitrary per-record data
        attachment_type: Descriptor annotation set by a container at read
                   time. Transient: not persisted and not compared.
    """
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    obj_type: str = "attachment"
    title: str = ""
    position: int = 0
    active: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    attachment_type: Descriptor = field(default_factory=dict, compare=False, repr=False)

    def __repr__(self) -> str:
        """Concise repr for debugging."""
        return f"Attachment(id={self.id[:8]}..., obj_type='{self.obj_type}', position={self.position})"


class AttachmentFetcher(ABC):
    """Interface for retrieving the children of an attachment."""

    @abstractmethod
    def fetch(self, parent: Attachment, *args: Any, **kwargs: Any) -> list[Attachment]:
        """Return the attachments joined to ``parent``.

        Filter arguments are implementation-defined and passed through
        unchanged by callers. The returned order is significant.
        """
        pass


def empty_descriptor() -> Descriptor:
    """Descriptor used for object types missing from configuration."""
    return {}


def copy_descriptor(descriptor: Optional[Descriptor]) -> Descriptor:
    """Return a shallow copy of ``descriptor``, or an empty one."""
    if not descriptor:
        return empty_descriptor()
    return dict(descriptor)
