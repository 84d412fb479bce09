"""Attachment object types."""

from .container import AttachmentContainer

__all__ = ["AttachmentContainer"]
