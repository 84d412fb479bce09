"""Container attachment: an attachment that holds further attachments."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional
import logging

from ..config import AttachmentsConfig, ConfigSource, Deferred, resolve_first_present
from ..interfaces import Attachment, AttachmentFetcher, Descriptor, copy_descriptor

if TYPE_CHECKING:
    from ..registry import ServiceRegistry

logger = logging.getLogger(__name__)


class AttachmentContainer:
    """Gallery-style attachment allowing nested attachment types.

    Wraps a base attachment record and a fetcher for its children. Each
    fetched child is annotated with the descriptor of its object type,
    read from configuration at call time.

    Usage:
        container = AttachmentContainer(gallery, source, config)
        for child in container.attachments(group="photos"):
            print(child.attachment_type.get("label"))
    """

    def __init__(
        self,
        attachment: Attachment,
        fetcher: AttachmentFetcher,
        config: ConfigSource = None,
    ):
        self.attachment = attachment
        self.fetcher = fetcher
        self._config: Optional[AttachmentsConfig] = None
        self._attachable_objects: Optional[dict[str, Descriptor]] = None
        if config is not None:
            self.set_config(config)

    @classmethod
    def from_registry(
        cls,
        attachment: Attachment,
        fetcher: AttachmentFetcher,
        registry: "ServiceRegistry",
    ) -> "AttachmentContainer":
        """Create a container configured from a service registry.

        Uses ``attachments/config`` when registered, otherwise the
        ``attachments`` section of ``config``. Neither is required.
        """
        def app_attachments():
            app_config = registry.get("config")
            return getattr(app_config, "attachments", None)

        config = resolve_first_present(
            Deferred(lambda: registry.get("attachments/config")),
            Deferred(app_attachments),
        )
        return cls(attachment, fetcher, config)

    @property
    def id(self) -> str:
        return self.attachment.id

    @property
    def obj_type(self) -> str:
        return self.attachment.obj_type

    @property
    def config(self) -> AttachmentsConfig:
        """The attachments configuration (empty when none was set)."""
        if self._config is None:
            self._config = AttachmentsConfig()
        return self._config

    def set_config(self, config: ConfigSource) -> None:
        """Set the attachments configuration from a config object or mapping."""
        if config is None or isinstance(config, AttachmentsConfig):
            self._config = config
        elif isinstance(config, Mapping):
            self._config = AttachmentsConfig.from_dict(config)
        else:
            raise TypeError(
                f"Expected AttachmentsConfig or mapping, got {type(config).__name__}"
            )

    def set_attachable_objects(self, objects: Optional[Mapping[str, Descriptor]]) -> None:
        """Override the configured attachable objects for this container only.

        Pass ``None`` to fall back to the configuration again.
        """
        self._attachable_objects = dict(objects) if objects is not None else None

    def attachable_objects(self) -> dict[str, Descriptor]:
        """Map of object type to descriptor allowed inside this container.

        Returns a copy; changing it does not alter the configuration.
        """
        objects = resolve_first_present(
            self._attachable_objects,
            Deferred(lambda: self._config.attachable_objects if self._config else None),
            default={},
        )
        return dict(objects)

    def attachments(self, *args: Any, **kwargs: Any) -> list[Attachment]:
        """Retrieve the attachments of this container.

        Arguments are forwarded unchanged to the fetcher. Every result gets
        its ``attachment_type`` set to the descriptor of its object type, or
        an empty descriptor when the type is not configured.
        """
        attachables = self.attachable_objects()
        attachments = self.fetcher.fetch(self.attachment, *args, **kwargs)

        for attachment in attachments:
            descriptor = attachables.get(attachment.obj_type)
            if descriptor is None:
                logger.debug(
                    f"No descriptor for '{attachment.obj_type}' in container {self.id}"
                )
            attachment.attachment_type = copy_descriptor(descriptor)

        return attachments

    def has_attachments(self, *args: Any, **kwargs: Any) -> bool:
        """Whether any attachments match the given filters."""
        return self.num_attachments(*args, **kwargs) > 0

    def num_attachments(self, *args: Any, **kwargs: Any) -> int:
        """Count attachments matching the given filters."""
        return len(self.fetcher.fetch(self.attachment, *args, **kwargs))

    def __repr__(self) -> str:
        return f"AttachmentContainer({self.attachment!r}, types={sorted(self.attachable_objects())})"
