"""Application and attachments configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

import yaml

from .interfaces import Descriptor

DEFAULT_CONFIG_PATH = "~/.attachmentkit/config.yaml"


class Deferred:
    """Marks a zero-argument lookup for :func:`resolve_first_present`."""

    def __init__(self, lookup: Callable[[], Any]):
        self.lookup = lookup

    def __call__(self) -> Any:
        return self.lookup()


def resolve_first_present(*candidates: Any, default: Any = None) -> Any:
    """Return the first candidate that is not ``None``.

    :class:`Deferred` candidates are invoked in order, and only until a
    value is found. Any other candidate, callables included, is returned
    as-is.

    Example:
        resolve_first_present(override, Deferred(lambda: config.attachments), default={})
    """
    for candidate in candidates:
        value = candidate() if isinstance(candidate, Deferred) else candidate
        if value is not None:
            return value
    return default


@dataclass
class AttachmentsConfig:
    """Attachments module configuration.

    Attributes:
        attachable_objects: Map of object-type identifier to its descriptor
            (label, icon, group) shown when picking an attachment type.
    """
    attachable_objects: dict[str, Descriptor] = field(default_factory=dict)

    def __post_init__(self):
        for obj_type, descriptor in self.attachable_objects.items():
            if not isinstance(descriptor, Mapping):
                raise ValueError(
                    f"Descriptor for '{obj_type}' must be a mapping, "
                    f"got {type(descriptor).__name__}"
                )

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "AttachmentsConfig":
        """Create configuration from dictionary."""
        data = data or {}
        objects = data.get("attachable_objects") or {}
        return cls(attachable_objects=dict(objects))


@dataclass
class AdminConfig:
    """Admin module configuration."""
    base_path: str = "admin"
    theme: str = "default"


@dataclass
class AppConfig:
    """Full application configuration.

    Attributes:
        base_path: Root directory used to resolve views and metadata
        apis: Third-party API credentials, nested by vendor then service
        attachments: Attachments module configuration
        debug: Enable debug logging
    """
    base_path: str = "."
    apis: dict[str, Any] = field(default_factory=dict)
    attachments: AttachmentsConfig = field(default_factory=AttachmentsConfig)
    debug: bool = False

    def __post_init__(self):
        if isinstance(self.attachments, Mapping):
            self.attachments = AttachmentsConfig.from_dict(self.attachments)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AppConfig":
        """Load configuration from YAML file."""
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create configuration from dictionary."""
        return cls(
            base_path=data.get("base_path", "."),
            apis=data.get("apis", {}) or {},
            attachments=AttachmentsConfig.from_dict(data.get("attachments")),
            debug=bool(data.get("debug", False)),
        )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from the file named by ATTACHMENTKIT_CONFIG."""
        config_path = os.environ.get("ATTACHMENTKIT_CONFIG", DEFAULT_CONFIG_PATH)
        return cls.from_file(config_path)

    @classmethod
    def for_testing(cls, base_path: Optional[str] = None) -> "AppConfig":
        """Create a configuration suitable for testing.

        Carries dummy reCAPTCHA keys so code reading ``apis`` has values.
        """
        if base_path is None:
            base_path = str(Path(__file__).resolve().parents[2])
        return cls(
            base_path=base_path,
            apis={
                "google": {
                    "recaptcha": {
                        "public_key": "foobar",
                        "private_key": "bazqux",
                    }
                }
            },
        )

    def api(self, *keys: str, default: Any = None) -> Any:
        """Look up a nested value in ``apis``, e.g. ``api("google", "recaptcha")``."""
        node: Any = self.apis
        for key in keys:
            if not isinstance(node, Mapping) or key not in node:
                return default
            node = node[key]
        return node

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.base_path or not str(self.base_path).strip():
            errors.append("base_path cannot be empty")

        for obj_type, descriptor in self.attachments.attachable_objects.items():
            if not descriptor.get("label"):
                errors.append(f"attachments.attachable_objects.{obj_type} has no label")

        return errors


ConfigSource = Union[AttachmentsConfig, Mapping, None]
