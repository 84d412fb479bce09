"""Pytest fixtures for attachmentkit tests."""

import pytest

from attachmentkit import AppConfig, Attachment, AttachmentsConfig, ServiceRegistry
from attachmentkit.testing import ContainerProvider, InMemoryAttachmentSource


@pytest.fixture
def registry():
    """Provide an empty service registry."""
    return ServiceRegistry()


@pytest.fixture
def app_config(tmp_path):
    """Provide a test configuration rooted in a temporary directory."""
    config = AppConfig.for_testing(base_path=str(tmp_path))
    config.attachments = AttachmentsConfig(attachable_objects={
        "image": {"label": "Image", "icon": "picture"},
        "text": {"label": "Text", "group": "content"},
        "gallery": {"label": "Gallery", "icon": "grid"},
    })
    return config


@pytest.fixture
def provider(app_config):
    """Provide a container provider serving ``app_config``."""
    return ContainerProvider(config=app_config)


@pytest.fixture
def source():
    """Provide an empty in-memory attachment source."""
    return InMemoryAttachmentSource()


@pytest.fixture
def gallery():
    """Provide a container-type attachment record."""
    return Attachment(id="gallery-1", obj_type="gallery", title="Summer")
