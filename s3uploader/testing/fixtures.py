"""Pytest fixtures for s3uploader testing.

To use these fixtures, add to your conftest.py:

    pytest_plugins = ["s3uploader.testing.fixtures"]

Or import specific fixtures:

    from s3uploader.testing.fixtures import mock_storage, uploader
"""

import pytest

from s3uploader.core.settings import S3UploaderSettings
from s3uploader.storage.uploads import S3Uploader, UploadConfig
from s3uploader.testing.mocks import InMemoryStorageClient
from s3uploader.testing.utils import create_test_settings


@pytest.fixture
def s3uploader_settings() -> S3UploaderSettings:
    """Provide test settings for s3uploader."""
    return create_test_settings()


@pytest.fixture
def s3_test_bucket() -> str:
    """Provide test bucket name."""
    return "test-bucket"


@pytest.fixture
def mock_storage() -> InMemoryStorageClient:
    """Provide an in-memory storage client.

    Returns:
        InMemoryStorageClient instance
    """
    client = InMemoryStorageClient()
    yield client
    client.clear()


@pytest.fixture
def upload_config(s3_test_bucket: str) -> UploadConfig:
    """Provide an unconstrained upload config for the test bucket."""
    return UploadConfig(bucket=s3_test_bucket)


@pytest.fixture
def uploader(
    mock_storage: InMemoryStorageClient,
    upload_config: UploadConfig,
) -> S3Uploader:
    """Provide an uploader wired to the in-memory client.

    Override ``upload_config`` in a test module to change its constraints.
    """
    return S3Uploader(mock_storage, upload_config)
