"""Testing utilities for s3uploader.

This module provides an in-memory storage client, test fixtures and
helpers for code that uploads through s3uploader.

Usage in conftest.py:
    from s3uploader.testing import (
        mock_storage_client,
        create_test_settings,
        InMemoryStorageClient,
    )

    @pytest.fixture
    def storage_client():
        with mock_storage_client() as client:
            yield client

Or use provided fixtures directly:
    pytest_plugins = ["s3uploader.testing.fixtures"]
"""

from s3uploader.testing.mocks import InMemoryStorageClient, RecordedCall, mock_storage_client
from s3uploader.testing.utils import create_test_file, create_test_settings

__all__ = [
    "InMemoryStorageClient",
    "RecordedCall",
    "mock_storage_client",
    "create_test_file",
    "create_test_settings",
]
