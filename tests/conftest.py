"""Shared fixtures for the s3uploader test suite."""

from s3uploader.testing.fixtures import (  # noqa: F401
    mock_storage,
    s3_test_bucket,
    s3uploader_settings,
    upload_config,
    uploader,
)
