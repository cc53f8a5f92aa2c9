"""Testing utilities for s3uploader."""

import os
from pathlib import Path

from s3uploader.core.settings import S3UploaderSettings


def create_test_settings(
    bucket_name: str = "test-bucket",
    path_prefix: str = "test/",
    **overrides
) -> S3UploaderSettings:
    """Create s3uploader settings for testing.

    Args:
        bucket_name: The S3 bucket name for tests
        path_prefix: The key prefix for tests
        **overrides: Additional settings to override

    Returns:
        S3UploaderSettings instance configured for testing
    """
    values = {
        "aws_bucket_name": bucket_name,
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
        "aws_default_region": "us-east-1",
        "aws_url": "http://localhost:4566",
        "path_prefix": path_prefix,
    }
    values.update(overrides)
    return S3UploaderSettings(_env_file=None, **values)


def create_test_file(
    directory: str | os.PathLike,
    name: str,
    size: int = 0,
    content: bytes | None = None,
) -> Path:
    """Write a file for upload tests.

    Args:
        directory: Directory to create the file in
        name: File name (its extension drives mime type detection)
        size: Number of filler bytes when no content is given
        content: Exact content to write

    Returns:
        Path of the created file
    """
    path = Path(directory) / name
    path.write_bytes(content if content is not None else b"x" * size)
    return path
