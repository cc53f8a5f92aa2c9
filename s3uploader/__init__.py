"""s3uploader: validated, gzip-encoded uploads to S3-compatible storage."""

__version__ = "0.1.0"

# Core components
from s3uploader.core.client import AioS3StorageClient, StorageClient
from s3uploader.core.exceptions import (
    S3UploaderError,
    ConfigurationError,
    ConstraintViolation,
    MimeTypeViolation,
    FileTooLargeViolation,
    TransferError,
)
from s3uploader.core.settings import S3UploaderSettings

# Storage components
from s3uploader.storage import GzipStream, S3Uploader, UploadConfig, UploadRequest

__all__ = [
    # Version
    "__version__",
    # Core
    "AioS3StorageClient",
    "StorageClient",
    "S3UploaderSettings",
    "S3UploaderError",
    "ConfigurationError",
    "ConstraintViolation",
    "MimeTypeViolation",
    "FileTooLargeViolation",
    "TransferError",
    # Storage
    "GzipStream",
    "S3Uploader",
    "UploadConfig",
    "UploadRequest",
]
