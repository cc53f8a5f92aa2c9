"""Storage utilities for s3uploader.

This module provides the uploader itself along with the gzip stream
used to encode upload bodies.
"""

from s3uploader.storage.compression import GzipStream
from s3uploader.storage.uploads import S3Uploader, UploadConfig, UploadRequest

__all__ = ["GzipStream", "S3Uploader", "UploadConfig", "UploadRequest"]
