"""Validated, gzip-compressed uploads to S3."""

import logging
import mimetypes
import os
import posixpath
import re
from dataclasses import dataclass
from typing import Any, BinaryIO, Mapping, Union

from s3uploader.core.client import StorageClient
from s3uploader.core.exceptions import (
    ConfigurationError,
    ConstraintViolation,
    FileTooLargeViolation,
    MimeTypeViolation,
)
from s3uploader.storage.compression import GzipStream

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_ENCODING = "gzip"
PUBLIC_READ_ACL = "public-read"

_EXTENSION_RE = re.compile(r"\.\w+\Z", re.ASCII)

MimeMatcher = Union[str, re.Pattern[str]]

# Option names accepted by UploadConfig.from_options, mapped to field names
_OPTION_ALIASES = {
    "pathPrefix": "path_prefix",
    "bucket": "bucket",
    "acceptedMimeTypes": "accepted_mime_types",
    "maxFileSize": "max_file_size",
}


def guess_mime_type(path: str) -> str:
    """Resolve a mime type from a file name, defaulting to octet-stream."""
    return mimetypes.guess_type(path)[0] or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class UploadConfig:
    """Configuration for file uploads.

    Unset or empty values fall back to the defaults below.

    Attributes:
        path_prefix: Prefix joined in front of every upload key
        bucket: Target bucket name
        accepted_mime_types: Substrings or compiled patterns a file's mime
            type must match (empty accepts any type)
        max_file_size: Maximum file size in bytes (0 for unlimited)
    """

    path_prefix: str = ""
    bucket: str = ""
    accepted_mime_types: tuple[MimeMatcher, ...] = ()
    max_file_size: int = 0

    def __post_init__(self):
        # frozen, so defaults are applied through object.__setattr__
        object.__setattr__(self, "path_prefix", self.path_prefix or "")
        object.__setattr__(self, "bucket", self.bucket or "")
        accepted = self.accepted_mime_types or ()
        if isinstance(accepted, (str, re.Pattern)):
            accepted = (accepted,)
        object.__setattr__(self, "accepted_mime_types", tuple(accepted))
        object.__setattr__(self, "max_file_size", self.max_file_size or 0)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "UploadConfig":
        """Build a config from an options mapping.

        Both field names (``path_prefix``) and option names (``pathPrefix``)
        are recognized. Unknown keys are ignored.

        Args:
            options: Mapping of option names to values

        Returns:
            UploadConfig instance
        """
        values = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in _OPTION_ALIASES.values():
                values[name] = value
        return cls(**values)


@dataclass
class UploadRequest:
    """A single stream upload.

    Attributes:
        stream: Binary readable (or raw bytes) holding the content
        path: Destination key, relative to the configured prefix
        content_type: Declared mime type (octet-stream if omitted)
        ext: Extension appended when ``path`` has none
    """

    stream: BinaryIO | bytes
    path: str
    content_type: str | None = None
    ext: str | None = None


class S3Uploader:
    """Uploads local files and streams to S3, gzip encoded and public-read.

    Files are checked against the configured mime types and size limit
    before any network call. The storage client is injected and owned by
    the caller.

    Example:
        uploader = S3Uploader(client, UploadConfig(
            bucket="media",
            path_prefix="uploads/",
            accepted_mime_types=["image/"],
            max_file_size=5 * 1024 * 1024,
        ))

        result = await uploader.upload_file("/tmp/photo.jpg", "photos/photo")
        await uploader.delete_object("uploads/photos/photo")
    """

    def __init__(
        self,
        client: StorageClient,
        config: UploadConfig | Mapping[str, Any] | None = None,
    ):
        """Initialize the uploader.

        Args:
            client: Storage client performing the actual transfers
            config: UploadConfig, or a mapping of upload options

        Raises:
            ConfigurationError: If no client is given
        """
        if client is None:
            raise ConfigurationError("S3Uploader: client parameter is required")
        self._client = client

        if isinstance(config, UploadConfig):
            self._config = config
        else:
            self._config = UploadConfig.from_options(config)

    @property
    def config(self) -> UploadConfig:
        return self._config

    @property
    def client(self) -> StorageClient:
        return self._client

    def _matches_mime_type(self, mime_type: str) -> bool:
        for matcher in self._config.accepted_mime_types:
            if isinstance(matcher, str):
                if matcher in mime_type:
                    return True
            elif matcher.search(mime_type) is not None:
                return True
        return False

    def check_constraints(self, local_path: str | os.PathLike) -> ConstraintViolation | None:
        """Check a local file against the configured constraints.

        Args:
            local_path: Path of the file to check

        Returns:
            The first violation found, or None if the file is acceptable
        """
        path = os.fspath(local_path)

        if self._config.accepted_mime_types:
            mime_type = guess_mime_type(path)
            if not self._matches_mime_type(mime_type):
                logger.debug(f"Rejected {path}: mime type {mime_type} not accepted")
                return MimeTypeViolation(path, mime_type, self._config.accepted_mime_types)

        if self._config.max_file_size > 0:
            size = os.stat(path).st_size
            if size > self._config.max_file_size:
                logger.debug(f"Rejected {path}: {size} bytes exceeds limit")
                return FileTooLargeViolation(path, size, self._config.max_file_size)

        return None

    def build_key(self, destination_key: str, ext: str | None = None) -> str:
        """Compute the final object key for a destination path.

        Args:
            destination_key: Key relative to the configured prefix
            ext: Extension to append if ``destination_key`` has none

        Returns:
            The full S3 key
        """
        key = posixpath.join(self._config.path_prefix, destination_key.lstrip("/"))
        if key:
            key = posixpath.normpath(key)
            # normpath keeps a doubled leading slash
            if key.startswith("//"):
                key = "/" + key.lstrip("/")
        if destination_key.endswith("/") and not key.endswith("/"):
            key += "/"

        if ext and not _EXTENSION_RE.search(destination_key):
            key += "." + ext.lstrip(".")
        return key

    async def upload_file(
        self,
        local_path: str | os.PathLike,
        destination_key: str,
        ext: str | None = None,
    ) -> dict[str, Any]:
        """Validate and upload a local file.

        Args:
            local_path: Path of the file to upload
            destination_key: Key relative to the configured prefix
            ext: Extension to append if ``destination_key`` has none

        Returns:
            Whatever the storage client returned

        Raises:
            MimeTypeViolation: If the file's mime type is not accepted
            FileTooLargeViolation: If the file exceeds the size limit
        """
        violation = self.check_constraints(local_path)
        if violation is not None:
            raise violation

        path = os.fspath(local_path)
        with open(path, "rb") as stream:
            return await self.upload_stream(
                UploadRequest(
                    stream=stream,
                    path=destination_key,
                    content_type=guess_mime_type(path),
                    ext=ext,
                )
            )

    async def upload_stream(
        self,
        request: UploadRequest | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Gzip and upload a stream.

        Accepts either an UploadRequest or its fields as keyword arguments.

        Args:
            request: The upload to perform
            **kwargs: UploadRequest fields, used when ``request`` is omitted

        Returns:
            Whatever the storage client returned
        """
        if request is None:
            request = UploadRequest(**kwargs)

        key = self.build_key(request.path, request.ext)
        content_type = request.content_type or DEFAULT_CONTENT_TYPE
        body = GzipStream(request.stream)

        logger.debug(f"Uploading s3://{self._config.bucket}/{key} ({content_type})")
        try:
            return await self._client.upload(
                self._config.bucket,
                key,
                body,
                content_type,
                CONTENT_ENCODING,
                PUBLIC_READ_ACL,
            )
        finally:
            body.close()

    async def delete_object(self, destination_key: str) -> dict[str, Any]:
        """Delete an object by its exact key.

        No prefix is applied; pass the full key.

        Args:
            destination_key: The S3 key to delete

        Returns:
            Whatever the storage client returned
        """
        logger.debug(f"Deleting s3://{self._config.bucket}/{destination_key}")
        return await self._client.delete(self._config.bucket, destination_key)
