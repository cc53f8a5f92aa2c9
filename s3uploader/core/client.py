"""Storage client protocol and the aiobotocore-backed implementation."""

import asyncio
import logging
from contextlib import AsyncExitStack
from typing import Any, BinaryIO, Protocol, runtime_checkable

from aiobotocore.client import AioBaseClient
from aiobotocore.session import get_session
from botocore.config import Config
from botocore.exceptions import ClientError

from s3uploader.core.exceptions import TransferError
from s3uploader.core.settings import S3UploaderSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class StorageClient(Protocol):
    """Protocol for the two storage operations the uploader delegates."""

    async def upload(
        self,
        bucket: str,
        key: str,
        body: BinaryIO,
        content_type: str,
        content_encoding: str,
        acl: str,
    ) -> dict[str, Any]:
        """Store ``body`` under ``key`` in ``bucket``."""
        ...

    async def delete(self, bucket: str, key: str) -> dict[str, Any]:
        """Delete the object at ``key`` in ``bucket``."""
        ...


def adjust_endpoint_url(
    endpoint_url: str | None, bucket_name: str | None
) -> str | None:
    """Adjust endpoint URL for path-style addressing if needed.

    Args:
        endpoint_url: The S3 endpoint URL
        bucket_name: The S3 bucket name

    Returns:
        Adjusted endpoint URL or None
    """
    if not endpoint_url:
        return None
    if bucket_name and f"{bucket_name}." in endpoint_url:
        return endpoint_url.replace(f"{bucket_name}.", "")
    return endpoint_url


class AioS3StorageClient:
    """StorageClient backed by an aiobotocore S3 client.

    Either pass an already-open aiobotocore client, or let this class open
    one from settings by using it as an async context manager.

    Example:
        async with AioS3StorageClient(settings) as client:
            uploader = S3Uploader(client, settings.to_upload_config())
            await uploader.upload_file("photo.jpg", "photos/photo")
    """

    def __init__(
        self,
        settings: S3UploaderSettings | None = None,
        client: AioBaseClient | None = None,
    ):
        """Initialize the storage client.

        Args:
            settings: Connection settings (loaded from the environment if omitted)
            client: An open aiobotocore S3 client to use instead of creating one
        """
        self.settings = settings or S3UploaderSettings()
        self._client = client
        self._exit_stack: AsyncExitStack | None = None
        self._endpoint_url = adjust_endpoint_url(
            self.settings.aws_url, self.settings.aws_bucket_name
        )
        self._client_config = Config(s3={"addressing_style": "path"})

    def _create_client(self):
        """Create the aiobotocore client context for these settings."""
        session = get_session()
        return session.create_client(
            "s3",
            region_name=self.settings.aws_default_region,
            aws_access_key_id=self.settings.aws_access_key_id,
            aws_secret_access_key=self.settings.aws_secret_access_key,
            endpoint_url=self._endpoint_url,
            config=self._client_config,
        )

    async def __aenter__(self) -> "AioS3StorageClient":
        if self._client is None:
            self._exit_stack = AsyncExitStack()
            self._client = await self._exit_stack.enter_async_context(
                self._create_client()
            )
        return self

    async def __aexit__(self, *exc) -> None:
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            self._exit_stack = None
            self._client = None

    @property
    def client(self) -> AioBaseClient:
        if self._client is None:
            raise RuntimeError(
                "AioS3StorageClient is not open; use 'async with' or pass a client"
            )
        return self._client

    async def upload(
        self,
        bucket: str,
        key: str,
        body: BinaryIO,
        content_type: str,
        content_encoding: str,
        acl: str,
    ) -> dict[str, Any]:
        """Upload a body with put_object.

        A plain PUT needs the content length up front, so the body is
        drained in a worker thread before the request is sent. The whole
        compressed object is held in memory for the duration of the call.

        Raises:
            TransferError: If S3 rejects the request
        """
        data = await asyncio.to_thread(body.read)
        logger.debug(f"put_object s3://{bucket}/{key} ({len(data)} bytes)")
        try:
            return await self.client.put_object(
                Bucket=bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                ContentEncoding=content_encoding,
                ACL=acl,
            )
        except ClientError as e:
            raise TransferError(
                f"Upload failed: {e}",
                operation="put_object",
                key=key,
                original_error=e,
            ) from e

    async def delete(self, bucket: str, key: str) -> dict[str, Any]:
        """Delete an object with delete_object.

        Raises:
            TransferError: If S3 rejects the request
        """
        logger.debug(f"delete_object s3://{bucket}/{key}")
        try:
            return await self.client.delete_object(Bucket=bucket, Key=key)
        except ClientError as e:
            raise TransferError(
                f"Delete failed: {e}",
                operation="delete_object",
                key=key,
                original_error=e,
            ) from e
