"""Custom exceptions for s3uploader.

This module provides a hierarchy of exceptions with helpful error messages
to make debugging easier for developers.
"""

from typing import Sequence


class S3UploaderError(Exception):
    """Base exception for all s3uploader errors.

    All s3uploader exceptions inherit from this class, making it easy
    to catch all library-specific errors.
    """

    def __init__(self, message: str, hint: str | None = None):
        """Initialize the exception.

        Args:
            message: The error message
            hint: Optional hint for resolving the error
        """
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class ConfigurationError(S3UploaderError):
    """Raised when the uploader or its settings are misconfigured."""

    def __init__(
        self,
        message: str | None = None,
        missing_fields: list[str] | None = None,
    ):
        """Initialize the configuration error.

        Args:
            message: Custom error message
            missing_fields: List of missing configuration fields
        """
        self.missing_fields = missing_fields or []

        if missing_fields:
            fields_str = ", ".join(missing_fields)
            message = f"Missing required configuration: {fields_str}"
            hint = "Set these as environment variables or in your .env file."
        else:
            hint = "Pass a storage client when creating the uploader."

        super().__init__(message or "Invalid s3uploader configuration", hint)


class ConstraintViolation(S3UploaderError):
    """A local file failed a constraint check before any network call."""

    def __init__(self, message: str, path: str | None = None, hint: str | None = None):
        self.path = path
        super().__init__(message, hint)


class MimeTypeViolation(ConstraintViolation):
    """Raised when a file's mime type matches none of the accepted entries."""

    def __init__(self, path: str, mime_type: str, accepted: Sequence = ()):
        """Initialize the mime type violation.

        Args:
            path: The local file that was checked
            mime_type: The mime type resolved from the file name
            accepted: The configured accepted mime type matchers
        """
        self.mime_type = mime_type
        self.accepted = tuple(accepted)

        accepted_str = ", ".join(
            getattr(matcher, "pattern", matcher) for matcher in self.accepted
        )
        super().__init__(
            f"Invalid file mimetype '{mime_type}' for {path}",
            path=path,
            hint=f"Accepted mime types: {accepted_str}",
        )


class FileTooLargeViolation(ConstraintViolation):
    """Raised when a file is bigger than the configured maximum size."""

    def __init__(self, path: str, size: int, max_size: int):
        """Initialize the size violation.

        Args:
            path: The local file that was checked
            size: Size of the file in bytes
            max_size: The configured limit in bytes
        """
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"File too big: {path} is {size} bytes",
            path=path,
            hint=f"The maximum allowed size is {max_size} bytes.",
        )


class TransferError(S3UploaderError):
    """Raised by the bundled storage client when an S3 call fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        key: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the transfer error.

        Args:
            message: The error message
            operation: The S3 operation that failed (e.g., 'put_object')
            key: The S3 key involved in the operation
            original_error: The original exception
        """
        self.operation = operation
        self.key = key
        self.original_error = original_error

        hint = None
        if "NoSuchBucket" in message:
            hint = "The specified bucket does not exist."
        elif "AccessDenied" in message:
            hint = "Check your IAM permissions for this operation."
        elif "InvalidAccessKeyId" in message:
            hint = "Check your AWS_ACCESS_KEY_ID setting."
        elif "SignatureDoesNotMatch" in message:
            hint = "Check your AWS_SECRET_ACCESS_KEY setting."

        super().__init__(message, hint)
