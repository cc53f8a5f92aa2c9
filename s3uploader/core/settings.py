"""Environment-driven settings for s3uploader."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from s3uploader.core.exceptions import ConfigurationError


class S3UploaderSettings(BaseSettings):
    """Settings loaded from ``S3UPLOADER_*`` environment variables or ``.env``."""

    # AWS / S3-compatible endpoint
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_default_region: str = "us-east-1"
    aws_url: str | None = None  # e.g. http://localhost:4566 for LocalStack
    aws_bucket_name: str = ""

    # Upload constraints
    path_prefix: str = ""
    accepted_mime_types: list[str] = Field(default_factory=list)
    max_file_size: int = Field(0, ge=0)  # 0 means unlimited

    model_config = SettingsConfigDict(
        env_prefix="S3UPLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def to_upload_config(self):
        """Build the immutable upload configuration from these settings.

        Returns:
            UploadConfig instance
        """
        from s3uploader.storage.uploads import UploadConfig

        return UploadConfig(
            path_prefix=self.path_prefix,
            bucket=self.aws_bucket_name,
            accepted_mime_types=self.accepted_mime_types,
            max_file_size=self.max_file_size,
        )

    def validate_client_settings(self) -> None:
        """Check that the fields needed to talk to S3 are present.

        Raises:
            ConfigurationError: If credentials or the bucket are missing
        """
        missing = [
            name.upper()
            for name in ("aws_access_key_id", "aws_secret_access_key", "aws_bucket_name")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(missing_fields=missing)
