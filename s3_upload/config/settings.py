"""
Process-wide configuration using Pydantic settings.

Values come from environment variables (and an optional .env file).
They are loaded once and handed to every upload/delete call by value,
so nothing reads os.environ behind the caller's back.

Environment values take precedence over per-call config. An empty
variable counts as unset, so S3_UPLOAD_ACCESS_KEY_ID="" still falls
back to AWS_ACCESS_KEY_ID.
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Upload settings loaded from S3_UPLOAD_* environment variables.

    Every field is optional here. Whether region and bucket are
    actually required is decided per call, because the caller may
    supply them in its own config.
    """

    # Target bucket
    bucket: Optional[str] = Field(
        default=None,
        description="Bucket name. Overrides the bucket passed in per-call config."
    )
    region: Optional[str] = Field(
        default=None,
        description="AWS region of the bucket, e.g. us-east-1."
    )

    # Display URL
    url: Optional[str] = Field(
        default=None,
        description="Friendlier host substituted for {bucket}.s3.{region}.amazonaws.com in returned locations."
    )
    keep_original_url: bool = Field(
        default=False,
        description="Return the S3 location verbatim even when a display URL is set."
    )

    # Naming policy
    keep_original_filename: bool = Field(
        default=False,
        description="Store objects under their original filename instead of a random token."
    )

    # Credentials
    access_key_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("S3_UPLOAD_ACCESS_KEY_ID", "AWS_ACCESS_KEY_ID"),
        description="Access key id. Falls back to AWS_ACCESS_KEY_ID."
    )
    secret_access_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("S3_UPLOAD_SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY"),
        description="Secret access key. Falls back to AWS_SECRET_ACCESS_KEY."
    )

    # Development
    mock_mode: bool = Field(
        default=False,
        description="Use the in-memory storage client instead of S3. Enables local dev without a bucket."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level for the command-line helper (DEBUG, INFO, WARNING, ERROR)"
    )

    model_config = SettingsConfigDict(
        env_prefix="S3_UPLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("keep_original_url", "keep_original_filename", mode="before")
    @classmethod
    def _literal_true(cls, value: Any) -> Any:
        """
        Only the exact string "true" enables a flag.

        Pydantic would otherwise accept "1", "yes", "on" and so on.
        Explicit booleans passed to the constructor are left alone.
        """
        if isinstance(value, str):
            return value == "true"
        return value

    @property
    def has_credentials(self) -> bool:
        """True when both halves of an access key pair are configured."""
        return bool(self.access_key_id and self.secret_access_key)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once per process. For tests, call
    get_settings.cache_clear() after changing the environment.
    """
    return Settings()
