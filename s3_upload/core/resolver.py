"""
Configuration resolution.

Each field is resolved from two sources: process settings and the
per-call S3UploadConfig. Settings win whenever they hold a value;
the call-site value is the fallback.

These are plain functions over plain values. No I/O happens here, so a
bad region or bucket is reported before any client is constructed.
"""

from typing import Optional

from ..config.settings import Settings
from .models import ConfigurationError, Credentials, EffectiveConfig, S3UploadConfig


def resolve_region(config: Optional[S3UploadConfig], settings: Settings) -> str:
    """Settings region, else config region. Raises if neither is set."""
    region = settings.region or (config.region if config else None)

    if not region:
        raise ConfigurationError("No region provided as env var or config")

    return region


def resolve_bucket(config: Optional[S3UploadConfig], settings: Settings) -> str:
    """Settings bucket, else config bucket. Raises if neither is set."""
    bucket = settings.bucket or (config.bucket if config else None)

    if not bucket:
        raise ConfigurationError("No bucket provided as env var or config")

    return bucket


def resolve_url(config: Optional[S3UploadConfig], settings: Settings) -> Optional[str]:
    """Display URL, or None to return S3 locations untouched."""
    return settings.url or (config.url if config else None) or None


def resolve_keep_original_url(config: Optional[S3UploadConfig], settings: Settings) -> bool:
    return settings.keep_original_url or bool(config and config.keep_original_url)


def resolve_keep_original_filename(config: Optional[S3UploadConfig], settings: Settings) -> bool:
    return settings.keep_original_filename or bool(config and config.keep_original_filename)


def resolve_credentials(
    config: Optional[S3UploadConfig],
    settings: Settings,
) -> Optional[Credentials]:
    """
    Pick the credential pair to hand to boto3.

    A complete pair from settings replaces the caller's pair outright.
    Half a pair in settings is ignored. None means boto3 falls back to
    its own discovery chain (instance role, ~/.aws, and so on).
    """
    if settings.has_credentials:
        return Credentials(
            access_key_id=settings.access_key_id,
            secret_access_key=settings.secret_access_key,
        )

    return config.credentials if config else None


def resolve_config(
    config: Optional[S3UploadConfig],
    settings: Settings,
) -> EffectiveConfig:
    """
    Build the effective configuration for one call.

    Region is checked first, then bucket, so a missing region is
    reported before credentials are even looked at.
    """
    region = resolve_region(config, settings)
    bucket = resolve_bucket(config, settings)

    return EffectiveConfig(
        region=region,
        bucket=bucket,
        url=resolve_url(config, settings),
        credentials=resolve_credentials(config, settings),
        keep_original_filename=resolve_keep_original_filename(config, settings),
        keep_original_url=resolve_keep_original_url(config, settings),
    )
