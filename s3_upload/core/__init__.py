"""
Core upload logic.

Config resolution, key/URL normalization and the value objects they
work on. Nothing in here talks to the network; the upload and delete
operations hand the resolved values to a StorageClient.
"""

from .models import (
    ConfigurationError,
    Credentials,
    EffectiveConfig,
    FileUpload,
    S3UploadConfig,
    UploadResult,
)
from .resolver import resolve_config
from .keys import (
    build_object_key,
    canonical_location,
    get_extension,
    get_file_key,
    rewrite_location,
)

__all__ = [
    "ConfigurationError",
    "Credentials",
    "EffectiveConfig",
    "FileUpload",
    "S3UploadConfig",
    "UploadResult",
    "resolve_config",
    "build_object_key",
    "canonical_location",
    "get_extension",
    "get_file_key",
    "rewrite_location",
]
