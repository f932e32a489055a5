"""
s3_upload - upload files to S3 and delete them again.

    url = await upload_file(FileUpload(open_photo, "cat.png", "image/png"))
    await delete_file(url)

Configuration comes from S3_UPLOAD_* environment variables, with
S3UploadConfig as a per-call fallback.

Package layout:
- config: environment-backed settings
- core: config resolution, keys and URLs
- infrastructure: the boto3 storage client
"""

from .batch import delete_files, upload_files
from .config.settings import Settings, get_settings
from .core.models import ConfigurationError, Credentials, FileUpload, S3UploadConfig
from .infrastructure.storage.client import TransportError
from .operations import delete_file, upload_file

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Credentials",
    "FileUpload",
    "S3UploadConfig",
    "Settings",
    "TransportError",
    "delete_file",
    "delete_files",
    "get_settings",
    "upload_file",
    "upload_files",
]
