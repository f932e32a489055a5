"""
Single-file upload and delete.

Both functions follow the same shape: resolve configuration, work out
the key, build a storage client, make one call. Strings are treated as
already-uploaded references, so an upload of a string returns it and a
delete of anything else does nothing.
"""

import logging
from typing import Optional, Union

from .config.settings import Settings, get_settings
from .core.keys import build_object_key, get_file_key, rewrite_location
from .core.models import FileUpload, S3UploadConfig
from .core.resolver import resolve_config
from .infrastructure.storage.client import PUBLIC_READ, StorageClient, create_storage_client

logger = logging.getLogger(__name__)


async def upload_file(
    file: Union[str, FileUpload],
    folder: Optional[str] = None,
    config: Optional[S3UploadConfig] = None,
    *,
    settings: Optional[Settings] = None,
    client: Optional[StorageClient] = None,
) -> str:
    """
    Upload one file and return its public URL.

    Args:
        file: A FileUpload, or a string that is returned unchanged
        folder: Optional key prefix, without trailing slash
        config: Per-call fallback for anything not set in the environment
        settings: Process settings; defaults to get_settings()
        client: Storage client to use instead of building one

    Raises:
        ConfigurationError: region or bucket could not be resolved
        TransportError: anything boto3 raised, unchanged
    """
    if isinstance(file, str):
        logger.debug("Upload input is already a reference", extra={"file": file})
        return file

    if settings is None:
        settings = get_settings()
    effective = resolve_config(config, settings)

    key = build_object_key(
        file.filename,
        folder=folder,
        keep_original_filename=effective.keep_original_filename,
    )

    if client is None:
        client = create_storage_client(effective, mock_mode=settings.mock_mode)

    stream = file.create_read_stream()
    try:
        result = await client.upload_stream(
            bucket=effective.bucket,
            key=key,
            body=stream,
            content_type=file.mimetype,
            acl=PUBLIC_READ,
        )
    finally:
        stream.close()

    return rewrite_location(result.location, effective)


async def delete_file(
    file: Optional[str] = None,
    config: Optional[S3UploadConfig] = None,
    *,
    settings: Optional[Settings] = None,
    client: Optional[StorageClient] = None,
) -> None:
    """
    Delete the object behind a URL or key.

    Anything that isn't a string is ignored without touching
    configuration or storage. A key that doesn't exist is not an error
    on S3, so deleting twice is harmless.
    """
    if not isinstance(file, str):
        return None

    if settings is None:
        settings = get_settings()
    effective = resolve_config(config, settings)
    key = get_file_key(file, config, settings)

    if client is None:
        client = create_storage_client(effective, mock_mode=settings.mock_mode)

    await client.delete_object(bucket=effective.bucket, key=key)
    return None
