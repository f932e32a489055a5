"""
Batch upload and delete.

Every item runs concurrently. The first failure is raised to the caller
straight away; items still in flight keep running in their worker
threads and their results are dropped.
"""

import asyncio
from typing import Iterable, Optional, Union

from .config.settings import Settings
from .core.models import FileUpload, S3UploadConfig
from .infrastructure.storage.client import StorageClient
from .operations import delete_file, upload_file


async def upload_files(
    files: Iterable[Union[str, FileUpload]],
    folder: Optional[str] = None,
    config: Optional[S3UploadConfig] = None,
    *,
    settings: Optional[Settings] = None,
    client: Optional[StorageClient] = None,
) -> list[str]:
    """Upload files concurrently. URLs come back in input order."""
    return list(
        await asyncio.gather(
            *(
                upload_file(file, folder, config, settings=settings, client=client)
                for file in files
            )
        )
    )


async def delete_files(
    files: Optional[Iterable[Optional[str]]] = None,
    config: Optional[S3UploadConfig] = None,
    *,
    settings: Optional[Settings] = None,
    client: Optional[StorageClient] = None,
) -> None:
    """Delete every string in files concurrently; other entries are skipped."""
    if files is None:
        return None

    await asyncio.gather(
        *(
            delete_file(file, config, settings=settings, client=client)
            for file in files
            if isinstance(file, str)
        )
    )
    return None
