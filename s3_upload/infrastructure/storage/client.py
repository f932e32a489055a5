"""
Object storage client for uploads and deletions.

Wraps boto3's S3 client, with a mock mode for local development.
boto3 already does the heavy lifting:
- upload_fileobj switches to multipart for large streams
- retries and backoff are handled by botocore
- failed multipart uploads are aborted by s3transfer

This layer only adapts those calls to async and reports what happened.
It does not retry and does not translate errors.
"""

import asyncio
import logging
from typing import BinaryIO, Protocol

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from ...core.keys import canonical_location
from ...core.models import EffectiveConfig, UploadResult

logger = logging.getLogger(__name__)

PUBLIC_READ = "public-read"

# Everything boto3 can raise for a failed upload or delete. Errors are
# re-raised unchanged, so callers catch these directly.
TransportError = (BotoCoreError, ClientError, S3UploadFailedError)


class StorageClient(Protocol):
    """
    What upload_file and delete_file need from a storage backend.

    Two calls, both keyed by bucket and object key. Boto3StorageClient
    and MockStorageClient implement it, and any object with these two
    coroutines can be passed as client=.
    """

    async def upload_stream(
        self,
        bucket: str,
        key: str,
        body: BinaryIO,
        content_type: str,
        acl: str = PUBLIC_READ,
    ) -> UploadResult:
        """Upload body under key and return where it ended up."""
        ...

    async def delete_object(
        self,
        bucket: str,
        key: str,
    ) -> None:
        """Delete a single object."""
        ...


class Boto3StorageClient:
    """
    S3 client backed by boto3.

    All methods are async to match the Protocol even though boto3 is
    synchronous. The blocking calls run in a worker thread so several
    uploads can be in flight on one event loop.
    """

    def __init__(self, config: EffectiveConfig, s3_client=None) -> None:
        """
        Build the boto3 client for config.region.

        Credentials are passed only when resolved; otherwise boto3 uses
        its default chain. s3_client lets tests supply a stand-in.
        """
        self._config = config

        if s3_client is None:
            client_kwargs = {"region_name": config.region}
            if config.credentials:
                client_kwargs["aws_access_key_id"] = config.credentials.access_key_id
                client_kwargs["aws_secret_access_key"] = config.credentials.secret_access_key

            s3_client = boto3.client("s3", **client_kwargs)

        self._s3_client = s3_client

        logger.info(
            "Initialized S3 storage client",
            extra={
                "bucket": config.bucket,
                "region": config.region,
                "explicit_credentials": config.credentials is not None,
            }
        )

    async def upload_stream(
        self,
        bucket: str,
        key: str,
        body: BinaryIO,
        content_type: str,
        acl: str = PUBLIC_READ,
    ) -> UploadResult:
        """
        Stream body to S3.

        upload_fileobj reads the stream in chunks and goes multipart once
        the stream passes the transfer threshold. It returns nothing, so
        the location is built from bucket, region and key.
        """
        try:
            await asyncio.to_thread(
                self._s3_client.upload_fileobj,
                body,
                bucket,
                key,
                ExtraArgs={"ACL": acl, "ContentType": content_type},
            )
        except TransportError as e:
            logger.error(
                "Failed to upload object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise

        location = canonical_location(bucket, self._config.region, key)

        logger.info(
            "Uploaded object",
            extra={"bucket": bucket, "key": key, "content_type": content_type}
        )

        return UploadResult(location=location, key=key)

    async def delete_object(self, bucket: str, key: str) -> None:
        """Delete one object. S3 reports success for keys that don't exist."""
        try:
            await asyncio.to_thread(
                self._s3_client.delete_object,
                Bucket=bucket,
                Key=key,
            )
        except TransportError as e:
            logger.error(
                "Failed to delete object",
                extra={"bucket": bucket, "key": key, "error": str(e)}
            )
            raise

        logger.info(
            "Deleted object",
            extra={"bucket": bucket, "key": key}
        )


# ---------------------------------------------------------------------------
# Mock Storage for Local Development
# ---------------------------------------------------------------------------

class MockStorageClient:
    """
    In-memory storage for local development.

    Objects are kept in a dict keyed by (bucket, key) and locations look
    exactly like the ones S3 would report, so display-URL rewriting and
    key extraction behave the same as against a real bucket.
    """

    def __init__(self, region: str = "us-east-1") -> None:
        self._region = region
        # {(bucket, key): (content_type, acl, data)}
        self.objects: dict[tuple[str, str], tuple[str, str, bytes]] = {}
        logger.info("Initialized mock storage client (in-memory)")

    async def upload_stream(
        self,
        bucket: str,
        key: str,
        body: BinaryIO,
        content_type: str,
        acl: str = PUBLIC_READ,
    ) -> UploadResult:
        """Read the whole stream into memory."""
        data = body.read()
        self.objects[(bucket, key)] = (content_type, acl, data)

        logger.debug(
            "Stored object in mock storage",
            extra={"bucket": bucket, "key": key, "size_bytes": len(data)}
        )

        return UploadResult(
            location=canonical_location(bucket, self._region, key),
            key=key,
        )

    async def delete_object(self, bucket: str, key: str) -> None:
        """Remove from memory. Missing keys are ignored, as on S3."""
        self.objects.pop((bucket, key), None)

        logger.debug(
            "Deleted object from mock storage",
            extra={"bucket": bucket, "key": key}
        )


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

# One in-memory client per region, shared across calls so an upload
# followed by a delete sees the same objects
_mock_storage_clients: dict[str, MockStorageClient] = {}


def create_storage_client(
    config: EffectiveConfig,
    mock_mode: bool = False,
) -> StorageClient:
    """
    Create storage client for one call.

    Args:
        config: Resolved configuration (region and credentials are used)
        mock_mode: If True, return the in-memory client for config.region

    Returns:
        StorageClient implementation (boto3 or Mock)
    """
    if mock_mode:
        if config.region not in _mock_storage_clients:
            _mock_storage_clients[config.region] = MockStorageClient(region=config.region)
        return _mock_storage_clients[config.region]

    return Boto3StorageClient(config)
