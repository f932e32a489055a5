"""
Object storage integration.

S3 via boto3, plus an in-memory mock for local development without
credentials.
"""

from .client import (
    Boto3StorageClient,
    MockStorageClient,
    StorageClient,
    TransportError,
    create_storage_client,
)

__all__ = [
    "Boto3StorageClient",
    "MockStorageClient",
    "StorageClient",
    "TransportError",
    "create_storage_client",
]
