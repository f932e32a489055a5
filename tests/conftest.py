"""
Shared fixtures.

Every test starts with no S3_UPLOAD_* or AWS credential variables set,
so a developer's shell or CI secrets can't leak into assertions.
"""

import pytest

from s3_upload.config.settings import Settings, get_settings
from s3_upload.infrastructure.storage.client import MockStorageClient

ENV_VARS = [
    "S3_UPLOAD_BUCKET",
    "S3_UPLOAD_REGION",
    "S3_UPLOAD_URL",
    "S3_UPLOAD_KEEP_ORIGINAL_URL",
    "S3_UPLOAD_KEEP_ORIGINAL_FILENAME",
    "S3_UPLOAD_ACCESS_KEY_ID",
    "S3_UPLOAD_SECRET_ACCESS_KEY",
    "S3_UPLOAD_MOCK_MODE",
    "S3_UPLOAD_LOG_LEVEL",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Build Settings from keyword arguments only, ignoring any .env file."""
    def _make(**values) -> Settings:
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def storage():
    return MockStorageClient(region="us-east-1")
