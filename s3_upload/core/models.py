"""
Value objects for uploads and deletions.

These carry no behaviour beyond validation. Everything is built fresh
per call and thrown away when the call returns.
"""

from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional


class ConfigurationError(ValueError):
    """Raised when region or bucket cannot be resolved from env or config."""
    pass


@dataclass(frozen=True)
class Credentials:
    """An access key pair. Always replaced as a whole, never merged."""
    access_key_id: str
    secret_access_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key_id={self.access_key_id!r}, secret_access_key='***')"


@dataclass
class S3UploadConfig:
    """
    Per-call configuration.

    Every field is optional. Environment settings win over whatever is
    set here, so this acts as the fallback for a single call.
    """
    region: Optional[str] = None
    bucket: Optional[str] = None
    url: Optional[str] = None
    credentials: Optional[Credentials] = None
    keep_original_filename: Optional[bool] = None
    keep_original_url: Optional[bool] = None


@dataclass(frozen=True)
class EffectiveConfig:
    """
    Configuration after merging settings and per-call config.

    Region and bucket are guaranteed non-empty; the resolver refuses to
    build one otherwise.
    """
    region: str
    bucket: str
    url: Optional[str] = None
    credentials: Optional[Credentials] = None
    keep_original_filename: bool = False
    keep_original_url: bool = False

    def __post_init__(self) -> None:
        if not self.region:
            raise ConfigurationError("No region provided as env var or config")
        if not self.bucket:
            raise ConfigurationError("No bucket provided as env var or config")


@dataclass
class FileUpload:
    """
    A file waiting to be uploaded.

    create_read_stream must return a fresh, unread binary stream each
    time it is called. The uploader calls it once and closes the result.
    """
    create_read_stream: Callable[[], BinaryIO]
    filename: str
    mimetype: str


@dataclass(frozen=True)
class UploadResult:
    """What the storage client reports once an upload completes."""
    location: str
    key: str
