"""
Object keys and URLs.

Three jobs live here:
1. Build the object key for a new upload (random token or original name)
2. Turn a stored URL back into a bare key for deletion
3. Swap the S3 host in a location for the configured display URL

URL handling is plain substring work, not URL parsing. Locations
produced by S3 have a fixed shape, and keeping the string logic in one
module means it can be replaced by real URL rewriting without touching
the callers.
"""

import logging
from typing import Optional
from urllib.parse import quote, unquote
from uuid import uuid4

from ..config.settings import Settings
from .models import EffectiveConfig, S3UploadConfig
from .resolver import resolve_url

logger = logging.getLogger(__name__)

S3_DOMAIN = "amazonaws.com"


def get_extension(filename: str) -> str:
    """
    Return the extension of filename including the leading dot.

    An extensionless name comes back as "." + filename. Callers relying on
    a real extension should check for a dot first.
    """
    return f".{filename.split('.')[-1]}"


def get_file_key(
    url_or_key: str,
    config: Optional[S3UploadConfig],
    settings: Settings,
) -> str:
    """
    Reduce a stored location to the object key.

    Tries the display URL first (when one resolves), then the S3 domain.
    The part after the split is percent-decoded, undoing the encoding
    canonical_location applies. Anything that does not split cleanly
    into two parts is assumed to be a key already and comes back
    untouched, so feeding the result back in returns it unchanged.
    """
    url = resolve_url(config, settings)

    by_url = url_or_key.split(f"{url}/") if url else []
    by_domain = url_or_key.split(f"{S3_DOMAIN}/")

    if len(by_url) == 2:
        return unquote(by_url[1])
    if len(by_domain) == 2:
        return unquote(by_domain[1])
    return url_or_key


def build_object_key(
    filename: str,
    folder: Optional[str] = None,
    keep_original_filename: bool = False,
) -> str:
    """
    Key for a new object: optional folder, then the name.

    The name is the original filename when requested, otherwise a uuid4
    token plus the original extension, so concurrent uploads of the same
    file never land on the same key.
    """
    prefix = f"{folder}/" if folder else ""
    name = filename if keep_original_filename else f"{uuid4().hex}{get_extension(filename)}"

    key = f"{prefix}{name}"

    logger.debug(
        "Built object key",
        extra={"original_filename": filename, "key": key}
    )

    return key


def canonical_host(bucket: str, region: str) -> str:
    """Virtual-hosted S3 host, e.g. bkt.s3.us-east-1.amazonaws.com"""
    return f"{bucket}.s3.{region}.{S3_DOMAIN}"


def canonical_location(bucket: str, region: str, key: str) -> str:
    """
    The public location S3 reports for an object.

    Each path segment is percent-encoded, the same way the SDKs encode
    keys into the Location of a completed upload.
    """
    return f"https://{canonical_host(bucket, region)}/{quote(key, safe='/~')}"


def rewrite_location(location: str, config: EffectiveConfig) -> str:
    """
    Present location under the display URL.

    No URL configured, or keep_original_url set: location comes back
    verbatim. Otherwise the first occurrence of the canonical S3 host is
    replaced by the URL. A location that does not contain the host is
    returned as-is and logged, since that usually means the bucket or
    region in config do not match where the object actually went.
    """
    if not config.url or config.keep_original_url:
        return location

    host = canonical_host(config.bucket, config.region)

    if host not in location:
        logger.warning(
            "Location does not contain the S3 host, display URL not applied",
            extra={"location": location, "host": host, "url": config.url}
        )
        return location

    return location.replace(host, config.url, 1)
