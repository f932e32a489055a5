"""
Upload configuration using Pydantic settings.

Configuration comes from S3_UPLOAD_* environment variables.
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
