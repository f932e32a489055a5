#!/usr/bin/env python3
"""
Upload local files to S3 or delete uploaded ones.

Usage:
    python scripts/manage_files.py upload photos/cat.png photos/dog.jpg --folder pets
    python scripts/manage_files.py delete https://bkt.s3.us-east-1.amazonaws.com/pets/abc.png

Requires:
    - .env file (or environment) with S3_UPLOAD_BUCKET and S3_UPLOAD_REGION
"""

import asyncio
import logging
import mimetypes
import os
import sys
from functools import partial
from pathlib import Path

# Add project root to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from s3_upload import (  # noqa: E402
    ConfigurationError,
    FileUpload,
    S3UploadConfig,
    TransportError,
    delete_files,
    get_settings,
    upload_files,
)

DEFAULT_MIMETYPE = "application/octet-stream"


def build_upload(path: str) -> FileUpload:
    """Describe a local file for upload; the file is opened only when uploading."""
    mimetype, _ = mimetypes.guess_type(path)
    return FileUpload(
        create_read_stream=partial(open, path, "rb"),
        filename=os.path.basename(path),
        mimetype=mimetype or DEFAULT_MIMETYPE,
    )


async def run_upload(paths: list[str], folder, keep_original_filename: bool) -> None:
    config = S3UploadConfig(keep_original_filename=keep_original_filename)
    urls = await upload_files([build_upload(p) for p in paths], folder=folder, config=config)
    for url in urls:
        print(url)


async def run_delete(files: list[str]) -> None:
    await delete_files(files)
    print(f"Deleted {len(files)} object(s)")


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Upload files to S3 or delete them')
    subparsers = parser.add_subparsers(dest='command', required=True)

    upload_parser = subparsers.add_parser('upload', help='Upload local files, print their URLs')
    upload_parser.add_argument('paths', nargs='+', help='Files to upload')
    upload_parser.add_argument('--folder', default=None, help='Key prefix inside the bucket')
    upload_parser.add_argument(
        '--keep-original-filename',
        action='store_true',
        help='Store under the local filename instead of a random token',
    )

    delete_parser = subparsers.add_parser('delete', help='Delete objects by URL or key')
    delete_parser.add_argument('files', nargs='+', help='URLs or keys to delete')

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level.upper(),
    )

    if args.command == 'upload':
        missing = [p for p in args.paths if not os.path.isfile(p)]
        if missing:
            print(f"ERROR: Cannot find {', '.join(missing)}")
            sys.exit(1)
        job = run_upload(args.paths, args.folder, args.keep_original_filename)
    else:
        job = run_delete(args.files)

    try:
        asyncio.run(job)
    except ConfigurationError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except TransportError as e:
        print(f"ERROR talking to S3: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
