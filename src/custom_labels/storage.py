from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from tqdm import tqdm

from custom_labels.errors import StorageAPIError
from custom_labels.logging import get_logger

logger = get_logger(__name__)

__all__ = ["fetch_object_bytes"]

CHUNK_SIZE = 1024 * 1024


def fetch_object_bytes(client: Any, bucket: str, key: str) -> bytes:
    """Download ``s3://bucket/key`` in full.

    The body is streamed in chunks behind a byte progress bar, which tqdm
    hides on its own when stderr is not a terminal.
    """
    try:
        resp = client.get_object(Bucket=bucket, Key=key)
    except (ClientError, BotoCoreError) as e:
        raise StorageAPIError(f"unable to retrieve image: {e}", cause=e) from e

    body = resp["Body"]
    total = resp.get("ContentLength")
    buf = bytearray()
    try:
        with tqdm(
            total=total, desc="fetch", unit="B", unit_scale=True, disable=None
        ) as pbar:
            while True:
                chunk = body.read(CHUNK_SIZE)
                if not chunk:
                    break
                buf.extend(chunk)
                pbar.update(len(chunk))
    except (ClientError, BotoCoreError, OSError) as e:
        raise StorageAPIError(f"unable to read image body: {e}", cause=e) from e
    finally:
        body.close()

    logger.info(f"fetched s3://{bucket}/{key} ({len(buf)} bytes)")
    return bytes(buf)
